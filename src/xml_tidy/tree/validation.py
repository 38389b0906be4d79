"""Well-formedness validation through pluggable XML parser backends.

A backend is a thin wrapper around a conformant XML parser that either accepts
the content or raises :class:`MalformedXmlError` carrying the parser's own
message and location. The engine never tries to recover from an error.
"""

import threading
from abc import ABC, abstractmethod
from typing import Dict, List, Optional, Type
from xml.parsers import expat

from lxml import etree

from xml_tidy.shared import (
    ConfigValidationError,
    MalformedXmlError,
    get_logger,
)
from xml_tidy.tree.nodes import XML_WHITESPACE

EMPTY_DOCUMENT_REASON = "document is empty"
ENCODING_REASON = "content contains characters that cannot be encoded"


class ParserBackend(ABC):
    """Capability interface over a conformant XML parser."""

    name: str = ""
    description: str = ""

    def __init__(
        self,
        correlation_id: Optional[str] = None,
        huge_tree: bool = True,
    ) -> None:
        self.correlation_id = correlation_id
        self.huge_tree = huge_tree
        self._logger = get_logger(__name__, correlation_id, self.__class__.__name__)

    @classmethod
    @abstractmethod
    def is_available(cls) -> bool:
        """Check if the underlying parser can be used."""

    @abstractmethod
    def _parse(self, data: bytes) -> None:
        """Parse ``data``, raising :class:`MalformedXmlError` on failure."""

    def check(self, content: str) -> None:
        """Validate that ``content`` is a well-formed XML document.

        Args:
            content: Document content with declarations already removed

        Raises:
            MalformedXmlError: If the parser rejects the content
        """
        if not content.strip(XML_WHITESPACE):
            raise MalformedXmlError(EMPTY_DOCUMENT_REASON)

        try:
            data = content.encode("utf-8")
        except UnicodeEncodeError as e:
            raise MalformedXmlError(ENCODING_REASON) from e

        self._parse(data)
        self._logger.debug(
            "Content accepted by parser backend",
            extra={"backend": self.name, "content_length": len(content)},
        )


class LxmlBackend(ParserBackend):
    """libxml2 through lxml; the default backend."""

    name = "lxml"
    description = "libxml2 well-formedness checking via lxml.etree"

    @classmethod
    def is_available(cls) -> bool:
        return True

    def _create_parser(self) -> "etree.XMLParser":
        return etree.XMLParser(
            resolve_entities=False,
            load_dtd=False,
            no_network=True,
            huge_tree=self.huge_tree,
            remove_blank_text=False,
        )

    def _parse(self, data: bytes) -> None:
        try:
            etree.fromstring(data, self._create_parser())
        except etree.XMLSyntaxError as e:
            line, column = e.position
            raise MalformedXmlError(e.msg or str(e), line, column) from e


class ExpatBackend(ParserBackend):
    """The standard library expat parser."""

    name = "expat"
    description = "Well-formedness checking via xml.parsers.expat"

    @classmethod
    def is_available(cls) -> bool:
        return True

    def _parse(self, data: bytes) -> None:
        parser = expat.ParserCreate("utf-8")
        try:
            parser.Parse(data, True)
        except expat.ExpatError as e:
            raise MalformedXmlError(expat.ErrorString(e.code), e.lineno, e.offset) from e


class BackendRegistry:
    """Registry for managing parser backends by name."""

    def __init__(self) -> None:
        """Initialize the backend registry."""
        self._backends: Dict[str, Type[ParserBackend]] = {}
        self._lock = threading.RLock()

    def register(self, backend_class: Type[ParserBackend]) -> None:
        """Register a backend class under its ``name``.

        Args:
            backend_class: Backend class to register
        """
        if not backend_class.name:
            raise ValueError("Parser backend must define a name")
        with self._lock:
            self._backends[backend_class.name] = backend_class

    def get_backend(
        self,
        name: str,
        correlation_id: Optional[str] = None,
        huge_tree: bool = True,
    ) -> ParserBackend:
        """Create a backend instance by name.

        Args:
            name: Registered backend name
            correlation_id: Optional correlation ID
            huge_tree: Lift the parser's document size and depth limits

        Returns:
            Backend instance

        Raises:
            ConfigValidationError: If no available backend has that name
        """
        with self._lock:
            backend_class = self._backends.get(name)
            known = sorted(self._backends)

        if backend_class is None:
            raise ConfigValidationError(
                f"Unknown parser backend: {name}",
                field_name="parser.backend",
                suggestions=known,
            )

        if not backend_class.is_available():
            raise ConfigValidationError(
                f"Parser backend is not available: {name}",
                field_name="parser.backend",
                suggestions=known,
            )
        return backend_class(correlation_id, huge_tree=huge_tree)

    def list_available(self) -> List[str]:
        """List names of registered backends that can be used."""
        with self._lock:
            backend_classes = list(self._backends.items())
        return [name for name, cls in backend_classes if cls.is_available()]


# Global backend registry instance
_backend_registry = BackendRegistry()
_backend_registry.register(LxmlBackend)
_backend_registry.register(ExpatBackend)


def register_backend(backend_class: Type[ParserBackend]) -> None:
    """Register a parser backend globally."""
    _backend_registry.register(backend_class)


def get_backend(
    name: str = "lxml",
    correlation_id: Optional[str] = None,
    huge_tree: bool = True,
) -> ParserBackend:
    """Get a registered parser backend instance."""
    return _backend_registry.get_backend(name, correlation_id, huge_tree)


def list_backends() -> List[str]:
    """List all available parser backends."""
    return _backend_registry.list_available()
