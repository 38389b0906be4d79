"""Source-preserving tree construction.

The builder runs over content that a parser backend has already accepted and
turns it into a :class:`Document`. Working from the source text rather than
from the backend's parsed values keeps attribute values and character data
exactly as written: ``&amp;``, ``&#65;`` and CDATA sections are not decoded.
Comments, processing instructions and DOCTYPE declarations inside the content
are skipped; character data on either side of a skipped construct is merged.
"""

import re
import time
from typing import List, Optional, Tuple

from xml_tidy.shared import MalformedXmlError, get_logger
from xml_tidy.tree.nodes import Document, Element, Node, Text
from xml_tidy.tree.validation import ParserBackend, get_backend

_TOKEN_PATTERN = re.compile(
    r"(?P<comment><!--.*?-->)"
    r"|(?P<cdata><!\[CDATA\[.*?\]\]>)"
    r"|(?P<pi><\?.*?\?>)"
    r"|(?P<doctype><!DOCTYPE(?:[^\[>]|\[.*?\])*>)"
    r"|(?P<end></(?P<end_name>[^\s>]+)\s*>)"
    r"|(?P<start><(?P<name>[^\s/>!?]+)"
    r"(?P<attrs>(?:\s+[^\s=/>]+\s*=\s*(?:\"[^\"]*\"|'[^']*'))*)"
    r"\s*(?P<self_closing>/)?>)"
    r"|(?P<text>[^<]+)",
    re.DOTALL,
)

_ATTRIBUTE_PATTERN = re.compile(
    r"([^\s=/>]+)\s*=\s*(?:\"([^\"]*)\"|'([^']*)')",
    re.DOTALL,
)

_SKIPPED_TOKENS = ("comment", "pi", "doctype")


def _location(content: str, position: int) -> Tuple[int, int]:
    """Translate a string offset into a 1-based (line, column) pair."""
    line = content.count("\n", 0, position) + 1
    column = position - content.rfind("\n", 0, position)
    return line, column


def parse_attributes(source: str) -> List[Tuple[str, str]]:
    """Split the attribute section of a start tag into ordered pairs.

    Values are returned as written between their quotes.

    Raises:
        MalformedXmlError: If an attribute name repeats
    """
    attributes: List[Tuple[str, str]] = []
    seen = set()
    for match in _ATTRIBUTE_PATTERN.finditer(source):
        name = match.group(1)
        value = match.group(2) if match.group(2) is not None else match.group(3)
        if name in seen:
            raise MalformedXmlError(f"attribute {name} redefined")
        seen.add(name)
        attributes.append((name, value))
    return attributes


def _append_text(children: List[Node], raw: str) -> None:
    if children and isinstance(children[-1], Text):
        children[-1] = Text(children[-1].value + raw)
    else:
        children.append(Text(raw))


class TreeBuilder:
    """Builds a :class:`Document` from well-formed content."""

    def __init__(self, correlation_id: Optional[str] = None) -> None:
        self.correlation_id = correlation_id
        self._logger = get_logger(__name__, correlation_id, "tree_builder")

    def build(self, content: str) -> Document:
        """Construct the document tree for ``content``.

        Args:
            content: Well-formed document content without leading declarations

        Returns:
            The complete document; never a partial tree

        Raises:
            MalformedXmlError: If the markup is not balanced
        """
        start_time = time.time()
        document = Document()
        stack: List[Element] = []
        position = 0

        while position < len(content):
            match = _TOKEN_PATTERN.match(content, position)
            if match is None:
                line, column = _location(content, position)
                raise MalformedXmlError("unexpected markup", line, column)

            kind = match.lastgroup
            children = stack[-1].children if stack else document.children

            if kind in ("text", "cdata"):
                _append_text(children, match.group(0))
            elif kind == "start":
                element = Element(
                    name=match.group("name"),
                    attributes=parse_attributes(match.group("attrs")),
                )
                children.append(element)
                if not match.group("self_closing"):
                    stack.append(element)
            elif kind == "end":
                name = match.group("end_name")
                if not stack or stack[-1].name != name:
                    line, column = _location(content, position)
                    raise MalformedXmlError(
                        f"closing tag </{name}> does not match", line, column
                    )
                stack.pop()
            elif kind not in _SKIPPED_TOKENS:
                line, column = _location(content, position)
                raise MalformedXmlError("unexpected markup", line, column)

            position = match.end()

        if stack:
            raise MalformedXmlError(f"element <{stack[-1].name}> is not closed")
        if len(document.elements) != 1:
            raise MalformedXmlError(
                "document must have exactly one root element"
            )

        self._logger.debug(
            "Document tree built",
            extra={
                "element_count": document.element_count,
                "build_time_ms": (time.time() - start_time) * 1000,
            },
        )
        return document


def parse_document(
    content: str,
    backend: Optional[ParserBackend] = None,
    correlation_id: Optional[str] = None,
) -> Document:
    """Validate ``content`` with a parser backend, then build its tree.

    Args:
        content: Document content without leading declarations
        backend: Parser backend; the default lxml backend if omitted
        correlation_id: Optional correlation ID for request tracking

    Returns:
        The document tree

    Raises:
        MalformedXmlError: If the content is not well-formed XML

    Examples:
        >>> doc = parse_document('<r a="1"><b>x</b></r>')
        >>> doc.root.get_attribute("a")
        '1'
    """
    if backend is None:
        backend = get_backend(correlation_id=correlation_id)
    backend.check(content)
    return TreeBuilder(correlation_id).build(content)
