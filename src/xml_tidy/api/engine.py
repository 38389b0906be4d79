"""Engine API with progressive disclosure for XML formatting and compression.

Level 1 is the pair of module-level functions :func:`format` and
:func:`compress` (plus the non-raising :func:`validate`); Level 2 is the
configurable :class:`XMLTidy` class that also exposes the parsed tree and
per-call metrics. Every call is an independent transformation of a string
into a new string: nothing is cached or shared between calls.
"""

import time
from typing import Optional, Tuple

from xml_tidy.prolog import DeclarationBlock, extract_declarations
from xml_tidy.render import Compressor, Formatter
from xml_tidy.shared import (
    EmptyInputError,
    EngineConfig,
    MalformedXmlError,
    TransformMetrics,
    TransformMode,
    TransformResult,
    ValidationReport,
    get_logger,
)
from xml_tidy.tree import Document, TreeBuilder, get_backend

# Constants for API operations
PREVIEW_LENGTH = 100  # Max length for content preview in logs
MS_PER_SECOND = 1000  # Milliseconds per second conversion


class XMLTidy:
    """Configurable formatter and compressor.

    Attributes:
        config: Engine configuration
        correlation_id: Correlation ID attached to every log record

    Examples:
        >>> tidy = XMLTidy()
        >>> print(tidy.format('<r><a>1</a></r>'))
        <r>
            <a>1</a>
        </r>
        >>> tidy.compress('<r>\\n    <a>1</a>\\n</r>')
        '<r><a>1</a></r>'

        Two-space indentation:
        >>> tidy = XMLTidy(EngineConfig().override(format__indent_size=2))
    """

    def __init__(
        self,
        config: Optional[EngineConfig] = None,
        correlation_id: Optional[str] = None
    ) -> None:
        """Initialize the engine.

        Args:
            config: Engine configuration (defaults to ``EngineConfig.default()``)
            correlation_id: Optional correlation ID for request tracking

        Raises:
            ConfigValidationError: If the configured parser backend is unknown
        """
        self.config = config or EngineConfig.default()
        self.correlation_id = correlation_id
        self.logger = get_logger(__name__, correlation_id, "xml_tidy")

        self._backend = get_backend(
            self.config.parser.backend,
            correlation_id,
            huge_tree=self.config.parser.huge_tree,
        )
        self._builder = TreeBuilder(correlation_id)
        self._formatter = Formatter(self.config.format)
        self._compressor = Compressor(self.config.compress)

    def parse(self, text: str) -> Tuple[DeclarationBlock, Document]:
        """Split declarations from ``text``, validate and build the tree.

        Args:
            text: Raw XML text

        Returns:
            The declarations block and the document tree

        Raises:
            EmptyInputError: If ``text`` is empty or whitespace-only
            MalformedXmlError: If the content is not well-formed XML
        """
        if not isinstance(text, str):
            raise TypeError(f"expected str, got {type(text).__name__}")
        if not text.strip():
            raise EmptyInputError()

        if len(text) > self.config.large_input_threshold:
            self.logger.warning(
                "Large input, this may take a moment",
                extra={
                    "content_length": len(text),
                    "threshold": self.config.large_input_threshold,
                }
            )

        start_time = time.time()
        block = extract_declarations(text)
        self.logger.debug(
            "Declarations extracted",
            extra={
                "declarations": block.declarations,
                "content_preview": block.content[:PREVIEW_LENGTH],
            }
        )

        try:
            self._backend.check(block.content)
            document = self._builder.build(block.content)
        except MalformedXmlError as e:
            self.logger.warning(
                "Rejected malformed XML",
                extra={
                    "reason": e.reason,
                    "line": e.line,
                    "column": e.column,
                    "backend": self._backend.name,
                }
            )
            raise

        self.logger.debug(
            "Content parsed",
            extra={"parse_time_ms": (time.time() - start_time) * MS_PER_SECOND}
        )
        return block, document

    def transform(self, text: str, mode: TransformMode) -> TransformResult:
        """Format or compress ``text`` and report metrics.

        Args:
            text: Raw XML text
            mode: ``TransformMode.FORMAT`` or ``TransformMode.COMPRESS``

        Returns:
            TransformResult with the output string and call metrics

        Raises:
            EmptyInputError: If ``text`` is empty or whitespace-only
            MalformedXmlError: If the content is not well-formed XML
        """
        start_time = time.time()
        block, document = self.parse(text)

        if mode is TransformMode.FORMAT:
            rendered = self._formatter.render(document)
        elif mode is TransformMode.COMPRESS:
            rendered = self._compressor.render(document, block.content)
        else:
            raise ValueError(f"Unsupported transform mode: {mode!r}")

        output = block.attach(rendered)
        metrics = TransformMetrics(
            processing_time_ms=(time.time() - start_time) * MS_PER_SECOND,
            input_characters=len(text),
            output_characters=len(output),
            element_count=document.element_count,
            max_depth=document.max_depth,
        )

        self.logger.info(
            "Transform completed",
            extra={
                "mode": mode.value,
                "processing_time_ms": metrics.processing_time_ms,
                "input_characters": metrics.input_characters,
                "output_characters": metrics.output_characters,
            }
        )

        return TransformResult(
            output=output,
            mode=mode,
            declarations=block.declarations,
            metrics=metrics,
            correlation_id=self.correlation_id,
        )

    def format(self, text: str) -> str:
        """Return ``text`` pretty-printed with stable indentation."""
        return self.transform(text, TransformMode.FORMAT).output

    def compress(self, text: str) -> str:
        """Return ``text`` on a single line with inter-tag whitespace removed."""
        return self.transform(text, TransformMode.COMPRESS).output

    def validate(self, text: str) -> ValidationReport:
        """Check ``text`` for well-formedness without raising.

        Returns:
            ValidationReport describing the first problem found, if any
        """
        try:
            block, document = self.parse(text)
        except EmptyInputError as e:
            return ValidationReport(valid=False, error=str(e))
        except MalformedXmlError as e:
            return ValidationReport(
                valid=False,
                error=str(e),
                line=e.line,
                column=e.column,
                declarations=extract_declarations(text).declarations,
            )

        return ValidationReport(
            valid=True,
            declarations=block.declarations,
            element_count=document.element_count,
        )


def format(
    text: str,
    config: Optional[EngineConfig] = None,
    correlation_id: Optional[str] = None
) -> str:
    """Pretty-print an XML document.

    Leading declarations (XML declaration, DOCTYPE, a leading comment) are
    kept verbatim, one per line, above the indented document.

    Args:
        text: Raw XML text
        config: Optional engine configuration
        correlation_id: Optional correlation ID for request tracking

    Returns:
        The formatted document

    Raises:
        EmptyInputError: If ``text`` is empty or whitespace-only
        MalformedXmlError: If the content is not well-formed XML

    Examples:
        >>> print(format('<r><a>1</a><b><c>2</c></b></r>'))
        <r>
            <a>1</a>
            <b>
                <c>2</c>
            </b>
        </r>
    """
    return XMLTidy(config, correlation_id).format(text)


def compress(
    text: str,
    config: Optional[EngineConfig] = None,
    correlation_id: Optional[str] = None
) -> str:
    """Compact an XML document onto a single line.

    Args:
        text: Raw XML text
        config: Optional engine configuration
        correlation_id: Optional correlation ID for request tracking

    Returns:
        The compressed document, declarations on their own lines above it

    Raises:
        EmptyInputError: If ``text`` is empty or whitespace-only
        MalformedXmlError: If the content is not well-formed XML

    Examples:
        >>> compress('<r> <a/> <b/> </r>')
        '<r><a></a><b></b></r>'
    """
    return XMLTidy(config, correlation_id).compress(text)


def validate(
    text: str,
    config: Optional[EngineConfig] = None,
    correlation_id: Optional[str] = None
) -> ValidationReport:
    """Check an XML document for well-formedness without raising."""
    return XMLTidy(config, correlation_id).validate(text)
