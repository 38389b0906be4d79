"""Exception taxonomy for the formatting engine.

Every failure surfaced by :func:`xml_tidy.format` and :func:`xml_tidy.compress`
is an :class:`XMLTidyError`. Failures are deterministic: calling again with the
same input raises the same error.
"""

from typing import Optional

INVALID_XML_MESSAGE = "invalid XML format"
EMPTY_INPUT_MESSAGE = "input is empty"


class XMLTidyError(Exception):
    """Base exception for all engine errors."""


class EmptyInputError(XMLTidyError):
    """Raised when the input is empty or contains only whitespace."""

    def __init__(self, message: str = EMPTY_INPUT_MESSAGE) -> None:
        super().__init__(message)


class MalformedXmlError(XMLTidyError):
    """Raised when content is not well-formed XML.

    Attributes:
        reason: Parser-supplied description of the problem, if any
        line: 1-based line of the error within the content, if known
        column: Column of the error within the content, if known
    """

    def __init__(
        self,
        reason: Optional[str] = None,
        line: Optional[int] = None,
        column: Optional[int] = None,
    ) -> None:
        self.reason = reason
        self.line = line
        self.column = column
        super().__init__(self._build_message())

    def _build_message(self) -> str:
        if not self.reason:
            return INVALID_XML_MESSAGE
        location = ""
        if self.line is not None:
            location = f" (line {self.line}"
            if self.column is not None:
                location += f", column {self.column}"
            location += ")"
        return f"{INVALID_XML_MESSAGE}: {self.reason}{location}"
