"""Leading declaration extraction.

Splits raw input into an opaque declarations block (XML declaration, DOCTYPE
and a leading comment) and the document content that follows it. The scan is
a fixed sequence of anchored prefix patterns, not a general prolog grammar:
each kind is looked for once, in order, and only at the current front of the
text.
"""

import re
from dataclasses import dataclass
from typing import List, Optional, Pattern, Tuple

BYTE_ORDER_MARK = "\ufeff"

XML_DECLARATION_PATTERN = re.compile(r"<\?xml.*?\?>", re.IGNORECASE | re.DOTALL)
DOCTYPE_PATTERN = re.compile(r"<!DOCTYPE.*?>", re.IGNORECASE | re.DOTALL)
LEADING_COMMENT_PATTERN = re.compile(r"<!--.*?-->", re.DOTALL)

_SCAN_ORDER: List[Tuple[str, Pattern[str]]] = [
    ("xml_declaration", XML_DECLARATION_PATTERN),
    ("doctype", DOCTYPE_PATTERN),
    ("comment", LEADING_COMMENT_PATTERN),
]


@dataclass
class DeclarationBlock:
    """Result of splitting raw input into declarations and content."""

    declarations: str = ""
    content: str = ""
    xml_declaration: Optional[str] = None
    doctype: Optional[str] = None
    comment: Optional[str] = None

    @property
    def has_declarations(self) -> bool:
        """Check if any declaration was found."""
        return bool(self.declarations)

    def attach(self, rendered: str) -> str:
        """Prepend the declarations block to rendered output."""
        if not self.declarations:
            return rendered
        return f"{self.declarations}\n{rendered}"


def extract_declarations(raw: str) -> DeclarationBlock:
    """Split ``raw`` into a declarations block and the remaining content.

    Never fails: input without any declaration yields an empty block and the
    input itself (minus a byte order mark and leading whitespace) as content.

    Examples:
        >>> block = extract_declarations('<?xml version="1.0"?>\\n<r/>')
        >>> block.declarations
        '<?xml version="1.0"?>'
        >>> block.content
        '<r/>'
    """
    rest = raw
    if rest.startswith(BYTE_ORDER_MARK):
        rest = rest[len(BYTE_ORDER_MARK):]
    rest = rest.lstrip()

    found = {}
    declarations = ""
    for kind, pattern in _SCAN_ORDER:
        match = pattern.match(rest)
        if match:
            found[kind] = match.group(0)
            declarations += match.group(0) + "\n"
            rest = rest[match.end():].lstrip()

    return DeclarationBlock(
        declarations=declarations.strip(),
        content=rest,
        **found,
    )
