"""Declaration extraction layer.

Separates the XML declaration, DOCTYPE and leading comment from the document
content so they can be re-emitted verbatim on top of rendered output.
"""

from .extractor import (
    BYTE_ORDER_MARK,
    DeclarationBlock,
    extract_declarations,
)

__all__ = [
    "BYTE_ORDER_MARK",
    "DeclarationBlock",
    "extract_declarations",
]
