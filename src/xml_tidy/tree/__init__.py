"""Document tree, well-formedness validation and tree construction.

Key Components:
    Element, Text, Document: The node model rendered by the formatter and compressor
    ParserBackend: Capability interface over a conformant XML parser
    TreeBuilder: Source-preserving construction of the node tree
    parse_document: Validate then build in one call
"""

from .builder import TreeBuilder, parse_attributes, parse_document
from .nodes import XML_WHITESPACE, Document, Element, Node, Text
from .validation import (
    BackendRegistry,
    ExpatBackend,
    LxmlBackend,
    ParserBackend,
    get_backend,
    list_backends,
    register_backend,
)

__all__ = [
    "XML_WHITESPACE",
    "Document",
    "Element",
    "Node",
    "Text",
    "TreeBuilder",
    "parse_attributes",
    "parse_document",
    "BackendRegistry",
    "ExpatBackend",
    "LxmlBackend",
    "ParserBackend",
    "get_backend",
    "list_backends",
    "register_backend",
]
