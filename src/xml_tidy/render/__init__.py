"""Renderers turning a document tree back into markup.

Key Components:
    Formatter: Indented, one construct per line
    Compressor: Single line, inter-tag whitespace removed
"""

from .compressor import Compressor, collapse_whitespace
from .formatter import Formatter
from .markup import end_tag, quote_attribute, start_tag

__all__ = [
    "Compressor",
    "Formatter",
    "collapse_whitespace",
    "end_tag",
    "quote_attribute",
    "start_tag",
]
