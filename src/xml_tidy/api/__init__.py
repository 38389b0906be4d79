"""Public engine API."""

from .engine import XMLTidy, compress, format, validate

__all__ = [
    "XMLTidy",
    "compress",
    "format",
    "validate",
]
