"""XML Tidy.

Formats XML documents into a stable indented layout and compresses them onto
a single line, rejecting anything that is not well-formed.

Progressive API Disclosure:
- Level 1: Simple functions - format(), compress(), validate()
- Level 2: Configured engine - XMLTidy class with EngineConfig
- Level 3: Building blocks - extract_declarations(), parse_document(),
  Formatter, Compressor
"""

__version__ = "0.1.0"
__author__ = "XML Tidy Team"

# Progressive API disclosure - Level 1: Simple functions
from .api import compress, format, validate

# Progressive API disclosure - Level 2: Configured engine
from .api import XMLTidy

# Level 3: Building blocks
from .prolog import DeclarationBlock, extract_declarations
from .render import Compressor, Formatter

# Configuration, errors and results
from .shared import (
    CompressConfig,
    CompressStrategy,
    ConfigValidationError,
    EmptyInputError,
    EngineConfig,
    FormatConfig,
    MalformedXmlError,
    ParserConfig,
    TransformMode,
    TransformResult,
    ValidationReport,
    XMLTidyError,
)
from .tree import Document, Element, Text, parse_document

__all__ = [
    # Version and metadata
    "__author__",
    "__version__",

    # Level 1: Simple functions
    "format",
    "compress",
    "validate",

    # Level 2: Configured engine
    "XMLTidy",

    # Level 3: Building blocks
    "DeclarationBlock",
    "extract_declarations",
    "parse_document",
    "Formatter",
    "Compressor",

    # Tree model
    "Document",
    "Element",
    "Text",

    # Configuration
    "EngineConfig",
    "FormatConfig",
    "CompressConfig",
    "CompressStrategy",
    "ParserConfig",
    "TransformMode",

    # Results and errors
    "TransformResult",
    "ValidationReport",
    "XMLTidyError",
    "EmptyInputError",
    "MalformedXmlError",
    "ConfigValidationError",
]
