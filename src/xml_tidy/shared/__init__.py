"""Shared utilities for XML formatting and compression.

This module provides configuration objects, error types, result types and
logging helpers used across all processing layers.
"""

from .config import (
    CompressConfig,
    CompressStrategy,
    ConfigError,
    ConfigValidationError,
    EngineConfig,
    FormatConfig,
    ParserConfig,
    TransformMode,
)
from .errors import (
    EmptyInputError,
    MalformedXmlError,
    XMLTidyError,
)
from .logging import (
    CorrelationLogger,
    get_logger,
)
from .result import (
    TransformMetrics,
    TransformResult,
    ValidationReport,
)

__all__ = [
    "CompressConfig",
    "CompressStrategy",
    "ConfigError",
    "ConfigValidationError",
    "EngineConfig",
    "FormatConfig",
    "ParserConfig",
    "TransformMode",
    "EmptyInputError",
    "MalformedXmlError",
    "XMLTidyError",
    "CorrelationLogger",
    "get_logger",
    "TransformMetrics",
    "TransformResult",
    "ValidationReport",
]
