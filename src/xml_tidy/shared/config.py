"""Configuration classes for XML formatting and compression.

This module provides configuration objects for the renderers, the parser
backend and the engine, with validation, presets and JSON round-tripping.
"""

import json
from dataclasses import dataclass, field, replace
from enum import Enum, auto
from typing import Any, Dict, List, Optional

DEFAULT_INDENT_SIZE = 4
DEFAULT_LARGE_INPUT_THRESHOLD = 100_000
MAX_INDENT_SIZE = 16

_VALID_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
_COMPONENTS = ["format", "compress", "parser"]


class CompressStrategy(Enum):
    """How the compact form is produced."""

    TREE = auto()      # Re-serialize the parsed tree without inter-tag whitespace
    TEXTUAL = auto()   # Collapse whitespace in the validated source text


class TransformMode(Enum):
    """Rendering mode of an engine call."""

    FORMAT = "format"
    COMPRESS = "compress"


@dataclass
class FormatConfig:
    """Configuration for the indented renderer."""

    indent_size: int = DEFAULT_INDENT_SIZE
    indent_char: str = " "

    def __post_init__(self) -> None:
        """Validate format configuration."""
        if not (0 <= self.indent_size <= MAX_INDENT_SIZE):
            raise ValueError(f"indent_size must be between 0 and {MAX_INDENT_SIZE}")
        if self.indent_char not in (" ", "\t"):
            raise ValueError("indent_char must be a space or a tab")

    @property
    def indent_unit(self) -> str:
        """One level of indentation."""
        return self.indent_char * self.indent_size


@dataclass
class CompressConfig:
    """Configuration for the compact renderer."""

    strategy: CompressStrategy = CompressStrategy.TREE
    self_close_empty: bool = False

    def __post_init__(self) -> None:
        """Validate compress configuration."""
        if not isinstance(self.strategy, CompressStrategy):
            raise ValueError("strategy must be a CompressStrategy")
        if self.self_close_empty and self.strategy is CompressStrategy.TEXTUAL:
            raise ValueError("self_close_empty is only supported by the TREE strategy")


@dataclass
class ParserConfig:
    """Configuration for the well-formedness backend."""

    backend: str = "lxml"
    huge_tree: bool = True

    def __post_init__(self) -> None:
        """Validate parser configuration."""
        if not self.backend:
            raise ValueError("backend cannot be empty")


class ConfigError(Exception):
    """Base exception for configuration errors."""


class ConfigValidationError(ConfigError):
    """Exception raised when configuration validation fails."""

    def __init__(self, message: str, field_name: Optional[str] = None,
                 suggestions: Optional[List[str]] = None):
        super().__init__(message)
        self.field_name = field_name
        self.suggestions = suggestions or []


@dataclass(frozen=True)
class EngineConfig:
    """Complete, immutable configuration for the formatting engine.

    Thread-safe due to frozen dataclass implementation; use :meth:`override`
    to derive a modified copy.
    """

    format: FormatConfig = field(default_factory=FormatConfig)
    compress: CompressConfig = field(default_factory=CompressConfig)
    parser: ParserConfig = field(default_factory=ParserConfig)

    large_input_threshold: int = DEFAULT_LARGE_INPUT_THRESHOLD
    logging_level: str = "WARNING"
    name: Optional[str] = None

    def __post_init__(self) -> None:
        """Validate the complete engine configuration."""
        try:
            self.format.__post_init__()
            self.compress.__post_init__()
            self.parser.__post_init__()
        except ValueError as e:
            raise ConfigValidationError(str(e)) from e

        if self.large_input_threshold <= 0:
            raise ConfigValidationError(
                "large_input_threshold must be > 0",
                field_name="large_input_threshold",
            )
        if self.logging_level not in _VALID_LOG_LEVELS:
            raise ConfigValidationError(
                f"logging_level must be one of {_VALID_LOG_LEVELS}",
                field_name="logging_level",
                suggestions=_VALID_LOG_LEVELS,
            )

    def override(self, **kwargs: Any) -> "EngineConfig":
        """Create a new configuration with specific overrides.

        Args:
            **kwargs: Fields to override; component fields use the
                ``component__field`` notation

        Returns:
            New EngineConfig instance with overrides applied

        Example:
            >>> config = EngineConfig().override(format__indent_size=2)
            >>> config.format.indent_size
            2
        """
        nested_overrides: Dict[str, Any] = {}
        for key, value in kwargs.items():
            if "__" in key:
                component, field_name = key.split("__", 1)
                if component not in _COMPONENTS:
                    raise ConfigValidationError(
                        f"Unknown configuration component: {component}",
                        field_name=key,
                        suggestions=_COMPONENTS,
                    )
                nested_overrides.setdefault(component, {})[field_name] = value
            else:
                nested_overrides[key] = value

        new_fields: Dict[str, Any] = {}
        try:
            for component in _COMPONENTS:
                if component in nested_overrides:
                    new_fields[component] = replace(
                        getattr(self, component), **nested_overrides.pop(component)
                    )
        except (TypeError, ValueError) as e:
            raise ConfigValidationError(str(e)) from e

        new_fields.update(nested_overrides)
        try:
            return replace(self, **new_fields)
        except TypeError as e:
            raise ConfigValidationError(str(e)) from e

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary format."""
        def _dataclass_to_dict(obj: Any) -> Any:
            if hasattr(obj, "__dataclass_fields__"):
                return {
                    name: _dataclass_to_dict(getattr(obj, name))
                    for name in obj.__dataclass_fields__
                }
            if isinstance(obj, Enum):
                return obj.name
            return obj

        return _dataclass_to_dict(self)

    def to_json(self, indent: int = 2) -> str:
        """Convert configuration to JSON string."""
        return json.dumps(self.to_dict(), indent=indent)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "EngineConfig":
        """Create configuration from dictionary.

        Args:
            data: Dictionary as produced by :meth:`to_dict`; missing keys
                keep their defaults

        Returns:
            EngineConfig instance created from dictionary
        """
        try:
            compress_data = dict(data.get("compress", {}))
            if isinstance(compress_data.get("strategy"), str):
                compress_data["strategy"] = CompressStrategy[
                    compress_data["strategy"].upper()
                ]

            top_level = {
                key: value for key, value in data.items()
                if key not in _COMPONENTS
            }
            return cls(
                format=FormatConfig(**data.get("format", {})),
                compress=CompressConfig(**compress_data),
                parser=ParserConfig(**data.get("parser", {})),
                **top_level,
            )
        except (KeyError, TypeError, ValueError) as e:
            raise ConfigValidationError(f"Invalid configuration data: {e}") from e

    @classmethod
    def from_json(cls, json_str: str) -> "EngineConfig":
        """Create configuration from JSON string."""
        try:
            data = json.loads(json_str)
        except json.JSONDecodeError as e:
            raise ConfigValidationError(f"Configuration is not valid JSON: {e}") from e
        if not isinstance(data, dict):
            raise ConfigValidationError("Configuration JSON must be an object")
        return cls.from_dict(data)

    # Preset factory methods
    @classmethod
    def default(cls) -> "EngineConfig":
        """Four-space indentation, tree compression, lxml backend."""
        return cls(name="default")

    @classmethod
    def tabs(cls) -> "EngineConfig":
        """Indent with one tab per level."""
        return cls(
            format=FormatConfig(indent_size=1, indent_char="\t"),
            name="tabs",
        )

    @classmethod
    def textual_compression(cls) -> "EngineConfig":
        """Compress by rewriting the source text instead of the tree."""
        return cls(
            compress=CompressConfig(strategy=CompressStrategy.TEXTUAL),
            name="textual_compression",
        )

    @classmethod
    def stdlib_only(cls) -> "EngineConfig":
        """Validate with the standard library expat parser."""
        return cls(
            parser=ParserConfig(backend="expat"),
            name="stdlib_only",
        )
