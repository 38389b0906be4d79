"""Result objects for formatting, compression and validation calls."""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from .config import TransformMode


@dataclass
class TransformMetrics:
    """Performance and size metrics for one engine call."""

    processing_time_ms: float = 0.0
    input_characters: int = 0
    output_characters: int = 0
    element_count: int = 0
    max_depth: int = 0

    @property
    def characters_per_second(self) -> float:
        """Calculate input characters processed per second."""
        if self.processing_time_ms <= 0:
            return 0.0
        return (self.input_characters * 1000.0) / self.processing_time_ms

    @property
    def size_ratio(self) -> float:
        """Output size relative to input size."""
        if self.input_characters == 0:
            return 0.0
        return self.output_characters / self.input_characters


@dataclass
class TransformResult:
    """Output of :meth:`xml_tidy.XMLTidy.transform`."""

    output: str
    mode: TransformMode
    declarations: str = ""
    metrics: TransformMetrics = field(default_factory=TransformMetrics)
    correlation_id: Optional[str] = None

    def __str__(self) -> str:
        return self.output

    def to_dict(self) -> Dict[str, Any]:
        """Convert result to dictionary representation."""
        return {
            "mode": self.mode.value,
            "output": self.output,
            "declarations": self.declarations,
            "processing_time_ms": self.metrics.processing_time_ms,
            "input_characters": self.metrics.input_characters,
            "output_characters": self.metrics.output_characters,
            "element_count": self.metrics.element_count,
            "max_depth": self.metrics.max_depth,
        }


@dataclass
class ValidationReport:
    """Non-raising outcome of a well-formedness check."""

    valid: bool
    error: Optional[str] = None
    line: Optional[int] = None
    column: Optional[int] = None
    declarations: str = ""
    element_count: int = 0

    def to_dict(self) -> Dict[str, Any]:
        """Convert report to dictionary representation."""
        result: Dict[str, Any] = {"valid": self.valid}
        if self.valid:
            result["element_count"] = self.element_count
        else:
            result["error"] = self.error
            if self.line is not None:
                result["line"] = self.line
                result["column"] = self.column
        return result
