"""Structured logging for the formatting engine.

Records carry the component that emitted them and the caller's correlation ID
as ``extra`` attributes, so a log handler can tie together the extractor,
backend, builder and CLI messages produced for one request.
"""

import logging
from typing import Any, Dict, Optional


class CorrelationLogger:
    """Logger that tags every record with a component and a correlation ID.

    The engine only reports progress (debug), completed transforms (info) and
    rejected or unusually large input (warning); errors propagate as
    exceptions instead of being logged here.
    """

    def __init__(
        self,
        name: str,
        correlation_id: Optional[str] = None,
        component: Optional[str] = None
    ) -> None:
        self.logger = logging.getLogger(name)
        self.correlation_id = correlation_id
        self.component = component or name.split(".")[-1]

    def _log(self, level: int, message: str, extra: Optional[Dict[str, Any]]) -> None:
        if not self.logger.isEnabledFor(level):
            return
        fields: Dict[str, Any] = {
            "component": self.component,
            "correlation_id": self.correlation_id,
        }
        if extra:
            fields.update(extra)
        self.logger.log(level, message, extra=fields)

    def debug(self, message: str, extra: Optional[Dict[str, Any]] = None) -> None:
        """Log a pipeline stage detail."""
        self._log(logging.DEBUG, message, extra)

    def info(self, message: str, extra: Optional[Dict[str, Any]] = None) -> None:
        """Log a completed operation."""
        self._log(logging.INFO, message, extra)

    def warning(self, message: str, extra: Optional[Dict[str, Any]] = None) -> None:
        """Log rejected or unusually large input."""
        self._log(logging.WARNING, message, extra)


def get_logger(
    name: str,
    correlation_id: Optional[str] = None,
    component: Optional[str] = None
) -> CorrelationLogger:
    """Get a correlation-aware logger.

    Args:
        name: Logger name (typically __name__)
        correlation_id: Optional correlation ID for request tracking
        component: Component name; defaults to the last part of ``name``
    """
    return CorrelationLogger(name, correlation_id, component)
