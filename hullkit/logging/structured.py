"""
Structured JSON Logger
=====================

Bounded Context: Observability Infrastructure

Outputs one JSON object per log line for hull runs.

Design:
- JSON output (greppable, jq-friendly)
- Wraps Python's logging module (thread-safe)
- Contextual metadata (algorithm, point counts, paths)
- Type-safe events (LogEvent enum)

Example:
    >>> logger = StructuredLogger(component="pipeline")
    >>> logger.info(
    ...     event=LogEvent.HULL_COMPUTED,
    ...     message="quickhull finished",
    ...     metadata={'algorithm': 'quickhull', 'hull_size': 7}
    ... )

Output:
    {"timestamp": "2026-10-19T15:30:45.123456+00:00", "level": "INFO",
     "component": "pipeline", "event": "hull.computed",
     "message": "quickhull finished",
     "metadata": {"algorithm": "quickhull", "hull_size": 7}}
"""

import json
import logging
from datetime import datetime, timezone
from typing import Dict, Any, Optional
from .events import LogEvent


class StructuredLogger:
    """
    JSON structured logger.

    Attributes:
        component: Component name (e.g., "pipeline", "cli")
        logger: Underlying Python logger instance
    """

    def __init__(
        self,
        component: str,
        level: int = logging.INFO,
        logger_name: Optional[str] = None
    ):
        """
        Initialize structured logger.

        Args:
            component: Component identifier (e.g., "pipeline")
            level: Logging level (default: INFO)
            logger_name: Custom logger name (default: hullkit.<component>)
        """
        self.component = component
        self.logger_name = logger_name or f"hullkit.{component}"
        self.logger = logging.getLogger(self.logger_name)
        self.logger.setLevel(level)

        # Configure JSON formatter if not already configured
        if not self.logger.handlers:
            handler = logging.StreamHandler()
            handler.setFormatter(JSONFormatter())
            self.logger.addHandler(handler)

    def build_entry(
        self,
        level: str,
        event: LogEvent,
        message: str,
        metadata: Optional[Dict[str, Any]] = None,
        exc_info: Optional[Exception] = None
    ) -> Dict[str, Any]:
        """Assemble the JSON-ready log entry."""
        log_entry = {
            'timestamp': datetime.now(timezone.utc).isoformat(),
            'level': level,
            'component': self.component,
            'event': event.value,
            'message': message,
        }

        if metadata:
            log_entry['metadata'] = metadata

        if exc_info:
            log_entry['exception'] = {
                'type': type(exc_info).__name__,
                'message': str(exc_info)
            }

        return log_entry

    def _log(
        self,
        level: str,
        event: LogEvent,
        message: str,
        metadata: Optional[Dict[str, Any]] = None,
        exc_info: Optional[Exception] = None
    ) -> None:
        log_entry = self.build_entry(level, event, message, metadata, exc_info)
        self.logger.log(
            getattr(logging, level),
            json.dumps(log_entry, default=str),
            exc_info=exc_info if level == 'ERROR' else None
        )

    def info(
        self,
        event: LogEvent,
        message: str,
        metadata: Optional[Dict[str, Any]] = None
    ) -> None:
        """
        Log INFO level message.

        Example:
            >>> logger.info(
            ...     event=LogEvent.RENDER_SAVED,
            ...     message="Saved hull image",
            ...     metadata={'path': 'runs/hull/convex_hull_quickhull.bmp'}
            ... )
        """
        self._log('INFO', event, message, metadata)

    def error(
        self,
        event: LogEvent,
        message: str,
        metadata: Optional[Dict[str, Any]] = None,
        exc_info: Optional[Exception] = None
    ) -> None:
        """
        Log ERROR level message.

        Example:
            >>> try:
            ...     gift_wrapping(points)
            ... except DegenerateInputError as e:
            ...     logger.error(
            ...         event=LogEvent.DEGENERATE_INPUT_ERROR,
            ...         message="Gift wrapping did not terminate",
            ...         exc_info=e,
            ...     )
        """
        self._log('ERROR', event, message, metadata, exc_info)


class JSONFormatter(logging.Formatter):
    """
    Pass-through formatter: StructuredLogger already emits JSON.
    """

    def format(self, record: logging.LogRecord) -> str:
        return record.getMessage()


def create_logger(
    component: str,
    level: int = logging.INFO
) -> StructuredLogger:
    """
    Factory function to create configured StructuredLogger.

    Example:
        >>> logger = create_logger("pipeline", level=logging.DEBUG)
    """
    return StructuredLogger(component=component, level=level)
