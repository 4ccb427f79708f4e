"""
Structured Logging for hullkit
==============================

Bounded Context: Observability

JSON-structured logging for hull runs.

Public API
----------
    LogEvent: Typed event names (enum)
    StructuredLogger: JSON logger implementation
    create_logger: Factory function

Example:
    >>> from hullkit.logging import create_logger, LogEvent
    >>> logger = create_logger("pipeline")
    >>> logger.info(
    ...     event=LogEvent.POINTS_GENERATED,
    ...     message="Sampled 20 points",
    ...     metadata={'count': 20, 'seed': 7}
    ... )
"""

from .events import LogEvent
from .structured import StructuredLogger, create_logger

__all__ = [
    'LogEvent',
    'StructuredLogger',
    'create_logger',
]
