"""Infrastructure utilities: logging."""
from .logging import (
    LogEntry,
    LogType,
    ToolCallLogger,
    configure_logging,
)

__all__ = [
    "LogEntry",
    "LogType",
    "ToolCallLogger",
    "configure_logging",
]
