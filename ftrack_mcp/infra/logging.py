"""
Server Logging Module

Provides structured logging for tool execution:
- Tool calls with arguments
- Tool results with timing
- Error tracking

Everything goes to stderr; stdout carries the MCP protocol stream.
"""
from __future__ import annotations

import json
import logging
import sys
import traceback
from collections import deque
from dataclasses import asdict, dataclass
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Deque, Dict, List, Optional

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def configure_logging(level: str = "INFO") -> None:
    """Configure root logging on stderr."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
        datefmt=DATE_FORMAT,
        stream=sys.stderr,
        force=True,
    )


class LogType(str, Enum):
    TOOL_CALL = "tool_call"
    TOOL_RESULT = "tool_result"
    ERROR = "error"


@dataclass
class LogEntry:
    """A single log entry for a tool invocation."""
    timestamp: str
    log_type: str
    tool: str
    message: str
    duration_ms: Optional[float] = None
    input_data: Optional[Any] = None
    output_data: Optional[Any] = None
    error: Optional[str] = None
    error_kind: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {k: v for k, v in asdict(self).items() if v is not None}


class ToolCallLogger:
    """
    Structured logger for tool calls.

    Usage:
        tool_logger = ToolCallLogger()
        tool_logger.log_tool_call("ftrack_query", {"expression": "..."})
        tool_logger.log_tool_result("ftrack_query", result, duration_ms=12.5)
    """

    def __init__(
        self,
        name: str = "ftrack_mcp.tools",
        max_data_length: int = 500,
        max_entries: int = 200,
    ):
        self.max_data_length = max_data_length
        self.entries: Deque[LogEntry] = deque(maxlen=max_entries)
        self._logger = logging.getLogger(name)

    def _now(self) -> str:
        return datetime.now(tz=timezone.utc).isoformat()

    def _truncate(self, data: Any) -> Any:
        """Truncate large data for logging."""
        if data is None:
            return None
        text = json.dumps(data, default=str) if not isinstance(data, str) else data
        if len(text) > self.max_data_length:
            return text[:self.max_data_length] + f"... [truncated {len(text) - self.max_data_length} chars]"
        return data

    def _add_entry(self, entry: LogEntry) -> None:
        self.entries.append(entry)

        level = logging.ERROR if entry.log_type == LogType.ERROR.value else logging.INFO
        msg_parts = [f"[{entry.log_type.upper()}]", entry.message]
        if entry.duration_ms is not None:
            msg_parts.append(f"({entry.duration_ms:.1f}ms)")
        self._logger.log(level, " ".join(msg_parts))

        if entry.input_data is not None:
            self._logger.debug("  Input: %s", entry.input_data)
        if entry.output_data is not None:
            self._logger.debug("  Output: %s", entry.output_data)
        if entry.error and entry.error_kind:
            self._logger.warning("  Error (%s): %s", entry.error_kind, entry.error)
        elif entry.error:
            self._logger.warning("  Error: %s", entry.error)

    # =========================================================================
    # Tool Logging
    # =========================================================================

    def log_tool_call(self, tool_name: str, arguments: Dict[str, Any]) -> None:
        """Log a tool call with its arguments."""
        self._add_entry(LogEntry(
            timestamp=self._now(),
            log_type=LogType.TOOL_CALL.value,
            tool=tool_name,
            message=f"Calling tool: {tool_name}",
            input_data=self._truncate(arguments),
        ))

    def log_tool_result(
        self,
        tool_name: str,
        result: Any,
        success: bool = True,
        duration_ms: Optional[float] = None,
        error: Optional[Exception | str] = None,
    ) -> None:
        """Log a tool result, with the error message if it failed."""
        self._add_entry(LogEntry(
            timestamp=self._now(),
            log_type=LogType.TOOL_RESULT.value,
            tool=tool_name,
            message=f"Tool {tool_name}: {'success' if success else 'failed'}",
            duration_ms=duration_ms,
            output_data=self._truncate(result) if success else None,
            error=str(error) if error else None,
            error_kind=getattr(error, "kind", None),
        ))

    def log_error(self, tool_name: str, error: Exception) -> None:
        """Log an unexpected error with full traceback."""
        full_traceback = "".join(traceback.format_exception(type(error), error, error.__traceback__))
        self._add_entry(LogEntry(
            timestamp=self._now(),
            log_type=LogType.ERROR.value,
            tool=tool_name,
            message=f"Unexpected failure in {tool_name}",
            error=full_traceback,
        ))

    def get_entries(self) -> List[Dict[str, Any]]:
        """Get recent log entries as dicts."""
        return [e.to_dict() for e in self.entries]
