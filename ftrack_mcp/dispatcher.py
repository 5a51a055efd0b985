"""
Runs tool executors and turns their outcome into MCP tool results.

Success is the pretty-printed JSON of the result. Any failure becomes the text
``Error: <message>`` with ``isError`` set; nothing is raised to the host.
"""
from __future__ import annotations

import json
import logging
import time
from typing import Any, Dict, Mapping, Optional

from mcp.types import CallToolResult, TextContent
from pydantic import ValidationError

from .ftrack_client import FtrackClient, FtrackError
from .infra.logging import ToolCallLogger
from .tools import EXECUTORS, Executor

logger = logging.getLogger(__name__)


def success_result(data: Any) -> CallToolResult:
    return CallToolResult(
        content=[TextContent(type="text", text=json.dumps(data, indent=2, default=str))]
    )


def error_result(message: str) -> CallToolResult:
    return CallToolResult(content=[TextContent(type="text", text=f"Error: {message}")], isError=True)


def describe_error(exc: Exception) -> str:
    """User-facing message for a failed tool call."""
    if isinstance(exc, FtrackError):
        return exc.message
    if isinstance(exc, ValidationError):
        return f"Invalid arguments: {exc.errors(include_url=False)}"
    if isinstance(exc, KeyError):
        return f"Missing required argument: {exc.args[0]}"
    return str(exc) or type(exc).__name__


class Dispatcher:
    """Looks up the executor for a tool name and runs it against one client."""

    def __init__(
        self,
        client: FtrackClient,
        executors: Optional[Mapping[str, Executor]] = None,
        tool_logger: Optional[ToolCallLogger] = None,
    ) -> None:
        self.client = client
        self.executors = dict(EXECUTORS if executors is None else executors)
        self.tool_logger = tool_logger or ToolCallLogger()

    async def dispatch(self, name: str, arguments: Optional[Dict[str, Any]] = None) -> CallToolResult:
        arguments = arguments or {}
        executor = self.executors.get(name)
        if executor is None:
            return error_result(f"Unknown tool: {name}")

        self.tool_logger.log_tool_call(name, arguments)
        started = time.perf_counter()
        try:
            result = await executor(self.client, arguments)
        except (FtrackError, ValidationError, KeyError) as exc:
            self.tool_logger.log_tool_result(
                name, None, success=False, duration_ms=_elapsed_ms(started), error=exc
            )
            return error_result(describe_error(exc))
        except Exception as exc:
            self.tool_logger.log_error(name, exc)
            return error_result(describe_error(exc))

        self.tool_logger.log_tool_result(name, result, duration_ms=_elapsed_ms(started))
        return success_result(result)


def _elapsed_ms(started: float) -> float:
    return (time.perf_counter() - started) * 1000
