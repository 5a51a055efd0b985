from typing import Any, Awaitable, Callable, Dict, List

from mcp.types import Tool

from ..ftrack_client import FtrackClient
from . import admin, api_keys, batch, crud, helpers, jobs, media, query, two_factor, users

Executor = Callable[[FtrackClient, Dict[str, Any]], Awaitable[Any]]

_MODULES = [query, crud, users, api_keys, two_factor, media, admin, jobs, batch, helpers]

TOOL_DEFINITIONS: List[Tool] = [
    tool for module in _MODULES for tool in module.TOOL_DEFINITIONS
]

EXECUTORS: Dict[str, Executor] = {
    name: executor for module in _MODULES for name, executor in module.EXECUTORS.items()
}

__all__ = ["TOOL_DEFINITIONS", "EXECUTORS", "Executor"]
