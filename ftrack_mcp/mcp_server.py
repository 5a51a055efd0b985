"""
MCP Server for the ftrack API
Exposes ftrack API operations as MCP tools over stdio.

Usage:
    ftrack-mcp
    python -m ftrack_mcp.mcp_server --log-level DEBUG --env-file .env

Requires FTRACK_SERVER, FTRACK_API_USER and FTRACK_API_KEY in the environment
(or in a .env file).

Claude Desktop / MCP host configuration:
    {
        "mcpServers": {
            "ftrack": {
                "command": "ftrack-mcp",
                "env": {
                    "FTRACK_SERVER": "https://mycompany.ftrackapp.com",
                    "FTRACK_API_USER": "john.doe@example.com",
                    "FTRACK_API_KEY": "..."
                }
            }
        }
    }
"""
from __future__ import annotations

import argparse
import asyncio
import logging
import os
import sys
from typing import Any, Dict, List, Optional

from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.types import CallToolResult, Tool

from .config import FtrackSettings, load_env
from .dispatcher import Dispatcher
from .ftrack_client import ConfigurationError, FtrackClient
from .infra.logging import configure_logging
from .tools import TOOL_DEFINITIONS

SERVER_NAME = "ftrack-mcp"
SERVER_VERSION = "1.0.0"
READY_MESSAGE = "ftrack MCP server started"

logger = logging.getLogger(__name__)


def build_server(client: FtrackClient) -> Server:
    """Create the MCP server with every ftrack tool bound to ``client``."""
    server = Server(
        SERVER_NAME,
        version=SERVER_VERSION,
        instructions="Comprehensive MCP server for the ftrack API - all operations",
    )
    dispatcher = Dispatcher(client)

    @server.list_tools()
    async def list_tools() -> List[Tool]:
        return list(TOOL_DEFINITIONS)

    @server.call_tool()
    async def call_tool(name: str, arguments: Dict[str, Any]) -> CallToolResult:
        return await dispatcher.dispatch(name, arguments)

    return server


def announce_ready() -> None:
    """Write the readiness line to stderr regardless of the log level."""
    print(READY_MESSAGE, file=sys.stderr, flush=True)


async def serve(client: FtrackClient) -> None:
    server = build_server(client)
    async with stdio_server() as (read_stream, write_stream):
        announce_ready()
        await server.run(read_stream, write_stream, server.create_initialization_options())


# ─────────────────────────────────────────────────────────────────────────────
# Main Entry Point
# ─────────────────────────────────────────────────────────────────────────────


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="ftrack MCP Server")
    parser.add_argument(
        "--log-level",
        default=os.getenv("FTRACK_MCP_LOG_LEVEL", "INFO"),
        help="Logging level (default: INFO)",
    )
    parser.add_argument(
        "--env-file",
        default=None,
        help="Path to a .env file (default: search from the working directory)",
    )
    args = parser.parse_args(argv)

    configure_logging(args.log_level)
    load_env(args.env_file)

    try:
        settings = FtrackSettings.from_env()
    except ConfigurationError as exc:
        logger.error("Failed to initialize ftrack client: %s", exc)
        if exc.missing:
            logger.error(
                "Please set FTRACK_SERVER, FTRACK_API_USER, and FTRACK_API_KEY environment variables."
            )
        return 1

    try:
        asyncio.run(serve(FtrackClient(settings)))
    except KeyboardInterrupt:
        pass
    return 0


if __name__ == "__main__":
    sys.exit(main())
