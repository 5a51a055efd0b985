"""MCP server exposing the ftrack API as tools."""

__version__ = "1.0.0"
