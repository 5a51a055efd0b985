from typing import Any, Dict

from mcp.types import Tool

from ..ftrack_client import FtrackClient

BATCH = Tool(
    name="ftrack_batch",
    description=(
        "Execute multiple operations in a single request. Results come back in "
        "operation order; the first failed operation is reported as the error."
    ),
    inputSchema={
        "type": "object",
        "properties": {
            "operations": {
                "type": "array",
                "description": "Array of operations to execute",
                "items": {
                    "type": "object",
                    "properties": {
                        "action": {
                            "type": "string",
                            "description": "Operation action (query, create, update, delete, etc.)",
                        },
                        "entity_type": {
                            "type": "string",
                            "description": "Entity type for the operation",
                        },
                        "entity_data": {"type": "object", "description": "Entity data"},
                        "entity_key": {
                            "type": "array",
                            "items": {"type": "string"},
                            "description": "Entity key/ID",
                        },
                        "expression": {
                            "type": "string",
                            "description": "Query expression (for query action)",
                        },
                    },
                    "required": ["action"],
                },
            }
        },
        "required": ["operations"],
    },
)


async def execute_batch(client: FtrackClient, arguments: Dict[str, Any]):
    return await client.batch(arguments["operations"])


TOOL_DEFINITIONS = [BATCH]

EXECUTORS = {"ftrack_batch": execute_batch}

__all__ = ["TOOL_DEFINITIONS", "EXECUTORS"]
