from typing import Any, Dict

from mcp.types import Tool

from ..ftrack_client import FtrackClient

CREATE = Tool(
    name="ftrack_create",
    description="Create a new entity in ftrack",
    inputSchema={
        "type": "object",
        "properties": {
            "entity_type": {
                "type": "string",
                "description": 'Type of entity to create (e.g., "Task", "Project", "AssetVersion")',
            },
            "entity_data": {
                "type": "object",
                "description": "Entity data as key-value pairs",
            },
        },
        "required": ["entity_type", "entity_data"],
    },
)

UPDATE = Tool(
    name="ftrack_update",
    description="Update an existing entity in ftrack",
    inputSchema={
        "type": "object",
        "properties": {
            "entity_type": {"type": "string", "description": "Type of entity to update"},
            "entity_id": {"type": "string", "description": "ID of the entity to update"},
            "entity_data": {
                "type": "object",
                "description": "Data to update as key-value pairs",
            },
        },
        "required": ["entity_type", "entity_id", "entity_data"],
    },
)

DELETE = Tool(
    name="ftrack_delete",
    description="Delete an entity from ftrack",
    inputSchema={
        "type": "object",
        "properties": {
            "entity_type": {"type": "string", "description": "Type of entity to delete"},
            "entity_id": {"type": "string", "description": "ID of the entity to delete"},
        },
        "required": ["entity_type", "entity_id"],
    },
)


async def execute_create(client: FtrackClient, arguments: Dict[str, Any]):
    return await client.create(arguments["entity_type"], arguments["entity_data"])


async def execute_update(client: FtrackClient, arguments: Dict[str, Any]):
    return await client.update(
        arguments["entity_type"], arguments["entity_id"], arguments["entity_data"]
    )


async def execute_delete(client: FtrackClient, arguments: Dict[str, Any]):
    return await client.delete(arguments["entity_type"], arguments["entity_id"])


TOOL_DEFINITIONS = [CREATE, UPDATE, DELETE]

EXECUTORS = {
    "ftrack_create": execute_create,
    "ftrack_update": execute_update,
    "ftrack_delete": execute_delete,
}

__all__ = ["TOOL_DEFINITIONS", "EXECUTORS"]
