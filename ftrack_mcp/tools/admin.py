"""Entity conversion, permissions, storage, review invites and remote resets."""
from typing import Any, Dict

from mcp.types import Tool

from ..ftrack_client import FtrackClient

CONVERT_ENTITY = Tool(
    name="ftrack_convert_entity",
    description="Convert an entity to a different type",
    inputSchema={
        "type": "object",
        "properties": {
            "entity_type": {"type": "string", "description": "Current entity type"},
            "entity_id": {"type": "string", "description": "Entity ID to convert"},
            "target_type": {"type": "string", "description": "Target entity type"},
        },
        "required": ["entity_type", "entity_id", "target_type"],
    },
)

PERMISSIONS = Tool(
    name="ftrack_permissions",
    description="Check the API user's permissions on an entity",
    inputSchema={
        "type": "object",
        "properties": {
            "entity_type": {"type": "string", "description": "Entity type"},
            "entity_id": {"type": "string", "description": "Entity ID"},
            "actions": {
                "type": "array",
                "items": {"type": "string"},
                "description": 'Specific actions to check (e.g., ["read", "write", "delete"])',
            },
        },
        "required": ["entity_type", "entity_id"],
    },
)

STORAGE_USAGE = Tool(
    name="ftrack_storage_usage",
    description="Get storage usage, globally or for one project",
    inputSchema={
        "type": "object",
        "properties": {
            "project_id": {
                "type": "string",
                "description": "Project ID (optional, returns global usage if not specified)",
            }
        },
        "required": [],
    },
)

SEND_REVIEW_SESSION_INVITE = Tool(
    name="ftrack_send_review_session_invite",
    description="Invite someone to a review session by email",
    inputSchema={
        "type": "object",
        "properties": {
            "review_session_id": {"type": "string", "description": "Review session ID"},
            "email": {"type": "string", "description": "Email address to invite"},
            "name": {"type": "string", "description": "Name of the invitee"},
            "message": {
                "type": "string",
                "description": "Custom message to include in the invitation",
            },
        },
        "required": ["review_session_id", "email"],
    },
)

RESET_REMOTE_API_KEY = Tool(
    name="ftrack_reset_remote_api_key",
    description="Reset a user's API key",
    inputSchema={
        "type": "object",
        "properties": {"user_id": {"type": "string", "description": "User ID"}},
        "required": ["user_id"],
    },
)

RESET_REMOTE_PASSWORD = Tool(
    name="ftrack_reset_remote_password",
    description="Reset a user's password",
    inputSchema={
        "type": "object",
        "properties": {"user_id": {"type": "string", "description": "User ID"}},
        "required": ["user_id"],
    },
)


async def execute_convert_entity(client: FtrackClient, arguments: Dict[str, Any]):
    return await client.convert_entity(
        arguments["entity_type"], arguments["entity_id"], arguments["target_type"]
    )


async def execute_permissions(client: FtrackClient, arguments: Dict[str, Any]):
    return await client.permissions(
        arguments["entity_type"], arguments["entity_id"], actions=arguments.get("actions")
    )


async def execute_storage_usage(client: FtrackClient, arguments: Dict[str, Any]):
    return await client.storage_usage(arguments.get("project_id"))


async def execute_send_review_session_invite(client: FtrackClient, arguments: Dict[str, Any]):
    return await client.send_review_session_invite(
        arguments["review_session_id"],
        arguments["email"],
        name=arguments.get("name"),
        message=arguments.get("message"),
    )


async def execute_reset_remote_api_key(client: FtrackClient, arguments: Dict[str, Any]):
    return await client.reset_remote_api_key(arguments["user_id"])


async def execute_reset_remote_password(client: FtrackClient, arguments: Dict[str, Any]):
    return await client.reset_remote_password(arguments["user_id"])


TOOL_DEFINITIONS = [
    CONVERT_ENTITY,
    PERMISSIONS,
    STORAGE_USAGE,
    SEND_REVIEW_SESSION_INVITE,
    RESET_REMOTE_API_KEY,
    RESET_REMOTE_PASSWORD,
]

EXECUTORS = {
    "ftrack_convert_entity": execute_convert_entity,
    "ftrack_permissions": execute_permissions,
    "ftrack_storage_usage": execute_storage_usage,
    "ftrack_send_review_session_invite": execute_send_review_session_invite,
    "ftrack_reset_remote_api_key": execute_reset_remote_api_key,
    "ftrack_reset_remote_password": execute_reset_remote_password,
}

__all__ = ["TOOL_DEFINITIONS", "EXECUTORS"]
