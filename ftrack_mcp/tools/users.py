"""User and security-role management tools."""
from typing import Any, Dict

from mcp.types import Tool

from ..ftrack_client import FtrackClient

_USER_ID = {"type": "string", "description": "User ID"}
_SECURITY_ROLE_ID = {"type": "string", "description": "Security role ID"}

ADD_USER_SECURITY_ROLE = Tool(
    name="ftrack_add_user_security_role",
    description="Add a security role to a user",
    inputSchema={
        "type": "object",
        "properties": {
            "user_id": _USER_ID,
            "security_role_id": {"type": "string", "description": "Security role ID to add"},
        },
        "required": ["user_id", "security_role_id"],
    },
)

REMOVE_USER_SECURITY_ROLE = Tool(
    name="ftrack_remove_user_security_role",
    description="Remove a security role from a user",
    inputSchema={
        "type": "object",
        "properties": {
            "user_id": _USER_ID,
            "security_role_id": {"type": "string", "description": "Security role ID to remove"},
        },
        "required": ["user_id", "security_role_id"],
    },
)

UPDATE_USER_SECURITY_ROLE = Tool(
    name="ftrack_update_user_security_role",
    description="Activate or deactivate a user's security role",
    inputSchema={
        "type": "object",
        "properties": {
            "user_id": _USER_ID,
            "security_role_id": _SECURITY_ROLE_ID,
            "is_active": {
                "type": "boolean",
                "default": True,
                "description": "Whether the role should be active",
            },
        },
        "required": ["user_id", "security_role_id"],
    },
)

GRANT_USER_SECURITY_ROLE_PROJECT = Tool(
    name="ftrack_grant_user_security_role_project",
    description="Grant a user's security role access to a project",
    inputSchema={
        "type": "object",
        "properties": {
            "user_id": _USER_ID,
            "security_role_id": _SECURITY_ROLE_ID,
            "project_id": {"type": "string", "description": "Project ID to grant access to"},
        },
        "required": ["user_id", "security_role_id", "project_id"],
    },
)

REVOKE_USER_SECURITY_ROLE_PROJECT = Tool(
    name="ftrack_revoke_user_security_role_project",
    description="Revoke a user's security role access to a project",
    inputSchema={
        "type": "object",
        "properties": {
            "user_id": _USER_ID,
            "security_role_id": _SECURITY_ROLE_ID,
            "project_id": {"type": "string", "description": "Project ID to revoke access from"},
        },
        "required": ["user_id", "security_role_id", "project_id"],
    },
)

ASSUME_USER = Tool(
    name="ftrack_assume_user",
    description="Assume another user's identity (requires admin privileges)",
    inputSchema={
        "type": "object",
        "properties": {"user_id": {"type": "string", "description": "User ID to assume"}},
        "required": ["user_id"],
    },
)

UN_ASSUME_USER = Tool(
    name="ftrack_un_assume_user",
    description="Stop assuming another user's identity",
    inputSchema={"type": "object", "properties": {}, "required": []},
)

SEND_USER_INVITE = Tool(
    name="ftrack_send_user_invite",
    description="Send an invitation email to a user",
    inputSchema={
        "type": "object",
        "properties": {
            "user_id": {"type": "string", "description": "User ID to invite"},
            "email": {
                "type": "string",
                "description": "Email address (optional, uses user email if not provided)",
            },
        },
        "required": ["user_id"],
    },
)


async def execute_add_user_security_role(client: FtrackClient, arguments: Dict[str, Any]):
    return await client.add_user_security_role(arguments["user_id"], arguments["security_role_id"])


async def execute_remove_user_security_role(client: FtrackClient, arguments: Dict[str, Any]):
    return await client.remove_user_security_role(
        arguments["user_id"], arguments["security_role_id"]
    )


async def execute_update_user_security_role(client: FtrackClient, arguments: Dict[str, Any]):
    return await client.update_user_security_role(
        arguments["user_id"],
        arguments["security_role_id"],
        is_active=arguments.get("is_active", True),
    )


async def execute_grant_user_security_role_project(client: FtrackClient, arguments: Dict[str, Any]):
    return await client.grant_user_security_role_project(
        arguments["user_id"], arguments["security_role_id"], arguments["project_id"]
    )


async def execute_revoke_user_security_role_project(client: FtrackClient, arguments: Dict[str, Any]):
    return await client.revoke_user_security_role_project(
        arguments["user_id"], arguments["security_role_id"], arguments["project_id"]
    )


async def execute_assume_user(client: FtrackClient, arguments: Dict[str, Any]):
    return await client.assume_user(arguments["user_id"])


async def execute_un_assume_user(client: FtrackClient, arguments: Dict[str, Any]):
    return await client.un_assume_user()


async def execute_send_user_invite(client: FtrackClient, arguments: Dict[str, Any]):
    return await client.send_user_invite(arguments["user_id"], email=arguments.get("email"))


TOOL_DEFINITIONS = [
    ADD_USER_SECURITY_ROLE,
    REMOVE_USER_SECURITY_ROLE,
    UPDATE_USER_SECURITY_ROLE,
    GRANT_USER_SECURITY_ROLE_PROJECT,
    REVOKE_USER_SECURITY_ROLE_PROJECT,
    ASSUME_USER,
    UN_ASSUME_USER,
    SEND_USER_INVITE,
]

EXECUTORS = {
    "ftrack_add_user_security_role": execute_add_user_security_role,
    "ftrack_remove_user_security_role": execute_remove_user_security_role,
    "ftrack_update_user_security_role": execute_update_user_security_role,
    "ftrack_grant_user_security_role_project": execute_grant_user_security_role_project,
    "ftrack_revoke_user_security_role_project": execute_revoke_user_security_role_project,
    "ftrack_assume_user": execute_assume_user,
    "ftrack_un_assume_user": execute_un_assume_user,
    "ftrack_send_user_invite": execute_send_user_invite,
}

__all__ = ["TOOL_DEFINITIONS", "EXECUTORS"]
