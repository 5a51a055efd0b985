from typing import Any, Dict

from mcp.types import Tool

from ..ftrack_client import FtrackClient

_API_KEY_ID = {"type": "string", "description": "API key ID"}

GRANT_API_KEY_PROJECT = Tool(
    name="ftrack_grant_api_key_project",
    description="Grant an API key access to a project",
    inputSchema={
        "type": "object",
        "properties": {
            "api_key_id": _API_KEY_ID,
            "project_id": {"type": "string", "description": "Project ID to grant access to"},
        },
        "required": ["api_key_id", "project_id"],
    },
)

REVOKE_API_KEY_PROJECT = Tool(
    name="ftrack_revoke_api_key_project",
    description="Revoke an API key's access to a project",
    inputSchema={
        "type": "object",
        "properties": {
            "api_key_id": _API_KEY_ID,
            "project_id": {"type": "string", "description": "Project ID to revoke access from"},
        },
        "required": ["api_key_id", "project_id"],
    },
)

GRANT_API_KEY_SECURITY_ROLE = Tool(
    name="ftrack_grant_api_key_security_role",
    description="Grant a security role to an API key",
    inputSchema={
        "type": "object",
        "properties": {
            "api_key_id": _API_KEY_ID,
            "security_role_id": {"type": "string", "description": "Security role ID to grant"},
        },
        "required": ["api_key_id", "security_role_id"],
    },
)

REVOKE_API_KEY_SECURITY_ROLE = Tool(
    name="ftrack_revoke_api_key_security_role",
    description="Revoke a security role from an API key",
    inputSchema={
        "type": "object",
        "properties": {
            "api_key_id": _API_KEY_ID,
            "security_role_id": {"type": "string", "description": "Security role ID to revoke"},
        },
        "required": ["api_key_id", "security_role_id"],
    },
)


async def execute_grant_api_key_project(client: FtrackClient, arguments: Dict[str, Any]):
    return await client.grant_api_key_project(arguments["api_key_id"], arguments["project_id"])


async def execute_revoke_api_key_project(client: FtrackClient, arguments: Dict[str, Any]):
    return await client.revoke_api_key_project(arguments["api_key_id"], arguments["project_id"])


async def execute_grant_api_key_security_role(client: FtrackClient, arguments: Dict[str, Any]):
    return await client.grant_api_key_security_role(
        arguments["api_key_id"], arguments["security_role_id"]
    )


async def execute_revoke_api_key_security_role(client: FtrackClient, arguments: Dict[str, Any]):
    return await client.revoke_api_key_security_role(
        arguments["api_key_id"], arguments["security_role_id"]
    )


TOOL_DEFINITIONS = [
    GRANT_API_KEY_PROJECT,
    REVOKE_API_KEY_PROJECT,
    GRANT_API_KEY_SECURITY_ROLE,
    REVOKE_API_KEY_SECURITY_ROLE,
]

EXECUTORS = {
    "ftrack_grant_api_key_project": execute_grant_api_key_project,
    "ftrack_revoke_api_key_project": execute_revoke_api_key_project,
    "ftrack_grant_api_key_security_role": execute_grant_api_key_security_role,
    "ftrack_revoke_api_key_security_role": execute_revoke_api_key_security_role,
}

__all__ = ["TOOL_DEFINITIONS", "EXECUTORS"]
