from typing import Any, Dict

from mcp.types import Tool

from ..ftrack_client import FtrackClient

_USER_ONLY = {
    "type": "object",
    "properties": {"user_id": {"type": "string", "description": "User ID"}},
    "required": ["user_id"],
}

CONFIGURE_OTP = Tool(
    name="ftrack_configure_otp",
    description="Configure one-time-password authentication for a user",
    inputSchema={
        "type": "object",
        "properties": {
            "user_id": {"type": "string", "description": "User ID"},
            "otp_type": {"type": "string", "description": 'OTP type (e.g., "totp", "email")'},
        },
        "required": ["user_id", "otp_type"],
    },
)

CONFIGURE_TOTP = Tool(
    name="ftrack_configure_totp",
    description="Configure TOTP (authenticator app) for a user",
    inputSchema=_USER_ONLY,
)

GENERATE_TOTP = Tool(
    name="ftrack_generate_totp",
    description="Generate a TOTP secret for a user",
    inputSchema=_USER_ONLY,
)

DISABLE_2FA = Tool(
    name="ftrack_disable_2fa",
    description="Disable two-factor authentication for a user",
    inputSchema=_USER_ONLY,
)


async def execute_configure_otp(client: FtrackClient, arguments: Dict[str, Any]):
    return await client.configure_otp(arguments["user_id"], arguments["otp_type"])


async def execute_configure_totp(client: FtrackClient, arguments: Dict[str, Any]):
    return await client.configure_totp(arguments["user_id"])


async def execute_generate_totp(client: FtrackClient, arguments: Dict[str, Any]):
    return await client.generate_totp(arguments["user_id"])


async def execute_disable_2fa(client: FtrackClient, arguments: Dict[str, Any]):
    return await client.disable_2fa(arguments["user_id"])


TOOL_DEFINITIONS = [CONFIGURE_OTP, CONFIGURE_TOTP, GENERATE_TOTP, DISABLE_2FA]

EXECUTORS = {
    "ftrack_configure_otp": execute_configure_otp,
    "ftrack_configure_totp": execute_configure_totp,
    "ftrack_generate_totp": execute_generate_totp,
    "ftrack_disable_2fa": execute_disable_2fa,
}

__all__ = ["TOOL_DEFINITIONS", "EXECUTORS"]
