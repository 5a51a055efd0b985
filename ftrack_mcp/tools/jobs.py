"""Delayed (background) job tools."""
from typing import Any, Dict

from mcp.types import Tool

from ..ftrack_client import FtrackClient

CSV_IMPORT_DELAYED_JOB = Tool(
    name="ftrack_csv_import_delayed_job",
    description="Start a background CSV import job",
    inputSchema={
        "type": "object",
        "properties": {
            "job_data": {"type": "object", "description": "CSV import job data"}
        },
        "required": ["job_data"],
    },
)

DELETE_DELAYED_JOB = Tool(
    name="ftrack_delete_delayed_job",
    description="Delete an entity (and its children) in a background job",
    inputSchema={
        "type": "object",
        "properties": {
            "entity_type": {"type": "string", "description": "Entity type to delete"},
            "entity_id": {"type": "string", "description": "Entity ID to delete"},
        },
        "required": ["entity_type", "entity_id"],
    },
)

EXPORT_REVIEW_SESSION_FEEDBACK_DELAYED_JOB = Tool(
    name="ftrack_export_review_session_feedback_delayed_job",
    description="Export review session feedback in a background job",
    inputSchema={
        "type": "object",
        "properties": {
            "review_session_id": {"type": "string", "description": "Review session ID"},
            "options": {"type": "object", "description": "Export options"},
        },
        "required": ["review_session_id"],
    },
)

ICONIK_SYNC_STRUCTURE_DELAYED_JOB = Tool(
    name="ftrack_iconik_sync_structure_delayed_job",
    description="Sync a project structure to iconik in a background job",
    inputSchema={
        "type": "object",
        "properties": {
            "project_id": {"type": "string", "description": "Project ID to sync"},
            "options": {"type": "object", "description": "Sync options"},
        },
        "required": ["project_id"],
    },
)

SYNC_LDAP_USERS_DELAYED_JOB = Tool(
    name="ftrack_sync_ldap_users_delayed_job",
    description="Sync users from LDAP in a background job",
    inputSchema={
        "type": "object",
        "properties": {
            "options": {"type": "object", "description": "LDAP sync options"}
        },
        "required": [],
    },
)


async def execute_csv_import_delayed_job(client: FtrackClient, arguments: Dict[str, Any]):
    return await client.csv_import_delayed_job(arguments["job_data"])


async def execute_delete_delayed_job(client: FtrackClient, arguments: Dict[str, Any]):
    return await client.delete_delayed_job(arguments["entity_type"], arguments["entity_id"])


async def execute_export_review_session_feedback_delayed_job(
    client: FtrackClient, arguments: Dict[str, Any]
):
    return await client.export_review_session_feedback_delayed_job(
        arguments["review_session_id"], arguments.get("options")
    )


async def execute_iconik_sync_structure_delayed_job(client: FtrackClient, arguments: Dict[str, Any]):
    return await client.iconik_sync_structure_delayed_job(
        arguments["project_id"], arguments.get("options")
    )


async def execute_sync_ldap_users_delayed_job(client: FtrackClient, arguments: Dict[str, Any]):
    return await client.sync_ldap_users_delayed_job(arguments.get("options"))


TOOL_DEFINITIONS = [
    CSV_IMPORT_DELAYED_JOB,
    DELETE_DELAYED_JOB,
    EXPORT_REVIEW_SESSION_FEEDBACK_DELAYED_JOB,
    ICONIK_SYNC_STRUCTURE_DELAYED_JOB,
    SYNC_LDAP_USERS_DELAYED_JOB,
]

EXECUTORS = {
    "ftrack_csv_import_delayed_job": execute_csv_import_delayed_job,
    "ftrack_delete_delayed_job": execute_delete_delayed_job,
    "ftrack_export_review_session_feedback_delayed_job": execute_export_review_session_feedback_delayed_job,
    "ftrack_iconik_sync_structure_delayed_job": execute_iconik_sync_structure_delayed_job,
    "ftrack_sync_ldap_users_delayed_job": execute_sync_ldap_users_delayed_job,
}

__all__ = ["TOOL_DEFINITIONS", "EXECUTORS"]
