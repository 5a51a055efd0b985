"""
Convenience tools built on the generic query, create and update operations.
"""
from typing import Any, Dict

from mcp.types import Tool

from ..ftrack_client import FtrackClient
from . import expressions

_NO_ARGS = {"type": "object", "properties": {}, "required": []}

LIST_PROJECTS = Tool(
    name="ftrack_list_projects",
    description="List all projects (convenience wrapper for query)",
    inputSchema={
        "type": "object",
        "properties": {
            "include_archived": {
                "type": "boolean",
                "default": False,
                "description": "Include archived projects",
            },
            "limit": {
                "type": "integer",
                "default": 100,
                "description": "Maximum number of projects to return",
            },
        },
        "required": [],
    },
)

LIST_TASKS = Tool(
    name="ftrack_list_tasks",
    description="List tasks for a project or context",
    inputSchema={
        "type": "object",
        "properties": {
            "project_id": {"type": "string", "description": "Project ID to filter by"},
            "parent_id": {"type": "string", "description": "Parent context ID to filter by"},
            "assignee_id": {"type": "string", "description": "User ID to filter by assignee"},
            "status": {"type": "string", "description": "Status name to filter by"},
            "limit": {
                "type": "integer",
                "default": 100,
                "description": "Maximum number of tasks to return",
            },
        },
        "required": [],
    },
)

LIST_USERS = Tool(
    name="ftrack_list_users",
    description="List all users",
    inputSchema={
        "type": "object",
        "properties": {
            "include_inactive": {
                "type": "boolean",
                "default": False,
                "description": "Include inactive users",
            },
            "limit": {
                "type": "integer",
                "default": 100,
                "description": "Maximum number of users to return",
            },
        },
        "required": [],
    },
)

LIST_ASSET_VERSIONS = Tool(
    name="ftrack_list_asset_versions",
    description="List asset versions for a task or asset, newest first",
    inputSchema={
        "type": "object",
        "properties": {
            "asset_id": {"type": "string", "description": "Asset ID to filter by"},
            "task_id": {"type": "string", "description": "Task ID to filter by"},
            "limit": {
                "type": "integer",
                "default": 50,
                "description": "Maximum number of versions to return",
            },
        },
        "required": [],
    },
)

LIST_STATUSES = Tool(
    name="ftrack_list_statuses",
    description="List all available statuses",
    inputSchema=_NO_ARGS,
)

LIST_TYPES = Tool(
    name="ftrack_list_types",
    description="List all available task/object types",
    inputSchema=_NO_ARGS,
)

LIST_PRIORITIES = Tool(
    name="ftrack_list_priorities",
    description="List all available priorities",
    inputSchema=_NO_ARGS,
)

LIST_SECURITY_ROLES = Tool(
    name="ftrack_list_security_roles",
    description="List all security roles",
    inputSchema=_NO_ARGS,
)

GET_ENTITY = Tool(
    name="ftrack_get_entity",
    description="Get a single entity by type and ID with specified projections",
    inputSchema={
        "type": "object",
        "properties": {
            "entity_type": {
                "type": "string",
                "description": 'Entity type (e.g., "Task", "Project", "User")',
            },
            "entity_id": {"type": "string", "description": "Entity ID"},
            "projections": {
                "type": "array",
                "items": {"type": "string"},
                "description": 'Attributes to return (e.g., ["id", "name", "status.name"])',
            },
        },
        "required": ["entity_type", "entity_id"],
    },
)

CREATE_NOTE = Tool(
    name="ftrack_create_note",
    description="Create a note on an entity",
    inputSchema={
        "type": "object",
        "properties": {
            "entity_type": {"type": "string", "description": "Entity type to add note to"},
            "entity_id": {"type": "string", "description": "Entity ID to add note to"},
            "content": {"type": "string", "description": "Note content"},
            "author_id": {
                "type": "string",
                "description": "Author user ID (defaults to API user)",
            },
        },
        "required": ["entity_type", "entity_id", "content"],
    },
)

LIST_NOTES = Tool(
    name="ftrack_list_notes",
    description="List notes for an entity, newest first",
    inputSchema={
        "type": "object",
        "properties": {
            "entity_type": {"type": "string", "description": "Entity type"},
            "entity_id": {"type": "string", "description": "Entity ID"},
            "limit": {
                "type": "integer",
                "default": 50,
                "description": "Maximum number of notes to return",
            },
        },
        "required": ["entity_type", "entity_id"],
    },
)

UPDATE_TASK_STATUS = Tool(
    name="ftrack_update_task_status",
    description="Update the status of a task",
    inputSchema={
        "type": "object",
        "properties": {
            "task_id": {"type": "string", "description": "Task ID"},
            "status_id": {"type": "string", "description": "New status ID"},
        },
        "required": ["task_id", "status_id"],
    },
)

ASSIGN_USER_TO_TASK = Tool(
    name="ftrack_assign_user_to_task",
    description="Assign a user to a task",
    inputSchema={
        "type": "object",
        "properties": {
            "task_id": {"type": "string", "description": "Task ID"},
            "user_id": {"type": "string", "description": "User ID to assign"},
        },
        "required": ["task_id", "user_id"],
    },
)

LIST_REVIEW_SESSIONS = Tool(
    name="ftrack_list_review_sessions",
    description="List review sessions, newest first",
    inputSchema={
        "type": "object",
        "properties": {
            "project_id": {"type": "string", "description": "Filter by project ID"},
            "limit": {
                "type": "integer",
                "default": 50,
                "description": "Maximum number of sessions to return",
            },
        },
        "required": [],
    },
)


async def execute_list_projects(client: FtrackClient, arguments: Dict[str, Any]):
    return await client.query(
        expressions.list_projects(
            include_archived=arguments.get("include_archived", False),
            limit=arguments.get("limit", 100),
        )
    )


async def execute_list_tasks(client: FtrackClient, arguments: Dict[str, Any]):
    return await client.query(
        expressions.list_tasks(
            project_id=arguments.get("project_id"),
            parent_id=arguments.get("parent_id"),
            assignee_id=arguments.get("assignee_id"),
            status=arguments.get("status"),
            limit=arguments.get("limit", 100),
        )
    )


async def execute_list_users(client: FtrackClient, arguments: Dict[str, Any]):
    return await client.query(
        expressions.list_users(
            include_inactive=arguments.get("include_inactive", False),
            limit=arguments.get("limit", 100),
        )
    )


async def execute_list_asset_versions(client: FtrackClient, arguments: Dict[str, Any]):
    return await client.query(
        expressions.list_asset_versions(
            asset_id=arguments.get("asset_id"),
            task_id=arguments.get("task_id"),
            limit=arguments.get("limit", 50),
        )
    )


async def execute_list_statuses(client: FtrackClient, arguments: Dict[str, Any]):
    return await client.query(expressions.STATUSES_QUERY)


async def execute_list_types(client: FtrackClient, arguments: Dict[str, Any]):
    return await client.query(expressions.TYPES_QUERY)


async def execute_list_priorities(client: FtrackClient, arguments: Dict[str, Any]):
    return await client.query(expressions.PRIORITIES_QUERY)


async def execute_list_security_roles(client: FtrackClient, arguments: Dict[str, Any]):
    return await client.query(expressions.SECURITY_ROLES_QUERY)


async def execute_get_entity(client: FtrackClient, arguments: Dict[str, Any]):
    return await client.query(
        expressions.get_entity(
            arguments["entity_type"], arguments["entity_id"], arguments.get("projections")
        )
    )


async def execute_create_note(client: FtrackClient, arguments: Dict[str, Any]):
    note_data = {
        "content": arguments["content"],
        "parent_type": arguments["entity_type"],
        "parent_id": arguments["entity_id"],
    }
    if arguments.get("author_id"):
        note_data["author_id"] = arguments["author_id"]
    return await client.create("Note", note_data)


async def execute_list_notes(client: FtrackClient, arguments: Dict[str, Any]):
    return await client.query(
        expressions.list_notes(
            arguments["entity_type"], arguments["entity_id"], limit=arguments.get("limit", 50)
        )
    )


async def execute_update_task_status(client: FtrackClient, arguments: Dict[str, Any]):
    return await client.update("Task", arguments["task_id"], {"status_id": arguments["status_id"]})


async def execute_assign_user_to_task(client: FtrackClient, arguments: Dict[str, Any]):
    return await client.create(
        "Appointment",
        {
            "context_id": arguments["task_id"],
            "resource_id": arguments["user_id"],
            "type": "assignment",
        },
    )


async def execute_list_review_sessions(client: FtrackClient, arguments: Dict[str, Any]):
    return await client.query(
        expressions.list_review_sessions(
            project_id=arguments.get("project_id"), limit=arguments.get("limit", 50)
        )
    )


TOOL_DEFINITIONS = [
    LIST_PROJECTS,
    LIST_TASKS,
    LIST_USERS,
    LIST_ASSET_VERSIONS,
    LIST_STATUSES,
    LIST_TYPES,
    LIST_PRIORITIES,
    GET_ENTITY,
    CREATE_NOTE,
    LIST_NOTES,
    UPDATE_TASK_STATUS,
    ASSIGN_USER_TO_TASK,
    LIST_SECURITY_ROLES,
    LIST_REVIEW_SESSIONS,
]

EXECUTORS = {
    "ftrack_list_projects": execute_list_projects,
    "ftrack_list_tasks": execute_list_tasks,
    "ftrack_list_users": execute_list_users,
    "ftrack_list_asset_versions": execute_list_asset_versions,
    "ftrack_list_statuses": execute_list_statuses,
    "ftrack_list_types": execute_list_types,
    "ftrack_list_priorities": execute_list_priorities,
    "ftrack_get_entity": execute_get_entity,
    "ftrack_create_note": execute_create_note,
    "ftrack_list_notes": execute_list_notes,
    "ftrack_update_task_status": execute_update_task_status,
    "ftrack_assign_user_to_task": execute_assign_user_to_task,
    "ftrack_list_security_roles": execute_list_security_roles,
    "ftrack_list_review_sessions": execute_list_review_sessions,
}

__all__ = ["TOOL_DEFINITIONS", "EXECUTORS"]
