"""Builders for the ftrack query expressions used by the convenience tools."""
from __future__ import annotations

from typing import Iterable, List, Optional, Sequence

PROJECT_FIELDS = "id, name, full_name, status, start_date, end_date"
TASK_FIELDS = (
    "id, name, type.name, status.name, priority.name, start_date, end_date, "
    "assignments.resource.username"
)
USER_FIELDS = "id, username, first_name, last_name, email, is_active"
ASSET_VERSION_FIELDS = "id, version, asset.name, task.name, user.username, date, comment"
NOTE_FIELDS = "id, content, author.username, date"
REVIEW_SESSION_FIELDS = "id, name, description, created_at, end_date"

STATUSES_QUERY = "select id, name, color, sort from Status order by sort"
TYPES_QUERY = "select id, name, sort from Type order by sort"
PRIORITIES_QUERY = "select id, name, color, sort from Priority order by sort"
SECURITY_ROLES_QUERY = "select id, name, type from SecurityRole order by name"


def quote_literal(value: str) -> str:
    """Return ``value`` as a double-quoted query literal."""
    escaped = str(value).replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


def select(fields: str, entity_type: str, conditions: Iterable[str] = ()) -> str:
    expression = f"select {fields} from {entity_type}"
    conditions = list(conditions)
    if conditions:
        expression += " where " + " and ".join(conditions)
    return expression


def list_projects(include_archived: bool = False, limit: int = 100) -> str:
    conditions = [] if include_archived else [f"status.name != {quote_literal('archived')}"]
    return f"{select(PROJECT_FIELDS, 'Project', conditions)} limit {int(limit)}"


def list_tasks(
    project_id: Optional[str] = None,
    parent_id: Optional[str] = None,
    assignee_id: Optional[str] = None,
    status: Optional[str] = None,
    limit: int = 100,
) -> str:
    conditions: List[str] = []
    if project_id:
        conditions.append(f"project_id is {quote_literal(project_id)}")
    if parent_id:
        conditions.append(f"parent_id is {quote_literal(parent_id)}")
    if assignee_id:
        conditions.append(f"assignments any (resource_id is {quote_literal(assignee_id)})")
    if status:
        conditions.append(f"status.name is {quote_literal(status)}")
    return f"{select(TASK_FIELDS, 'Task', conditions)} limit {int(limit)}"


def list_users(include_inactive: bool = False, limit: int = 100) -> str:
    conditions = [] if include_inactive else ["is_active is true"]
    return f"{select(USER_FIELDS, 'User', conditions)} limit {int(limit)}"


def list_asset_versions(
    asset_id: Optional[str] = None,
    task_id: Optional[str] = None,
    limit: int = 50,
) -> str:
    conditions: List[str] = []
    if asset_id:
        conditions.append(f"asset_id is {quote_literal(asset_id)}")
    if task_id:
        conditions.append(f"task_id is {quote_literal(task_id)}")
    expression = select(ASSET_VERSION_FIELDS, "AssetVersion", conditions)
    return f"{expression} order by version descending limit {int(limit)}"


def get_entity(entity_type: str, entity_id: str, projections: Optional[Sequence[str]] = None) -> str:
    fields = ", ".join(projections) if projections else "*"
    return select(fields, entity_type, [f"id is {quote_literal(entity_id)}"])


def list_notes(entity_type: str, entity_id: str, limit: int = 50) -> str:
    conditions = [
        f"parent_type is {quote_literal(entity_type)}",
        f"parent_id is {quote_literal(entity_id)}",
    ]
    return f"{select(NOTE_FIELDS, 'Note', conditions)} order by date descending limit {int(limit)}"


def list_review_sessions(project_id: Optional[str] = None, limit: int = 50) -> str:
    conditions = [f"project_id is {quote_literal(project_id)}"] if project_id else []
    expression = select(REVIEW_SESSION_FIELDS, "ReviewSession", conditions)
    return f"{expression} order by created_at descending limit {int(limit)}"
