from typing import Any, Dict

from mcp.types import Tool

from ..ftrack_client import FtrackClient

QUERY = Tool(
    name="ftrack_query",
    description=(
        'Execute a query using ftrack query language. '
        'Example: "select id, name from Project where status is active"'
    ),
    inputSchema={
        "type": "object",
        "properties": {
            "expression": {
                "type": "string",
                "description": 'ftrack query expression (e.g., "select id, name from Project")',
            }
        },
        "required": ["expression"],
    },
)

PARSE_QUERY = Tool(
    name="ftrack_parse_query",
    description="Parse a query expression without executing it (useful for validation)",
    inputSchema={
        "type": "object",
        "properties": {
            "expression": {"type": "string", "description": "Query expression to parse"}
        },
        "required": ["expression"],
    },
)

QUERY_SCHEMAS = Tool(
    name="ftrack_query_schemas",
    description="Get all entity schemas (types, attributes, relations) available on the server",
    inputSchema={"type": "object", "properties": {}, "required": []},
)

QUERY_SERVER_INFORMATION = Tool(
    name="ftrack_query_server_information",
    description="Get ftrack server information (version, settings, enabled features)",
    inputSchema={"type": "object", "properties": {}, "required": []},
)

SEARCH = Tool(
    name="ftrack_search",
    description="Full-text search across ftrack entities",
    inputSchema={
        "type": "object",
        "properties": {
            "expression": {"type": "string", "description": "Search query expression"},
            "entity_type": {
                "type": "string",
                "description": 'Entity type to search (e.g., "Task", "Project")',
            },
            "terms": {
                "type": "array",
                "items": {"type": "string"},
                "description": "Search terms",
            },
            "context_id": {
                "type": "string",
                "description": "Limit search to a specific context",
            },
            "object_type_ids": {
                "type": "array",
                "items": {"type": "string"},
                "description": "Filter by object type IDs",
            },
        },
        "required": ["expression"],
    },
)


async def execute_query(client: FtrackClient, arguments: Dict[str, Any]):
    return await client.query(arguments["expression"])


async def execute_parse_query(client: FtrackClient, arguments: Dict[str, Any]):
    return await client.parse_query(arguments["expression"])


async def execute_query_schemas(client: FtrackClient, arguments: Dict[str, Any]):
    return await client.query_schemas()


async def execute_query_server_information(client: FtrackClient, arguments: Dict[str, Any]):
    return await client.query_server_information()


async def execute_search(client: FtrackClient, arguments: Dict[str, Any]):
    return await client.search(
        arguments["expression"],
        entity_type=arguments.get("entity_type"),
        terms=arguments.get("terms"),
        context_id=arguments.get("context_id"),
        object_type_ids=arguments.get("object_type_ids"),
    )


TOOL_DEFINITIONS = [QUERY, PARSE_QUERY, QUERY_SCHEMAS, QUERY_SERVER_INFORMATION, SEARCH]

EXECUTORS = {
    "ftrack_query": execute_query,
    "ftrack_parse_query": execute_parse_query,
    "ftrack_query_schemas": execute_query_schemas,
    "ftrack_query_server_information": execute_query_server_information,
    "ftrack_search": execute_search,
}

__all__ = ["TOOL_DEFINITIONS", "EXECUTORS"]
