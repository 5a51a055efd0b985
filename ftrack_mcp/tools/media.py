"""File upload, signed URL and transcoding tools."""
from typing import Any, Dict

from mcp.types import Tool

from ..ftrack_client import FtrackClient

GET_UPLOAD_METADATA = Tool(
    name="ftrack_get_upload_metadata",
    description="Get upload URL and headers for uploading a file to a component",
    inputSchema={
        "type": "object",
        "properties": {
            "component_id": {"type": "string", "description": "Component ID for the upload"},
            "file_size": {"type": "integer", "description": "Size of the file in bytes"},
            "file_name": {"type": "string", "description": "Name of the file"},
            "checksum": {
                "type": "string",
                "description": "MD5 checksum of the file (base64 encoded)",
            },
        },
        "required": ["component_id", "file_size"],
    },
)

COMPLETE_MULTIPART_UPLOAD = Tool(
    name="ftrack_complete_multipart_upload",
    description="Complete a multipart upload once all parts are uploaded",
    inputSchema={
        "type": "object",
        "properties": {
            "component_id": {"type": "string", "description": "Component ID"},
            "upload_id": {
                "type": "string",
                "description": "Upload ID from the multipart upload initiation",
            },
            "parts": {
                "type": "array",
                "items": {
                    "type": "object",
                    "properties": {
                        "part_number": {"type": "integer"},
                        "etag": {"type": "string"},
                    },
                    "required": ["part_number", "etag"],
                },
                "description": "Uploaded parts with their ETags",
            },
        },
        "required": ["component_id", "upload_id", "parts"],
    },
)

GENERATE_SIGNED_URL = Tool(
    name="ftrack_generate_signed_url",
    description="Generate a signed URL for downloading or uploading a component",
    inputSchema={
        "type": "object",
        "properties": {
            "component_id": {"type": "string", "description": "Component ID"},
            "operation": {
                "type": "string",
                "enum": ["get", "put"],
                "default": "get",
                "description": 'Operation type: "get" for download, "put" for upload',
            },
        },
        "required": ["component_id"],
    },
)

ENCODE_MEDIA = Tool(
    name="ftrack_encode_media",
    description="Encode (transcode) a media component for web review",
    inputSchema={
        "type": "object",
        "properties": {
            "component_id": {"type": "string", "description": "Component ID to encode"},
            "options": {"type": "object", "description": "Additional encoding options"},
        },
        "required": ["component_id"],
    },
)


async def execute_get_upload_metadata(client: FtrackClient, arguments: Dict[str, Any]):
    return await client.get_upload_metadata(
        arguments["component_id"],
        arguments["file_size"],
        file_name=arguments.get("file_name"),
        checksum=arguments.get("checksum"),
    )


async def execute_complete_multipart_upload(client: FtrackClient, arguments: Dict[str, Any]):
    return await client.complete_multipart_upload(
        arguments["component_id"], arguments["upload_id"], arguments["parts"]
    )


async def execute_generate_signed_url(client: FtrackClient, arguments: Dict[str, Any]):
    return await client.generate_signed_url(
        arguments["component_id"], operation=arguments.get("operation", "get")
    )


async def execute_encode_media(client: FtrackClient, arguments: Dict[str, Any]):
    return await client.encode_media(arguments["component_id"], arguments.get("options"))


TOOL_DEFINITIONS = [
    GET_UPLOAD_METADATA,
    COMPLETE_MULTIPART_UPLOAD,
    GENERATE_SIGNED_URL,
    ENCODE_MEDIA,
]

EXECUTORS = {
    "ftrack_get_upload_metadata": execute_get_upload_metadata,
    "ftrack_complete_multipart_upload": execute_complete_multipart_upload,
    "ftrack_generate_signed_url": execute_generate_signed_url,
    "ftrack_encode_media": execute_encode_media,
}

__all__ = ["TOOL_DEFINITIONS", "EXECUTORS"]
