"""
Typed ftrack API operations.

Every action the API understands is a pydantic model whose ``action`` field is
fixed. ``Operation.to_payload()`` turns a model into the JSON mapping sent on
the wire, leaving out optional fields that were not given.
"""
from __future__ import annotations

from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field


class Operation(BaseModel):
    """Base class for a single ftrack API operation."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    action: str

    def to_payload(self) -> Dict[str, Any]:
        return {key: value for key, value in self.model_dump().items() if value is not None}


class _WithOptions(Operation):
    """Operation that merges free-form options into the top level of its payload."""

    options: Dict[str, Any] = Field(default_factory=dict, exclude=True)

    def to_payload(self) -> Dict[str, Any]:
        payload = super().to_payload()
        payload.update(self.options)
        return payload


# ─────────────────────────────────────────────────────────────────────────────
# Query
# ─────────────────────────────────────────────────────────────────────────────


class Query(Operation):
    action: Literal["query"] = "query"
    expression: str


class ParseQuery(Operation):
    action: Literal["parse_query"] = "parse_query"
    expression: str


class QuerySchemas(Operation):
    action: Literal["query_schemas"] = "query_schemas"


class QueryServerInformation(Operation):
    action: Literal["query_server_information"] = "query_server_information"


class Search(Operation):
    action: Literal["search"] = "search"
    expression: str
    entity_type: Optional[str] = None
    terms: Optional[List[str]] = None
    context_id: Optional[str] = None
    object_type_ids: Optional[List[str]] = None


# ─────────────────────────────────────────────────────────────────────────────
# CRUD
# ─────────────────────────────────────────────────────────────────────────────


class Create(Operation):
    action: Literal["create"] = "create"
    entity_type: str
    entity_data: Dict[str, Any]


class Update(Operation):
    action: Literal["update"] = "update"
    entity_type: str
    entity_key: List[str] = Field(..., min_length=1)
    entity_data: Dict[str, Any]


class Delete(Operation):
    action: Literal["delete"] = "delete"
    entity_type: str
    entity_key: List[str] = Field(..., min_length=1)


# ─────────────────────────────────────────────────────────────────────────────
# Users and security roles
# ─────────────────────────────────────────────────────────────────────────────


class AddUserSecurityRole(Operation):
    action: Literal["add_user_security_role"] = "add_user_security_role"
    user_id: str
    security_role_id: str


class RemoveUserSecurityRole(Operation):
    action: Literal["remove_user_security_role"] = "remove_user_security_role"
    user_id: str
    security_role_id: str


class UpdateUserSecurityRole(Operation):
    action: Literal["update_user_security_role"] = "update_user_security_role"
    user_id: str
    security_role_id: str
    is_active: bool = True


class GrantUserSecurityRoleProject(Operation):
    action: Literal["grant_user_security_role_project"] = "grant_user_security_role_project"
    user_id: str
    security_role_id: str
    project_id: str


class RevokeUserSecurityRoleProject(Operation):
    action: Literal["revoke_user_security_role_project"] = "revoke_user_security_role_project"
    user_id: str
    security_role_id: str
    project_id: str


class AssumeUser(Operation):
    action: Literal["assume_user"] = "assume_user"
    user_id: str


class UnAssumeUser(Operation):
    action: Literal["un_assume_user"] = "un_assume_user"


class SendUserInvite(Operation):
    action: Literal["send_user_invite"] = "send_user_invite"
    user_id: str
    email: Optional[str] = None


# ─────────────────────────────────────────────────────────────────────────────
# API keys
# ─────────────────────────────────────────────────────────────────────────────


class GrantApiKeyProject(Operation):
    action: Literal["grant_api_key_project"] = "grant_api_key_project"
    api_key_id: str
    project_id: str


class RevokeApiKeyProject(Operation):
    action: Literal["revoke_api_key_project"] = "revoke_api_key_project"
    api_key_id: str
    project_id: str


class GrantApiKeySecurityRole(Operation):
    action: Literal["grant_api_key_security_role"] = "grant_api_key_security_role"
    api_key_id: str
    security_role_id: str


class RevokeApiKeySecurityRole(Operation):
    action: Literal["revoke_api_key_security_role"] = "revoke_api_key_security_role"
    api_key_id: str
    security_role_id: str


# ─────────────────────────────────────────────────────────────────────────────
# Two-factor authentication
# ─────────────────────────────────────────────────────────────────────────────


class ConfigureOtp(Operation):
    action: Literal["configure_otp"] = "configure_otp"
    user_id: str
    otp_type: str


class ConfigureTotp(Operation):
    action: Literal["configure_totp"] = "configure_totp"
    user_id: str


class GenerateTotp(Operation):
    action: Literal["generate_totp"] = "generate_totp"
    user_id: str


class Disable2FA(Operation):
    action: Literal["disable_2fa"] = "disable_2fa"
    user_id: str


# ─────────────────────────────────────────────────────────────────────────────
# Files and media
# ─────────────────────────────────────────────────────────────────────────────


class UploadPart(BaseModel):
    model_config = ConfigDict(frozen=True)

    part_number: int
    etag: str


class GetUploadMetadata(Operation):
    action: Literal["get_upload_metadata"] = "get_upload_metadata"
    component_id: str
    file_size: int
    file_name: Optional[str] = None
    checksum: Optional[str] = None


class CompleteMultipartUpload(Operation):
    action: Literal["complete_multipart_upload"] = "complete_multipart_upload"
    component_id: str
    upload_id: str
    parts: List[UploadPart]


class GenerateSignedUrl(Operation):
    action: Literal["generate_signed_url"] = "generate_signed_url"
    component_id: str
    operation: Literal["get", "put"] = "get"


class EncodeMedia(_WithOptions):
    action: Literal["encode_media"] = "encode_media"
    component_id: str


# ─────────────────────────────────────────────────────────────────────────────
# Entities, permissions, storage, review
# ─────────────────────────────────────────────────────────────────────────────


class ConvertEntity(Operation):
    action: Literal["convert_entity"] = "convert_entity"
    entity_type: str
    entity_id: str
    target_type: str


class Permissions(Operation):
    action: Literal["permissions"] = "permissions"
    entity_type: str
    entity_id: str
    actions: Optional[List[str]] = None


class StorageUsage(Operation):
    action: Literal["storage_usage"] = "storage_usage"
    project_id: Optional[str] = None


class SendReviewSessionInvite(Operation):
    action: Literal["send_review_session_invite"] = "send_review_session_invite"
    review_session_id: str
    email: str
    name: Optional[str] = None
    message: Optional[str] = None


ResetType = Literal["api_key", "password"]


class ResetRemote(Operation):
    action: Literal["reset_remote"] = "reset_remote"
    user_id: str
    reset_type: ResetType


# ─────────────────────────────────────────────────────────────────────────────
# Delayed jobs
# ─────────────────────────────────────────────────────────────────────────────


JobType = Literal[
    "csvimportdelayedjob",
    "deletedelayedjob",
    "exportreviewsessionfeedback",
    "iconiksyncstructure",
    "syncldapusers",
]


class DelayedJob(_WithOptions):
    action: Literal["delayed_job"] = "delayed_job"
    job_type: JobType
    job_data: Optional[Dict[str, Any]] = None
    entity_type: Optional[str] = None
    entity_id: Optional[str] = None
    review_session_id: Optional[str] = None
    project_id: Optional[str] = None


__all__ = [
    "Operation",
    "Query",
    "ParseQuery",
    "QuerySchemas",
    "QueryServerInformation",
    "Search",
    "Create",
    "Update",
    "Delete",
    "AddUserSecurityRole",
    "RemoveUserSecurityRole",
    "UpdateUserSecurityRole",
    "GrantUserSecurityRoleProject",
    "RevokeUserSecurityRoleProject",
    "AssumeUser",
    "UnAssumeUser",
    "SendUserInvite",
    "GrantApiKeyProject",
    "RevokeApiKeyProject",
    "GrantApiKeySecurityRole",
    "RevokeApiKeySecurityRole",
    "ConfigureOtp",
    "ConfigureTotp",
    "GenerateTotp",
    "Disable2FA",
    "UploadPart",
    "GetUploadMetadata",
    "CompleteMultipartUpload",
    "GenerateSignedUrl",
    "EncodeMedia",
    "ConvertEntity",
    "Permissions",
    "StorageUsage",
    "SendReviewSessionInvite",
    "ResetType",
    "ResetRemote",
    "JobType",
    "DelayedJob",
]
