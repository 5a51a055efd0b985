"""
ftrack API client.

All traffic goes through ``execute``: one HTTP POST to ``<server>/api`` carrying
a JSON array of operations, answered by a JSON array of results in the same
order. The convenience methods each build one typed operation and send it with
``execute_one``.

Usage:
    settings = FtrackSettings.from_env()
    client = FtrackClient(settings)
    projects = await client.query("select id, name from Project")
"""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Dict, List, Mapping, Optional, Sequence, Union

import httpx

from . import operations as ops
from .errors import OperationError, ProtocolError, TransportError

if TYPE_CHECKING:
    from ..config import FtrackSettings

logger = logging.getLogger(__name__)

OperationLike = Union[ops.Operation, Mapping[str, Any]]


def _to_payload(operation: OperationLike) -> Dict[str, Any]:
    if isinstance(operation, ops.Operation):
        return operation.to_payload()
    return dict(operation)


class FtrackClient:
    """Async client for the ftrack operation API."""

    def __init__(self, settings: "FtrackSettings") -> None:
        self.settings = settings
        self.api_endpoint = settings.api_endpoint
        self.headers = {
            "Content-Type": "application/json",
            "Accept": "application/json",
            "ftrack-user": settings.api_user,
            "ftrack-api-key": settings.api_key,
        }

    # =========================================================================
    # Core
    # =========================================================================

    async def execute(
        self, operations: Union[OperationLike, Sequence[OperationLike]]
    ) -> List[Any]:
        """Send one or more operations in a single request.

        Returns the results in operation order. Raises ``TransportError`` when
        the request fails, ``ProtocolError`` when the body is not a result
        array of the same length, and ``OperationError`` for the first operation the server
        flagged as failed.
        """
        if isinstance(operations, (ops.Operation, Mapping)):
            operations = [operations]
        payload = [_to_payload(operation) for operation in operations]
        logger.debug(
            "POST %s actions=%s", self.api_endpoint, [op.get("action") for op in payload]
        )

        try:
            async with httpx.AsyncClient(timeout=self.settings.timeout) as http:
                response = await http.post(self.api_endpoint, json=payload, headers=self.headers)
        except httpx.HTTPError as exc:
            raise TransportError(f"ftrack API request failed: {exc}") from exc

        if not response.is_success:
            logger.debug("ftrack API returned status %s", response.status_code)
            raise TransportError.from_status(response.status_code, response.text)

        try:
            results = response.json()
        except ValueError as exc:
            raise ProtocolError(f"ftrack API returned invalid JSON: {response.text}") from exc
        if not isinstance(results, list):
            raise ProtocolError(f"ftrack API returned {type(results).__name__}, expected a list: {response.text}")

        for index, result in enumerate(results):
            if isinstance(result, dict) and result.get("exception"):
                raise OperationError(index, result.get("content"), result.get("exception"))
        if len(results) != len(payload):
            raise ProtocolError(
                f"ftrack API returned {len(results)} results for {len(payload)} operations: "
                f"{response.text}"
            )
        return results

    async def execute_one(self, operation: OperationLike) -> Any:
        """Send a single operation and return its result."""
        results = await self.execute([operation])
        return results[0]

    async def batch(self, operations: Sequence[OperationLike]) -> List[Any]:
        """Execute several operations in one request (first failure wins)."""
        return await self.execute(list(operations))

    # =========================================================================
    # Query
    # =========================================================================

    async def query(self, expression: str) -> Any:
        return await self.execute_one(ops.Query(expression=expression))

    async def parse_query(self, expression: str) -> Any:
        return await self.execute_one(ops.ParseQuery(expression=expression))

    async def query_schemas(self) -> Any:
        return await self.execute_one(ops.QuerySchemas())

    async def query_server_information(self) -> Any:
        return await self.execute_one(ops.QueryServerInformation())

    async def search(
        self,
        expression: str,
        entity_type: Optional[str] = None,
        terms: Optional[List[str]] = None,
        context_id: Optional[str] = None,
        object_type_ids: Optional[List[str]] = None,
    ) -> Any:
        """Full-text search."""
        return await self.execute_one(
            ops.Search(
                expression=expression,
                entity_type=entity_type,
                terms=terms,
                context_id=context_id,
                object_type_ids=object_type_ids,
            )
        )

    # =========================================================================
    # CRUD
    # =========================================================================

    async def create(self, entity_type: str, data: Dict[str, Any]) -> Any:
        return await self.execute_one(ops.Create(entity_type=entity_type, entity_data=data))

    async def update(self, entity_type: str, entity_id: str, data: Dict[str, Any]) -> Any:
        return await self.execute_one(
            ops.Update(entity_type=entity_type, entity_key=[entity_id], entity_data=data)
        )

    async def delete(self, entity_type: str, entity_id: str) -> Any:
        return await self.execute_one(ops.Delete(entity_type=entity_type, entity_key=[entity_id]))

    # =========================================================================
    # Users and security roles
    # =========================================================================

    async def add_user_security_role(self, user_id: str, security_role_id: str) -> Any:
        return await self.execute_one(
            ops.AddUserSecurityRole(user_id=user_id, security_role_id=security_role_id)
        )

    async def remove_user_security_role(self, user_id: str, security_role_id: str) -> Any:
        return await self.execute_one(
            ops.RemoveUserSecurityRole(user_id=user_id, security_role_id=security_role_id)
        )

    async def update_user_security_role(
        self, user_id: str, security_role_id: str, is_active: bool = True
    ) -> Any:
        return await self.execute_one(
            ops.UpdateUserSecurityRole(
                user_id=user_id, security_role_id=security_role_id, is_active=is_active
            )
        )

    async def grant_user_security_role_project(
        self, user_id: str, security_role_id: str, project_id: str
    ) -> Any:
        return await self.execute_one(
            ops.GrantUserSecurityRoleProject(
                user_id=user_id, security_role_id=security_role_id, project_id=project_id
            )
        )

    async def revoke_user_security_role_project(
        self, user_id: str, security_role_id: str, project_id: str
    ) -> Any:
        return await self.execute_one(
            ops.RevokeUserSecurityRoleProject(
                user_id=user_id, security_role_id=security_role_id, project_id=project_id
            )
        )

    async def assume_user(self, user_id: str) -> Any:
        """Act as another user (requires admin privileges)."""
        return await self.execute_one(ops.AssumeUser(user_id=user_id))

    async def un_assume_user(self) -> Any:
        return await self.execute_one(ops.UnAssumeUser())

    async def send_user_invite(self, user_id: str, email: Optional[str] = None) -> Any:
        return await self.execute_one(ops.SendUserInvite(user_id=user_id, email=email))

    # =========================================================================
    # API keys
    # =========================================================================

    async def grant_api_key_project(self, api_key_id: str, project_id: str) -> Any:
        return await self.execute_one(
            ops.GrantApiKeyProject(api_key_id=api_key_id, project_id=project_id)
        )

    async def revoke_api_key_project(self, api_key_id: str, project_id: str) -> Any:
        return await self.execute_one(
            ops.RevokeApiKeyProject(api_key_id=api_key_id, project_id=project_id)
        )

    async def grant_api_key_security_role(self, api_key_id: str, security_role_id: str) -> Any:
        return await self.execute_one(
            ops.GrantApiKeySecurityRole(api_key_id=api_key_id, security_role_id=security_role_id)
        )

    async def revoke_api_key_security_role(self, api_key_id: str, security_role_id: str) -> Any:
        return await self.execute_one(
            ops.RevokeApiKeySecurityRole(api_key_id=api_key_id, security_role_id=security_role_id)
        )

    # =========================================================================
    # Two-factor authentication
    # =========================================================================

    async def configure_otp(self, user_id: str, otp_type: str) -> Any:
        return await self.execute_one(ops.ConfigureOtp(user_id=user_id, otp_type=otp_type))

    async def configure_totp(self, user_id: str) -> Any:
        return await self.execute_one(ops.ConfigureTotp(user_id=user_id))

    async def generate_totp(self, user_id: str) -> Any:
        return await self.execute_one(ops.GenerateTotp(user_id=user_id))

    async def disable_2fa(self, user_id: str) -> Any:
        return await self.execute_one(ops.Disable2FA(user_id=user_id))

    # =========================================================================
    # Files and media
    # =========================================================================

    async def get_upload_metadata(
        self,
        component_id: str,
        file_size: int,
        file_name: Optional[str] = None,
        checksum: Optional[str] = None,
    ) -> Any:
        return await self.execute_one(
            ops.GetUploadMetadata(
                component_id=component_id,
                file_size=file_size,
                file_name=file_name,
                checksum=checksum,
            )
        )

    async def complete_multipart_upload(
        self, component_id: str, upload_id: str, parts: Sequence[Mapping[str, Any]]
    ) -> Any:
        return await self.execute_one(
            ops.CompleteMultipartUpload(
                component_id=component_id, upload_id=upload_id, parts=list(parts)
            )
        )

    async def generate_signed_url(self, component_id: str, operation: str = "get") -> Any:
        return await self.execute_one(
            ops.GenerateSignedUrl(component_id=component_id, operation=operation)
        )

    async def encode_media(
        self, component_id: str, options: Optional[Dict[str, Any]] = None
    ) -> Any:
        """Trigger transcoding of a component."""
        return await self.execute_one(
            ops.EncodeMedia(component_id=component_id, options=options or {})
        )

    # =========================================================================
    # Entities, permissions, storage, review
    # =========================================================================

    async def convert_entity(self, entity_type: str, entity_id: str, target_type: str) -> Any:
        return await self.execute_one(
            ops.ConvertEntity(entity_type=entity_type, entity_id=entity_id, target_type=target_type)
        )

    async def permissions(
        self, entity_type: str, entity_id: str, actions: Optional[List[str]] = None
    ) -> Any:
        return await self.execute_one(
            ops.Permissions(entity_type=entity_type, entity_id=entity_id, actions=actions)
        )

    async def storage_usage(self, project_id: Optional[str] = None) -> Any:
        return await self.execute_one(ops.StorageUsage(project_id=project_id))

    async def send_review_session_invite(
        self,
        review_session_id: str,
        email: str,
        name: Optional[str] = None,
        message: Optional[str] = None,
    ) -> Any:
        return await self.execute_one(
            ops.SendReviewSessionInvite(
                review_session_id=review_session_id, email=email, name=name, message=message
            )
        )

    async def reset_remote(self, user_id: str, reset_type: str) -> Any:
        return await self.execute_one(ops.ResetRemote(user_id=user_id, reset_type=reset_type))

    async def reset_remote_api_key(self, user_id: str) -> Any:
        return await self.reset_remote(user_id, "api_key")

    async def reset_remote_password(self, user_id: str) -> Any:
        return await self.reset_remote(user_id, "password")

    # =========================================================================
    # Delayed jobs
    # =========================================================================

    async def csv_import_delayed_job(self, job_data: Dict[str, Any]) -> Any:
        return await self.execute_one(
            ops.DelayedJob(job_type="csvimportdelayedjob", job_data=job_data)
        )

    async def delete_delayed_job(self, entity_type: str, entity_id: str) -> Any:
        return await self.execute_one(
            ops.DelayedJob(job_type="deletedelayedjob", entity_type=entity_type, entity_id=entity_id)
        )

    async def export_review_session_feedback_delayed_job(
        self, review_session_id: str, options: Optional[Dict[str, Any]] = None
    ) -> Any:
        return await self.execute_one(
            ops.DelayedJob(
                job_type="exportreviewsessionfeedback",
                review_session_id=review_session_id,
                options=options or {},
            )
        )

    async def iconik_sync_structure_delayed_job(
        self, project_id: str, options: Optional[Dict[str, Any]] = None
    ) -> Any:
        return await self.execute_one(
            ops.DelayedJob(job_type="iconiksyncstructure", project_id=project_id, options=options or {})
        )

    async def sync_ldap_users_delayed_job(self, options: Optional[Dict[str, Any]] = None) -> Any:
        return await self.execute_one(ops.DelayedJob(job_type="syncldapusers", options=options or {}))
