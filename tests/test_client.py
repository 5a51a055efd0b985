import httpx
import pytest
import respx

from conftest import API_URL, echo_operations, sent_operations
from ftrack_mcp.ftrack_client import OperationError, ProtocolError, TransportError
from ftrack_mcp.ftrack_client import operations as ops


@pytest.mark.asyncio
@respx.mock
async def test_execute_preserves_result_order(client):
    route = respx.post(API_URL).mock(
        return_value=httpx.Response(200, json=[{"data": ["a"]}, {"data": ["b"]}])
    )

    results = await client.execute(
        [ops.Query(expression="select id from Project"), {"action": "query_schemas"}]
    )

    assert results == [{"data": ["a"]}, {"data": ["b"]}]
    assert sent_operations(route) == [
        {"action": "query", "expression": "select id from Project"},
        {"action": "query_schemas"},
    ]


@pytest.mark.asyncio
@respx.mock
async def test_execute_sends_identity_headers(client):
    route = respx.post(API_URL).mock(return_value=httpx.Response(200, json=[{}]))

    await client.execute(ops.QueryServerInformation())

    request = route.calls.last.request
    assert request.headers["ftrack-user"] == "pipeline@studio.com"
    assert request.headers["ftrack-api-key"] == "secret-key"
    assert request.headers["content-type"] == "application/json"
    assert request.headers["accept"] == "application/json"
    assert route.call_count == 1


@pytest.mark.asyncio
@respx.mock
async def test_single_operation_is_wrapped_in_a_list(client):
    route = respx.post(API_URL).mock(return_value=httpx.Response(200, json=[{"ok": True}]))

    results = await client.execute({"action": "un_assume_user"})

    assert results == [{"ok": True}]
    assert sent_operations(route) == [{"action": "un_assume_user"}]


@pytest.mark.asyncio
@respx.mock
async def test_operation_error_reports_failing_index(client):
    respx.post(API_URL).mock(
        return_value=httpx.Response(
            200,
            json=[
                {"data": [{"id": "1"}]},
                {"exception": "ServerError", "content": "Entity not found"},
            ],
        )
    )

    with pytest.raises(OperationError) as excinfo:
        await client.batch([ops.QuerySchemas(), ops.Delete(entity_type="Task", entity_key=["x"])])

    assert excinfo.value.index == 1
    assert excinfo.value.content == "Entity not found"
    assert excinfo.value.exception == "ServerError"
    assert str(excinfo.value) == "Operation 1 failed: Entity not found"


@pytest.mark.asyncio
@respx.mock
async def test_first_operation_error_wins(client):
    respx.post(API_URL).mock(
        return_value=httpx.Response(
            200,
            json=[
                {"exception": "ValueError", "content": "first"},
                {"exception": "ValueError", "content": "second"},
            ],
        )
    )

    with pytest.raises(OperationError) as excinfo:
        await client.batch([ops.QuerySchemas(), ops.QuerySchemas()])

    assert excinfo.value.index == 0
    assert "first" in str(excinfo.value)


@pytest.mark.asyncio
@respx.mock
async def test_http_error_status_raises_transport_error(client):
    respx.post(API_URL).mock(return_value=httpx.Response(401, text="The API key is invalid"))

    with pytest.raises(TransportError) as excinfo:
        await client.query("select id from Project")

    assert excinfo.value.status_code == 401
    assert excinfo.value.body == "The API key is invalid"
    assert str(excinfo.value) == "ftrack API error (401): The API key is invalid"


@pytest.mark.asyncio
@respx.mock
async def test_network_failure_raises_transport_error(client):
    respx.post(API_URL).mock(side_effect=httpx.ConnectError("connection refused"))

    with pytest.raises(TransportError) as excinfo:
        await client.query_schemas()

    assert excinfo.value.status_code is None
    assert "connection refused" in str(excinfo.value)


@pytest.mark.asyncio
@respx.mock
async def test_non_list_response_raises_protocol_error(client):
    respx.post(API_URL).mock(return_value=httpx.Response(200, json={"unexpected": True}))

    with pytest.raises(ProtocolError):
        await client.query_schemas()


@pytest.mark.asyncio
@respx.mock
async def test_empty_result_array_raises_protocol_error(client):
    respx.post(API_URL).mock(return_value=httpx.Response(200, json=[]))

    with pytest.raises(ProtocolError) as excinfo:
        await client.query_schemas()

    assert "0 results for 1 operations" in str(excinfo.value)


@pytest.mark.asyncio
@respx.mock
async def test_short_result_array_raises_protocol_error(client):
    respx.post(API_URL).mock(return_value=httpx.Response(200, json=[{"data": []}]))

    with pytest.raises(ProtocolError) as excinfo:
        await client.batch([ops.QuerySchemas(), ops.QueryServerInformation()])

    assert "1 results for 2 operations" in str(excinfo.value)


@pytest.mark.asyncio
@respx.mock
async def test_update_wraps_id_in_entity_key(client):
    route = respx.post(API_URL).mock(side_effect=echo_operations)

    await client.update("Task", "task-1", {"name": "lighting"})

    assert sent_operations(route) == [
        {
            "action": "update",
            "entity_type": "Task",
            "entity_key": ["task-1"],
            "entity_data": {"name": "lighting"},
        }
    ]


ROUND_TRIP_CASES = [
    ("query", ("select id from Task",), {}, {"action": "query", "expression": "select id from Task"}),
    ("parse_query", ("select id from Task",), {}, {"action": "parse_query", "expression": "select id from Task"}),
    ("query_schemas", (), {}, {"action": "query_schemas"}),
    ("query_server_information", (), {}, {"action": "query_server_information"}),
    ("search", ("hero",), {}, {"action": "search", "expression": "hero"}),
    (
        "search",
        ("hero",),
        {"entity_type": "Shot", "terms": ["hero"], "context_id": "p1", "object_type_ids": ["o1"]},
        {
            "action": "search",
            "expression": "hero",
            "entity_type": "Shot",
            "terms": ["hero"],
            "context_id": "p1",
            "object_type_ids": ["o1"],
        },
    ),
    ("create", ("Task", {"name": "comp"}), {}, {"action": "create", "entity_type": "Task", "entity_data": {"name": "comp"}}),
    ("delete", ("Task", "t1"), {}, {"action": "delete", "entity_type": "Task", "entity_key": ["t1"]}),
    ("add_user_security_role", ("u1", "r1"), {}, {"action": "add_user_security_role", "user_id": "u1", "security_role_id": "r1"}),
    ("remove_user_security_role", ("u1", "r1"), {}, {"action": "remove_user_security_role", "user_id": "u1", "security_role_id": "r1"}),
    (
        "update_user_security_role",
        ("u1", "r1"),
        {"is_active": False},
        {"action": "update_user_security_role", "user_id": "u1", "security_role_id": "r1", "is_active": False},
    ),
    (
        "grant_user_security_role_project",
        ("u1", "r1", "p1"),
        {},
        {"action": "grant_user_security_role_project", "user_id": "u1", "security_role_id": "r1", "project_id": "p1"},
    ),
    (
        "revoke_user_security_role_project",
        ("u1", "r1", "p1"),
        {},
        {"action": "revoke_user_security_role_project", "user_id": "u1", "security_role_id": "r1", "project_id": "p1"},
    ),
    ("assume_user", ("u1",), {}, {"action": "assume_user", "user_id": "u1"}),
    ("un_assume_user", (), {}, {"action": "un_assume_user"}),
    ("send_user_invite", ("u1",), {}, {"action": "send_user_invite", "user_id": "u1"}),
    ("send_user_invite", ("u1",), {"email": "a@b.com"}, {"action": "send_user_invite", "user_id": "u1", "email": "a@b.com"}),
    ("grant_api_key_project", ("k1", "p1"), {}, {"action": "grant_api_key_project", "api_key_id": "k1", "project_id": "p1"}),
    ("revoke_api_key_project", ("k1", "p1"), {}, {"action": "revoke_api_key_project", "api_key_id": "k1", "project_id": "p1"}),
    (
        "grant_api_key_security_role",
        ("k1", "r1"),
        {},
        {"action": "grant_api_key_security_role", "api_key_id": "k1", "security_role_id": "r1"},
    ),
    (
        "revoke_api_key_security_role",
        ("k1", "r1"),
        {},
        {"action": "revoke_api_key_security_role", "api_key_id": "k1", "security_role_id": "r1"},
    ),
    ("configure_otp", ("u1", "email"), {}, {"action": "configure_otp", "user_id": "u1", "otp_type": "email"}),
    ("configure_totp", ("u1",), {}, {"action": "configure_totp", "user_id": "u1"}),
    ("generate_totp", ("u1",), {}, {"action": "generate_totp", "user_id": "u1"}),
    ("disable_2fa", ("u1",), {}, {"action": "disable_2fa", "user_id": "u1"}),
    ("get_upload_metadata", ("c1", 2048), {}, {"action": "get_upload_metadata", "component_id": "c1", "file_size": 2048}),
    (
        "get_upload_metadata",
        ("c1", 2048),
        {"file_name": "plate.exr", "checksum": "abc=="},
        {
            "action": "get_upload_metadata",
            "component_id": "c1",
            "file_size": 2048,
            "file_name": "plate.exr",
            "checksum": "abc==",
        },
    ),
    (
        "complete_multipart_upload",
        ("c1", "up1", [{"part_number": 1, "etag": "e1"}]),
        {},
        {
            "action": "complete_multipart_upload",
            "component_id": "c1",
            "upload_id": "up1",
            "parts": [{"part_number": 1, "etag": "e1"}],
        },
    ),
    ("generate_signed_url", ("c1",), {}, {"action": "generate_signed_url", "component_id": "c1", "operation": "get"}),
    ("generate_signed_url", ("c1", "put"), {}, {"action": "generate_signed_url", "component_id": "c1", "operation": "put"}),
    ("encode_media", ("c1",), {}, {"action": "encode_media", "component_id": "c1"}),
    (
        "encode_media",
        ("c1", {"keep_original": True}),
        {},
        {"action": "encode_media", "component_id": "c1", "keep_original": True},
    ),
    (
        "convert_entity",
        ("Task", "t1", "Milestone"),
        {},
        {"action": "convert_entity", "entity_type": "Task", "entity_id": "t1", "target_type": "Milestone"},
    ),
    ("permissions", ("Task", "t1"), {}, {"action": "permissions", "entity_type": "Task", "entity_id": "t1"}),
    (
        "permissions",
        ("Task", "t1"),
        {"actions": ["read"]},
        {"action": "permissions", "entity_type": "Task", "entity_id": "t1", "actions": ["read"]},
    ),
    ("storage_usage", (), {}, {"action": "storage_usage"}),
    ("storage_usage", ("p1",), {}, {"action": "storage_usage", "project_id": "p1"}),
    (
        "send_review_session_invite",
        ("rs1", "client@b.com"),
        {"name": "Client"},
        {"action": "send_review_session_invite", "review_session_id": "rs1", "email": "client@b.com", "name": "Client"},
    ),
    ("reset_remote_api_key", ("u1",), {}, {"action": "reset_remote", "user_id": "u1", "reset_type": "api_key"}),
    ("reset_remote_password", ("u1",), {}, {"action": "reset_remote", "user_id": "u1", "reset_type": "password"}),
    (
        "csv_import_delayed_job",
        ({"entity_type": "Shot"},),
        {},
        {"action": "delayed_job", "job_type": "csvimportdelayedjob", "job_data": {"entity_type": "Shot"}},
    ),
    (
        "delete_delayed_job",
        ("Project", "p1"),
        {},
        {"action": "delayed_job", "job_type": "deletedelayedjob", "entity_type": "Project", "entity_id": "p1"},
    ),
    (
        "export_review_session_feedback_delayed_job",
        ("rs1", {"format": "pdf"}),
        {},
        {"action": "delayed_job", "job_type": "exportreviewsessionfeedback", "review_session_id": "rs1", "format": "pdf"},
    ),
    (
        "iconik_sync_structure_delayed_job",
        ("p1",),
        {},
        {"action": "delayed_job", "job_type": "iconiksyncstructure", "project_id": "p1"},
    ),
    ("sync_ldap_users_delayed_job", (), {}, {"action": "delayed_job", "job_type": "syncldapusers"}),
]


@pytest.mark.asyncio
@pytest.mark.parametrize("method, args, kwargs, expected", ROUND_TRIP_CASES)
@respx.mock
async def test_convenience_methods_build_expected_operation(client, method, args, kwargs, expected):
    route = respx.post(API_URL).mock(side_effect=echo_operations)

    result = await getattr(client, method)(*args, **kwargs)

    assert result == {"content": expected}
    assert sent_operations(route) == [expected]
