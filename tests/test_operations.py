import pytest
from pydantic import ValidationError

from ftrack_mcp.ftrack_client import operations as ops


@pytest.mark.parametrize(
    "operation, action",
    [
        (ops.Query(expression="select id from Task"), "query"),
        (ops.ParseQuery(expression="select id from Task"), "parse_query"),
        (ops.QuerySchemas(), "query_schemas"),
        (ops.QueryServerInformation(), "query_server_information"),
        (ops.Search(expression="hero"), "search"),
        (ops.Create(entity_type="Task", entity_data={"name": "comp"}), "create"),
        (ops.Update(entity_type="Task", entity_key=["t1"], entity_data={}), "update"),
        (ops.Delete(entity_type="Task", entity_key=["t1"]), "delete"),
        (ops.UnAssumeUser(), "un_assume_user"),
        (ops.Disable2FA(user_id="u1"), "disable_2fa"),
        (ops.ResetRemote(user_id="u1", reset_type="password"), "reset_remote"),
        (ops.DelayedJob(job_type="syncldapusers"), "delayed_job"),
    ],
)
def test_action_literal(operation, action):
    assert operation.to_payload()["action"] == action


def test_absent_optionals_are_omitted():
    payload = ops.Search(expression="hero").to_payload()
    assert payload == {"action": "search", "expression": "hero"}

    payload = ops.SendReviewSessionInvite(review_session_id="rs1", email="a@b.com").to_payload()
    assert "name" not in payload
    assert "message" not in payload


def test_null_values_inside_entity_data_are_kept():
    payload = ops.Update(
        entity_type="Task", entity_key=["t1"], entity_data={"description": None}
    ).to_payload()
    assert payload["entity_data"] == {"description": None}


def test_signed_url_defaults_to_get():
    payload = ops.GenerateSignedUrl(component_id="c1").to_payload()
    assert payload == {"action": "generate_signed_url", "component_id": "c1", "operation": "get"}


def test_signed_url_rejects_unknown_operation():
    with pytest.raises(ValidationError):
        ops.GenerateSignedUrl(component_id="c1", operation="delete")


def test_options_are_merged_into_payload():
    payload = ops.EncodeMedia(component_id="c1", options={"keep_original": True}).to_payload()
    assert payload == {"action": "encode_media", "component_id": "c1", "keep_original": True}
    assert "options" not in payload


def test_delayed_job_merges_options():
    payload = ops.DelayedJob(
        job_type="iconiksyncstructure", project_id="p1", options={"dry_run": True}
    ).to_payload()
    assert payload == {
        "action": "delayed_job",
        "job_type": "iconiksyncstructure",
        "project_id": "p1",
        "dry_run": True,
    }


@pytest.mark.parametrize("job_type", ["importcsv", "", "SYNCLDAPUSERS"])
def test_delayed_job_rejects_unknown_job_type(job_type):
    with pytest.raises(ValidationError):
        ops.DelayedJob(job_type=job_type)


def test_reset_remote_accepts_only_known_types():
    assert ops.ResetRemote(user_id="u1", reset_type="api_key").to_payload()["reset_type"] == "api_key"
    with pytest.raises(ValidationError):
        ops.ResetRemote(user_id="u1", reset_type="session")


def test_entity_key_must_not_be_empty():
    with pytest.raises(ValidationError):
        ops.Delete(entity_type="Task", entity_key=[])


def test_multipart_parts_serialize_as_mappings():
    payload = ops.CompleteMultipartUpload(
        component_id="c1",
        upload_id="up1",
        parts=[{"part_number": 1, "etag": "abc"}, {"part_number": 2, "etag": "def"}],
    ).to_payload()
    assert payload["parts"] == [{"part_number": 1, "etag": "abc"}, {"part_number": 2, "etag": "def"}]


def test_unknown_fields_are_rejected():
    with pytest.raises(ValidationError):
        ops.Query(expression="select id from Task", limit=5)
