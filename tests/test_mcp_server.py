import json

import httpx
import pytest
import respx
from mcp.shared.memory import create_connected_server_and_client_session

from conftest import API_URL
from ftrack_mcp.infra.logging import configure_logging
from ftrack_mcp.mcp_server import READY_MESSAGE, announce_ready, build_server, main
from ftrack_mcp.tools import TOOL_DEFINITIONS


def test_main_exits_with_error_when_unconfigured(tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text("")

    assert main(["--env-file", str(env_file), "--log-level", "WARNING"]) == 1


@pytest.mark.asyncio
async def test_server_lists_every_tool(client):
    server = build_server(client)

    async with create_connected_server_and_client_session(server) as session:
        result = await session.list_tools()

    assert [tool.name for tool in result.tools] == [tool.name for tool in TOOL_DEFINITIONS]


@pytest.mark.asyncio
@respx.mock
async def test_server_calls_tool_over_session(client):
    payload = {"data": [{"id": "p1", "name": "feature"}]}
    respx.post(API_URL).mock(return_value=httpx.Response(200, json=[payload]))
    server = build_server(client)

    async with create_connected_server_and_client_session(server) as session:
        result = await session.call_tool("ftrack_list_projects", {"limit": 1})

    assert not result.isError
    assert json.loads(result.content[0].text) == payload


@pytest.mark.asyncio
@respx.mock
async def test_server_reports_api_failure_as_tool_error(client):
    respx.post(API_URL).mock(return_value=httpx.Response(401, text="Unauthorized"))
    server = build_server(client)

    async with create_connected_server_and_client_session(server) as session:
        result = await session.call_tool("ftrack_query_schemas", {})

    assert result.isError
    assert result.content[0].text == "Error: ftrack API error (401): Unauthorized"


def test_main_exits_with_error_on_bad_timeout(tmp_path, monkeypatch):
    env_file = tmp_path / ".env"
    env_file.write_text("")
    monkeypatch.setenv("FTRACK_SERVER", "https://studio.ftrackapp.com")
    monkeypatch.setenv("FTRACK_API_USER", "pipeline@studio.com")
    monkeypatch.setenv("FTRACK_API_KEY", "secret-key")
    monkeypatch.setenv("FTRACK_TIMEOUT", "forever")

    assert main(["--env-file", str(env_file), "--log-level", "WARNING"]) == 1


def test_readiness_line_ignores_log_level(capsys):
    configure_logging("ERROR")

    announce_ready()

    assert capsys.readouterr().err == f"{READY_MESSAGE}\n"
