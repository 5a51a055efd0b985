import json

import httpx
import pytest

from ftrack_mcp.config import FtrackSettings
from ftrack_mcp.ftrack_client import FtrackClient

SERVER_URL = "https://studio.ftrackapp.com"
API_URL = f"{SERVER_URL}/api"


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("FTRACK_SERVER", "FTRACK_API_USER", "FTRACK_API_KEY", "FTRACK_TIMEOUT"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def settings():
    return FtrackSettings(
        server_url=SERVER_URL + "/",
        api_user="pipeline@studio.com",
        api_key="secret-key",
    )


@pytest.fixture
def client(settings):
    return FtrackClient(settings)


def sent_operations(route):
    """Operations posted in the last call to a respx route."""
    return json.loads(route.calls.last.request.content)


def echo_operations(request):
    """Answer every operation with a success result wrapping the operation itself."""
    operations = json.loads(request.content)
    return httpx.Response(200, json=[{"content": op} for op in operations])
