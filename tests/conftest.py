"""Shared fixtures."""

import pytest
from fastapi.testclient import TestClient

from cfbd_mcp.config import Settings
from cfbd_mcp.server import create_app
from tests.helpers import FakeCFBD


@pytest.fixture
def settings():
    return Settings(cfbd_api_key="test-key", keepalive_interval=0)


@pytest.fixture
def fake():
    return FakeCFBD()


@pytest.fixture
def http(settings, fake):
    with TestClient(create_app(settings, client=fake)) as client:
        yield client
