from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from email_writer.config import Settings
from email_writer.main import create_app
from email_writer.utils.dependencies import get_gemini_client
from tests.fakes import FakeClient


@pytest.fixture
def make_client():
    """Build a TestClient around a fresh app wired to the given fake generation client."""
    opened = []

    def _make(fake: FakeClient, **settings_overrides) -> TestClient:
        settings = Settings(gemini_api_key="test-key", **settings_overrides)
        app = create_app(settings)
        app.dependency_overrides[get_gemini_client] = lambda: fake
        client = TestClient(app)
        client.__enter__()
        opened.append(client)
        return client

    yield _make

    for client in opened:
        client.__exit__(None, None, None)
