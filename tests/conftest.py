"""Shared fixtures: a TestClient wired to a fake Databricks endpoint."""

import asyncio
import json

import httpx
import pytest
from fastapi.testclient import TestClient

from app.api.deps import get_http_client
from app.core.config import Settings, get_settings
from app.main import app

DATABRICKS_URL = "https://databricks.test/serving-endpoints/relay/invocations"
DATABRICKS_TOKEN = "dapi-test-token"


class FakeDatabricks:
    """Records outbound calls and answers them with a canned handler."""

    def __init__(self):
        self.requests = []
        self.handler = lambda request: httpx.Response(200, json={"predictions": []})

    def respond_with(self, status_code=200, **kwargs):
        self.handler = lambda request: httpx.Response(status_code, **kwargs)

    def raise_error(self, exc_factory):
        def handler(request):
            raise exc_factory(request)
        self.handler = handler

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.handler(request)

    @property
    def last_body(self):
        return json.loads(self.requests[-1].content)


@pytest.fixture
def databricks():
    return FakeDatabricks()


@pytest.fixture
def settings():
    return Settings(
        DATABRICKS_URL=DATABRICKS_URL,
        DATABRICKS_TOKEN=DATABRICKS_TOKEN,
        DATABRICKS_TIMEOUT_SECONDS=600,
    )


@pytest.fixture
def client(databricks, settings):
    fake_http = httpx.AsyncClient(transport=httpx.MockTransport(databricks))
    app.dependency_overrides[get_settings] = lambda: settings
    app.dependency_overrides[get_http_client] = lambda: fake_http
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
    asyncio.run(fake_http.aclose())
