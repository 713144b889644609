import json

import httpx
import pytest
import pytest_asyncio

from src.adapter.services.http_recovery_service import HttpRecoveryService
from tests.fixtures.json_loader import TestDataLoader

BASE_URL = "http://recovery.test/api/v1/auth"


class RecordingBackend:
    """Scripted recovery API: path -> (status, body); records every request"""

    def __init__(self):
        self.routes = {}
        self.requests = []

    def reply(self, path: str, status_code: int, body) -> None:
        self.routes[path] = (status_code, body)

    def fail(self, path: str, exc: Exception) -> None:
        self.routes[path] = exc

    def payloads(self, path: str):
        return [json.loads(r.content) for r in self.requests if r.url.path.endswith(path)]

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        for path, outcome in self.routes.items():
            if request.url.path.endswith(path):
                if isinstance(outcome, Exception):
                    raise outcome
                status_code, body = outcome
                if isinstance(body, str):
                    return httpx.Response(status_code, text=body)
                return httpx.Response(status_code, json=body)
        return httpx.Response(404, json={"error": "not found"})


@pytest.fixture
def test_data():
    return TestDataLoader()


@pytest.fixture
def backend():
    return RecordingBackend()


@pytest_asyncio.fixture
async def client(backend):
    transport = httpx.MockTransport(backend.handler)
    async with httpx.AsyncClient(transport=transport, base_url=BASE_URL) as ac:
        yield ac


@pytest.fixture
def service(client):
    return HttpRecoveryService(client)
