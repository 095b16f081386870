import json

import httpx
import pytest
from fastapi.testclient import TestClient

from app.deps import get_transport
from app.main import create_app
from app.settings import Settings


class RecordingUpstream:
    """Fake chat-completions API. Replies with `content` or with an error status."""

    def __init__(self):
        self.requests: list[httpx.Request] = []
        self.status_code = 200
        self.content = ""
        self.error_body = ""

    def reply_with(self, content: str) -> None:
        self.status_code = 200
        self.content = content

    def fail_with(self, status_code: int, body: str) -> None:
        self.status_code = status_code
        self.error_body = body

    @property
    def call_count(self) -> int:
        return len(self.requests)

    def last_json(self) -> dict:
        return json.loads(self.requests[-1].content)

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.status_code != 200:
            return httpx.Response(self.status_code, text=self.error_body)
        return httpx.Response(
            200,
            json={"choices": [{"message": {"role": "assistant", "content": self.content}}]},
        )


@pytest.fixture
def settings():
    return Settings(_env_file=None, LOVABLE_API_KEY="test-key")


@pytest.fixture
def upstream():
    return RecordingUpstream()


@pytest.fixture
def make_client(upstream):
    def _make(settings: Settings) -> TestClient:
        app = create_app(settings)
        app.dependency_overrides[get_transport] = lambda: httpx.MockTransport(upstream.handler)
        return TestClient(app)
    return _make


@pytest.fixture
def client(make_client, settings):
    return make_client(settings)
