"""Shared pytest fixtures for LLM Capabilities tests."""

import json
import os
from typing import Any, Callable, Dict, List, Optional

import httpx
import pytest

from llm_capabilities.core.cache import EmpiricalCache
from llm_capabilities.models.capabilities import Capability


OPENROUTER_PAYLOAD = {
    "data": [
        {
            "id": "openai/gpt-4o",
            "supported_parameters": ["tools", "structured_outputs", "response_format", "temperature"],
            "architecture": {"input_modalities": ["text", "image"], "output_modalities": ["text"]},
        },
        {
            "id": "deepseek/deepseek-r1",
            "supported_parameters": ["reasoning", "temperature"],
            "architecture": {"input_modalities": ["text"], "output_modalities": ["text"]},
        },
        {
            "id": "qwen/qwen3-235b",
            "supported_parameters": ["tools"],
            "architecture": {"input_modalities": ["text"], "output_modalities": ["text"]},
        },
        {
            "id": "google/gemini-2.5-flash-image",
            "supported_parameters": [],
            "architecture": {"input_modalities": ["text", "image"], "output_modalities": ["text", "image"]},
        },
        {
            "id": "mistral/plain-text",
            "supported_parameters": ["temperature", "top_p"],
            "architecture": {"input_modalities": ["text"], "output_modalities": ["text"]},
        },
    ]
}


class FakeIndexServer:
    """Serves a canned OpenRouter response through httpx.MockTransport."""

    def __init__(self, status_code: int = 200, payload: Any = None, body: Optional[bytes] = None,
                 error: Optional[Exception] = None):
        self.status_code = status_code
        self.payload = OPENROUTER_PAYLOAD if payload is None else payload
        self.body = body
        self.error = error
        self.requests: List[httpx.Request] = []
        self.client = httpx.Client(transport=httpx.MockTransport(self._handle))

    @property
    def calls(self) -> int:
        return len(self.requests)

    def _handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        if self.body is not None:
            return httpx.Response(self.status_code, content=self.body)
        return httpx.Response(self.status_code, json=self.payload)


class FakeRegistry:
    """In-memory ModelRegistry."""

    def __init__(self, answers: Optional[Dict[str, Dict[Capability, bool]]] = None,
                 error: Optional[Exception] = None):
        self.answers = answers or {}
        self.error = error
        self.queries: List[tuple] = []

    def supports(self, model: str, capability: Capability) -> Optional[bool]:
        self.queries.append((model, capability))
        if self.error is not None:
            raise self.error
        return self.answers.get(model, {}).get(capability)


@pytest.fixture
def cache_path(tmp_path):
    """Path to a cache file that does not exist yet."""
    return str(tmp_path / "cache.json")


@pytest.fixture
def index_path(tmp_path):
    """Path to an index file that does not exist yet."""
    return str(tmp_path / "index.json")


@pytest.fixture
def cache(cache_path):
    return EmpiricalCache(path=cache_path)


@pytest.fixture
def index_server_factory() -> Callable[..., FakeIndexServer]:
    servers: List[FakeIndexServer] = []

    def factory(**kwargs) -> FakeIndexServer:
        server = FakeIndexServer(**kwargs)
        servers.append(server)
        return server

    yield factory

    for server in servers:
        server.client.close()


@pytest.fixture
def index_server(index_server_factory) -> FakeIndexServer:
    return index_server_factory()


@pytest.fixture
def fake_registry_factory():
    return FakeRegistry


@pytest.fixture
def write_json():
    """Write a JSON document to a path."""
    def _write(path: str, data: Any) -> None:
        with open(path, "w", encoding="utf-8") as f:
            json.dump(data, f)
    return _write


@pytest.fixture
def read_json():
    def _read(path: str) -> Any:
        with open(path, "r", encoding="utf-8") as f:
            return json.load(f)
    return _read


@pytest.fixture
def clean_env(monkeypatch):
    """Remove every LLM_CAPABILITIES_* variable from the environment."""
    for key in list(os.environ):
        if key.startswith("LLM_CAPABILITIES_"):
            monkeypatch.delenv(key, raising=False)


@pytest.fixture
def openrouter_payload():
    return json.loads(json.dumps(OPENROUTER_PAYLOAD))
