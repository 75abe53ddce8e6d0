from __future__ import annotations

import json
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable

import httpx
import pytest

ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from arrkit.client import ArrClient
from arrkit.config import ClientConfig

BASE_URL = "http://arr.local"
API_KEY = "mockAPIkey"


@dataclass
class ScriptedCall:
    """One expected request and the canned response returned for it.

    `expected_target` is the raw path plus query (e.g. ``/api/v3/tag?x=1``).
    `expected_body` is compared byte for byte when not None.
    """

    expected_method: str
    expected_target: str
    response_status: int = 200
    response_body: str = ""
    expected_body: str | None = None
    seen: list[httpx.Request] = field(default_factory=list)

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.seen.append(request)
        assert request.method == self.expected_method
        assert request.url.raw_path.decode("ascii") == self.expected_target
        assert request.headers.get("x-api-key") == API_KEY
        if self.expected_body is not None:
            assert request.content.decode("utf-8") == self.expected_body
        return httpx.Response(
            self.response_status,
            content=self.response_body.encode("utf-8"),
            headers={"Content-Type": "application/json"},
            request=request,
        )


@pytest.fixture
def client_config() -> ClientConfig:
    return ClientConfig(url=BASE_URL, api_key=API_KEY, timeout_seconds=1.0)


@pytest.fixture
def scripted(client_config: ClientConfig) -> Callable[[ScriptedCall], ArrClient]:
    """Return a factory building an ArrClient that serves one ScriptedCall."""

    def factory(call: ScriptedCall) -> ArrClient:
        return ArrClient(client_config, transport=httpx.MockTransport(call.handler))

    return factory


class EchoBackend:
    """In-memory backend storing posted objects under increasing ids."""

    def __init__(self) -> None:
        self.items: dict[int, dict[str, Any]] = {}
        self.next_id = 1

    def handler(self, request: httpx.Request) -> httpx.Response:
        parts = [p for p in request.url.path.split("/") if p]
        item_id = int(parts[3]) if len(parts) > 3 else None
        if request.method == "POST":
            payload = json.loads(request.content)
            payload["id"] = self.next_id
            self.items[self.next_id] = payload
            self.next_id += 1
            return httpx.Response(201, json=payload, request=request)
        if request.method == "PUT" and item_id in self.items:
            payload = json.loads(request.content)
            self.items[item_id] = payload
            return httpx.Response(202, json=payload, request=request)
        if request.method == "GET" and item_id is None:
            return httpx.Response(200, json=list(self.items.values()), request=request)
        if request.method == "GET" and item_id in self.items:
            return httpx.Response(200, json=self.items[item_id], request=request)
        if request.method == "DELETE" and item_id in self.items:
            del self.items[item_id]
            return httpx.Response(200, content=b"{}", request=request)
        return httpx.Response(404, json={"message": "NotFound"}, request=request)


@pytest.fixture
def echo_client(client_config: ClientConfig) -> ArrClient:
    backend = EchoBackend()
    return ArrClient(client_config, transport=httpx.MockTransport(backend.handler))
