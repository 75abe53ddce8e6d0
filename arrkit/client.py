"""Generic JSON request engine shared by every *arr backend binding.

`ArrClient` is stateless per call. It attaches the API key to each request,
serializes pydantic bodies, and decodes responses into the caller's model.
Single objects and collections have separate entry points (`get_one` and
`get_many`), and a body of the other shape is a decode error rather than
something to coerce.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any, TypeVar

from loguru import logger
from pydantic import BaseModel, TypeAdapter, ValidationError

from arrkit.config import ClientConfig
from arrkit.errors import decode_error
from arrkit.net.http import HttpClient
from arrkit.paths import Endpoint
from arrkit.schemas import encode_body

if TYPE_CHECKING:
    import httpx

__all__ = ["API_KEY_HEADER", "ArrClient"]

log = logger.bind(module="client")

API_KEY_HEADER = "X-API-Key"
_JSON = "application/json"

ModelT = TypeVar("ModelT", bound=BaseModel)


class ArrClient:
    """Typed request engine bound to one backend instance."""

    def __init__(
        self,
        config: ClientConfig,
        *,
        transport: "httpx.BaseTransport | None" = None,
    ) -> None:
        self.config = config
        self._http = HttpClient(
            base_url=config.url,
            timeout_seconds=config.timeout_seconds,
            follow_redirects=config.follow_redirects,
            headers={
                API_KEY_HEADER: config.api_key,
                "Accept": _JSON,
                "User-Agent": config.user_agent,
            },
            auth=config.basic_auth,
            transport=transport,
            reuse_connections=config.reuse_connections,
        )

    @property
    def base_url(self) -> str:
        return self._http.base_url

    def close(self) -> None:
        """Close any underlying persistent HTTP resources."""
        self._http.close()

    def __enter__(self) -> "ArrClient":
        self._http.open()
        return self

    def __exit__(self, exc_type: object, exc: object, tb: object) -> None:
        self.close()

    def _send(self, method: str, endpoint: Endpoint, body: BaseModel | None = None) -> "httpx.Response":
        if body is None:
            return self._http.request(method, endpoint.target)
        return self._http.request(
            method,
            endpoint.target,
            headers={"Content-Type": _JSON},
            content=encode_body(body),
        )

    def _decode(self, response: "httpx.Response", endpoint: Endpoint, expected: type) -> Any:
        """Parse the body as JSON and check it is a dict or list, as requested."""
        method = response.request.method
        url = str(response.request.url)
        content = response.content or b""
        if not content.strip():
            raise decode_error(
                "empty body",
                status_code=response.status_code,
                method=method,
                url=url,
            )
        try:
            payload = json.loads(content)
        except ValueError as exc:
            raise decode_error(
                f"not JSON ({exc})",
                status_code=response.status_code,
                body=content,
                method=method,
                url=url,
            ) from exc
        if not isinstance(payload, expected):
            want = "an object" if expected is dict else "an array"
            raise decode_error(
                f"expected {want} for {endpoint.path}, got {type(payload).__name__}",
                status_code=response.status_code,
                body=content,
                method=method,
                url=url,
            )
        return payload

    def _validate(self, response: "httpx.Response", adapter: TypeAdapter[Any], payload: Any) -> Any:
        try:
            return adapter.validate_python(payload)
        except ValidationError as exc:
            raise decode_error(
                str(exc),
                status_code=response.status_code,
                body=response.content or b"",
                method=response.request.method,
                url=str(response.request.url),
            ) from exc

    def _one(self, response: "httpx.Response", endpoint: Endpoint, model: type[ModelT]) -> ModelT:
        payload = self._decode(response, endpoint, dict)
        return self._validate(response, TypeAdapter(model), payload)

    def get_one(self, endpoint: Endpoint, model: type[ModelT]) -> ModelT:
        """GET a single JSON object and decode it into `model`."""
        return self._one(self._send("GET", endpoint), endpoint, model)

    def get_many(self, endpoint: Endpoint, model: type[ModelT]) -> list[ModelT]:
        """GET a JSON array and decode each element into `model`."""
        response = self._send("GET", endpoint)
        payload = self._decode(response, endpoint, list)
        return self._validate(response, TypeAdapter(list[model]), payload)  # type: ignore[valid-type]

    def post(self, endpoint: Endpoint, body: BaseModel, model: type[ModelT]) -> ModelT:
        """POST `body` as JSON and decode the returned object into `model`."""
        return self._one(self._send("POST", endpoint, body), endpoint, model)

    def put(self, endpoint: Endpoint, body: BaseModel, model: type[ModelT]) -> ModelT:
        """PUT `body` as JSON and decode the returned object into `model`."""
        return self._one(self._send("PUT", endpoint, body), endpoint, model)

    def delete(self, endpoint: Endpoint) -> None:
        """DELETE the target. Any 2xx body is ignored."""
        self._send("DELETE", endpoint)

    def ping(self) -> None:
        """GET /ping, which every backend answers without the API prefix."""
        self._http.request("GET", "/ping")
        log.debug("Ping ok base_url={}", self.base_url)
