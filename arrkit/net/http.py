"""Shared HTTP helpers built on top of httpx.

This module centralizes default timeout/redirect/header behavior and maps
every httpx failure and non-2xx response into `arrkit.errors.RequestError`.
"""

from __future__ import annotations

import threading
import weakref
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Mapping

import httpx
from loguru import logger

from arrkit.errors import classify_response, transport_error

__all__ = ["HttpClient"]

log = logger.bind(module="net.http")

_MIN_TIMEOUT_SECONDS = 0.1


class HttpClient:
    """Small sync HTTP client with consistent defaults and error mapping.

    Notes:
        - By default, a short-lived `httpx.Client` is created per request.
        - When `reuse_connections=True`, an internal persistent `httpx.Client` is
          used to enable connection pooling. Call `close()` (or use this object
          as a context manager) to release resources deterministically.
        - Timeouts are clamped to at least `_MIN_TIMEOUT_SECONDS`.
    """

    def __init__(
        self,
        *,
        base_url: str,
        timeout_seconds: float = 30.0,
        follow_redirects: bool = True,
        headers: Mapping[str, str] | None = None,
        auth: tuple[str, str] | None = None,
        transport: httpx.BaseTransport | None = None,
        reuse_connections: bool = False,
    ) -> None:
        self.base_url = (base_url or "").rstrip("/") + "/"
        self.timeout_seconds = float(max(_MIN_TIMEOUT_SECONDS, timeout_seconds))
        self.follow_redirects = bool(follow_redirects)
        self.headers: dict[str, str] = dict(headers or {})
        self.auth = auth
        self.transport = transport
        self.reuse_connections = bool(reuse_connections)
        self._client: httpx.Client | None = None
        self._finalizer: weakref.finalize | None = None
        self._lock = threading.Lock()

    def _build_client(self) -> httpx.Client:
        kwargs: dict[str, object] = {
            "base_url": self.base_url,
            "timeout": self.timeout_seconds,
            "follow_redirects": self.follow_redirects,
            "headers": self.headers,
        }
        if self.auth is not None:
            kwargs["auth"] = httpx.BasicAuth(*self.auth)
        if self.transport is not None:
            kwargs["transport"] = self.transport
        return httpx.Client(**kwargs)  # type: ignore[arg-type]

    def open(self) -> None:
        """Open an internal persistent `httpx.Client` when reuse is enabled."""
        if not self.reuse_connections:
            return
        with self._lock:
            if self._client is not None:
                return
            self._client = self._build_client()
            # Ensure we don't leak open pools if callers forget to close explicitly.
            self._finalizer = weakref.finalize(self, self._client.close)

    def close(self) -> None:
        """Close any internal persistent `httpx.Client`."""
        with self._lock:
            if self._finalizer is not None:
                self._finalizer.detach()
                self._finalizer = None
            if self._client is None:
                return
            self._client.close()
            self._client = None

    def __enter__(self) -> "HttpClient":
        self.open()
        return self

    def __exit__(self, exc_type: object, exc: object, tb: object) -> None:
        self.close()

    @contextmanager
    def _client_ctx(self) -> Iterator[httpx.Client]:
        if self.reuse_connections:
            self.open()
            assert self._client is not None
            yield self._client
            return
        with self._build_client() as client:
            yield client

    def request(
        self,
        method: str,
        target: str,
        *,
        headers: Mapping[str, str] | None = None,
        content: bytes | None = None,
    ) -> httpx.Response:
        """Send an HTTP request and return the 2xx response.

        `target` is a path (with optional query string) relative to the base URL.

        Raises:
            RequestError: When the request fails or returns a non-2xx response.
        """
        method = (method or "GET").strip().upper()
        target = (target or "").strip()
        if not target:
            raise ValueError("target must be non-empty.")

        url = self.base_url.rstrip("/") + "/" + target.lstrip("/")
        log.debug("{} {}", method, url)
        try:
            with self._client_ctx() as client:
                response = client.request(
                    method,
                    target,
                    headers=dict(headers) if headers else None,
                    content=content,
                )
        except httpx.RequestError as exc:
            log.debug("{} {} failed: {}", method, url, exc)
            raise transport_error(exc, method=method, url=url) from exc

        error = classify_response(response, method=method, url=url)
        if error is not None:
            log.debug("{} {} -> {}", method, url, response.status_code)
            raise error
        return response
