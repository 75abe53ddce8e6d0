"""Structured errors raised by the arrkit request machinery.

Every failure the client can observe is reported as a single `RequestError`
whose identity is its `ErrorKind` plus HTTP status code. Message text is
informational only, so callers can write one portable check such as
``is_not_found(exc)`` across every backend and resource type.
"""

from __future__ import annotations

import enum
import json
from typing import Any

import httpx

__all__ = [
    "ErrorKind",
    "RequestError",
    "classify_response",
    "decode_error",
    "is_not_found",
    "transport_error",
]

_MAX_ERROR_TEXT_CHARS = 2048


class ErrorKind(str, enum.Enum):
    """Error categories surfaced to callers."""

    NOT_FOUND = "not_found"
    HTTP_STATUS = "http_status"
    TRANSPORT = "transport"
    DECODE = "decode"


class RequestError(RuntimeError):
    """Raised when a request fails, returns non-2xx, or cannot be decoded."""

    def __init__(
        self,
        message: str,
        *,
        kind: ErrorKind,
        status_code: int | None = None,
        body: bytes = b"",
        method: str | None = None,
        url: str | None = None,
    ) -> None:
        super().__init__(message)
        self.message = str(message)
        self.kind = ErrorKind(kind)
        self.status_code = int(status_code) if status_code is not None else None
        self.body = body
        self.method = method
        self.url = url

    def __reduce__(self) -> tuple[Any, ...]:
        # Rebuild through the keyword-only constructor.
        return (
            _restore_request_error,
            (self.message, self.kind, self.status_code, self.body, self.method, self.url),
        )

    @property
    def is_not_found(self) -> bool:
        return self.kind is ErrorKind.NOT_FOUND

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RequestError):
            return NotImplemented
        return self.kind is other.kind and self.status_code == other.status_code

    def __hash__(self) -> int:
        return hash((self.kind, self.status_code))

    def __str__(self) -> str:  # pragma: no cover - trivial
        prefix = f"{self.method} {self.url}: " if self.method and self.url else ""
        if self.status_code is None:
            return f"{prefix}{self.message}"
        return f"{prefix}{self.message} (status={self.status_code})"

    def __repr__(self) -> str:
        return f"RequestError(kind={self.kind.value!r}, status_code={self.status_code!r})"


def _restore_request_error(
    message: str,
    kind: ErrorKind,
    status_code: int | None,
    body: bytes,
    method: str | None,
    url: str | None,
) -> RequestError:
    return RequestError(message, kind=kind, status_code=status_code, body=body, method=method, url=url)


def is_not_found(exc: BaseException | None) -> bool:
    """Return True when `exc` is a RequestError for a missing resource."""
    return isinstance(exc, RequestError) and exc.is_not_found


def _truncate(text: str, *, limit: int) -> str:
    """Return a truncated string with an ellipsis when needed."""
    if limit <= 0:
        return ""
    if len(text) <= limit:
        return text
    head = text[: max(0, limit - 3)].rstrip()
    return f"{head}..."


def _message_from_payload(payload: Any) -> str | None:
    """Extract a readable message from the JSON error shapes the backends use.

    Two shapes occur in practice: ``{"message": ..., "description": ...}`` and
    a validation list of ``{"propertyName": ..., "errorMessage": ...}`` items.
    """
    if isinstance(payload, dict):
        message = str(payload.get("message") or "").strip()
        description = str(payload.get("description") or "").strip()
        if message and description:
            return f"{message}: {description}"
        return message or description or None
    if isinstance(payload, list):
        parts: list[str] = []
        for item in payload:
            if not isinstance(item, dict):
                continue
            text = str(item.get("errorMessage") or "").strip()
            if not text:
                continue
            prop = str(item.get("propertyName") or "").strip()
            parts.append(f"{prop}: {text}" if prop else text)
        return "; ".join(parts) or None
    return None


def _safe_response_text(response: httpx.Response) -> str:
    """Best-effort extraction of an error message from a response body."""
    content = response.content or b""
    text = content.decode("utf-8", errors="replace").strip()
    if text:
        try:
            extracted = _message_from_payload(json.loads(text))
        except ValueError:
            extracted = None
        if extracted:
            text = extracted
    return _truncate(text, limit=_MAX_ERROR_TEXT_CHARS)


def classify_response(
    response: httpx.Response,
    *,
    method: str | None = None,
    url: str | None = None,
) -> RequestError | None:
    """Return None for a 2xx response, otherwise the matching RequestError."""
    status = int(response.status_code)
    if 200 <= status < 300:
        return None

    kind = ErrorKind.NOT_FOUND if status == httpx.codes.NOT_FOUND else ErrorKind.HTTP_STATUS
    message = _safe_response_text(response) or response.reason_phrase or "HTTP request failed"
    return RequestError(
        message,
        kind=kind,
        status_code=status,
        body=response.content or b"",
        method=method,
        url=url,
    )


def transport_error(
    exc: BaseException,
    *,
    method: str | None = None,
    url: str | None = None,
) -> RequestError:
    """Wrap a connection, timeout or protocol failure."""
    name = type(exc).__name__
    return RequestError(
        f"HTTP request failed ({name}): {exc}",
        kind=ErrorKind.TRANSPORT,
        method=method,
        url=url,
    )


def decode_error(
    detail: str,
    *,
    status_code: int | None = None,
    body: bytes = b"",
    method: str | None = None,
    url: str | None = None,
) -> RequestError:
    """Report a 2xx response whose body does not match the expected shape."""
    return RequestError(
        f"Invalid response body: {detail}",
        kind=ErrorKind.DECODE,
        status_code=status_code,
        body=body,
        method=method,
        url=url,
    )
