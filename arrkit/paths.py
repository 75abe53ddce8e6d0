"""Versioned endpoint paths for the *arr HTTP APIs.

Every backend exposes its resources below ``/{api_root}/{api_version}``.
`build_endpoint` composes that path from loose segments and keeps query
parameters in insertion order, because a few backends are sensitive to it.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any, Final, Union
from urllib.parse import quote, urlencode

__all__ = ["API_ROOT", "Endpoint", "QueryInput", "build_endpoint", "join_path"]

API_ROOT: Final[str] = "api"

QueryInput = Union[Mapping[str, Any], Iterable[tuple[str, Any]], None]


def join_path(*segments: str) -> str:
    """Join path segments into ``/a/b/c`` with no empty or doubled separators."""
    parts: list[str] = []
    for segment in segments:
        for piece in str(segment or "").split("/"):
            piece = piece.strip()
            if piece:
                parts.append(piece)
    return "/" + "/".join(parts)


def _query_text(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _normalize_query(query: QueryInput) -> tuple[tuple[str, str], ...]:
    if not query:
        return ()
    items = query.items() if isinstance(query, Mapping) else query
    pairs: list[tuple[str, str]] = []
    for key, value in items:
        if value is None:
            continue
        if isinstance(value, (list, tuple)):
            pairs.extend((str(key), _query_text(item)) for item in value if item is not None)
            continue
        pairs.append((str(key), _query_text(value)))
    return tuple(pairs)


def _normalize_id(item_id: int | None) -> int | None:
    if item_id is None:
        return None
    if isinstance(item_id, bool) or not isinstance(item_id, int):
        raise ValueError(f"Resource id must be an integer, got {item_id!r}.")
    if item_id < 0:
        raise ValueError(f"Resource id must not be negative, got {item_id}.")
    return item_id or None


@dataclass(frozen=True, slots=True)
class Endpoint:
    """One request target: versioned resource path plus ordered query."""

    api_version: str
    resource: str
    item_id: int | None = None
    query: tuple[tuple[str, str], ...] = ()
    api_root: str = API_ROOT

    def __post_init__(self) -> None:
        if not (self.resource or "").strip("/ "):
            raise ValueError("Endpoint resource name must be non-empty.")
        object.__setattr__(self, "item_id", _normalize_id(self.item_id))

    @property
    def path(self) -> str:
        segments = [self.api_root, self.api_version, self.resource]
        if self.item_id:
            segments.append(str(self.item_id))
        return join_path(*segments)

    @property
    def query_string(self) -> str:
        return urlencode(self.query, quote_via=quote)

    @property
    def target(self) -> str:
        """Path plus query string, relative to the client base URL."""
        query = self.query_string
        return f"{self.path}?{query}" if query else self.path

    def url(self, base_url: str) -> str:
        return (base_url or "").rstrip("/") + self.target

    def with_query(self, query: QueryInput) -> "Endpoint":
        """Return a copy with extra query pairs appended after existing ones."""
        return Endpoint(
            api_version=self.api_version,
            resource=self.resource,
            item_id=self.item_id,
            query=self.query + _normalize_query(query),
            api_root=self.api_root,
        )


def build_endpoint(
    api_version: str,
    resource: str,
    item_id: int | None = None,
    *,
    query: QueryInput = None,
    api_root: str = API_ROOT,
) -> Endpoint:
    """Build an Endpoint.

    `item_id` of None or 0 targets the collection. Query values are rendered
    as backends expect them: booleans as ``true``/``false``, sequences as
    repeated keys, and None values are dropped.
    """
    return Endpoint(
        api_version=api_version,
        resource=resource,
        item_id=item_id,
        query=_normalize_query(query),
        api_root=api_root,
    )
