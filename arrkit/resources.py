"""Typed CRUD bindings for one named backend resource."""

from __future__ import annotations

from typing import TYPE_CHECKING, Generic, TypeVar

from pydantic import BaseModel

from arrkit.paths import Endpoint, QueryInput, build_endpoint

if TYPE_CHECKING:
    from arrkit.client import ArrClient

__all__ = ["FORCE_SAVE_PARAM", "Resource"]

FORCE_SAVE_PARAM = "forceSave"


OutT = TypeVar("OutT", bound=BaseModel)
InT = TypeVar("InT", bound=BaseModel)


class Resource(Generic[OutT, InT]):
    """GET/POST/PUT/DELETE for ``/api/{version}/{name}``.

    `OutT` is the model the backend returns and `InT` the model sent on add
    and update (often the same class). When `force_save` is set, add sends
    ``forceSave=true`` and update sends ``forceSave=<force>``; the backend
    then skips its connection test before saving.
    """

    def __init__(
        self,
        client: "ArrClient",
        *,
        api_version: str,
        name: str,
        output_model: type[OutT],
        force_save: bool = False,
    ) -> None:
        self.client = client
        self.api_version = api_version
        self.name = name
        self.output_model = output_model
        self.force_save = bool(force_save)
        # Fail on an empty name at binding time rather than on first call.
        self.endpoint()

    def __repr__(self) -> str:
        return f"Resource({self.name!r}, api_version={self.api_version!r})"

    def endpoint(self, item_id: int | None = None, *, query: QueryInput = None) -> Endpoint:
        return build_endpoint(self.api_version, self.name, item_id, query=query)

    def _item(self, item_id: int) -> Endpoint:
        if not item_id:
            raise ValueError(f"{self.name} id must be a positive integer, got {item_id!r}.")
        return self.endpoint(item_id)

    def get_all(self) -> list[OutT]:
        return self.client.get_many(self.endpoint(), self.output_model)

    def get(self, item_id: int) -> OutT:
        return self.client.get_one(self._item(item_id), self.output_model)

    def add(self, item: InT) -> OutT:
        query = {FORCE_SAVE_PARAM: True} if self.force_save else None
        return self.client.post(self.endpoint(query=query), item, self.output_model)

    def update(self, item: InT, *, force: bool = False) -> OutT:
        """PUT `item` to ``{name}/{item.id}``."""
        item_id = getattr(item, "id", None)
        if not item_id:
            raise ValueError(f"Cannot update {self.name} without an id.")
        query = {FORCE_SAVE_PARAM: force} if self.force_save else None
        return self.client.put(self.endpoint(item_id, query=query), item, self.output_model)

    def delete(self, item_id: int) -> None:
        self.client.delete(self._item(item_id))
