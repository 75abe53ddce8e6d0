"""Shared plumbing for the per-backend bindings."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, ClassVar, TypeVar

from pydantic import BaseModel

from arrkit.client import ArrClient
from arrkit.config import ClientConfig
from arrkit.paths import build_endpoint
from arrkit.resources import Resource
from arrkit.schemas.shared import SystemStatus, Tag

if TYPE_CHECKING:
    import httpx

__all__ = ["ArrApp"]

OutT = TypeVar("OutT", bound=BaseModel)
AppT = TypeVar("AppT", bound="ArrApp")


class ArrApp:
    """One backend API version bound to an ArrClient.

    Subclasses set `API_VERSION` and declare their resources in `__init__`.
    """

    API_VERSION: ClassVar[str]

    def __init__(self, client: ArrClient) -> None:
        self.client = client
        self.tags: Resource[Tag, Tag] = self.resource("tag", Tag)

    @classmethod
    def from_config(
        cls: type[AppT],
        config: ClientConfig,
        *,
        transport: "httpx.BaseTransport | None" = None,
    ) -> AppT:
        return cls(ArrClient(config, transport=transport))

    def resource(self, name: str, output_model: type[OutT], *, force_save: bool = False) -> Resource[OutT, Any]:
        return Resource(
            self.client,
            api_version=self.API_VERSION,
            name=name,
            output_model=output_model,
            force_save=force_save,
        )

    def system_status(self) -> SystemStatus:
        return self.client.get_one(build_endpoint(self.API_VERSION, "system/status"), SystemStatus)

    def ping(self) -> None:
        self.client.ping()

    def close(self) -> None:
        self.client.close()

    def __enter__(self: AppT) -> AppT:
        self.client.__enter__()
        return self

    def __exit__(self, exc_type: object, exc: object, tb: object) -> None:
        self.client.close()
