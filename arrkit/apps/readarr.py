"""Readarr (books) bindings for API v1."""

from __future__ import annotations

from typing import Annotated

from pydantic import Field

from arrkit.apps.base import ArrApp
from arrkit.client import ArrClient
from arrkit.fields import FieldInput, FieldOutputs
from arrkit.resources import Resource
from arrkit.schemas import ArrModel, NullableList, OmitEmpty
from arrkit.schemas.shared import RemotePathMapping

__all__ = ["DownloadClientInput", "DownloadClientOutput", "Readarr"]


class DownloadClientInput(ArrModel):
    # Readarr has no remove-completed/failed toggles and always sends implementationName.
    enable: bool = False
    priority: int = 0
    id: Annotated[int, OmitEmpty] = 0
    config_contract: str = ""
    implementation: str = ""
    implementation_name: str = ""
    name: str = ""
    protocol: str = ""
    tags: list[int] | None = None
    fields: list[FieldInput] = Field(default_factory=list)


class DownloadClientOutput(ArrModel):
    enable: bool = False
    priority: int = 0
    id: int = 0
    config_contract: str = ""
    implementation: str = ""
    implementation_name: str = ""
    info_link: str = ""
    name: str = ""
    protocol: str = ""
    fields: FieldOutputs = Field(default_factory=list)
    tags: NullableList[int] = Field(default_factory=list)


class Readarr(ArrApp):
    API_VERSION = "v1"

    def __init__(self, client: ArrClient) -> None:
        super().__init__(client)
        self.download_clients: Resource[DownloadClientOutput, DownloadClientInput] = self.resource(
            "downloadClient", DownloadClientOutput, force_save=True
        )
        self.remote_path_mappings: Resource[RemotePathMapping, RemotePathMapping] = self.resource(
            "remotePathMapping", RemotePathMapping
        )
