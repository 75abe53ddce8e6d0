"""Download client payloads shared by Radarr and Sonarr (API v3)."""

from __future__ import annotations

from typing import Annotated

from pydantic import Field

from arrkit.fields import FieldInput, FieldOutputs
from arrkit.schemas import ArrModel, NullableList, OmitEmpty

__all__ = ["DownloadClientInput", "DownloadClientOutput"]


class DownloadClientInput(ArrModel):
    enable: bool = False
    remove_completed_downloads: bool = False
    remove_failed_downloads: bool = False
    priority: int = 0
    id: Annotated[int, OmitEmpty] = 0
    config_contract: str = ""
    implementation: str = ""
    name: str = ""
    protocol: str = ""
    tags: list[int] | None = None
    fields: list[FieldInput] = Field(default_factory=list)


class DownloadClientOutput(ArrModel):
    enable: bool = False
    remove_completed_downloads: bool = False
    remove_failed_downloads: bool = False
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
