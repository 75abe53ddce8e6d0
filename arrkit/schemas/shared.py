"""Schemas with the same shape on every backend that has them."""

from __future__ import annotations

from typing import Annotated

from pydantic import Field

from arrkit.schemas import ArrModel, NullableList, OmitEmpty

__all__ = ["FolderPath", "RemotePathMapping", "RootFolder", "SystemStatus", "Tag"]


class Tag(ArrModel):
    id: Annotated[int, OmitEmpty] = 0
    label: str = ""


class FolderPath(ArrModel):
    """An unmanaged folder below a root folder."""

    name: str = ""
    path: str = ""


class RemotePathMapping(ArrModel):
    """Translates a download client's path into a path the backend can read."""

    id: Annotated[int, OmitEmpty] = 0
    host: str = ""
    remote_path: str = ""
    local_path: str = ""


class RootFolder(ArrModel):
    """A library root folder (Radarr and Sonarr shape)."""

    path: str = ""
    accessible: Annotated[bool, OmitEmpty] = False
    free_space: Annotated[int, OmitEmpty] = 0
    unmapped_folders: Annotated[NullableList[FolderPath], OmitEmpty] = Field(default_factory=list)
    id: Annotated[int, OmitEmpty] = 0


class SystemStatus(ArrModel):
    """Subset of ``/system/status`` common to every backend."""

    app_name: str = ""
    instance_name: str = ""
    version: str = ""
    build_time: str = ""
    is_debug: bool = False
    is_production: bool = False
    is_admin: bool = False
    is_user_interactive: bool = False
    startup_path: str = ""
    app_data: str = ""
    os_name: str = ""
    os_version: str = ""
    is_docker: bool = False
    is_linux: bool = False
    is_osx: bool = False
    is_windows: bool = False
    branch: str = ""
    authentication: str = ""
    url_base: str = ""
    runtime_version: str = ""
    runtime_name: str = ""
    start_time: str = ""
    package_update_mechanism: str = ""
