"""Radarr (movies) bindings for API v3."""

from __future__ import annotations

from arrkit.apps.base import ArrApp
from arrkit.client import ArrClient
from arrkit.resources import Resource
from arrkit.schemas.providers import DownloadClientInput, DownloadClientOutput
from arrkit.schemas.shared import RemotePathMapping, RootFolder

__all__ = ["Radarr"]


class Radarr(ArrApp):
    API_VERSION = "v3"

    def __init__(self, client: ArrClient) -> None:
        super().__init__(client)
        self.root_folders: Resource[RootFolder, RootFolder] = self.resource("rootFolder", RootFolder)
        self.download_clients: Resource[DownloadClientOutput, DownloadClientInput] = self.resource(
            "downloadClient", DownloadClientOutput, force_save=True
        )
        self.remote_path_mappings: Resource[RemotePathMapping, RemotePathMapping] = self.resource(
            "remotePathMapping", RemotePathMapping
        )
