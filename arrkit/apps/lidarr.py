"""Lidarr (music) bindings for API v1."""

from __future__ import annotations

from arrkit.apps.base import ArrApp
from arrkit.client import ArrClient
from arrkit.resources import Resource
from arrkit.schemas.shared import RemotePathMapping

__all__ = ["Lidarr"]


class Lidarr(ArrApp):
    API_VERSION = "v1"

    def __init__(self, client: ArrClient) -> None:
        super().__init__(client)
        self.remote_path_mappings: Resource[RemotePathMapping, RemotePathMapping] = self.resource(
            "remotePathMapping", RemotePathMapping
        )
