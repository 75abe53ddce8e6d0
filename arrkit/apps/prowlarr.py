"""Prowlarr (indexer manager) bindings for API v1."""

from __future__ import annotations

from typing import Annotated

from pydantic import Field

from arrkit.apps.base import ArrApp
from arrkit.client import ArrClient
from arrkit.fields import FieldInput, FieldOutputs
from arrkit.resources import Resource
from arrkit.schemas import ArrModel, NullableList, OmitEmpty

__all__ = ["NotificationInput", "NotificationMessage", "NotificationOutput", "Prowlarr"]


class NotificationMessage(ArrModel):
    message: str = ""
    type: str = ""


class NotificationInput(ArrModel):
    on_grab: bool = False
    on_health_issue: bool = False
    on_health_restored: bool = False
    on_application_update: bool = False
    supports_on_grab: bool = False
    include_manual_grabs: bool = False
    supports_on_health_issue: bool = False
    supports_on_health_restored: bool = False
    include_health_warnings: bool = False
    supports_on_application_update: bool = False
    id: Annotated[int, OmitEmpty] = 0
    name: str = ""
    implementation_name: str = ""
    implementation: str = ""
    config_contract: str = ""
    info_link: str = ""
    tags: list[int] | None = None
    fields: list[FieldInput] = Field(default_factory=list)


class NotificationOutput(ArrModel):
    on_grab: bool = False
    on_health_issue: bool = False
    on_health_restored: bool = False
    on_application_update: bool = False
    supports_on_grab: bool = False
    include_manual_grabs: bool = False
    supports_on_health_issue: bool = False
    supports_on_health_restored: bool = False
    include_health_warnings: bool = False
    supports_on_application_update: bool = False
    id: int = 0
    name: str = ""
    implementation_name: str = ""
    implementation: str = ""
    config_contract: str = ""
    info_link: str = ""
    message: NotificationMessage = Field(default_factory=NotificationMessage)
    tags: NullableList[int] = Field(default_factory=list)
    fields: FieldOutputs = Field(default_factory=list)


class Prowlarr(ArrApp):
    API_VERSION = "v1"

    def __init__(self, client: ArrClient) -> None:
        super().__init__(client)
        # Prowlarr saves notifications without a forceSave flag.
        self.notifications: Resource[NotificationOutput, NotificationInput] = self.resource(
            "notification", NotificationOutput
        )
