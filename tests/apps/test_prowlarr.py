from __future__ import annotations

from conftest import ScriptedCall

from arrkit.apps import Prowlarr
from arrkit.apps.prowlarr import NotificationInput, NotificationMessage, NotificationOutput
from arrkit.fields import FieldInput, FieldKind, FieldOutput

NOTIFICATION = """{
    "onHealthIssue": false,
    "onApplicationUpdate": true,
    "supportsOnHealthIssue": true,
    "includeHealthWarnings": false,
    "supportsOnApplicationUpdate": true,
    "name": "Test",
    "fields": [
        {"order": 0, "name": "path", "label": "Path", "value": "/scripts/prowlarr.sh", "type": "filePath", "advanced": false},
        {
            "order": 1,
            "name": "arguments",
            "label": "Arguments",
            "helpText": "Arguments to pass to the script",
            "type": "textbox",
            "advanced": false,
            "hidden": "hiddenIfNotSet"
        }
    ],
    "implementationName": "Custom Script",
    "implementation": "CustomScript",
    "configContract": "CustomScriptSettings",
    "infoLink": "https://wiki.servarr.com/prowlarr/supported#customscript",
    "message": {
        "message": "Testing will execute the script with the EventType set to Test",
        "type": "warning"
    },
    "tags": [],
    "id": 3
}"""

ADD_NOTIFICATION = (
    '{"onGrab":false,"onHealthIssue":false,"onHealthRestored":false,"onApplicationUpdate":true,'
    '"supportsOnGrab":false,"includeManualGrabs":false,"supportsOnHealthIssue":false,'
    '"supportsOnHealthRestored":false,"includeHealthWarnings":false,"supportsOnApplicationUpdate":false,'
    '"name":"Test","implementationName":"","implementation":"CustomScript",'
    '"configContract":"CustomScriptSettings","infoLink":"","tags":null,'
    '"fields":[{"name":"path","value":"/scripts/prowlarr.sh"}]}\n'
)
UPDATE_NOTIFICATION = ADD_NOTIFICATION.replace('"name":"Test"', '"id":3,"name":"Test"')

EXPECTED = NotificationOutput(
    on_application_update=True,
    supports_on_health_issue=True,
    supports_on_application_update=True,
    id=3,
    name="Test",
    implementation_name="Custom Script",
    implementation="CustomScript",
    config_contract="CustomScriptSettings",
    info_link="https://wiki.servarr.com/prowlarr/supported#customscript",
    tags=[],
    fields=[
        FieldOutput(order=0, name="path", label="Path", value="/scripts/prowlarr.sh", type="filePath"),
        FieldOutput(
            order=1,
            name="arguments",
            label="Arguments",
            help_text="Arguments to pass to the script",
            hidden="hiddenIfNotSet",
            type="textbox",
        ),
    ],
    message=NotificationMessage(
        message="Testing will execute the script with the EventType set to Test",
        type="warning",
    ),
)


def _input(**overrides) -> NotificationInput:
    values = dict(
        on_application_update=True,
        name="Test",
        implementation="CustomScript",
        config_contract="CustomScriptSettings",
        fields=[FieldInput(name="path", value="/scripts/prowlarr.sh")],
    )
    values.update(overrides)
    return NotificationInput(**values)


def test_get_notifications(scripted) -> None:
    call = ScriptedCall("GET", "/api/v1/notification", 200, f"[{NOTIFICATION}]")
    output = Prowlarr(scripted(call)).notifications.get_all()
    assert output == [EXPECTED]
    assert output[0].fields[1].kind is FieldKind.NONE


def test_add_notification_has_no_force_save(scripted) -> None:
    call = ScriptedCall("POST", "/api/v1/notification", 200, NOTIFICATION, expected_body=ADD_NOTIFICATION)
    assert Prowlarr(scripted(call)).notifications.add(_input()) == EXPECTED


def test_update_notification(scripted) -> None:
    call = ScriptedCall("PUT", "/api/v1/notification/3", 200, NOTIFICATION, expected_body=UPDATE_NOTIFICATION)
    assert Prowlarr(scripted(call)).notifications.update(_input(id=3)) == EXPECTED


def test_delete_notification(scripted) -> None:
    call = ScriptedCall("DELETE", "/api/v1/notification/2", 200, "{}")
    assert Prowlarr(scripted(call)).notifications.delete(2) is None


WEBHOOK = """{
    "onHealthIssue": true,
    "name": "Hook",
    "fields": [
        {"order": 0, "name": "url", "label": "Webhook URL", "value": "http://hook.local", "type": "url"},
        {"order": 1, "name": "method", "label": "Method", "value": 1, "type": "select"},
        {"order": 2, "name": "headers", "label": "Headers", "value": [{"key": "X-A", "value": "b"}], "type": "keyValueList"}
    ],
    "implementation": "Webhook",
    "configContract": "WebhookSettings",
    "tags": null,
    "id": 5
}"""


def test_get_notifications_with_structured_field_values(scripted) -> None:
    call = ScriptedCall("GET", "/api/v1/notification", 200, f"[{WEBHOOK}]")
    output = Prowlarr(scripted(call)).notifications.get_all()
    assert len(output) == 1
    webhook = output[0]
    assert webhook.tags == []
    assert [f.kind for f in webhook.fields] == [FieldKind.STRING, FieldKind.INT, FieldKind.LIST]
    assert webhook.fields[2].value == [{"key": "X-A", "value": "b"}]
