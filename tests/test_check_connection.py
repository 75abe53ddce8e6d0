from __future__ import annotations

import json

import httpx
import pytest
from conftest import API_KEY, BASE_URL

from arrkit.config import Settings
from script import check_connection

STATUS = '{"appName": "Radarr", "instanceName": "Radarr", "version": "5.2.6.8376", "branch": "master"}'


def _transport(status_code: int = 200) -> httpx.MockTransport:
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.headers.get("x-api-key") == API_KEY
        if request.url.path == "/ping":
            return httpx.Response(200, content=b'{"status": "OK"}', request=request)
        assert request.url.path == "/api/v3/system/status"
        body = STATUS if status_code == 200 else '{"message": "Unauthorized"}'
        return httpx.Response(status_code, content=body.encode("utf-8"), request=request)

    return httpx.MockTransport(handler)


@pytest.fixture(autouse=True)
def _settings(monkeypatch: pytest.MonkeyPatch) -> None:
    settings = Settings(url=BASE_URL, api_key=API_KEY, log_level="WARNING", _env_file=None)
    monkeypatch.setattr(check_connection, "get_settings", lambda: settings)


def test_check_connection_prints_json(capsys: pytest.CaptureFixture[str]) -> None:
    assert check_connection.main(["--app", "radarr", "--json"], transport=_transport()) == 0
    payload = json.loads(capsys.readouterr().out)
    assert payload["appName"] == "Radarr"
    assert payload["version"] == "5.2.6.8376"


def test_check_connection_renders_table() -> None:
    assert check_connection.main(["--app", "radarr"], transport=_transport()) == 0


def test_check_connection_reports_failure() -> None:
    assert check_connection.main(["--app", "radarr"], transport=_transport(401)) == 1
