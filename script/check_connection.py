"""Connection check for an *arr backend.

Loads settings from the environment (ARR_URL, ARR_API_KEY, ...), pings the
backend and prints its system status.

Usage (with uv):
    uv run python script/check_connection.py --app radarr
"""

from __future__ import annotations

import argparse
import json
from typing import TYPE_CHECKING, Sequence

from loguru import logger
from rich.console import Console
from rich.table import Table

from arrkit.apps import ArrApp, Lidarr, Prowlarr, Radarr, Readarr, Sonarr
from arrkit.config import get_settings
from arrkit.errors import RequestError
from arrkit.logs import configure_logging

if TYPE_CHECKING:
    import httpx

console = Console()
log = logger.bind(module="script.check_connection")

APPS: dict[str, type[ArrApp]] = {
    "radarr": Radarr,
    "sonarr": Sonarr,
    "lidarr": Lidarr,
    "readarr": Readarr,
    "prowlarr": Prowlarr,
}


def _build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Check connectivity and credentials for an *arr backend.",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument("--app", default="radarr", choices=sorted(APPS), help="Backend type at ARR_URL.")
    parser.add_argument(
        "--json",
        dest="json_output",
        action="store_true",
        help="Print the system status as JSON.",
    )
    return parser


def main(argv: Sequence[str] | None = None, *, transport: "httpx.BaseTransport | None" = None) -> int:
    args = _build_arg_parser().parse_args(list(argv) if argv is not None else None)
    settings = get_settings()
    configure_logging(settings.log_level)

    app_cls = APPS[args.app]
    with app_cls.from_config(settings.client_config(), transport=transport) as app:
        try:
            app.ping()
            status = app.system_status()
        except RequestError as exc:
            log.error("Connection check failed: {}", exc)
            console.print(f"[bold red]FAIL[/] {exc}")
            return 1

    if args.json_output:
        print(json.dumps(status.model_dump(by_alias=True), indent=2))
        return 0

    table = Table(title=f"{args.app} status", show_lines=False)
    table.add_column("Key", style="bold")
    table.add_column("Value")
    for key in ("app_name", "instance_name", "version", "branch", "os_name", "url_base"):
        table.add_row(key, str(getattr(status, key)))
    console.print(table)
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
