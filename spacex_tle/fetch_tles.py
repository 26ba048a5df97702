"""
fetch_tles.py
-------------
Command-line wrapper: prints the TLE lines for every payload of a SpaceX
mission as JSON.

usage: python -m spacex_tle.fetch_tles <mission_id>
"""

from __future__ import annotations

import sys
from pathlib import Path

from rich.console import Console

from spacex_tle.config import load_config
from spacex_tle.errors import UpstreamError
from spacex_tle.logs import setup_logging
from spacex_tle.service import MissionTleService
from spacex_tle.utils import result_to_json

console = Console(stderr=True)

LOG_FILE = Path("logs/fetch_tles.log")

EXIT_NOT_FOUND = 1
EXIT_UPSTREAM = 2


def main(argv: list[str] | None = None) -> int:
    argv = sys.argv[1:] if argv is None else argv
    if len(argv) != 1:
        console.print("usage: spacex-tle <mission_id>")
        return 64

    mission_id = argv[0]
    cfg = load_config()
    setup_logging(cfg.log_level, LOG_FILE)
    service = MissionTleService(cfg)

    console.print(f"Fetching TLEs for mission [cyan]{mission_id}[/cyan] (TXN limit {cfg.txn_limit}) ...")
    try:
        result = service.get_mission_tles(mission_id)
    except UpstreamError as e:
        console.print(f"[red]Fetch failed:[/red] {e}")
        return EXIT_UPSTREAM

    if result is None:
        console.print(f"[yellow]No TLEs found for mission {mission_id}[/yellow]")
        return EXIT_NOT_FOUND

    print(result_to_json(result, indent=2))
    console.print(f"[green]Done:[/green] {len(result)} payload(s)")
    return 0


def run() -> None:
    raise SystemExit(main())


if __name__ == "__main__":
    run()
