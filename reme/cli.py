"""Command line entry point."""

from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from pathlib import Path

from reme.daemon import start_daemon
from reme.entities import Events
from reme.form import run
from reme.store import EventStore


def ensure_events_file(
    path: str | os.PathLike[str] | None = None,
    home: str | os.PathLike[str] | None = None,
) -> Path:
    """Return the events file to use, creating the default one if needed.

    A given `path` is used as is. Otherwise the file is
    `~/.local/share/reme/events.json`, created with no events when missing.
    """
    if path:
        return Path(path)
    base = Path(home) if home is not None else Path.home()
    files_dir = base / ".local" / "share" / "reme"
    events_file = files_dir / "events.json"
    if events_file.exists():
        return events_file
    files_dir.mkdir(parents=True, exist_ok=True)
    events_file.write_text(json.dumps(Events().to_dict(), separators=(",", ":")), encoding="utf-8")
    return events_file


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="reme", description="Create reminders and get notified.")
    parser.add_argument("-ef", "--ef", dest="events_file", default="", help="Custom path to events file.")
    parser.add_argument("-daemon", "--daemon", action="store_true", help="Start as daemon.")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = _parser().parse_args(argv)

    try:
        path = ensure_events_file(args.events_file)
    except OSError as exc:
        print(f"Error checking or creating file: <{exc}>", file=sys.stderr)
        return 1

    store = EventStore(path)

    if args.daemon:
        logging.basicConfig(level=logging.INFO, format="%(asctime)s %(message)s")
        return start_daemon(store)

    try:
        run(store)
    except (OSError, ValueError) as exc:
        print(f"Error creating events: <{exc}>", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())