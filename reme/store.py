"""Reading, writing and watching the events file."""

from __future__ import annotations

import json
import os
import threading
from datetime import date, datetime
from pathlib import Path
from typing import Iterator

from reme.entities import Event, Events


def _parse_time(text: str) -> datetime:
    moment = datetime.fromisoformat(text.replace("Z", "+00:00"))
    if moment.tzinfo is None:
        raise ValueError(f"time {text!r} has no offset")
    return moment


class EventStore:
    """An events file on disk."""

    def __init__(self, path: str | os.PathLike[str]) -> None:
        self.path = Path(path)

    def read_events(self) -> Events:
        """Read all events; content that is not valid JSON yields no events."""
        content = self.path.read_bytes()
        try:
            return Events.from_dict(json.loads(content))
        except (ValueError, TypeError, AttributeError):
            return Events()

    def todays_events(self) -> Events:
        """Return the events that fall on today's date."""
        today = date.today()
        return Events([event for event in self.read_events() if _parse_time(event.time).date() == today])

    def write_event(self, event: Event) -> Events:
        """Replace the event with the same id, or append it, and save the file."""
        data = self.read_events()
        replaced = False
        for index, existing in enumerate(data.events):
            if existing.id == event.id:
                data.events[index] = event
                replaced = True
        if not replaced:
            data.events.append(event)
        self.path.write_text(json.dumps(data.to_dict(), indent="\t", ensure_ascii=False), encoding="utf-8")
        return data

    def watch(self, stop: threading.Event, interval: float = 1.0) -> Iterator[str]:
        """Yield 'write', 'create' or 'remove' whenever the file changes, until `stop` is set."""
        self.path.stat()
        previous = self._signature()
        while not stop.wait(interval):
            current = self._signature()
            if current == previous:
                continue
            if current is None:
                yield "remove"
            elif previous is None:
                yield "create"
            else:
                yield "write"
            previous = current

    def _signature(self) -> tuple[int, int] | None:
        try:
            info = self.path.stat()
        except FileNotFoundError:
            return None
        return info.st_mtime_ns, info.st_size