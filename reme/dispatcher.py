"""Firing notifications for events whose time has come."""

from __future__ import annotations

import logging
import queue
import sys
import threading
from datetime import datetime, timezone
from typing import Callable

from reme.entities import Event
from reme.store import EventStore

log = logging.getLogger(__name__)

NOTIFICATION_TITLE = "REME Notification"
_POLL_INTERVAL = 0.5


def desktop_notify(title: str, message: str) -> None:
    """Alert the user on the terminal with a bell and the message."""
    sys.stderr.write(f"\a{title}: {message}\n")
    sys.stderr.flush()


def _parse_time(text: str) -> datetime:
    moment = datetime.fromisoformat(text.replace("Z", "+00:00"))
    if moment.tzinfo is None:
        raise ValueError(f"time {text!r} has no offset")
    return moment


class EventDispatcher:
    """Keeps the known events in memory and notifies when they are due."""

    def __init__(self, store: EventStore, notify: Callable[[str, str], None] = desktop_notify) -> None:
        self.store = store
        self.notify = notify
        self.events = store.read_events()

    def reload(self) -> None:
        """Pick up the newest event from the file when the number of events changed."""
        fresh = self.store.read_events()
        if len(self.events) == len(fresh):
            return
        if not self.events.events or not fresh.events:
            return
        self.events.events.append(fresh.events[-1])

    def check_event(self, event: Event) -> bool:
        """Notify and mark the event if its time has passed; return whether it fired."""
        if event.already_dispatched:
            return False
        if not datetime.now(timezone.utc) > _parse_time(event.time):
            return False
        event.already_dispatched = True
        self.notify(NOTIFICATION_TITLE, event.subject)
        self.store.write_event(event)
        return True

    def check_due(self) -> list[Event]:
        """Check every known event and return those that fired."""
        return [event for event in self.events if self.check_event(event)]

    def run(self, stop: threading.Event, tick: float = 5.0) -> None:
        """Check events every `tick` seconds and follow file changes until `stop` is set."""
        if not self.events.events:
            log.info("No more events.")
        changes: queue.Queue[object] = queue.Queue()
        halt = threading.Event()

        def watch() -> None:
            try:
                for op in self.store.watch(halt, min(tick, _POLL_INTERVAL)):
                    changes.put(op)
            except Exception as exc:  # handed over to the loop below
                changes.put(exc)

        watcher = threading.Thread(target=watch, daemon=True)
        watcher.start()
        try:
            while not stop.is_set():
                try:
                    item = changes.get(timeout=tick)
                except queue.Empty:
                    self.check_due()
                    continue
                if isinstance(item, BaseException):
                    raise item
                if item == "write":
                    self.reload()
                    log.info("New events are: %s", self.events.events)
                else:
                    log.info("Other operation: %s", item)
        finally:
            halt.set()
            watcher.join()