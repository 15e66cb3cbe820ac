"""Running the reminder daemon in the foreground."""

from __future__ import annotations

import logging
import signal
import sys
import threading
from contextlib import contextmanager
from typing import Iterator

from reme.dispatcher import EventDispatcher
from reme.store import EventStore

log = logging.getLogger(__name__)

_EXIT_SIGNALS = tuple(
    signum
    for signum in (getattr(signal, "SIGINT", None), getattr(signal, "SIGTERM", None))
    if signum is not None
)
_RELOAD_SIGNAL = getattr(signal, "SIGHUP", None)


def run_daemon(store: EventStore, stop: threading.Event) -> EventDispatcher:
    """Dispatch due events and follow the events file until `stop` is set.

    Errors while reading or watching the file propagate. Returns the
    dispatcher once it has stopped.
    """
    dispatcher = EventDispatcher(store)
    dispatcher.run(stop)
    log.info("Done, exiting now.")
    return dispatcher


@contextmanager
def _signal_handlers(stop: threading.Event) -> Iterator[None]:
    if threading.current_thread() is not threading.main_thread():
        yield
        return

    def on_exit(signum: int, frame: object) -> None:
        log.info("Got SIGINT/SIGTERM, exiting.")
        stop.set()

    def on_reload(signum: int, frame: object) -> None:
        log.info("Got SIGHUP, reloading config now.")

    previous = {}
    for signum in _EXIT_SIGNALS:
        previous[signum] = signal.signal(signum, on_exit)
    if _RELOAD_SIGNAL is not None:
        previous[_RELOAD_SIGNAL] = signal.signal(_RELOAD_SIGNAL, on_reload)
    try:
        yield
    finally:
        for signum, handler in previous.items():
            signal.signal(signum, handler if handler is not None else signal.SIG_DFL)


def start_daemon(store: EventStore) -> int:
    """Run the daemon until SIGINT or SIGTERM arrives or an error occurs.

    SIGHUP is logged and otherwise ignored. Returns the exit status, which is
    always 1 because the daemon only ends on a signal or an error.
    """
    stop = threading.Event()
    with _signal_handlers(stop):
        try:
            run_daemon(store, stop)
        except Exception as exc:
            print(exc, file=sys.stderr)
            return 1
    return 1