"""Asking for a new event on the plain terminal."""

from __future__ import annotations

import re
from typing import Callable

from reme.entities import Event
from reme.timeutil import fixed_json_time, relative_json_time

InputFn = Callable[[], str]
OutputFn = Callable[[str], None]

_LEADING_NUMBER = re.compile(r"\s*\+?(\d+)")


def _token(line: str) -> str:
    parts = line.split()
    return parts[0] if parts else ""


def _count(line: str) -> int:
    match = _LEADING_NUMBER.match(line)
    return int(match.group(1)) if match else 0


def timer_event(subject: str, input_fn: InputFn = input, output_fn: OutputFn = print) -> Event:
    """Ask for hours and minutes from now and build the event."""
    output_fn("Hours: ")
    hours = _count(input_fn())
    output_fn("Minutes: ")
    minutes = _count(input_fn())
    return Event(time=relative_json_time(hours, minutes), subject=subject)


def appointment_event(subject: str, input_fn: InputFn = input, output_fn: OutputFn = print) -> Event:
    """Ask for a date and a time of day and build the event."""
    output_fn("On: ")
    on = _token(input_fn())
    output_fn("At: ")
    at = _token(input_fn())
    return Event(time=fixed_json_time(on, at), subject=subject)


_BUILDERS = {"t": timer_event, "p": appointment_event}


def get_new_event(input_fn: InputFn = input, output_fn: OutputFn = print) -> Event:
    """Ask whether to set a timer or an appointment, then for its details."""
    output_fn("Hey you. Press 't' to set a timer or 'p' to set an appointment.")
    chosen = _token(input_fn())
    if chosen not in _BUILDERS:
        output_fn(
            f"Type {chosen} not allowed. Please use either 't' to set a timer "
            "or 'p' to set an appointment:"
        )
        chosen = _token(input_fn())
        if chosen not in _BUILDERS:
            raise ValueError(f"Type {chosen} not allowed.")
    output_fn("Subject: ")
    subject = input_fn()
    return _BUILDERS[chosen](subject, input_fn, output_fn)