"""Interactive form for creating a new event."""

from __future__ import annotations

import re
from typing import Callable

from reme.entities import Event
from reme.store import EventStore
from reme.timeutil import fixed_json_time, relative_json_time

InputFn = Callable[[], str]
OutputFn = Callable[[str], None]

_DATE_PATTERN = re.compile(r"\d{4}-\d{1,2}-\d{1,2}", re.ASCII)
_TIME_PATTERN = re.compile(r"\d{1,2}", re.ASCII)
_NUMBER_PATTERN = re.compile(r"[0-9]+")

_CHOICES = {
    "1": "timer",
    "timer": "timer",
    "2": "appointment",
    "appointment": "appointment",
}


class FormAborted(Exception):
    """The user left the form before finishing it."""


def validate_empty(value: str) -> None:
    """Reject an empty value."""
    if value == "":
        raise ValueError("Please set a value for this field.")


def validate_date(value: str) -> None:
    """Require something in the form YYYY-MM-DD."""
    validate_empty(value)
    if not _DATE_PATTERN.search(value):
        raise ValueError("Please provide date in the format of `YYYY-MM-DD`.")


def validate_time(value: str) -> None:
    """Require at least one digit."""
    validate_empty(value)
    if not _TIME_PATTERN.search(value):
        raise ValueError("Please provide time in the format of `dd`.")


def _read(input_fn: InputFn) -> str:
    try:
        return input_fn()
    except (EOFError, KeyboardInterrupt) as exc:
        raise FormAborted("user aborted") from exc


def _ask(
    title: str,
    input_fn: InputFn,
    output_fn: OutputFn,
    validate: Callable[[str], None],
    placeholder: str = "",
) -> str:
    label = f"{title} ({placeholder}): " if placeholder else f"{title}: "
    while True:
        output_fn(label)
        value = _read(input_fn)
        try:
            validate(value)
        except ValueError as exc:
            output_fn(str(exc))
            continue
        return value


def _choose(input_fn: InputFn, output_fn: OutputFn) -> str:
    while True:
        output_fn("What would you like to do?")
        output_fn("  1) Set a timer")
        output_fn("  2) Set an appointment")
        answer = _read(input_fn).strip().lower()
        if answer in _CHOICES:
            return _CHOICES[answer]
        output_fn("Please choose 1 or 2.")


def _parse_count(value: str) -> int:
    if not _NUMBER_PATTERN.fullmatch(value):
        raise ValueError(f"invalid number {value!r}")
    return int(value)


def run_form(input_fn: InputFn = input, output_fn: OutputFn = print) -> tuple[str, str]:
    """Ask for the event details; return its subject and RFC 3339 time.

    Raises FormAborted when input ends or is interrupted.
    """
    event_type = _choose(input_fn, output_fn)
    subject = _ask("Subject", input_fn, output_fn, validate_empty)

    if event_type == "timer":
        hours = _ask("Hours", input_fn, output_fn, validate_time, "HH")
        minutes = _ask("Minutes", input_fn, output_fn, validate_time, "MM")
        json_time = relative_json_time(_parse_count(hours), _parse_count(minutes))
    else:
        day = _ask("Date", input_fn, output_fn, validate_date, "YYYY-MM-DD")
        hour = _ask("Hour", input_fn, output_fn, validate_empty, "HH")
        minute = _ask("Minute", input_fn, output_fn, validate_empty, "MM")
        json_time = fixed_json_time(day, f"{hour}:{minute}")

    return subject, json_time


def create_event(store: EventStore, subject: str, json_time: str) -> Event:
    """Store a new, not yet dispatched event and return it."""
    event = Event(time=json_time, subject=subject)
    store.write_event(event)
    return event


def run(store: EventStore, input_fn: InputFn = input, output_fn: OutputFn = print) -> Event | None:
    """Run the form and store the event; return None if the user aborted."""
    try:
        subject, json_time = run_form(input_fn, output_fn)
    except FormAborted:
        return None
    event = create_event(store, subject, json_time)
    output_fn("Event created 🎉")
    return event