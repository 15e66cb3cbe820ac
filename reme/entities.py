"""Data types stored in the events file."""

from __future__ import annotations

import base64
import os
import time
from dataclasses import dataclass, field
from typing import Any, Iterator


def _new_id() -> str:
    """Return a short, roughly time-ordered unique identifier (20 characters)."""
    raw = int(time.time()).to_bytes(4, "big") + os.urandom(8)
    return base64.b32hexencode(raw).decode("ascii").rstrip("=").lower()


@dataclass
class Event:
    """A single reminder: when it fires, what it is about, and whether it fired."""

    time: str = ""
    subject: str = ""
    already_dispatched: bool = False
    id: str = field(default_factory=_new_id)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "time": self.time,
            "subject": self.subject,
            "alreadyDispatched": self.already_dispatched,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Event":
        return cls(
            id=str(data.get("id") or ""),
            time=str(data.get("time") or ""),
            subject=str(data.get("subject") or ""),
            already_dispatched=bool(data.get("alreadyDispatched", False)),
        )


@dataclass
class Events:
    """The whole content of the events file."""

    events: list[Event] = field(default_factory=list)

    def __iter__(self) -> Iterator[Event]:
        return iter(self.events)

    def __len__(self) -> int:
        return len(self.events)

    def to_dict(self) -> dict[str, Any]:
        return {"events": [event.to_dict() for event in self.events]}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Events":
        items = data.get("events") or []
        return cls([Event.from_dict(item) for item in items])


@dataclass
class Prompt:
    """State of a simple selection prompt."""

    choices: list[str] = field(default_factory=list)
    cursor: int = 0
    selected: set[int] = field(default_factory=set)