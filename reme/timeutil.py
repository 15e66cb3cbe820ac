"""Producing RFC 3339 timestamps for events."""

from __future__ import annotations

import re
from datetime import datetime, timedelta, timezone

_FIXED_PATTERN = re.compile(r"(\d{4})-(\d{2})-(\d{2}) (\d{1,2}):(\d{2}):(\d{2})")


def _format(moment: datetime) -> str:
    moment = moment.replace(microsecond=0)
    text = moment.isoformat()
    if moment.utcoffset() == timedelta(0):
        text = text[: -len("+00:00")] + "Z"
    return text


def relative_json_time(hours: int, minutes: int) -> str:
    """Return the local time `hours` and `minutes` from now, RFC 3339 formatted."""
    if hours < 0 or minutes < 0:
        raise ValueError("hours and minutes must not be negative")
    moment = datetime.now(timezone.utc) + timedelta(hours=hours, minutes=minutes)
    return _format(moment.astimezone())


def fixed_json_time(on: str, at: str) -> str:
    """Return the local time given as date `YYYY-MM-DD` and time `HH:MM`, RFC 3339 formatted."""
    text = f"{on} {at}:00"
    match = _FIXED_PATTERN.fullmatch(text)
    if match is None:
        raise ValueError(f"cannot parse {text!r} as 'YYYY-MM-DD HH:MM:SS'")
    year, month, day, hour, minute, second = (int(part) for part in match.groups())
    try:
        naive = datetime(year, month, day, hour, minute, second)
    except ValueError as exc:
        raise ValueError(f"cannot parse {text!r}: {exc}") from exc
    return _format(naive.astimezone())