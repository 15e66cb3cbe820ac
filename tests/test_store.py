import json
import threading
from datetime import datetime

import pytest

from reme.entities import Event
from reme.store import EventStore


@pytest.fixture
def store(tmp_path):
    path = tmp_path / "events.json"
    path.write_text(json.dumps({"events": []}))
    return EventStore(path)


def test_read_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        EventStore(tmp_path / "nope.json").read_events()


def test_read_invalid_json_yields_no_events(tmp_path):
    path = tmp_path / "events.json"
    path.write_text("not json")
    assert EventStore(path).read_events().events == []


def test_write_appends_and_persists(store):
    event = Event(time="2024-05-06T14:30:00Z", subject="Call")
    result = store.write_event(event)
    assert result.events == [event]
    assert store.read_events().events == [event]


def test_write_uses_tab_indentation(store):
    store.write_event(Event(time="2024-05-06T14:30:00Z", subject="Call"))
    assert store.path.read_text().startswith('{\n\t"events": [')


def test_write_replaces_event_with_same_id(store):
    first = Event(time="2024-05-06T14:30:00Z", subject="Call")
    other = Event(time="2024-05-07T14:30:00Z", subject="Other")
    store.write_event(first)
    store.write_event(other)
    updated = Event(id=first.id, time=first.time, subject="Call", already_dispatched=True)
    result = store.write_event(updated)
    assert len(result) == 2
    assert store.read_events().events == [updated, other]


def test_todays_events_filters_other_days(store):
    now = datetime.now().astimezone().replace(microsecond=0)
    today = Event(time=now.isoformat(), subject="today")
    store.write_event(today)
    store.write_event(Event(time="2000-01-01T12:00:00Z", subject="old"))
    assert [e.subject for e in store.todays_events()] == ["today"]


def test_todays_events_rejects_bad_time(store):
    store.write_event(Event(time="garbage", subject="bad"))
    with pytest.raises(ValueError):
        store.todays_events()


def test_watch_missing_file_raises(tmp_path):
    stop = threading.Event()
    with pytest.raises(FileNotFoundError):
        next(EventStore(tmp_path / "nope.json").watch(stop, 0.01))


def test_watch_reports_write(store):
    stop = threading.Event()
    writer = threading.Timer(
        0.3,
        store.write_event,
        args=(Event(time="2024-05-06T14:30:00Z", subject="Call"),),
    )
    safety = threading.Timer(5.0, stop.set)
    writer.start()
    safety.start()
    ops = []
    gen = store.watch(stop, 0.02)
    try:
        for op in gen:
            ops.append(op)
            if op == "write":
                break
    finally:
        stop.set()
        gen.close()
        writer.cancel()
        safety.cancel()
    assert ops
    assert ops[-1] == "write"