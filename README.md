# reme

`reme` is a small reminder tool for the terminal. You record a **timer**
(a number of hours and minutes from now) or an **appointment** (a fixed
date and time in local time). A daemon checks the recorded events and
alerts you once each one is due.

## Installation

```
pip install .
```

## Usage

Create a new event interactively:

```
reme
```

The form first asks what you would like to do: answer `1` (or `timer`)
to set a timer, `2` (or `appointment`) to set an appointment. Then it
asks for a subject, which must not be empty.

- A timer asks for hours (`HH`) and minutes (`MM`) from now. Both must be
  whole numbers.
- An appointment asks for a date (`YYYY-MM-DD`), an hour (`HH`) and a
  minute (`MM`). The date and time are read as local time; month, day and
  minute need two digits.

Invalid answers are explained and asked again. Ending input (Ctrl-D) or
pressing Ctrl-C leaves the form without storing anything. On success the
event is stored and `Event created 🎉` is printed.

Start the daemon:

```
reme --daemon
```

The daemon checks the events every 5 seconds. For each event whose time
has passed and that has not fired yet, it rings the terminal bell, writes
`REME Notification: <subject>` to standard error, and marks the event as
dispatched (`alreadyDispatched: true`) in the file. It polls the file for
changes; when the number of events in the file changes, it adds the
newest event to the ones it follows (this only happens if it already
knew of at least one event). It logs what it does to standard error.

The daemon stops on `SIGINT` (Ctrl-C) or `SIGTERM` and exits with status 1.
`SIGHUP` is logged and otherwise ignored.

### Options

| Option | Meaning |
| --- | --- |
| `-ef PATH`, `--ef PATH` | Use `PATH` as the events file. |
| `-daemon`, `--daemon` | Start as daemon. |

### Events file

By default events are kept in `~/.local/share/reme/events.json`. The file
and its directory are created, holding no events, when missing. A file
given with `-ef` is used as it is and is not created:

```
reme -ef /path/to/events.json
reme --daemon -ef /path/to/events.json
```

The file is plain JSON. A file that does not hold valid JSON is read as
holding no events.

```json
{
	"events": [
		{
			"id": "cpq1ab2n0000000000a0",
			"time": "2024-06-01T09:30:00+02:00",
			"subject": "Stand-up",
			"alreadyDispatched": false
		}
	]
}
```

## Library use

The pieces can also be used from Python:

```python
from reme.entities import Event
from reme.store import EventStore
from reme.timeutil import fixed_json_time, relative_json_time

store = EventStore("events.json")
event = Event(id="demo", time=relative_json_time(0, 30), subject="Tea")
store.write_event(event)          # replaces an event with the same id, or appends
print(store.read_events())
print(store.todays_events())      # only the events on today's date

store.write_event(Event(time=fixed_json_time("2024-06-01", "09:30"), subject="Stand-up"))
```

Modules:

- `reme.entities` – `Event`, `Events` (with `to_dict` / `from_dict`) and `Prompt`.
- `reme.timeutil` – `relative_json_time(hours, minutes)` and
  `fixed_json_time(on, at)`, returning RFC 3339 strings with the local offset.
- `reme.store` – `EventStore`: `read_events`, `todays_events`,
  `write_event`, and `watch(stop, interval)`, a generator that yields
  `"write"`, `"create"` or `"remove"` when the file changes.
- `reme.dispatcher` – `EventDispatcher` (`reload`, `check_event`,
  `check_due`, `run`) and `desktop_notify`; pass your own `notify(title,
  message)` callable to the dispatcher to alert some other way.
- `reme.daemon` – `run_daemon(store, stop)` and `start_daemon(store)`.
- `reme.form` – the interactive form: `run`, `run_form`, `create_event`
  and the validators `validate_empty`, `validate_date`, `validate_time`.
- `reme.prompt` – a simpler line-based prompt, `get_new_event`, that asks
  `t` for a timer or `p` for an appointment and returns an `Event`
  without storing it.
- `reme.cli` – `main(argv=None)` and `ensure_events_file(path, home)`.

## Limitations

- Alerts are a terminal bell and a line on standard error from the
  daemon's own terminal; `reme` does not show native desktop notification
  pop-ups.
- The daemon runs in the foreground; it does not detach itself or install
  a service.
- Events cannot be listed, edited or deleted from the command line; edit
  the JSON file or use `EventStore` for that.

## Development

```
pip install -e ".[test]"
pytest
```