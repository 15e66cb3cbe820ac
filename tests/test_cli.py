import io
import json

from reme.cli import ensure_events_file, main
from reme.entities import Events


def test_default_file_is_created_empty(tmp_path):
    path = ensure_events_file(None, tmp_path)
    assert path == tmp_path / ".local" / "share" / "reme" / "events.json"
    assert path.read_text(encoding="utf-8") == '{"events":[]}'


def test_existing_default_file_is_kept(tmp_path):
    target = tmp_path / ".local" / "share" / "reme" / "events.json"
    target.parent.mkdir(parents=True)
    target.write_text('{"events":[{"id":"a"}]}', encoding="utf-8")
    path = ensure_events_file(None, tmp_path)
    assert path == target
    assert target.read_text(encoding="utf-8") == '{"events":[{"id":"a"}]}'


def test_custom_path_is_used_without_creating(tmp_path):
    custom = tmp_path / "mine.json"
    assert ensure_events_file(str(custom), tmp_path) == custom
    assert not custom.exists()
    assert not (tmp_path / ".local").exists()


def _events_file(tmp_path):
    path = tmp_path / "events.json"
    path.write_text(json.dumps(Events().to_dict()), encoding="utf-8")
    return path


def test_main_creates_appointment(tmp_path, monkeypatch, capsys):
    path = _events_file(tmp_path)
    monkeypatch.setattr("sys.stdin", io.StringIO("2\nDentist\n2030-01-02\n09\n30\n"))
    assert main(["-ef", str(path)]) == 0
    stored = json.loads(path.read_text(encoding="utf-8"))["events"]
    assert len(stored) == 1
    assert stored[0]["subject"] == "Dentist"
    assert stored[0]["time"].startswith("2030-01-02T09:30:00")
    assert stored[0]["alreadyDispatched"] is False
    assert "Event created 🎉" in capsys.readouterr().out


def test_main_aborted_form_writes_nothing(tmp_path, monkeypatch):
    path = _events_file(tmp_path)
    before = path.read_text(encoding="utf-8")
    monkeypatch.setattr("sys.stdin", io.StringIO(""))
    assert main(["-ef", str(path)]) == 0
    assert path.read_text(encoding="utf-8") == before


def test_main_reports_error_for_missing_file(tmp_path, monkeypatch, capsys):
    missing = tmp_path / "absent.json"
    monkeypatch.setattr("sys.stdin", io.StringIO("1\nTea\n0\n5\n"))
    assert main(["-ef", str(missing)]) == 1
    assert "Error creating events" in capsys.readouterr().err


def test_main_daemon_with_missing_file_fails(tmp_path, capsys):
    missing = tmp_path / "absent.json"
    assert main(["-ef", str(missing), "-daemon"]) == 1
    assert "absent.json" in capsys.readouterr().err