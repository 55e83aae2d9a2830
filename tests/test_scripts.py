import json

from scripts.analyze_calendar import main


def test_missing_data_file_exits_with_error(tmp_path, monkeypatch, caplog):
    missing = tmp_path / "storage.json"
    monkeypatch.setattr("sys.argv", ["analyze_calendar.py", "--data", str(missing)])
    assert main() == 1
    assert "storage.json" in caplog.text


def test_unknown_ruleset_exits_with_error(tmp_path, monkeypatch):
    path = tmp_path / "events.json"
    path.write_text("[]", encoding="utf-8")
    monkeypatch.setattr("sys.argv", ["analyze_calendar.py", "--data", str(path), "--ruleset", "v9"])
    assert main() == 1


def test_report_written_to_output(tmp_path, monkeypatch, capsys):
    path = tmp_path / "events.json"
    path.write_text(
        json.dumps([{"title": "Work Sync", "startTime": "2024-01-01T09:00:00Z", "endTime": "2024-01-01T10:30:00Z"}]),
        encoding="utf-8",
    )
    out = tmp_path / "out" / "report.json"
    monkeypatch.setattr("sys.argv", ["analyze_calendar.py", "--data", str(path), "--output", str(out)])
    assert main() == 0
    report = json.loads(out.read_text(encoding="utf-8"))
    assert report["total_hours"] == 1.5
    assert report["ruleset"] == "final"
    assert "Saved category report" in capsys.readouterr().out
