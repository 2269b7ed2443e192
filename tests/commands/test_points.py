import json

import gpxkit.appconfig as gcfg
import gpxkit.commands.points as points


def test_run_prints_table(sample_path, capsys, monkeypatch, tmp_path):
    config_path = tmp_path / "gpxkit_config.json"
    config_path.write_text(json.dumps({"home_timezone": "UTC"}))
    monkeypatch.setattr(gcfg, "_FILE_PATHS", [config_path])

    status = points.run(sample_path("sample.gpx"))

    out = capsys.readouterr().out
    assert status == 0
    assert "Latitude" in out
    assert "2024-01-01 10:00:00" in out
    assert "150" in out
    assert "3 track points" in out


def test_run_json(sample_path, capsys):
    status = points.run(sample_path("sample.gpx"), as_json=True)

    data = json.loads(capsys.readouterr().out)
    assert status == 0
    assert len(data) == 3
    assert data[0]["lat"] == 45.0
    assert data[0]["heart_rate"] == 150
    assert data[2]["elevation"] is None


def test_run_json_unparsed_value(write_gpx, capsys):
    path = write_gpx('<trk><trkseg><trkpt lat="north" lon="7.5"/></trkseg></trk>')

    points.run(path, as_json=True)

    data = json.loads(capsys.readouterr().out)
    assert data[0]["lat"] == {"raw": "north"}


def test_run_timestamp_format_from_config(sample_path, capsys, monkeypatch, tmp_path):
    config_path = tmp_path / "gpxkit_config.json"
    config_path.write_text(json.dumps({"home_timezone": "UTC", "timestamp_format": "%d/%m/%Y %H:%M"}))
    monkeypatch.setattr(gcfg, "_FILE_PATHS", [config_path])

    points.run(sample_path("sample.gpx"))

    assert "01/01/2024 10:00" in capsys.readouterr().out


def test_run_reports_structure_error(sample_path, capsys):
    status = points.run(sample_path("no_track.gpx"))

    assert status == 1
    assert capsys.readouterr().out.startswith("Error:")


def test_run_reports_bad_timezone(sample_path, capsys, monkeypatch, tmp_path):
    config_path = tmp_path / "gpxkit_config.json"
    config_path.write_text(json.dumps({"home_timezone": "Nowhere/Special"}))
    monkeypatch.setattr(gcfg, "_FILE_PATHS", [config_path])

    status = points.run(sample_path("sample.gpx"))

    assert status == 1
    assert "Nowhere/Special" in capsys.readouterr().out


def test_run_null_timestamp_format_uses_default(sample_path, capsys, monkeypatch, tmp_path):
    config_path = tmp_path / "gpxkit_config.json"
    config_path.write_text(json.dumps({"home_timezone": "UTC", "timestamp_format": None}))
    monkeypatch.setattr(gcfg, "_FILE_PATHS", [config_path])

    status = points.run(sample_path("sample.gpx"))

    assert status == 0
    assert "2024-01-01 10:00:00" in capsys.readouterr().out
