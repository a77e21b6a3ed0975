"""Tests for the command-line interface."""

import json
from pathlib import Path

import pytest

from vidstrip import __version__
from vidstrip.cli import main


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    (tmp_path / "clip.MP4").write_bytes(b"raw")
    (tmp_path / "notes.txt").write_text("keep me")
    monkeypatch.chdir(tmp_path)
    return tmp_path


def test_no_arguments_uses_current_directory(fake_tools, workdir, capsys):
    assert main([]) == 0

    assert (workdir / "clip.MP4").read_bytes().startswith(b"stripped:")
    assert (workdir / "notes.txt").read_text() == "keep me"
    assert "Stripped: 1" in capsys.readouterr().out


def test_logs_progress(fake_tools, workdir, capsys):
    main([])

    err = capsys.readouterr().err
    assert "[1/1] Processing: clip.MP4" in err
    assert "title: Vacation" in err
    assert "✓ Metadata removed" in err


def test_directory_argument(fake_tools, tmp_path):
    target = tmp_path / "target"
    target.mkdir()
    (target / "a.webm").write_bytes(b"raw")

    assert main([str(target)]) == 0
    assert (target / "a.webm").read_bytes().startswith(b"stripped:")


def test_no_verify(fake_tools, workdir):
    assert main(["--no-verify"]) == 0

    assert [c[0] for c in fake_tools.calls] == ["ffmpeg", "ffmpeg"]


def test_per_file_failure_still_exits_zero(fake_tools, workdir, capsys):
    fake_tools.on("ffmpeg", lambda cmd, **kw: (0 if "-version" in cmd else 1, ""))

    assert main([]) == 0

    assert (workdir / "clip.MP4").read_bytes() == b"raw"
    assert not (workdir / "clip.tmp.MP4").exists()
    assert "Failed:   1" in capsys.readouterr().out


def test_dependency_error_exits_nonzero(fake_run, workdir, capsys):
    assert main([]) == 1

    assert "Error: ffmpeg not found" in capsys.readouterr().err
    assert (workdir / "clip.MP4").read_bytes() == b"raw"


def test_missing_directory_exits_nonzero(fake_tools, tmp_path, capsys):
    assert main([str(tmp_path / "missing")]) == 1
    assert "Error: Not a directory" in capsys.readouterr().err


def test_json_report(fake_tools, workdir, tmp_path):
    report = tmp_path / "report.json"

    assert main(["-q", "-o", str(report)]) == 0

    data = json.loads(report.read_text())
    assert data["counts"]["stripped"] == 1
    assert data["files"][0]["status"] == "stripped"
    assert data["files"][0]["findings_after"] == []


def test_remove_orphans(fake_tools, workdir, tmp_path):
    orphan = workdir / "clip.tmp.MP4"
    orphan.write_bytes(b"partial")
    report = tmp_path / "report.json"

    assert main(["--remove-orphans", "-q", "-o", str(report)]) == 0

    data = json.loads(report.read_text())
    assert [Path(p).name for p in data["removed_temp_files"]] == ["clip.tmp.MP4"]
    assert not orphan.exists()
    assert (workdir / "clip.MP4").read_bytes() == b"stripped:raw"


def test_status(fake_run, capsys):
    fake_run.on("ffmpeg")
    fake_run.on("ffprobe")

    assert main(["--status"]) == 0

    out = capsys.readouterr().out
    assert "✓ ffmpeg" in out
    assert "✗ brew" in out


def test_version(capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(["--version"])
    assert excinfo.value.code == 0
    assert __version__ in capsys.readouterr().out


def test_invalid_timeout_env_exits_nonzero(fake_tools, workdir, monkeypatch, capsys):
    monkeypatch.setenv("VIDSTRIP_RUN_TIMEOUT", "abc")

    assert main([]) == 1
    assert "Error: Invalid run timeout" in capsys.readouterr().err
    assert (workdir / "clip.MP4").read_bytes() == b"raw"


def test_empty_temp_marker_exits_nonzero(fake_tools, workdir, monkeypatch, capsys):
    config_file = workdir / "config.yaml"
    config_file.write_text('strip:\n  temp_marker: ""\n')
    monkeypatch.setattr("vidstrip.config.CONFIG_LOCATIONS", [config_file])

    assert main([]) == 1
    assert "Error: Invalid temp_marker" in capsys.readouterr().err
    assert (workdir / "clip.MP4").read_bytes() == b"raw"
