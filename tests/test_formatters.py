"""Tests for summary formatting."""

import json

from vidstrip.formatters import format_json, format_summary, to_dict
from vidstrip.models import FileResult, FileStatus, RunSummary


def _summary():
    return RunSummary(
        root="/videos",
        files=[
            FileResult(path="/videos/a.mp4", status=FileStatus.STRIPPED, findings_after=[]),
            FileResult(
                path="/videos/b.mp4",
                status=FileStatus.STRIPPED,
                findings_after=["stream[0].timecode: 01:00:00:00"],
            ),
            FileResult(path="/videos/c.mp4", error="ffmpeg exited with status 1"),
        ],
        orphaned_temp_files=["/videos/old.tmp.mp4"],
    )


def test_format_summary():
    text = format_summary(_summary())

    assert text.splitlines()[0] == "Processed 3 file(s) in /videos"
    assert "Stripped: 2" in text
    assert "Failed:   1" in text
    assert "/videos/c.mp4: ffmpeg exited with status 1" in text
    assert "With remaining metadata: 1" in text
    assert "Leftover temporary files found: 1" in text


def test_format_summary_all_good():
    summary = RunSummary(
        root="/videos",
        files=[FileResult(path="/videos/a.mp4", status=FileStatus.STRIPPED, findings_after=[])],
    )
    assert format_summary(summary) == "Processed 1 file(s) in /videos\n  Stripped: 1"


def test_format_json():
    data = json.loads(format_json(_summary()))

    assert data["root"] == "/videos"
    assert data["counts"] == {
        "processed": 3,
        "stripped": 2,
        "failed": 1,
        "with_remaining_metadata": 1,
    }
    assert data["files"][2]["status"] == "failed"
    assert data == to_dict(_summary())
