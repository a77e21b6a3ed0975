"""Pytest configuration and fixtures."""

import json
import logging
import subprocess
from pathlib import Path

import pytest

from vidstrip.config import reset_config

# ffprobe output for a file straight off a camera/encoder
TAGGED_PROBE = {
    "format": {
        "format_name": "mov,mp4,m4a,3gp,3g2,mj2",
        "tags": {
            "major_brand": "isom",
            "minor_version": "512",
            "compatible_brands": "isomiso2avc1mp41",
            "creation_time": "2024-01-01T00:00:00.000000Z",
            "encoder": "HandBrake 1.6",
            "title": "Vacation",
        },
    },
    "streams": [
        {
            "index": 0,
            "codec_type": "video",
            "tags": {
                "creation_time": "2024-01-01T00:00:00.000000Z",
                "handler_name": "VideoHandler",
                "encoder": "AVC Coding",
            },
        },
        {"index": 1, "codec_type": "audio", "tags": {"handler_name": "SoundHandler"}},
    ],
}

# ffprobe output for the same file after ffmpeg -map_metadata -1
CLEAN_PROBE = {
    "format": {
        "format_name": "mov,mp4,m4a,3gp,3g2,mj2",
        "tags": {
            "major_brand": "isom",
            "minor_version": "512",
            "compatible_brands": "isomiso2avc1mp41",
            "encoder": "Lavf60.3.100",
        },
    },
    "streams": [
        {"index": 0, "codec_type": "video", "tags": {"handler_name": "VideoHandler"}},
        {"index": 1, "codec_type": "audio", "tags": {"handler_name": "SoundHandler"}},
    ],
}

STRIPPED_PREFIX = b"stripped:"


def command_exists(cmd: str) -> bool:
    """Check if a command exists in PATH."""
    try:
        subprocess.run(
            [cmd, "-version"],
            capture_output=True,
            timeout=5,
        )
        return True
    except (FileNotFoundError, subprocess.TimeoutExpired):
        return False


class FakeRunner:
    """Stand-in for ``subprocess.run`` that dispatches on the binary name.

    Handlers take the command list and keyword arguments and return a
    ``(returncode, stdout)`` pair, or raise. Unknown binaries behave as if
    they were not installed.
    """

    def __init__(self) -> None:
        self.calls: list[list[str]] = []
        self.handlers = {}

    def on(self, binary, handler=None, returncode=0, stdout=""):
        if handler is None:

            def handler(cmd, **kwargs):
                return returncode, stdout

        self.handlers[binary] = handler

    def __call__(self, cmd, *args, **kwargs):
        cmd = list(cmd)
        self.calls.append(cmd)
        handler = self.handlers.get(cmd[0])
        if handler is None:
            raise FileNotFoundError(2, "No such file or directory", cmd[0])
        returncode, stdout = handler(cmd, **kwargs)
        if kwargs.get("check") and returncode != 0:
            raise subprocess.CalledProcessError(returncode, cmd)
        return subprocess.CompletedProcess(cmd, returncode, stdout=stdout, stderr="")

    def called(self, binary):
        """Commands run for ``binary``, in order."""
        return [c for c in self.calls if c[0] == binary]


def fake_ffmpeg(cmd, **kwargs):
    """Write a marked copy of the input to the output path."""
    if "-version" in cmd:
        return 0, ""
    src = Path(cmd[cmd.index("-i") + 1])
    Path(cmd[-1]).write_bytes(STRIPPED_PREFIX + src.read_bytes())
    return 0, ""


def fake_ffprobe(cmd, **kwargs):
    """Report tags depending on whether the file went through fake_ffmpeg."""
    if "-version" in cmd:
        return 0, ""
    path = Path(cmd[-1])
    data = CLEAN_PROBE if path.read_bytes().startswith(STRIPPED_PREFIX) else TAGGED_PROBE
    return 0, json.dumps(data)


@pytest.fixture(autouse=True)
def _fresh_config(monkeypatch, tmp_path):
    """Keep user config files and VIDSTRIP_* variables out of the tests."""
    for key in ("EXTENSIONS", "VERIFY", "RUN_TIMEOUT", "INSTALL_TIMEOUT", "TEMP_MARKER"):
        monkeypatch.delenv(f"VIDSTRIP_{key}", raising=False)
    monkeypatch.setattr("vidstrip.config.CONFIG_LOCATIONS", [tmp_path / "no-such-config.yaml"])
    reset_config()
    yield
    reset_config()


@pytest.fixture(autouse=True)
def _reset_logging():
    """Undo configure_logging() so caplog sees vidstrip's records again."""
    yield
    logger = logging.getLogger("vidstrip")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
    logger.propagate = True


@pytest.fixture
def fake_run(monkeypatch) -> FakeRunner:
    """Replace subprocess.run with a FakeRunner that knows no binaries yet."""
    runner = FakeRunner()
    monkeypatch.setattr(subprocess, "run", runner)
    return runner


@pytest.fixture
def fake_tools(fake_run) -> FakeRunner:
    """FakeRunner with working ffmpeg and ffprobe."""
    fake_run.on("ffmpeg", fake_ffmpeg)
    fake_run.on("ffprobe", fake_ffprobe)
    return fake_run


@pytest.fixture
def tagged_probe() -> dict:
    return json.loads(json.dumps(TAGGED_PROBE))


@pytest.fixture
def clean_probe() -> dict:
    return json.loads(json.dumps(CLEAN_PROBE))


@pytest.fixture
def has_ffmpeg() -> bool:
    """Check if ffmpeg and ffprobe are available."""
    return command_exists("ffmpeg") and command_exists("ffprobe")
