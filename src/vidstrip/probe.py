"""Reading container and stream tags with ffprobe."""

from __future__ import annotations

import json
import subprocess
from pathlib import Path

from pydantic import ValidationError

from vidstrip.deadline import Deadline
from vidstrip.errors import ProbeError
from vidstrip.models import MetadataSnapshot
from vidstrip.tools import FFprobeTool


def parse_probe_output(text: str) -> MetadataSnapshot:
    """Parse ffprobe's JSON output into a snapshot.

    Raises:
        ProbeError: If the output is not a JSON object
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise ProbeError(f"Failed to parse ffprobe output: {e}") from e
    if not isinstance(data, dict):
        raise ProbeError(f"Unexpected ffprobe output: expected an object, got {type(data).__name__}")
    try:
        return MetadataSnapshot.from_ffprobe(data)
    except ValidationError as e:
        raise ProbeError(f"Unexpected ffprobe output: {e}") from e


def read_metadata(path: Path | str, deadline: Deadline | None = None) -> MetadataSnapshot:
    """Read the current tags of a video file.

    Args:
        path: Video file to probe
        deadline: Overall run budget bounding the ffprobe call

    Returns:
        A fresh MetadataSnapshot

    Raises:
        ProbeError: If ffprobe fails or its output cannot be parsed
        RunTimeoutError: If the run budget is already exhausted
    """
    deadline = deadline or Deadline.unbounded()
    timeout = deadline.remaining()
    try:
        output = FFprobeTool().probe(str(path), timeout=timeout)
    except subprocess.CalledProcessError as e:
        raise ProbeError(f"ffprobe exited with status {e.returncode}") from e
    except subprocess.TimeoutExpired as e:
        # Becomes a RunTimeoutError once the run budget itself is spent
        deadline.remaining()
        raise ProbeError("ffprobe timed out") from e
    except OSError as e:
        raise ProbeError(f"Failed to run ffprobe: {e}") from e
    return parse_probe_output(output)
