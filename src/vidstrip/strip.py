"""Stripping metadata from a video file in place.

Strategy:
  1) ffmpeg remuxes the original into a sibling scratch file
     (clip.mp4 -> clip.tmp.mp4) with stream copy and -map_metadata -1.
     The scratch file keeps the extension so ffmpeg picks the same muxer.
  2) The scratch file is renamed over the original. Being a sibling, the
     rename stays on one filesystem and is atomic.
The original is never written to until step 2, so any failure leaves it as
it was.
"""

from __future__ import annotations

import logging
import os
import subprocess
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

from vidstrip.deadline import Deadline
from vidstrip.discovery import temp_path_for
from vidstrip.errors import StripError
from vidstrip.tools import FFmpegTool

logger = logging.getLogger(__name__)


@contextmanager
def temp_slot(path: Path, marker: str = ".tmp") -> Iterator[Path]:
    """Reserve the scratch path for ``path`` and remove it on exit.

    After a successful rename there is nothing left to remove. A failure to
    remove is logged so it cannot hide the error that got us here.

    Raises:
        StripError: If the marker would make the scratch path the original itself
    """
    tmp = temp_path_for(path, marker)
    if tmp == path:
        raise StripError(f"Temporary path for {path.name} would overwrite the original")
    try:
        yield tmp
    finally:
        if tmp.exists():
            try:
                tmp.unlink()
            except OSError as e:
                logger.warning("Could not remove temporary file %s: %s", tmp, e)


def strip_metadata(
    path: Path | str,
    deadline: Deadline | None = None,
    marker: str = ".tmp",
) -> None:
    """Remove all metadata from ``path``, replacing the file in place.

    Args:
        path: Video file to strip
        deadline: Overall run budget bounding the ffmpeg call
        marker: Inserted between stem and extension for the scratch file

    Raises:
        StripError: If ffmpeg fails, produces no output, or the rename fails
        RunTimeoutError: If the run budget runs out before or during ffmpeg
    """
    path = Path(path)
    deadline = deadline or Deadline.unbounded()

    with temp_slot(path, marker) as tmp:
        try:
            FFmpegTool().remux(str(path), str(tmp), timeout=deadline.remaining())
        except subprocess.CalledProcessError as e:
            raise StripError(f"ffmpeg exited with status {e.returncode}") from e
        except subprocess.TimeoutExpired as e:
            # Becomes a RunTimeoutError once the run budget itself is spent
            deadline.remaining()
            raise StripError("ffmpeg timed out") from e
        except OSError as e:
            raise StripError(f"Failed to run ffmpeg: {e}") from e

        # ffmpeg can exit 0 without writing anything
        if not tmp.exists():
            raise StripError(f"Temporary file was not created: {tmp.name}")

        try:
            os.replace(tmp, path)
        except OSError as e:
            raise StripError(f"Failed to replace {path.name}: {e}") from e

    logger.debug("Replaced %s with stripped copy", path)
