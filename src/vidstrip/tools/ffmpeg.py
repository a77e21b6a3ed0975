"""FFmpeg wrapper used to remux a file without its metadata."""

import subprocess
from typing import ClassVar

from vidstrip.tools.base import BaseTool


class FFmpegTool(BaseTool):
    """Remux a file with stream copy and every metadata tag dropped.

    Flags:
      -loglevel error   (only genuine errors reach the terminal)
      -map 0            (keep all streams)
      -map_metadata -1  (drop global and per-stream metadata)
      -c copy           (no re-encode)
      -y                (overwrite the output unconditionally)
    """

    name: ClassVar[str] = "ffmpeg"
    binary: ClassVar[str] = "ffmpeg"

    def build_command(self, src: str, dst: str) -> list[str]:
        return [
            self.binary,
            "-loglevel",
            "error",
            "-i",
            src,
            "-map",
            "0",
            "-map_metadata",
            "-1",
            "-c",
            "copy",
            "-y",
            dst,
        ]

    def remux(self, src: str, dst: str, timeout: float | None = None) -> None:
        """Write ``src`` to ``dst`` with all metadata removed.

        ffmpeg's stdout/stderr are inherited so its errors show up for the user.

        Raises:
            subprocess.CalledProcessError: If ffmpeg exits non-zero
            subprocess.TimeoutExpired: If ffmpeg runs past ``timeout``
            OSError: If ffmpeg cannot be started
        """
        subprocess.run(self.build_command(src, dst), timeout=timeout, check=True)
