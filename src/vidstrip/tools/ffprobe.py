"""FFprobe wrapper used to read container and stream tags."""

import subprocess
from typing import ClassVar

from vidstrip.tools.base import BaseTool


class FFprobeTool(BaseTool):
    """Run ffprobe and return its JSON description of a file."""

    name: ClassVar[str] = "ffprobe"
    binary: ClassVar[str] = "ffprobe"

    def build_command(self, path: str) -> list[str]:
        return [
            self.binary,
            "-v",
            "quiet",
            "-print_format",
            "json",
            "-show_format",
            "-show_streams",
            path,
        ]

    def probe(self, path: str, timeout: float | None = None) -> str:
        """Return ffprobe's raw JSON output for ``path``.

        Raises:
            subprocess.CalledProcessError: If ffprobe exits non-zero
            subprocess.TimeoutExpired: If ffprobe runs past ``timeout``
            OSError: If ffprobe cannot be started
        """
        result = subprocess.run(
            self.build_command(path),
            capture_output=True,
            text=True,
            timeout=timeout,
            check=True,
        )
        return result.stdout
