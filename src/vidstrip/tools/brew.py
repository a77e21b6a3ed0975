"""Homebrew wrapper used to bootstrap ffmpeg."""

import subprocess
from typing import ClassVar

from vidstrip.tools.base import BaseTool

HOMEBREW_INSTALL_COMMAND = (
    '/bin/bash -c "$(curl -fsSL '
    'https://raw.githubusercontent.com/Homebrew/install/HEAD/install.sh)"'
)


class BrewTool(BaseTool):
    """Install formulae with ``brew install``."""

    name: ClassVar[str] = "brew"
    binary: ClassVar[str] = "brew"
    version_args: ClassVar[tuple[str, ...]] = ("--version",)

    def install_command(self, formula: str) -> list[str]:
        return [self.binary, "install", formula]

    def install(self, formula: str, timeout: float | None = None) -> None:
        """Install ``formula``, streaming brew's own output to the terminal.

        Raises:
            subprocess.CalledProcessError: If brew exits non-zero
            subprocess.TimeoutExpired: If the install runs past ``timeout``
            OSError: If brew cannot be started
        """
        subprocess.run(self.install_command(formula), timeout=timeout, check=True)
