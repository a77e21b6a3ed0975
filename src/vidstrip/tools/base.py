"""Base class for external command-line tools."""

from __future__ import annotations

import logging
import subprocess
from typing import ClassVar

logger = logging.getLogger(__name__)


class BaseTool:
    """Thin wrapper around an external binary.

    Subclasses name the binary and how to ask it for its version; the
    version probe doubles as the availability check (exit code 0 means the
    tool is usable).

    Attributes:
        name: Human-readable name of the tool
        binary: Executable looked up on PATH
        version_args: Arguments that make the binary print its version
    """

    name: ClassVar[str] = "base"
    binary: ClassVar[str] = ""
    version_args: ClassVar[tuple[str, ...]] = ("-version",)
    version_timeout: ClassVar[float] = 30

    @classmethod
    def is_available(cls) -> bool:
        """Run the version command and report whether it exited with 0."""
        try:
            result = subprocess.run(
                [cls.binary, *cls.version_args],
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
                timeout=cls.version_timeout,
            )
        except (OSError, subprocess.TimeoutExpired) as e:
            logger.debug("%s version probe failed: %s", cls.name, e)
            return False
        return result.returncode == 0

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self.name!r}, binary={self.binary!r})"
