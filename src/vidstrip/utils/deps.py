"""Dependency checking and ffmpeg bootstrapping."""

from __future__ import annotations

import logging
import subprocess

from vidstrip.deadline import Deadline
from vidstrip.errors import DependencyError, InstallTimeoutError
from vidstrip.tools import (
    HOMEBREW_INSTALL_COMMAND,
    BrewTool,
    FFmpegTool,
    FFprobeTool,
    get_tool_status,
)

logger = logging.getLogger(__name__)

MANUAL_INSTALL_HINT = "Try installing it manually: brew install ffmpeg"
PATH_HINT = (
    "ffmpeg was installed but is not on PATH. Restart the terminal or run: "
    'export PATH="/opt/homebrew/bin:$PATH"'
)


def _format_duration(seconds: float) -> str:
    if seconds >= 60:
        return f"{seconds / 60:.0f} minutes"
    return f"{seconds:.0f} seconds"


def check_system_dependencies() -> dict[str, bool]:
    """Check availability of system dependencies (binaries).

    Returns:
        Dict mapping tool names to availability status.
    """
    return get_tool_status()


def ensure_available(
    deadline: Deadline | None = None,
    install_timeout: float = 20 * 60,
) -> None:
    """Make sure ffmpeg can be run, installing it with Homebrew if needed.

    An ffmpeg that is already present is always preferred; Homebrew is only
    consulted when ``ffmpeg -version`` fails.

    Args:
        deadline: Overall run budget; the install is bounded by whichever of
            it and ``install_timeout`` ends first
        install_timeout: Seconds allowed for ``brew install ffmpeg``

    Raises:
        DependencyError: If ffmpeg is missing and cannot be made available
        InstallTimeoutError: If the install did not finish in time
    """
    if FFmpegTool.is_available():
        return

    logger.info("ffmpeg not found. Attempting automatic installation...")

    if not BrewTool.is_available():
        raise DependencyError(
            "ffmpeg not found and Homebrew is not available.\n"
            f"Install Homebrew: {HOMEBREW_INSTALL_COMMAND}\n"
            "Then install ffmpeg: brew install ffmpeg"
        )

    logger.info("Found Homebrew. Installing ffmpeg...")
    logger.info("This may take several minutes...")

    deadline = deadline or Deadline.unbounded()
    timeout = deadline.remaining(cap=install_timeout)
    try:
        BrewTool().install("ffmpeg", timeout=timeout)
    except subprocess.TimeoutExpired as e:
        raise InstallTimeoutError(
            f"ffmpeg install timed out ({_format_duration(timeout)}). {MANUAL_INSTALL_HINT}"
        ) from e
    except (subprocess.CalledProcessError, OSError) as e:
        raise DependencyError(f"Installing ffmpeg with brew failed: {e}\n{MANUAL_INSTALL_HINT}") from e

    logger.info("ffmpeg installed successfully!")

    if not FFmpegTool.is_available():
        raise DependencyError(PATH_HINT)


def probe_available() -> bool:
    """Whether ffprobe (shipped alongside ffmpeg) can be run."""
    available = FFprobeTool.is_available()
    if not available:
        logger.warning("ffprobe not found; metadata will not be displayed or verified")
    return available


def print_dependency_status() -> None:
    """Print dependency status to stdout."""
    status = check_system_dependencies()

    print("vidstrip dependency status:")
    print("=" * 40)

    for name, available in sorted(status.items()):
        icon = "✓" if available else "✗"
        print(f"  {icon} {name}")

    print(f"\nSummary: {sum(status.values())}/{len(status)} system tools")

    # Recommendations
    if not status["ffmpeg"]:
        if status["brew"]:
            print("\n⚠️  ffmpeg is required. It will be installed on first run (brew install ffmpeg)")
        else:
            print("\n⚠️  ffmpeg is required. Install: brew install ffmpeg")
