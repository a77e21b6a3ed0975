"""Wrappers around the external binaries vidstrip drives."""

from vidstrip.tools.base import BaseTool
from vidstrip.tools.brew import HOMEBREW_INSTALL_COMMAND, BrewTool
from vidstrip.tools.ffmpeg import FFmpegTool
from vidstrip.tools.ffprobe import FFprobeTool

# Every tool vidstrip knows about, for status reporting
_TOOLS: list[type[BaseTool]] = [
    FFmpegTool,
    FFprobeTool,
    BrewTool,
]


def get_tool_status() -> dict[str, bool]:
    """Get availability status of all tools.

    Returns:
        Dict mapping tool names to whether their version command succeeds.
    """
    return {tool_cls.name: tool_cls.is_available() for tool_cls in _TOOLS}


__all__ = [
    # Base class
    "BaseTool",
    # Tools
    "BrewTool",
    "FFmpegTool",
    "FFprobeTool",
    # Functions
    "get_tool_status",
    # Constants
    "HOMEBREW_INSTALL_COMMAND",
]
