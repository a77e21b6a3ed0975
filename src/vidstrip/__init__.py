"""vidstrip - strip metadata from video files in place.

Usage:
    from vidstrip import classify, find_video_files, read_metadata, strip_metadata
    from vidstrip import IgnorePolicy

    for path in find_video_files("."):
        print(classify(read_metadata(path), IgnorePolicy.PRE_STRIP))
        strip_metadata(path)
        print(classify(read_metadata(path), IgnorePolicy.POST_STRIP))
"""

from vidstrip._version import __version__
from vidstrip.classify import IgnorePolicy, classify
from vidstrip.config import VidstripConfig, get_config, load_config
from vidstrip.deadline import Deadline
from vidstrip.discovery import find_orphaned_temp_files, find_video_files
from vidstrip.errors import (
    ConfigError,
    DependencyError,
    DiscoveryError,
    InstallTimeoutError,
    ProbeError,
    RunTimeoutError,
    StripError,
    VidstripError,
)
from vidstrip.formatters import format_json, format_summary
from vidstrip.models import FileResult, FileStatus, MetadataSnapshot, RunSummary, StreamTags
from vidstrip.probe import parse_probe_output, read_metadata
from vidstrip.process import process_file, process_files, run
from vidstrip.strip import strip_metadata
from vidstrip.utils import check_system_dependencies, ensure_available

__all__ = [
    # Version
    "__version__",
    # Main functions
    "run",
    "process_file",
    "process_files",
    "find_video_files",
    "find_orphaned_temp_files",
    "read_metadata",
    "parse_probe_output",
    "classify",
    "strip_metadata",
    "ensure_available",
    "check_system_dependencies",
    # Models
    "MetadataSnapshot",
    "StreamTags",
    "FileResult",
    "FileStatus",
    "RunSummary",
    "IgnorePolicy",
    "Deadline",
    # Config
    "VidstripConfig",
    "get_config",
    "load_config",
    # Formatters
    "format_summary",
    "format_json",
    # Errors
    "VidstripError",
    "ConfigError",
    "DependencyError",
    "InstallTimeoutError",
    "DiscoveryError",
    "RunTimeoutError",
    "ProbeError",
    "StripError",
]
