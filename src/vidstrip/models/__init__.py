"""Pydantic models for vidstrip."""

from .result import FileResult, FileStatus, RunSummary
from .snapshot import MetadataSnapshot, StreamTags

__all__ = [
    # Snapshots
    "MetadataSnapshot",
    "StreamTags",
    # Results
    "FileResult",
    "FileStatus",
    "RunSummary",
]
