"""Per-file and per-run result models."""

from enum import Enum

from pydantic import BaseModel, Field


class FileStatus(str, Enum):
    """Outcome of processing one file."""

    STRIPPED = "stripped"
    FAILED = "failed"


class FileResult(BaseModel):
    """What happened to a single video file."""

    path: str
    status: FileStatus = FileStatus.FAILED
    findings_before: list[str] | None = None
    findings_after: list[str] | None = None
    warnings: list[str] = Field(default_factory=list)
    error: str | None = None

    @property
    def verified(self) -> bool:
        """True if the file was re-read after stripping and nothing remained."""
        return self.status == FileStatus.STRIPPED and self.findings_after == []

    @property
    def has_remaining_metadata(self) -> bool:
        return bool(self.findings_after)


class RunSummary(BaseModel):
    """Results of one pass over a directory."""

    root: str
    verify: bool = True
    files: list[FileResult] = Field(default_factory=list)
    orphaned_temp_files: list[str] = Field(default_factory=list)
    removed_temp_files: list[str] = Field(default_factory=list)

    @property
    def processed(self) -> int:
        return len(self.files)

    @property
    def stripped(self) -> int:
        return sum(1 for f in self.files if f.status == FileStatus.STRIPPED)

    @property
    def failed(self) -> int:
        return sum(1 for f in self.files if f.status == FileStatus.FAILED)

    @property
    def with_remaining_metadata(self) -> int:
        return sum(1 for f in self.files if f.has_remaining_metadata)
