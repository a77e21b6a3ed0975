"""Batch processing of a directory."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path

from vidstrip.classify import IgnorePolicy, classify
from vidstrip.config import VidstripConfig, get_config
from vidstrip.deadline import Deadline
from vidstrip.discovery import (
    find_orphaned_temp_files,
    find_video_files,
    remove_orphaned_temp_files,
)
from vidstrip.errors import ProbeError, StripError
from vidstrip.models import FileResult, FileStatus, RunSummary
from vidstrip.probe import read_metadata
from vidstrip.strip import strip_metadata
from vidstrip.utils.deps import ensure_available, probe_available

logger = logging.getLogger(__name__)


def _log_findings(header: str, findings: list[str], level: int = logging.INFO) -> None:
    logger.log(level, "  %s", header)
    for finding in findings:
        logger.log(level, "    - %s", finding)


def _inspect(path: Path, result: FileResult, deadline: Deadline) -> None:
    """Read and report tags before stripping."""
    try:
        snapshot = read_metadata(path, deadline)
    except ProbeError as e:
        logger.warning("Warning: could not read metadata: %s", e)
        result.warnings.append(f"pre-strip read failed: {e}")
        return

    result.findings_before = classify(snapshot, IgnorePolicy.PRE_STRIP)
    if result.findings_before:
        _log_findings("Metadata found:", result.findings_before)
        logger.info("  Removing metadata...")
    else:
        logger.info("  No metadata found")


def _verify(path: Path, result: FileResult, deadline: Deadline) -> None:
    """Re-read tags after stripping and report anything left."""
    try:
        snapshot = read_metadata(path, deadline)
    except ProbeError as e:
        logger.warning("Warning: could not verify metadata removal: %s", e)
        result.warnings.append(f"post-strip read failed: {e}")
        return

    result.findings_after = classify(snapshot, IgnorePolicy.POST_STRIP)
    if result.findings_after:
        _log_findings("⚠️  Warning: metadata remains:", result.findings_after, logging.WARNING)
    else:
        logger.info("  ✓ Metadata removed")


def process_file(
    path: Path,
    verify: bool = True,
    deadline: Deadline | None = None,
    marker: str = ".tmp",
) -> FileResult:
    """Strip one file, optionally reporting tags before and after.

    Read failures only produce warnings; a strip failure marks the file as
    failed and skips verification. Neither is raised.

    Raises:
        RunTimeoutError: If the run budget runs out
    """
    deadline = deadline or Deadline.unbounded()
    result = FileResult(path=str(path))

    if verify:
        _inspect(path, result, deadline)

    try:
        strip_metadata(path, deadline, marker=marker)
    except StripError as e:
        logger.error("Error processing %s: %s", path, e)
        result.error = str(e)
        return result

    result.status = FileStatus.STRIPPED
    if verify:
        _verify(path, result, deadline)
    return result


def process_files(
    files: Sequence[Path],
    verify: bool = True,
    deadline: Deadline | None = None,
    marker: str = ".tmp",
) -> list[FileResult]:
    """Process files one after another, logging numbered progress."""
    results = []
    total = len(files)
    for i, path in enumerate(files, start=1):
        logger.info("[%d/%d] Processing: %s", i, total, path.name)
        result = process_file(path, verify=verify, deadline=deadline, marker=marker)
        results.append(result)
        if result.status == FileStatus.STRIPPED:
            logger.info("[%d/%d] Done: %s", i, total, path.name)
    return results


def run(root: Path | str, config: VidstripConfig | None = None) -> RunSummary:
    """Check dependencies, then find and strip every video under ``root``.

    Args:
        root: Directory to scan
        config: Settings to use (default: the loaded global config)

    Returns:
        RunSummary describing every processed file

    Raises:
        DependencyError: If ffmpeg cannot be made available
        DiscoveryError: If ``root`` cannot be walked
        RunTimeoutError: If the whole run exceeds its time limit
    """
    config = config or get_config()
    root = Path(root)
    deadline = Deadline(config.timeouts.run_seconds)

    ensure_available(deadline, install_timeout=config.timeouts.install_seconds)

    verify = config.strip.verify
    if verify and not probe_available():
        verify = False

    summary = RunSummary(root=str(root), verify=verify)
    marker = config.strip.temp_marker
    extensions = config.scan.extensions

    logger.info("Scanning directory: %s", root)

    orphans = find_orphaned_temp_files(root, extensions, marker)
    summary.orphaned_temp_files = [str(p) for p in orphans]
    if orphans:
        if config.strip.remove_orphans:
            removed = remove_orphaned_temp_files(orphans)
            summary.removed_temp_files = [str(p) for p in removed]
        else:
            logger.warning("Found %d leftover temporary file(s) from an earlier run:", len(orphans))
            for orphan in orphans:
                logger.warning("  - %s", orphan)
            logger.warning("Re-run with --remove-orphans to delete them")

    # Leftover scratch copies are reported, never stripped themselves
    skipped = set(orphans).difference(Path(p) for p in summary.removed_temp_files)
    files = [f for f in find_video_files(root, extensions) if f not in skipped]
    if not files:
        logger.info("No video files found")
        return summary

    logger.info("Found %d video file(s)", len(files))
    summary.files = process_files(files, verify=verify, deadline=deadline, marker=marker)
    logger.info("Processing complete")
    return summary
