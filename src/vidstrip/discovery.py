"""Finding video files under a directory."""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable
from pathlib import Path

from vidstrip.config import DEFAULT_EXTENSIONS
from vidstrip.errors import DiscoveryError

logger = logging.getLogger(__name__)


def _walk_files(root: Path) -> Iterable[Path]:
    """Yield regular files under ``root`` in a deterministic order.

    Directory entries are sorted at every level. Any error raised while
    listing a directory aborts the walk.
    """
    if not root.is_dir():
        raise DiscoveryError(f"Not a directory: {root}")

    def _raise(error: OSError) -> None:
        raise DiscoveryError(f"Failed to read {error.filename}: {error.strerror or error}") from error

    for dirpath, dirnames, filenames in os.walk(root, onerror=_raise):
        dirnames.sort()
        for filename in sorted(filenames):
            path = Path(dirpath) / filename
            if path.is_file():
                yield path


def find_video_files(root: Path | str, extensions: Iterable[str] = DEFAULT_EXTENSIONS) -> list[Path]:
    """Find every video file under ``root``.

    Args:
        root: Directory to scan recursively
        extensions: Allowed suffixes including the leading dot; matched
            case-insensitively

    Returns:
        Matching file paths, sorted lexicographically per directory level

    Raises:
        DiscoveryError: If ``root`` is not a directory or cannot be walked
    """
    allowed = {ext.lower() for ext in extensions}
    videos = [
        path for path in _walk_files(Path(root)) if os.path.splitext(path.name)[1].lower() in allowed
    ]
    logger.debug("Found %d video file(s) under %s", len(videos), root)
    return videos


def temp_path_for(path: Path, marker: str = ".tmp") -> Path:
    """Sibling scratch path that keeps the extension: clip.mp4 -> clip.tmp.mp4."""
    stem, ext = os.path.splitext(path.name)
    return path.with_name(f"{stem}{marker}{ext}")


def original_path_for(path: Path, marker: str = ".tmp") -> Path | None:
    """The file a scratch path was made from: clip.tmp.mp4 -> clip.mp4.

    Returns None when the name does not carry the marker.
    """
    stem, ext = os.path.splitext(path.name)
    if not marker or len(stem) <= len(marker) or not stem.lower().endswith(marker.lower()):
        return None
    return path.with_name(f"{stem[: -len(marker)]}{ext}")


def is_temp_path(path: Path, marker: str = ".tmp") -> bool:
    """Whether ``path`` is a scratch file left next to the original it was made from.

    A file that only carries the marker in its name, with no original beside
    it, is an ordinary video.
    """
    original = original_path_for(path, marker)
    return original is not None and original.is_file()


def find_orphaned_temp_files(
    root: Path | str,
    extensions: Iterable[str] = DEFAULT_EXTENSIONS,
    marker: str = ".tmp",
) -> list[Path]:
    """Find scratch files left behind by an interrupted run.

    Raises:
        DiscoveryError: If ``root`` is not a directory or cannot be walked
    """
    return [path for path in find_video_files(root, extensions) if is_temp_path(path, marker)]


def remove_orphaned_temp_files(paths: Iterable[Path]) -> list[Path]:
    """Delete the given scratch files, returning the ones actually removed."""
    removed = []
    for path in paths:
        try:
            path.unlink()
        except FileNotFoundError:
            continue
        except OSError as e:
            logger.warning("Could not remove temporary file %s: %s", path, e)
            continue
        logger.info("Removed leftover temporary file: %s", path)
        removed.append(path)
    return removed
