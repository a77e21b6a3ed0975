"""Output formatters for vidstrip."""

import json
from typing import Any

from vidstrip.models import RunSummary


def format_summary(summary: RunSummary) -> str:
    """Format a run summary as a few human-readable lines."""
    lines = [f"Processed {summary.processed} file(s) in {summary.root}"]
    lines.append(f"  Stripped: {summary.stripped}")
    if summary.failed:
        lines.append(f"  Failed:   {summary.failed}")
        for result in summary.files:
            if result.error:
                lines.append(f"    - {result.path}: {result.error}")
    if summary.verify and summary.with_remaining_metadata:
        lines.append(f"  With remaining metadata: {summary.with_remaining_metadata}")
    if summary.removed_temp_files:
        lines.append(f"  Leftover temporary files removed: {len(summary.removed_temp_files)}")
    elif summary.orphaned_temp_files:
        lines.append(f"  Leftover temporary files found: {len(summary.orphaned_temp_files)}")
    return "\n".join(lines)


def to_dict(summary: RunSummary) -> dict[str, Any]:
    """Convert a summary to a dictionary, including the derived counts."""
    data = summary.model_dump(mode="json")
    data["counts"] = {
        "processed": summary.processed,
        "stripped": summary.stripped,
        "failed": summary.failed,
        "with_remaining_metadata": summary.with_remaining_metadata,
    }
    return data


def format_json(summary: RunSummary, indent: int = 2) -> str:
    """Format a summary as a JSON document.

    Args:
        summary: RunSummary object
        indent: JSON indentation level

    Returns:
        JSON formatted string
    """
    return json.dumps(to_dict(summary), indent=indent, ensure_ascii=False, default=str)
