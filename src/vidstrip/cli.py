"""
Command-line interface for vidstrip.

Usage:
  vidstrip                           # Strip every video under the current directory
  vidstrip ~/Movies                  # Strip every video under ~/Movies
  vidstrip --no-verify               # Strip only, skip before/after inspection
  vidstrip -o report.json            # Also save a JSON report
  vidstrip --status                  # Show ffmpeg/ffprobe/brew availability
"""

from __future__ import annotations

import argparse
import dataclasses
import logging
import os
import sys

from vidstrip._version import __version__
from vidstrip.config import get_config
from vidstrip.errors import VidstripError
from vidstrip.formatters import format_json, format_summary
from vidstrip.logs import configure_logging
from vidstrip.process import run
from vidstrip.utils.deps import print_dependency_status


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="vidstrip",
        description="Strip metadata from every video file under a directory (stream copy, no re-encode).",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Files are rewritten in place. Each file is remuxed by ffmpeg into a sibling
temporary file (clip.mp4 -> clip.tmp.mp4) which then replaces the original,
so an interrupted run never leaves a half-written original behind.

Examples:
  vidstrip                           # Current directory
  vidstrip ~/Movies --no-verify      # Strip only
  vidstrip --remove-orphans          # Also delete leftover *.tmp.* files
  vidstrip -o report.json            # JSON export
        """,
    )
    parser.add_argument(
        "directory",
        nargs="?",
        default=None,
        help="Directory to scan recursively (default: current directory)",
    )
    parser.add_argument("-o", "--output", help="Save report to JSON file")
    parser.add_argument("-V", "--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "--no-verify",
        action="store_true",
        help="Skip reading metadata before and after stripping",
    )
    parser.add_argument(
        "--remove-orphans",
        action="store_true",
        help="Delete temporary files left behind by an interrupted run",
    )
    parser.add_argument(
        "--status",
        action="store_true",
        help="Show tool availability status",
    )

    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument("-v", "--verbose", action="store_true", help="Show debug output")
    verbosity.add_argument("-q", "--quiet", action="store_true", help="Only show warnings and errors")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point for vidstrip CLI."""
    args = build_parser().parse_args(argv)

    if args.status:
        print_dependency_status()
        return 0

    if args.verbose:
        configure_logging(logging.DEBUG)
    elif args.quiet:
        configure_logging(logging.WARNING)
    else:
        configure_logging(logging.INFO)

    try:
        config = get_config()
    except VidstripError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    strip = dataclasses.replace(
        config.strip,
        verify=config.strip.verify and not args.no_verify,
        remove_orphans=config.strip.remove_orphans or args.remove_orphans,
    )
    config = dataclasses.replace(config, strip=strip)

    try:
        root = args.directory or os.getcwd()
    except OSError as e:
        print(f"Error: could not determine the current directory: {e}", file=sys.stderr)
        return 1

    try:
        summary = run(root, config)
    except VidstripError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        print("\nInterrupted", file=sys.stderr)
        return 130

    if summary.files and not args.quiet:
        print(format_summary(summary))

    if args.output:
        with open(args.output, "w", encoding="utf-8") as f:
            f.write(format_json(summary))
        print(f"Report saved to: {args.output}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
