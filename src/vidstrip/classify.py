"""Deciding which tags of a snapshot are worth reporting.

Two policies share this module. Before stripping every identifying tag is
listed for the user. After stripping, tags that ffmpeg writes on its own
(brand markers and its ``Lavf``/``Lavc`` encoder stamp) are expected and
must not be mistaken for a failed strip.
"""

from __future__ import annotations

from enum import Enum

from vidstrip.models import MetadataSnapshot

# Container tags reported before stripping, in display order
PRIORITY_TAGS: tuple[str, ...] = (
    "creation_time",
    "encoder",
    "comment",
    "title",
    "artist",
    "album",
    "date",
    "description",
)

# Stream tags checked by both policies, in display order
STREAM_TAGS: tuple[str, ...] = ("creation_time", "encoder", "timecode")

# Container structure markers that survive -map_metadata -1
TECHNICAL_TAGS = frozenset({"major_brand", "minor_version", "compatible_brands"})

CONTAINER_ENCODER_PREFIX = "Lavf"
STREAM_ENCODER_PREFIX = "Lav"


class IgnorePolicy(str, Enum):
    """Which tags the classifier treats as noise."""

    PRE_STRIP = "pre_strip"
    POST_STRIP = "post_strip"


def _is_benign_encoder(key: str, value: str, prefix: str) -> bool:
    return key.lower() == "encoder" and value.startswith(prefix)


def _container_findings(snapshot: MetadataSnapshot, policy: IgnorePolicy) -> list[str]:
    tags = snapshot.format_tags
    if policy is IgnorePolicy.PRE_STRIP:
        return [f"{key}: {tags[key]}" for key in PRIORITY_TAGS if tags.get(key)]

    findings = []
    for key, value in tags.items():
        if not value or key.lower() in TECHNICAL_TAGS:
            continue
        if _is_benign_encoder(key, value, CONTAINER_ENCODER_PREFIX):
            continue
        findings.append(f"{key}: {value}")
    return findings


def _stream_findings(snapshot: MetadataSnapshot, policy: IgnorePolicy) -> list[str]:
    findings = []
    for i, stream in enumerate(snapshot.streams):
        for key in STREAM_TAGS:
            value = stream.tags.get(key)
            if not value:
                continue
            if policy is IgnorePolicy.POST_STRIP and _is_benign_encoder(
                key, value, STREAM_ENCODER_PREFIX
            ):
                continue
            findings.append(f"stream[{i}].{key}: {value}")
    return findings


def classify(snapshot: MetadataSnapshot, policy: IgnorePolicy = IgnorePolicy.PRE_STRIP) -> list[str]:
    """List the interesting tags of a snapshot as human-readable findings.

    Container findings come first, then stream findings in stream order.

    Args:
        snapshot: Tags read from a file
        policy: PRE_STRIP reports the well-known identifying tags;
            POST_STRIP reports everything except ffmpeg's own noise

    Returns:
        Findings such as ``"title: Vacation"`` or
        ``"stream[0].creation_time: 2024-01-01"``; empty when nothing of
        interest is present
    """
    return _container_findings(snapshot, policy) + _stream_findings(snapshot, policy)
