"""Tag snapshot models built from ffprobe output."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


def _stringify_tags(value: Any) -> dict[str, str]:
    if not isinstance(value, dict):
        return {}
    return {str(k): "" if v is None else str(v) for k, v in value.items()}


class StreamTags(BaseModel):
    """Tags attached to one audio, video, subtitle or data stream."""

    model_config = ConfigDict(frozen=True)

    index: int | None = None
    codec_type: str | None = None
    tags: dict[str, str] = Field(default_factory=dict)

    @field_validator("tags", mode="before")
    @classmethod
    def _coerce_tags(cls, value: Any) -> dict[str, str]:
        return _stringify_tags(value)


class MetadataSnapshot(BaseModel):
    """Container and per-stream tags of a file at one point in time.

    A snapshot is produced fresh by every probe and never modified; the
    before/after pair of a strip is compared via the classifier.
    """

    model_config = ConfigDict(frozen=True)

    format_tags: dict[str, str] = Field(default_factory=dict)
    streams: list[StreamTags] = Field(default_factory=list)

    @field_validator("format_tags", mode="before")
    @classmethod
    def _coerce_format_tags(cls, value: Any) -> dict[str, str]:
        return _stringify_tags(value)

    @classmethod
    def from_ffprobe(cls, data: dict[str, Any]) -> "MetadataSnapshot":
        """Build a snapshot from the decoded ``ffprobe -print_format json`` document."""
        fmt = data.get("format") or {}
        streams = [
            StreamTags(
                index=stream.get("index"),
                codec_type=stream.get("codec_type"),
                tags=stream.get("tags"),
            )
            for stream in data.get("streams") or []
            if isinstance(stream, dict)
        ]
        return cls(format_tags=fmt.get("tags") if isinstance(fmt, dict) else None, streams=streams)

    @property
    def is_empty(self) -> bool:
        """True when neither the container nor any stream carries a tag."""
        return not self.format_tags and not any(s.tags for s in self.streams)
