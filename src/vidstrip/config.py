"""Configuration management for vidstrip.

Nothing has to be configured: with no file and no environment variables
vidstrip scans for the usual video extensions and verifies every file.

Supports loading configuration from:
1. Environment variables (VIDSTRIP_*)
2. Config file (~/.vidstrip/config.yaml)
3. Default values

Example config file (~/.vidstrip/config.yaml):
    scan:
      extensions: [".mp4", ".mov", ".mkv"]
    strip:
      verify: true
      temp_marker: ".tmp"
    timeouts:
      run_seconds: 1800
      install_seconds: 1200
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from vidstrip.errors import ConfigError

logger = logging.getLogger(__name__)

# Config file search locations (in priority order)
CONFIG_LOCATIONS = [
    Path.home() / ".vidstrip" / "config.yaml",
    Path.home() / ".config" / "vidstrip" / "config.yaml",
    Path(".vidstrip.yaml"),
]

DEFAULT_EXTENSIONS = frozenset({".mp4", ".mkv", ".avi", ".mov", ".wmv", ".flv", ".webm", ".m4v"})


def normalize_extensions(values: Any) -> frozenset[str]:
    """Lowercase extensions and make sure each carries its leading dot."""
    if isinstance(values, str):
        values = values.split(",")
    result = set()
    for value in values:
        ext = str(value).strip().lower()
        if not ext:
            continue
        result.add(ext if ext.startswith(".") else f".{ext}")
    return frozenset(result)


@dataclass
class ScanConfig:
    """Which files count as videos."""

    extensions: frozenset[str] = DEFAULT_EXTENSIONS


@dataclass
class StripConfig:
    """How files are stripped."""

    verify: bool = True
    temp_marker: str = ".tmp"
    remove_orphans: bool = False


@dataclass
class TimeoutConfig:
    """Wall-clock limits, in seconds."""

    run_seconds: float = 30 * 60
    install_seconds: float = 20 * 60


@dataclass
class VidstripConfig:
    """Main configuration for vidstrip."""

    scan: ScanConfig = field(default_factory=ScanConfig)
    strip: StripConfig = field(default_factory=StripConfig)
    timeouts: TimeoutConfig = field(default_factory=TimeoutConfig)


def _load_yaml_config() -> dict[str, Any]:
    """Load configuration from the first YAML file found."""
    for config_path in CONFIG_LOCATIONS:
        if config_path.exists():
            try:
                with open(config_path) as f:
                    data = yaml.safe_load(f)
            except (OSError, yaml.YAMLError) as e:
                logger.warning("Ignoring unreadable config file %s: %s", config_path, e)
                continue
            return data if isinstance(data, dict) else {}
    return {}


def _get_env(key: str, default: Any = None) -> Any:
    """Get environment variable with VIDSTRIP_ prefix."""
    return os.environ.get(f"VIDSTRIP_{key}", default)


def _parse_bool(value: str | None) -> bool | None:
    """Parse boolean from string."""
    if value is None:
        return None
    return value.lower() in ("true", "1", "yes", "on")


def validate_temp_marker(marker: Any) -> str:
    """Check that the scratch-file marker yields a name distinct from the original.

    Raises:
        ConfigError: If the marker is empty or contains a path separator
    """
    if not isinstance(marker, str) or not marker.strip():
        raise ConfigError(f"Invalid temp_marker {marker!r}: must be a non-empty string")
    if "/" in marker or "\\" in marker or os.sep in marker:
        raise ConfigError(f"Invalid temp_marker {marker!r}: must not contain a path separator")
    return marker


def _parse_seconds(name: str, value: Any) -> float:
    """Parse a timeout in seconds.

    Raises:
        ConfigError: If the value is not a positive number
    """
    try:
        seconds = float(value)
    except (TypeError, ValueError) as e:
        raise ConfigError(f"Invalid {name} {value!r}: expected a number of seconds") from e
    if seconds <= 0:
        raise ConfigError(f"Invalid {name} {value!r}: must be greater than zero")
    return seconds


def load_config() -> VidstripConfig:
    """Load configuration from file and environment variables.

    Priority (highest first):
    1. Environment variables (VIDSTRIP_*)
    2. Config file (~/.vidstrip/config.yaml)
    3. Default values

    Raises:
        ConfigError: If a timeout or the temp marker is invalid
    """
    file_config = _load_yaml_config()

    # Scan config
    scan_config = file_config.get("scan") or {}
    extensions = _get_env("EXTENSIONS") or scan_config.get("extensions")
    scan = ScanConfig(
        extensions=normalize_extensions(extensions) if extensions else DEFAULT_EXTENSIONS,
    )

    # Strip config
    strip_config = file_config.get("strip") or {}
    verify_env = _parse_bool(_get_env("VERIFY"))
    strip = StripConfig(
        verify=verify_env if verify_env is not None else bool(strip_config.get("verify", True)),
        temp_marker=validate_temp_marker(
            _get_env("TEMP_MARKER") or strip_config.get("temp_marker", ".tmp")
        ),
        remove_orphans=bool(strip_config.get("remove_orphans", False)),
    )

    # Timeouts
    timeout_config = file_config.get("timeouts") or {}
    timeouts = TimeoutConfig(
        run_seconds=_parse_seconds(
            "run timeout", _get_env("RUN_TIMEOUT") or timeout_config.get("run_seconds", 30 * 60)
        ),
        install_seconds=_parse_seconds(
            "install timeout",
            _get_env("INSTALL_TIMEOUT") or timeout_config.get("install_seconds", 20 * 60),
        ),
    )

    return VidstripConfig(scan=scan, strip=strip, timeouts=timeouts)


# Global config instance (lazy loaded)
_config: VidstripConfig | None = None


def get_config() -> VidstripConfig:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = load_config()
    return _config


def reset_config() -> None:
    """Reset the global configuration (for testing)."""
    global _config
    _config = None
