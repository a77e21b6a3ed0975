"""Exceptions raised by vidstrip.

Fatal errors end the whole run. File-scoped errors are logged by the batch
driver, which then moves on to the next file.
"""


class VidstripError(Exception):
    """Base class for all vidstrip errors."""


class ConfigError(VidstripError):
    """A configuration value is invalid."""


class DependencyError(VidstripError):
    """ffmpeg is missing and could not be installed."""


class InstallTimeoutError(DependencyError):
    """The package manager did not finish installing ffmpeg in time."""


class DiscoveryError(VidstripError):
    """The target directory could not be walked."""


class RunTimeoutError(VidstripError):
    """The overall run budget was exhausted."""


class ProbeError(VidstripError):
    """ffprobe failed or returned output that could not be parsed."""


class StripError(VidstripError):
    """Stripping or replacing a single file failed."""
