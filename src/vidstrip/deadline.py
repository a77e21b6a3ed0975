"""Wall-clock budget shared by every external process of a run."""

from __future__ import annotations

import time

from vidstrip.errors import RunTimeoutError


class Deadline:
    """A fixed point in time after which no more work may start.

    Subprocess wrappers ask for :meth:`remaining` and hand it to
    ``subprocess.run(timeout=...)`` so a child still running at expiry is
    killed.
    """

    def __init__(self, seconds: float | None) -> None:
        self.seconds = seconds
        self._expires_at = None if seconds is None else time.monotonic() + seconds

    @classmethod
    def unbounded(cls) -> Deadline:
        return cls(None)

    @property
    def expired(self) -> bool:
        return self._expires_at is not None and time.monotonic() >= self._expires_at

    def remaining(self, cap: float | None = None) -> float | None:
        """Seconds left, optionally capped by a shorter nested bound.

        Raises:
            RunTimeoutError: If the deadline has already passed
        """
        if self._expires_at is None:
            return cap
        left = self._expires_at - time.monotonic()
        if left <= 0:
            raise RunTimeoutError(f"Run exceeded its time limit of {self.seconds:.0f}s")
        return left if cap is None else min(left, cap)

    def __repr__(self) -> str:
        return f"Deadline(seconds={self.seconds!r})"
