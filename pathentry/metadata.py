"""Single-stat metadata queries for path entries.

Every derived query reads one ``StatOutcome``. Failures are kept on the
outcome rather than raised, then folded to ``False``/``0`` by the accessors.
"""

from __future__ import annotations

import os
import stat as statmod
from collections.abc import Callable
from dataclasses import dataclass

NANOS_PER_MILLI = 1_000_000
MILLIS_PER_SECOND = 1_000


def _mtime_ms_from_ns(st: os.stat_result) -> int:
    """Read milliseconds from the integer nanosecond field."""
    seconds, nanos = divmod(int(st.st_mtime_ns), 1_000_000_000)
    return seconds * MILLIS_PER_SECOND + nanos // NANOS_PER_MILLI


def _mtime_ms_from_seconds(st: os.stat_result) -> int:
    """Read milliseconds from the float seconds field."""
    return int(st.st_mtime * MILLIS_PER_SECOND)


def _select_mtime_reader(
    stat_type: type = os.stat_result,
) -> tuple[str, Callable[[os.stat_result], int]]:
    """Pick the finest modification-time field ``stat_type`` exposes."""
    if hasattr(stat_type, "st_mtime_ns"):
        return "ns", _mtime_ms_from_ns
    return "s", _mtime_ms_from_seconds


MTIME_RESOLUTION, _read_mtime_ms = _select_mtime_reader()


@dataclass(frozen=True)
class StatOutcome:
    """Result of one stat call: either ``stat`` or ``error`` is set."""

    stat: os.stat_result | None = None
    error: OSError | None = None

    @property
    def ok(self) -> bool:
        """Whether the stat call succeeded."""
        return self.stat is not None

    @property
    def exists(self) -> bool:
        """Alias of ``ok``: a path exists when stat succeeds."""
        return self.ok

    @property
    def is_directory(self) -> bool:
        """Whether stat succeeded and reports a directory."""
        return self.stat is not None and statmod.S_ISDIR(self.stat.st_mode)

    @property
    def is_file(self) -> bool:
        """Whether stat succeeded and reports a regular file."""
        return self.stat is not None and statmod.S_ISREG(self.stat.st_mode)

    @property
    def length_or_none(self) -> int | None:
        """Byte size, or ``None`` when stat failed."""
        if self.stat is None:
            return None
        return int(self.stat.st_size)

    @property
    def last_modified_or_none(self) -> int | None:
        """Milliseconds since epoch, or ``None`` when stat failed."""
        if self.stat is None:
            return None
        return mtime_millis(self.stat)

    @property
    def length(self) -> int:
        """Byte size, or ``0`` when stat failed (indistinguishable from empty)."""
        return self.length_or_none or 0

    @property
    def last_modified_ms(self) -> int:
        """Milliseconds since epoch, or ``0`` when stat failed."""
        return self.last_modified_or_none or 0


def mtime_millis(st: os.stat_result) -> int:
    """Return ``seconds*1000 + nanoseconds/1e6`` for a stat result."""
    return _read_mtime_ms(st)


def query_stat(path: str) -> StatOutcome:
    """Stat ``path`` (following symlinks) without raising."""
    try:
        return StatOutcome(stat=os.stat(path))
    except OSError as exc:
        return StatOutcome(error=exc)
    except ValueError as exc:
        return StatOutcome(error=OSError(str(exc)))


__all__ = [
    "MTIME_RESOLUTION",
    "StatOutcome",
    "mtime_millis",
    "query_stat",
]
