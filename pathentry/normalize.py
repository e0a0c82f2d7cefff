"""Path normalization, joining, and parent derivation.

Resolution is best-effort: an existing target resolves to its canonical
absolute form, anything else keeps the literal input so callers can go on to
create it.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field

SEPARATOR = "/"
SPLIT_SEPARATORS = ("/", "\\")


@dataclass(frozen=True)
class Resolution:
    """Outcome of normalizing one path string."""

    path: str
    resolved: bool
    error: OSError | None = field(default=None, compare=False)


def resolve_path(path: str) -> Resolution:
    """Return the canonical form of ``path`` or the literal input on failure.

    The empty path is kept as-is; ``realpath`` would otherwise turn it into
    the process working directory.
    """
    if not path:
        return Resolution(path="", resolved=False)
    try:
        return Resolution(path=os.path.realpath(path, strict=True), resolved=True)
    except OSError as exc:
        return Resolution(path=path, resolved=False, error=exc)
    except ValueError:
        # embedded NUL
        return Resolution(path=path, resolved=False)


def join_path(parent: str, child: str) -> str:
    """Join ``parent`` and ``child`` with a single separator."""
    if parent.endswith(SPLIT_SEPARATORS):
        return parent + child
    return parent + SEPARATOR + child


def _last_separator_index(path: str, separators: tuple[str, ...] = SPLIT_SEPARATORS) -> int:
    """Return the index of the last separator in ``path``, or ``-1``."""
    return max(path.rfind(sep) for sep in separators)


def parent_path(path: str, separators: tuple[str, ...] = SPLIT_SEPARATORS) -> str:
    """Truncate ``path`` at its last separator; ``""`` when there is none."""
    index = _last_separator_index(path, separators)
    if index < 0:
        return ""
    return path[:index]


def last_segment(path: str) -> str:
    """Return the text after the last separator (the whole path if none)."""
    return path[_last_separator_index(path) + 1 :]


__all__ = [
    "SEPARATOR",
    "SPLIT_SEPARATORS",
    "Resolution",
    "resolve_path",
    "join_path",
    "parent_path",
    "last_segment",
]
