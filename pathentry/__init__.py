"""Public package surface for pathentry.

Exports ``PathEntry`` plus the normalization, metadata, and platform helpers
it is built from. The library installs no log handlers of its own.
"""

from __future__ import annotations

import logging

from .entry import PathEntry
from .metadata import MTIME_RESOLUTION, StatOutcome, query_stat
from .normalize import Resolution, join_path, parent_path, resolve_path
from .platform import HostPlatform, PlatformQuery

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "PathEntry",
    "MTIME_RESOLUTION",
    "StatOutcome",
    "query_stat",
    "Resolution",
    "join_path",
    "parent_path",
    "resolve_path",
    "HostPlatform",
    "PlatformQuery",
]
