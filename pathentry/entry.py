"""Immutable filesystem path entries and their operations.

A ``PathEntry`` is a handle to a path, not to an open resource. Its resolved
form is fixed at construction; every query or action issues a fresh system
call against that value. Operations never raise for filesystem conditions:
absence and failure both come back as ``False``, ``0``, ``[]`` or ``None``.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from typing import BinaryIO

from .codec import to_host_path
from .metadata import StatOutcome, query_stat
from .normalize import (
    Resolution,
    join_path,
    last_segment,
    parent_path,
    resolve_path,
)
from .platform import DEFAULT_PLATFORM, PlatformQuery

logger = logging.getLogger(__name__)

NEW_FILE_MODE = 0o644
NEW_DIRECTORY_MODE = 0o755
RESOURCE_DIRNAME = "resource"
# os.sep plus os.altsep; backslash only on Windows
EXECUTABLE_SEPARATORS = tuple(sep for sep in (os.sep, os.altsep) if sep)
SELF_AND_PARENT = frozenset({".", ".."})


def _failed(operation: str, path: str, exc: OSError) -> bool:
    logger.debug("%s failed for %s: %s", operation, path, exc)
    return False


@dataclass(frozen=True)
class PathEntry:
    """One filesystem path with its best-effort resolved form."""

    display_path: str
    resolved_path: str
    resolution: Resolution = field(compare=False, repr=False)

    @classmethod
    def open(cls, path: str | bytes | os.PathLike) -> PathEntry:
        """Open an entry for ``path``; the target need not exist."""
        display = to_host_path(path)
        resolution = resolve_path(display)
        logger.debug("Open %s", resolution.path)
        return cls(display_path=display, resolved_path=resolution.path, resolution=resolution)

    @classmethod
    def open_child(cls, parent: PathEntry, child: str | bytes | os.PathLike) -> PathEntry:
        """Open ``child`` under ``parent``'s resolved path."""
        return cls.open(join_path(parent.resolved_path, to_host_path(child)))

    @classmethod
    def open_resource_directory(
        cls,
        platform: PlatformQuery | None = None,
        dirname: str | None = None,
    ) -> PathEntry:
        """Open the resource directory that sits next to the running executable.

        Falls back to the empty-path entry when the executable location is
        unknown or has no directory part. Existence is not checked.
        """
        platform = platform or DEFAULT_PLATFORM
        executable = platform.executable_path()
        if not executable:
            logger.debug("Executable path unavailable; resource directory is empty")
            return cls.open("")
        if not any(sep in executable for sep in EXECUTABLE_SEPARATORS):
            return cls.open("")
        executable_dir = parent_path(executable, EXECUTABLE_SEPARATORS)
        return cls.open(join_path(executable_dir, dirname or RESOURCE_DIRNAME))

    @classmethod
    def open_working_directory(
        cls,
        name: str | bytes | os.PathLike,
        platform: PlatformQuery | None = None,
    ) -> PathEntry:
        """Open the per-user directory ``name`` under the home directory.

        Falls back to the empty-path entry when no home directory is set.
        Existence is not checked.
        """
        platform = platform or DEFAULT_PLATFORM
        home = platform.home_directory()
        if not home:
            logger.debug("Home directory unavailable; working directory is empty")
            return cls.open("")
        return cls.open(join_path(home, to_host_path(name)))

    @property
    def path(self) -> str:
        """Path used for joins and parent derivation (the resolved form)."""
        return self.resolved_path

    @property
    def name(self) -> str:
        """Last segment of the resolved path."""
        return last_segment(self.resolved_path)

    def __str__(self) -> str:
        return self.resolved_path

    def __fspath__(self) -> str:
        return self.resolved_path

    # -- metadata ---------------------------------------------------------

    def metadata(self) -> StatOutcome:
        """Run one stat query and return its outcome, failures included."""
        return query_stat(self.resolved_path)

    def exists(self) -> bool:
        """Return whether stat succeeds for this path."""
        return self.metadata().exists

    def is_directory(self) -> bool:
        """Return whether this path is an existing directory."""
        return self.metadata().is_directory

    def is_file(self) -> bool:
        """Return whether this path is an existing regular file."""
        return self.metadata().is_file

    def length(self) -> int:
        """Size in bytes; ``0`` both for empty files and for stat failures."""
        return self.metadata().length

    def last_modified(self) -> int:
        """Modification time in ms since epoch; ``0`` when stat fails."""
        return self.metadata().last_modified_ms

    # -- enumeration ------------------------------------------------------

    def list_files(self) -> list[PathEntry]:
        """Return the immediate children of this directory.

        Order follows the OS directory iteration and is not sorted; callers
        that need a stable order must sort. Non-directories and unreadable
        directories yield an empty list.
        """
        if not self.is_directory():
            return []
        children: list[PathEntry] = []
        try:
            with os.scandir(self.resolved_path) as entries:
                for child in entries:
                    if child.name in SELF_AND_PARENT:
                        continue
                    children.append(PathEntry.open(join_path(self.resolved_path, child.name)))
        except OSError as exc:
            logger.debug("list_files failed for %s: %s", self.resolved_path, exc)
            return []
        return children

    def get_parent_file(self) -> PathEntry:
        """Open the resolved path up to its last separator, or the empty path."""
        return PathEntry.open(parent_path(self.resolved_path))

    # -- mutators ---------------------------------------------------------

    def create_new_file(self) -> bool:
        """Create an empty file, or succeed if one is already there."""
        try:
            fd = os.open(self.resolved_path, os.O_CREAT | os.O_RDWR, NEW_FILE_MODE)
        except OSError as exc:
            return _failed("create_new_file", self.resolved_path, exc)
        os.close(fd)
        return True

    def mkdir(self) -> bool:
        """Create this single directory level."""
        try:
            os.mkdir(self.resolved_path, NEW_DIRECTORY_MODE)
        except OSError as exc:
            return _failed("mkdir", self.resolved_path, exc)
        return True

    def remove(self) -> bool:
        """Remove this file or empty directory."""
        try:
            if self.is_directory():
                os.rmdir(self.resolved_path)
            else:
                os.unlink(self.resolved_path)
        except OSError as exc:
            return _failed("remove", self.resolved_path, exc)
        return True

    def rename_to(self, dest: PathEntry) -> bool:
        """Rename this entry onto ``dest``'s resolved path."""
        try:
            os.rename(self.resolved_path, dest.resolved_path)
        except OSError as exc:
            return _failed("rename_to", self.resolved_path, exc)
        return True

    # -- streams ----------------------------------------------------------

    def to_stream_in(self) -> BinaryIO | None:
        """Open a binary reader the caller owns, or ``None`` on failure."""
        try:
            stream = open(self.resolved_path, "rb")
        except OSError as exc:
            logger.debug("to_stream_in failed for %s: %s", self.resolved_path, exc)
            return None
        if not stream.readable():
            stream.close()
            return None
        return stream

    def to_stream_out(self) -> BinaryIO | None:
        """Open a truncating binary writer the caller owns, or ``None``."""
        try:
            stream = open(self.resolved_path, "wb")
        except OSError as exc:
            logger.debug("to_stream_out failed for %s: %s", self.resolved_path, exc)
            return None
        if not stream.writable():
            stream.close()
            return None
        return stream


__all__ = [
    "NEW_FILE_MODE",
    "NEW_DIRECTORY_MODE",
    "RESOURCE_DIRNAME",
    "EXECUTABLE_SEPARATORS",
    "PathEntry",
]
