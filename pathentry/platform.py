"""Host queries behind the resource and working directory locators.

``PathEntry`` factories take any ``PlatformQuery`` so tests can substitute
fixed values for the executable location and home directory.
"""

from __future__ import annotations

import os
import sys
from typing import Protocol

PROC_SELF_EXE = "/proc/self/exe"


class PlatformQuery(Protocol):
    """Source of the executable location and home directory."""

    def executable_path(self) -> str | None:
        """Return the running binary's path, or ``None`` if unknown."""
        ...

    def home_directory(self) -> str | None:
        """Return the user's home directory, or ``None`` if unset."""
        ...


class HostPlatform:
    """Reads the running process and environment of this host."""

    def executable_path(self) -> str | None:
        """Return the path of the running binary, or ``None`` if unknown.

        Frozen bundles report their own binary through ``sys.executable``.
        Linux asks ``/proc`` directly; other platforms fall back to
        ``sys.executable``.
        """
        if getattr(sys, "frozen", False):
            return sys.executable or None
        if sys.platform.startswith("linux"):
            try:
                return os.readlink(PROC_SELF_EXE) or None
            except OSError:
                return None
        return sys.executable or None

    def home_directory(self) -> str | None:
        """Return ``$HOME`` (``%USERPROFILE%`` on Windows), ``None`` if unset."""
        home = os.environ.get("HOME")
        if not home and sys.platform == "win32":
            home = os.environ.get("USERPROFILE")
        return home or None


DEFAULT_PLATFORM = HostPlatform()


__all__ = [
    "PROC_SELF_EXE",
    "PlatformQuery",
    "HostPlatform",
    "DEFAULT_PLATFORM",
]
