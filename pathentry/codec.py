"""Boundary between host path strings and UTF-8 bytes.

Paths travel through the package as ``str``. Callers may hand in ``bytes`` or
``os.PathLike`` values; those are coerced here so every other module sees one
representation. Undecodable bytes round-trip via ``surrogateescape``.
"""

from __future__ import annotations

import os

PATH_ENCODING = "utf-8"
PATH_ERRORS = "surrogateescape"


def decode_utf8(raw: bytes) -> str:
    """Decode UTF-8 path bytes into a host string."""
    return raw.decode(PATH_ENCODING, errors=PATH_ERRORS)


def encode_utf8(path: str) -> bytes:
    """Encode a host path string as UTF-8 bytes."""
    return path.encode(PATH_ENCODING, errors=PATH_ERRORS)


def to_host_path(value: str | bytes | os.PathLike) -> str:
    """Coerce ``value`` to a host path string.

    Raises ``TypeError`` for objects that are not path-like, matching
    ``os.fspath``.
    """
    raw = os.fspath(value)
    if isinstance(raw, bytes):
        return decode_utf8(raw)
    return raw


__all__ = [
    "PATH_ENCODING",
    "PATH_ERRORS",
    "decode_utf8",
    "encode_utf8",
    "to_host_path",
]
