"""SHA-256 helpers for downloaded archives."""

from __future__ import annotations

import hashlib
import os

_CHUNK_SIZE = 1 << 16


def sha256_of(path: str | os.PathLike[str]) -> str:
    """Return the lowercase hex SHA-256 digest of a file's contents."""
    digest = hashlib.sha256()
    with open(path, "rb") as stream:
        for chunk in iter(lambda: stream.read(_CHUNK_SIZE), b""):
            digest.update(chunk)
    return digest.hexdigest()


def verify_sha256(path: str | os.PathLike[str], expected: str) -> bool:
    """Tell whether the file's digest equals the expected lowercase hex string."""
    return sha256_of(path) == expected