"""Content fingerprints used as identity keys for source files."""

from __future__ import annotations

import hashlib
import os
from pathlib import Path
from typing import Optional

from .logging import get_logger

_CHUNK_SIZE = 1024 * 1024

logger = get_logger("hashing")


def compute_file_hash(path: str | os.PathLike[str]) -> Optional[str]:
    """Return the SHA-256 hex digest of the file bytes, or None when unreadable.

    Only the content contributes to the digest; timestamps and permissions do
    not. An unreadable file is reported as None so callers can treat it as
    changed.
    """
    digest = hashlib.sha256()
    try:
        with Path(path).open("rb") as handle:
            for chunk in iter(lambda: handle.read(_CHUNK_SIZE), b""):
                digest.update(chunk)
    except OSError as exc:
        logger.debug("Cannot fingerprint %s: %s", path, exc)
        return None
    return digest.hexdigest()


__all__ = ["compute_file_hash"]
