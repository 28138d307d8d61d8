"""Local path helpers: filename sanitization and the "already synced" check."""

from __future__ import annotations

import os
import re

_INVALID_RUN_RE = re.compile(r"[^A-Za-z0-9._-]+")

# Drive allows empty names; the local side never does.
_EMPTY_NAME = "_"


def sanitize_filename(name: str) -> str:
    """
    Make a remote file name safe for the local filesystem.

    Every run of characters outside ``[A-Za-z0-9._-]`` collapses into a single
    underscore, so ``"B (1).dat"`` becomes ``"B_1_.dat"``. The result is
    deterministic and idempotent.
    """
    cleaned = _INVALID_RUN_RE.sub("_", name)
    return cleaned or _EMPTY_NAME


def local_path_for(target_dir: str, remote_name: str) -> str:
    """Return the local path a remote file name syncs to."""
    return os.path.join(target_dir, sanitize_filename(remote_name))


def regular_file_exists(path: str) -> bool:
    """True only for an existing regular file; directories do not count."""
    return os.path.isfile(path)
