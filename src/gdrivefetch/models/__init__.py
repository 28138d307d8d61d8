"""Public model exports for gdrivefetch."""

from __future__ import annotations

from .file_info import RemoteFileEntry, RemoteFolder
from .results import EntryResult, EntryStatus, SyncResult

__all__ = [
    "RemoteFolder",
    "RemoteFileEntry",
    "EntryStatus",
    "EntryResult",
    "SyncResult",
]
