"""Public sync exports for gdrivefetch."""

from __future__ import annotations

from .engine import MediaSource, SyncEngine, apply_remote_mtime

__all__ = ["MediaSource", "SyncEngine", "apply_remote_mtime"]
