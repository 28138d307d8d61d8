"""Data model for Drive items."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(slots=True, frozen=True)
class RemoteFolder:
    """The Drive folder a run syncs from. Resolved once per run."""

    folder_id: str
    name: str


@dataclass(slots=True, frozen=True)
class RemoteFileEntry:
    """
    One child of the synced folder, as returned by the listing call.

    Notes:
        - Timestamps are kept as the raw RFC3339 strings Drive returned;
          parsing happens at the point of use so a malformed value only
          affects that one step.
    """

    file_id: str
    name: str
    mime_type: str = ""
    created_time: Optional[str] = None
    modified_time: Optional[str] = None
