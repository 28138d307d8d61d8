"""Result models for a sync run."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


class EntryStatus(str, Enum):
    """Outcome of processing one listed entry."""

    SKIPPED = "skipped"
    DOWNLOADED = "downloaded"
    DOWNLOAD_FAILED = "download_failed"
    CREATE_FAILED = "create_failed"
    UNSUPPORTED = "unsupported"


@dataclass(slots=True)
class EntryResult:
    """Result for a single remote entry."""

    file_id: str
    name: str
    local_path: str
    status: EntryStatus

    timestamp_warning: bool = False
    error_type: Optional[str] = None
    error_message: Optional[str] = None


@dataclass(slots=True)
class SyncResult:
    """Aggregate result for one run over a folder."""

    folder_id: str
    target_dir: str
    results: list[EntryResult] = field(default_factory=list)

    def add(self, result: EntryResult) -> None:
        self.results.append(result)

    @property
    def summary(self) -> dict[str, int]:
        """Count of entries per status (every status is present)."""
        counts = {status.value: 0 for status in EntryStatus}
        for r in self.results:
            counts[r.status.value] += 1
        return counts

    @property
    def failed(self) -> list[EntryResult]:
        return [
            r
            for r in self.results
            if r.status in (EntryStatus.DOWNLOAD_FAILED, EntryStatus.CREATE_FAILED)
        ]
