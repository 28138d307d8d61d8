"""Download listed entries that are not yet present in the target directory."""

from __future__ import annotations

import logging
import os
from typing import Iterable, Iterator, Optional, Protocol

from gdrivefetch.errors import GDriveFetchError
from gdrivefetch.models import EntryResult, EntryStatus, RemoteFileEntry, SyncResult
from gdrivefetch.util.mime import is_download_disallowed
from gdrivefetch.util.paths import local_path_for, regular_file_exists
from gdrivefetch.util.time import parse_rfc3339, to_epoch_ns

logger = logging.getLogger(__name__)


class MediaSource(Protocol):
    def iter_media(self, file_id: str) -> Iterator[bytes]:
        ...


class SyncEngine:
    """
    Per-entry download loop.

    Every failure here is scoped to one entry: it is logged, recorded in the
    returned SyncResult and the loop moves on. Nothing is retried; the next
    run picks up whatever is still missing.
    """

    def __init__(self, source: MediaSource) -> None:
        self._source = source

    def sync(
        self,
        entries: Iterable[RemoteFileEntry],
        target_dir: str,
        *,
        folder_id: str = "",
    ) -> SyncResult:
        result = SyncResult(folder_id=folder_id, target_dir=target_dir)
        for entry in entries:
            result.add(self.sync_entry(entry, target_dir))

        summary = result.summary
        logger.info(
            "Sync finished: "
            + ", ".join(f"{status}={count}" for status, count in summary.items())
        )
        return result

    def sync_entry(self, entry: RemoteFileEntry, target_dir: str) -> EntryResult:
        logger.info(f"Found file {entry.name} {entry.file_id} {entry.created_time}")

        out_path = local_path_for(target_dir, entry.name)
        logger.info(f">> Outfile name is {out_path}")

        if regular_file_exists(out_path):
            logger.info(f">> File already exists {out_path}")
            return _result(entry, out_path, EntryStatus.SKIPPED)

        if entry.mime_type and is_download_disallowed(entry.mime_type):
            logger.warning(
                f">> File is not downloadable ({entry.mime_type}), skipping {entry.name}"
            )
            return _result(entry, out_path, EntryStatus.UNSUPPORTED)

        logger.info(f">> Downloading to {out_path}")
        failure = self._download(entry, out_path)
        if failure is not None:
            return failure

        logger.info(f">> mtime {entry.modified_time}")
        warned = not apply_remote_mtime(out_path, entry.modified_time)

        logger.info(">> Storing as file OK")
        return _result(entry, out_path, EntryStatus.DOWNLOADED, timestamp_warning=warned)

    def _download(self, entry: RemoteFileEntry, out_path: str) -> Optional[EntryResult]:
        """Copy the entry's content to out_path. Returns a result only on failure."""
        chunks: Iterator[bytes] = iter(())
        try:
            try:
                chunks = iter(self._source.iter_media(entry.file_id))
                first = next(chunks, b"")
            except GDriveFetchError as exc:
                logger.error(f">> Failed to download {entry.name}: {exc}")
                return _failed(entry, out_path, EntryStatus.DOWNLOAD_FAILED, exc)

            logger.info(">> Download response OK")

            try:
                out = open(out_path, "wb")
            except OSError as exc:
                logger.error(f">> Failed to create filename {out_path}: {exc}")
                return _failed(entry, out_path, EntryStatus.CREATE_FAILED, exc)

            try:
                with out:
                    out.write(first)
                    for chunk in chunks:
                        out.write(chunk)
            except (GDriveFetchError, OSError) as exc:
                logger.error(f">> Failed while copying {entry.name}: {exc}")
                _remove_partial(out_path)
                return _failed(entry, out_path, EntryStatus.DOWNLOAD_FAILED, exc)
        finally:
            _close(chunks)

        return None


def apply_remote_mtime(path: str, modified_time: Optional[str]) -> bool:
    """
    Set atime and mtime of path to the remote modification time.

    Returns False (after logging a warning) when the timestamp is missing,
    cannot be parsed, or cannot be applied; the file itself is left alone.
    """
    if not modified_time:
        logger.warning(f">> WARN: No modified time for {path}")
        return False

    try:
        ns = to_epoch_ns(parse_rfc3339(modified_time))
    except ValueError:
        logger.warning(f">> WARN: Failed to parse modified time {modified_time!r}")
        return False

    try:
        os.utime(path, ns=(ns, ns))
    except OSError as exc:
        logger.warning(f">> WARN: Failed to change modification time of {path}: {exc}")
        return False
    return True


def _close(chunks: Iterator[bytes]) -> None:
    close = getattr(chunks, "close", None)
    if close is not None:
        close()


def _remove_partial(path: str) -> None:
    # A leftover partial file would be taken as "already synced" next run.
    try:
        os.remove(path)
    except FileNotFoundError:
        pass
    except OSError as exc:
        logger.warning(f">> WARN: Could not remove partial file {path}: {exc}")


def _result(
    entry: RemoteFileEntry,
    out_path: str,
    status: EntryStatus,
    *,
    timestamp_warning: bool = False,
) -> EntryResult:
    return EntryResult(
        file_id=entry.file_id,
        name=entry.name,
        local_path=out_path,
        status=status,
        timestamp_warning=timestamp_warning,
    )


def _failed(
    entry: RemoteFileEntry,
    out_path: str,
    status: EntryStatus,
    exc: Exception,
) -> EntryResult:
    return EntryResult(
        file_id=entry.file_id,
        name=entry.name,
        local_path=out_path,
        status=status,
        error_type=exc.__class__.__name__,
        error_message=str(exc),
    )
