"""Google Drive API controller (internal use only)."""

from __future__ import annotations

import io
import json
import logging
import time
from dataclasses import dataclass
from typing import Any, Callable, Iterator, Optional, Sequence, TypeVar

from gdrivefetch.auth import READONLY_SCOPES, AuthInfo, OAuthClient
from gdrivefetch.auth.code_provider import CodeProvider
from gdrivefetch.errors import (
    ApiError,
    AuthError,
    EmptyFolderError,
    FolderNotFoundError,
    HttpErrorInfo,
    InvalidArgumentError,
    NetworkError,
    RateLimitError,
    map_http_error,
)
from gdrivefetch.models import RemoteFileEntry, RemoteFolder

from .fields import FOLDER_FIELDS, LIST_FIELDS, ORDER_BY_CREATED_DESC
from .query import build_folder_query, build_parent_query

logger = logging.getLogger(__name__)

T = TypeVar("T")

DEFAULT_PAGE_SIZE = 25
MAX_PAGE_SIZE = 1000
DEFAULT_CHUNK_SIZE = 10 * 1024 * 1024


@dataclass(frozen=True)
class _RetryPolicy:
    max_retries: int = 0
    initial_delay_sec: float = 1.0


class GoogleDriveController:
    """
    Drive API controller (internal only).

    Notes:
        - The Drive `service` object is NOT exposed.
        - No retries by default; `max_retries` enables exponential backoff for
          rate-limit, network and 5xx errors.
    """

    DEFAULT_SCOPES: tuple[str, ...] = READONLY_SCOPES

    def __init__(
        self,
        auth_info: AuthInfo,
        *,
        scopes: Optional[Sequence[str]] = None,
        code_provider: Optional[CodeProvider] = None,
        max_retries: int = 0,
    ) -> None:
        self._retry_policy = _RetryPolicy(max_retries=max_retries)

        use_scopes = list(scopes) if scopes is not None else list(self.DEFAULT_SCOPES)
        client = OAuthClient(auth_info, code_provider=code_provider)
        self._service = client.build_drive_service(use_scopes, ensure_valid=True)

    @classmethod
    def from_service(
        cls,
        service: Any,
        *,
        max_retries: int = 0,
        initial_delay_sec: float = 1.0,
    ) -> "GoogleDriveController":
        """Create controller from a pre-built Drive service (useful for tests)."""
        obj = cls.__new__(cls)
        obj._retry_policy = _RetryPolicy(
            max_retries=max_retries,
            initial_delay_sec=initial_delay_sec,
        )
        obj._service = service
        return obj

    # ----------------------------
    # Public API
    # ----------------------------
    def find_folder(self, name: str) -> RemoteFolder:
        """
        Resolve a folder by exact name.

        Only one result is requested; when several folders share the name,
        Drive's first match wins.

        Raises:
            FolderNotFoundError: if no folder has that name.
        """
        if not isinstance(name, str) or not name:
            raise InvalidArgumentError("folder name must be a non-empty string")

        req = self._service.files().list(
            q=build_folder_query(name),
            pageSize=1,
            fields=FOLDER_FIELDS,
        )
        data = self._execute(req.execute)
        files = data.get("files", []) or []
        if not files:
            raise FolderNotFoundError(
                "No folders found.",
                details={"folder_name": name},
            )

        folder = _folder_dict_to_remote_folder(files[0])
        logger.info(f"Found folder {folder.name} {folder.folder_id}")
        return folder

    def list_children(
        self,
        folder_id: str,
        *,
        page_size: int = DEFAULT_PAGE_SIZE,
        all_pages: bool = False,
    ) -> list[RemoteFileEntry]:
        """
        List the folder's children, newest first.

        Only the first page is fetched unless `all_pages` is True.

        Raises:
            EmptyFolderError: if the folder has no children.
        """
        if not isinstance(page_size, int) or not 1 <= page_size <= MAX_PAGE_SIZE:
            raise InvalidArgumentError(
                f"page_size must be an integer between 1 and {MAX_PAGE_SIZE}",
                details={"page_size": page_size},
            )

        q = build_parent_query(folder_id)
        entries: list[RemoteFileEntry] = []
        page_token: Optional[str] = None

        while True:
            req = self._service.files().list(
                q=q,
                pageSize=page_size,
                orderBy=ORDER_BY_CREATED_DESC,
                fields=LIST_FIELDS,
                pageToken=page_token,
            )
            data = self._execute(req.execute)
            for f in data.get("files", []) or []:
                entries.append(_file_dict_to_entry(f))

            page_token = data.get("nextPageToken")
            if not all_pages or not page_token:
                break

        if not entries:
            raise EmptyFolderError("No files found.", details={"folder_id": folder_id})
        return entries

    def iter_media(
        self,
        file_id: str,
        *,
        chunk_size: int = DEFAULT_CHUNK_SIZE,
    ) -> Iterator[bytes]:
        """
        Stream a file's raw content in chunks.

        Nothing is requested until the first chunk is pulled. Closing the
        iterator stops the download.
        """
        try:
            from googleapiclient.http import MediaIoBaseDownload
        except Exception as exc:  # pragma: no cover
            raise AuthError(
                "google-api-python-client is not available",
                cause=exc,
            ) from exc

        req = self._execute(lambda: self._service.files().get_media(fileId=file_id))
        buf = io.BytesIO()
        downloader = MediaIoBaseDownload(buf, req, chunksize=chunk_size)

        done = False
        while not done:
            _status, done = self._execute(downloader.next_chunk)
            data = buf.getvalue()
            buf.seek(0)
            buf.truncate()
            yield data

    # ----------------------------
    # Internals
    # ----------------------------
    def _execute(self, func: Callable[[], T]) -> T:
        delay = self._retry_policy.initial_delay_sec
        for attempt in range(self._retry_policy.max_retries + 1):
            try:
                return func()
            except Exception as exc:
                mapped = self._map_exception(exc)
                if self._should_retry(mapped) and attempt < self._retry_policy.max_retries:
                    logger.warning(f"{mapped}; retrying in {delay:.1f}s")
                    time.sleep(delay)
                    delay *= 2
                    continue
                raise mapped from exc

        raise ApiError("Unexpected retry loop termination")

    def _should_retry(self, exc: Exception) -> bool:
        if isinstance(exc, RateLimitError):
            return True
        if isinstance(exc, NetworkError):
            return True
        if isinstance(exc, ApiError):
            status_code = getattr(exc, "details", {}).get("status_code")
            return isinstance(status_code, int) and 500 <= status_code <= 599
        return False

    def _map_exception(self, exc: Exception) -> Exception:
        try:
            from googleapiclient.errors import HttpError
        except Exception:  # pragma: no cover
            HttpError = None  # type: ignore[assignment]

        if HttpError is not None and isinstance(exc, HttpError):
            info = _http_error_to_info(exc)
            return map_http_error(info, cause=exc)

        if isinstance(exc, (OSError, TimeoutError)):
            return NetworkError("Network error", cause=exc)

        return ApiError("Drive API error", cause=exc)


def _folder_dict_to_remote_folder(data: dict[str, Any]) -> RemoteFolder:
    folder_id = data.get("id")
    if not isinstance(folder_id, str) or not folder_id:
        raise ApiError("Drive returned a folder without an id", details={"data": data})
    name = data.get("name", "")
    return RemoteFolder(folder_id=folder_id, name=name if isinstance(name, str) else "")


def _file_dict_to_entry(data: dict[str, Any]) -> RemoteFileEntry:
    file_id = data.get("id")
    name = data.get("name", "")
    mime_type = data.get("mimeType", "")
    created_time = data.get("createdTime")
    modified_time = data.get("modifiedTime")

    return RemoteFileEntry(
        file_id=file_id if isinstance(file_id, str) else "",
        name=name if isinstance(name, str) else "",
        mime_type=mime_type if isinstance(mime_type, str) else "",
        created_time=created_time if isinstance(created_time, str) else None,
        modified_time=modified_time if isinstance(modified_time, str) else None,
    )


def _http_error_to_info(exc: Any) -> HttpErrorInfo:
    status_code = getattr(getattr(exc, "resp", None), "status", None)
    reason = getattr(getattr(exc, "resp", None), "reason", None)

    message = None
    details: dict[str, Any] = {}

    content = getattr(exc, "content", None)
    if isinstance(content, (bytes, bytearray)):
        try:
            payload = json.loads(content.decode("utf-8"))
        except ValueError:
            payload = None
        err = payload.get("error", {}) if isinstance(payload, dict) else {}
        if isinstance(err, dict):
            message = err.get("message") or None
            errors = err.get("errors") or []
            if errors and isinstance(errors, list) and isinstance(errors[0], dict):
                details["domain"] = errors[0].get("domain")
                details["reason_detail"] = errors[0].get("reason")
                if isinstance(errors[0].get("reason"), str):
                    reason = errors[0]["reason"]

    if not isinstance(status_code, int):
        status_code = 0

    return HttpErrorInfo(
        status_code=status_code,
        reason=reason if isinstance(reason, str) else None,
        message=message,
        details=details or None,
    )
