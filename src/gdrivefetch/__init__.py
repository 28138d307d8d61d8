"""gdrivefetch public API."""

from __future__ import annotations

from gdrivefetch.auth import (
    AuthInfo,
    ClientConfig,
    CodeProvider,
    ConsoleCodeProvider,
    OAuthClient,
    StaticCodeProvider,
    TokenStore,
)
from gdrivefetch.config import SyncConfig
from gdrivefetch.controller import GoogleDriveController
from gdrivefetch.errors import (
    ApiError,
    AuthError,
    ConfigError,
    EmptyFolderError,
    FolderNotFoundError,
    GDriveFetchError,
    HttpErrorInfo,
    InvalidArgumentError,
    LocalIOError,
    NetworkError,
    NotFoundError,
    PermissionError,
    QuotaExceededError,
    RateLimitError,
    map_http_error,
)
from gdrivefetch.manager import FolderSyncer
from gdrivefetch.models import (
    EntryResult,
    EntryStatus,
    RemoteFileEntry,
    RemoteFolder,
    SyncResult,
)
from gdrivefetch.sync import SyncEngine
from gdrivefetch.util.paths import sanitize_filename

__all__ = [
    # High-level
    "FolderSyncer",
    "SyncEngine",
    "GoogleDriveController",
    "SyncConfig",
    "sanitize_filename",
    # Auth
    "AuthInfo",
    "ClientConfig",
    "CodeProvider",
    "ConsoleCodeProvider",
    "StaticCodeProvider",
    "OAuthClient",
    "TokenStore",
    # Models
    "RemoteFolder",
    "RemoteFileEntry",
    "EntryStatus",
    "EntryResult",
    "SyncResult",
    # Errors
    "GDriveFetchError",
    "ConfigError",
    "AuthError",
    "PermissionError",
    "InvalidArgumentError",
    "NotFoundError",
    "FolderNotFoundError",
    "EmptyFolderError",
    "RateLimitError",
    "QuotaExceededError",
    "NetworkError",
    "ApiError",
    "LocalIOError",
    "HttpErrorInfo",
    "map_http_error",
]
