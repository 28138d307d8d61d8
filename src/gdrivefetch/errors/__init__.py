"""Public error exports for gdrivefetch."""

from __future__ import annotations

from .exceptions import (
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

__all__ = [
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
