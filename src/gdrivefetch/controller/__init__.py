"""Internal controller exports for gdrivefetch."""

from __future__ import annotations

from .drive_controller import DEFAULT_PAGE_SIZE, GoogleDriveController
from .query import build_folder_query, build_parent_query, escape_query_value

__all__ = [
    "GoogleDriveController",
    "DEFAULT_PAGE_SIZE",
    "build_folder_query",
    "build_parent_query",
    "escape_query_value",
]
