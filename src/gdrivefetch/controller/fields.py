"""Field definitions for Google Drive API responses."""

from __future__ import annotations

FOLDER_FIELDS: str = "files(id,name)"

ENTRY_FIELDS: str = (
    "id,"
    "name,"
    "mimeType,"
    "createdTime,"
    "modifiedTime"
)

LIST_FIELDS: str = f"nextPageToken,files({ENTRY_FIELDS})"

ORDER_BY_CREATED_DESC: str = "createdTime desc"
