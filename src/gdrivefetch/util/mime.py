from __future__ import annotations

FOLDER_MIME: str = "application/vnd.google-apps.folder"

GOOGLE_APP_PREFIX: str = "application/vnd.google-apps."


def is_folder(mime_type: str) -> bool:
    return mime_type == FOLDER_MIME


def is_google_app(mime_type: str) -> bool:
    """Returns True if the MIME type is a Google 'apps' type (Docs, Sheets, ...)."""
    return mime_type.startswith(GOOGLE_APP_PREFIX)


def is_download_disallowed(mime_type: str) -> bool:
    """
    Return True when Drive cannot serve the item as raw bytes.

    Folders, shortcuts and Google Docs/Sheets/Slides have no binary content;
    they can only be exported, which this tool does not do.
    """
    return is_folder(mime_type) or is_google_app(mime_type)
