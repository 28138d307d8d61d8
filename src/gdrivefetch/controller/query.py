"""Drive search query construction.

Values are always escaped before they are placed inside a quoted string
literal of the Drive query language.
"""

from __future__ import annotations

from gdrivefetch.util.mime import FOLDER_MIME


def escape_query_value(value: str) -> str:
    """Escape a value for use inside single quotes in a Drive query."""
    if not isinstance(value, str):
        raise TypeError("query value must be a string")
    return value.replace("\\", "\\\\").replace("'", "\\'")


def quote(value: str) -> str:
    return f"'{escape_query_value(value)}'"


def build_folder_query(name: str, *, include_trashed: bool = False) -> str:
    q = f"mimeType = {quote(FOLDER_MIME)} and name = {quote(name)}"
    if not include_trashed:
        q = f"{q} and trashed = false"
    return q


def build_parent_query(parent_id: str, *, include_trashed: bool = False) -> str:
    q = f"{quote(parent_id)} in parents"
    if not include_trashed:
        q = f"{q} and trashed = false"
    return q
