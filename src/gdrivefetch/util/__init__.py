from .mime import FOLDER_MIME, is_download_disallowed, is_folder, is_google_app
from .paths import local_path_for, regular_file_exists, sanitize_filename
from .time import normalize_dt, parse_rfc3339, to_epoch_ns

__all__ = [
    "FOLDER_MIME",
    "is_folder",
    "is_google_app",
    "is_download_disallowed",
    "sanitize_filename",
    "local_path_for",
    "regular_file_exists",
    "parse_rfc3339",
    "to_epoch_ns",
    "normalize_dt",
]
