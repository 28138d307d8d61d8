"""FolderSyncer: resolve a folder by name, list it, and sync it locally."""

from __future__ import annotations

import logging
import os
from typing import Optional

from gdrivefetch.auth.code_provider import CodeProvider
from gdrivefetch.config import SyncConfig
from gdrivefetch.controller import DEFAULT_PAGE_SIZE, GoogleDriveController
from gdrivefetch.errors import LocalIOError
from gdrivefetch.models import SyncResult
from gdrivefetch.sync import SyncEngine

logger = logging.getLogger(__name__)


class FolderSyncer:
    """
    High-level entry point for one run.

    Fatal conditions (no folder, empty folder, auth failures, unusable target
    directory) propagate as gdrivefetch errors. Deciding to exit the process
    is left to the caller.
    """

    def __init__(
        self,
        controller: GoogleDriveController,
        *,
        page_size: int = DEFAULT_PAGE_SIZE,
        all_pages: bool = False,
    ) -> None:
        self._controller = controller
        self._engine = SyncEngine(controller)
        self._page_size = page_size
        self._all_pages = all_pages

    @classmethod
    def from_config(
        cls,
        config: SyncConfig,
        *,
        code_provider: Optional[CodeProvider] = None,
    ) -> "FolderSyncer":
        """Authenticate and build a syncer for the given configuration."""
        controller = GoogleDriveController(
            config.auth_info,
            scopes=config.scopes,
            code_provider=code_provider,
            max_retries=config.max_retries,
        )
        return cls(controller, page_size=config.page_size, all_pages=config.all_pages)

    def run(self, folder_name: str, target_dir: str) -> SyncResult:
        """
        Sync the named Drive folder into target_dir.

        Raises:
            LocalIOError: if target_dir cannot be created.
            FolderNotFoundError: if no folder has that name.
            EmptyFolderError: if the folder lists no files.
        """
        prepare_target_dir(target_dir)

        folder = self._controller.find_folder(folder_name)
        entries = self._controller.list_children(
            folder.folder_id,
            page_size=self._page_size,
            all_pages=self._all_pages,
        )
        logger.info(f"Listed {len(entries)} entries in {folder.name}")
        return self._engine.sync(entries, target_dir, folder_id=folder.folder_id)


def prepare_target_dir(target_dir: str) -> None:
    try:
        os.makedirs(target_dir, mode=0o755, exist_ok=True)
    except OSError as exc:
        raise LocalIOError(
            "Unable to create target dir",
            details={"target_dir": target_dir},
            cause=exc,
        ) from exc
