import os
import tempfile
import unittest
from unittest.mock import patch

from gdrivefetch.config import SyncConfig
from gdrivefetch.errors import EmptyFolderError, FolderNotFoundError, LocalIOError
from gdrivefetch.manager import FolderSyncer
from gdrivefetch.models import EntryStatus, RemoteFileEntry, RemoteFolder

MTIME = "2023-05-01T12:00:00.000Z"


class FakeController:
    def __init__(self, folders=None, entries=None) -> None:
        self.calls = []
        self.folders = folders if folders is not None else {"Photos": "D1"}
        self.entries = entries if entries is not None else [
            RemoteFileEntry("A", "A.txt", "text/plain", MTIME, MTIME),
            RemoteFileEntry("B", "B (1).dat", "application/octet-stream", MTIME, MTIME),
            RemoteFileEntry("C", "\x1b.bin", "application/octet-stream", MTIME, MTIME),
        ]

    def find_folder(self, name: str) -> RemoteFolder:
        self.calls.append(("find_folder", name))
        if name not in self.folders:
            raise FolderNotFoundError("No folders found.", details={"folder_name": name})
        return RemoteFolder(folder_id=self.folders[name], name=name)

    def list_children(self, folder_id: str, *, page_size: int = 25, all_pages: bool = False):
        self.calls.append(("list_children", folder_id, page_size, all_pages))
        if not self.entries:
            raise EmptyFolderError("No files found.", details={"folder_id": folder_id})
        return list(self.entries)

    def iter_media(self, file_id: str):
        self.calls.append(("iter_media", file_id))
        return iter([f"content of {file_id}".encode()])

    def call_names(self) -> list:
        return [c[0] for c in self.calls]


class TestFolderSyncer(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.target = os.path.join(self._tmp.name, "out", "photos")

    def tearDown(self) -> None:
        self._tmp.cleanup()

    def test_end_to_end_creates_sanitized_files(self) -> None:
        ctrl = FakeController()

        result = FolderSyncer(ctrl).run("Photos", self.target)

        self.assertEqual(sorted(os.listdir(self.target)), ["A.txt", "B_1_.dat", "_.bin"])
        self.assertEqual(result.folder_id, "D1")
        self.assertEqual(result.summary["downloaded"], 3)
        self.assertEqual(
            ctrl.call_names(),
            ["find_folder", "list_children", "iter_media", "iter_media", "iter_media"],
        )

    def test_second_run_downloads_nothing(self) -> None:
        FolderSyncer(FakeController()).run("Photos", self.target)

        ctrl = FakeController()
        result = FolderSyncer(ctrl).run("Photos", self.target)

        self.assertNotIn("iter_media", ctrl.call_names())
        self.assertEqual(
            [r.status for r in result.results], [EntryStatus.SKIPPED] * 3
        )

    def test_missing_folder_stops_before_listing(self) -> None:
        ctrl = FakeController(folders={})

        with self.assertRaises(FolderNotFoundError):
            FolderSyncer(ctrl).run("Photos", self.target)

        self.assertEqual(ctrl.call_names(), ["find_folder"])

    def test_empty_folder_stops_before_sync(self) -> None:
        ctrl = FakeController(entries=[])

        with patch("gdrivefetch.manager.SyncEngine.sync") as sync:
            with self.assertRaises(EmptyFolderError):
                FolderSyncer(ctrl).run("Photos", self.target)

        sync.assert_not_called()
        self.assertNotIn("iter_media", ctrl.call_names())

    def test_paging_options_are_forwarded(self) -> None:
        ctrl = FakeController()

        FolderSyncer(ctrl, page_size=100, all_pages=True).run("Photos", self.target)

        self.assertIn(("list_children", "D1", 100, True), ctrl.calls)

    def test_unusable_target_dir(self) -> None:
        blocker = os.path.join(self._tmp.name, "file")
        with open(blocker, "wb") as f:
            f.write(b"x")
        ctrl = FakeController()

        with self.assertRaises(LocalIOError):
            FolderSyncer(ctrl).run("Photos", os.path.join(blocker, "sub"))

        self.assertEqual(ctrl.calls, [])

    def test_from_config_builds_controller(self) -> None:
        config = SyncConfig(
            folder_name="Photos",
            target_dir=self.target,
            client_secrets_file="secrets.json",
            token_file="tok.json",
            page_size=50,
            all_pages=True,
            max_retries=2,
        )
        provider = object()

        with patch("gdrivefetch.manager.GoogleDriveController") as ctrl_cls:
            syncer = FolderSyncer.from_config(config, code_provider=provider)  # type: ignore[arg-type]

        args, kwargs = ctrl_cls.call_args
        self.assertEqual(args[0].token_file, "tok.json")
        self.assertEqual(kwargs["max_retries"], 2)
        self.assertIs(kwargs["code_provider"], provider)
        self.assertEqual(syncer._page_size, 50)
        self.assertTrue(syncer._all_pages)


if __name__ == "__main__":
    unittest.main()
