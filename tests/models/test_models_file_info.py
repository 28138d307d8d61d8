import dataclasses
import unittest

from gdrivefetch.models import RemoteFileEntry, RemoteFolder


class TestRemoteModels(unittest.TestCase):
    def test_entry_defaults(self) -> None:
        entry = RemoteFileEntry(file_id="F1", name="a.txt")
        self.assertEqual(entry.mime_type, "")
        self.assertIsNone(entry.created_time)
        self.assertIsNone(entry.modified_time)

    def test_entry_is_immutable(self) -> None:
        entry = RemoteFileEntry(file_id="F1", name="a.txt")
        with self.assertRaises(dataclasses.FrozenInstanceError):
            entry.name = "b.txt"  # type: ignore[misc]

    def test_folder_fields(self) -> None:
        folder = RemoteFolder(folder_id="D1", name="Photos")
        self.assertEqual(folder.folder_id, "D1")
        self.assertEqual(folder.name, "Photos")


if __name__ == "__main__":
    unittest.main()
