"""CLI argument and default-path behavior tests.

Verifies how ``filepicker.cli.main`` chooses the directory and what it prints.
"""

from __future__ import annotations

import io
import os
import sys
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from filepicker import cli, config


class CliTests(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self._tmp.cleanup)
        self.config_path = Path(self._tmp.name).resolve() / "config" / "config.json"
        patcher = mock.patch("filepicker.config.CONFIG_PATH", self.config_path)
        patcher.start()
        self.addCleanup(patcher.stop)

    def _run(self, argv: list[str], **kwargs) -> str:
        stdout = io.StringIO()
        with mock.patch.object(sys, "argv", ["filepicker", *argv]), mock.patch("sys.stdout", stdout):
            cli.main(**kwargs)
        return stdout.getvalue()

    def _make_directory(self) -> Path:
        root = Path(self._tmp.name).resolve() / "browse"
        (root / "images").mkdir(parents=True)
        (root / "disk.img").write_bytes(b"x" * 1340)
        (root / ".secret").write_text("hidden", encoding="utf-8")
        return root

    def test_lists_directory_and_remembers_it(self) -> None:
        root = self._make_directory()

        output = self._run([str(root), "--no-color", "--name-limit", "10"])

        lines = output.splitlines()
        self.assertEqual(lines[0].split(" > ")[-1], "browse")
        self.assertEqual(lines[1:], ["  [D] images", "  [F] disk.img    1.34 kB"])
        self.assertNotIn(".secret", output)
        self.assertEqual(config.load_last_directory(), root)

    def test_default_path_used_when_no_argument(self) -> None:
        root = self._make_directory()
        output = self._run(["--no-color"], default_path=root)
        self.assertIn("[D] images", output)

    def test_remembered_directory_used_when_no_argument(self) -> None:
        root = self._make_directory()
        config.save_last_directory(root)
        previous_cwd = Path.cwd()
        try:
            os.chdir(self._tmp.name)
            output = self._run(["--no-color"])
        finally:
            os.chdir(previous_cwd)
        self.assertIn("[F] disk.img", output)

    def test_metadata_mode_skips_missing_names(self) -> None:
        root = self._make_directory()

        output = self._run([str(root), "--no-color", "--metadata", "disk.img", "missing", "images"])

        self.assertEqual(output.splitlines()[1:], ["  [F] disk.img              1.34 kB", "  [D] images"])

    def test_extensions_flag_changes_selectability_and_persists(self) -> None:
        root = self._make_directory()

        output = self._run([str(root), "--no-color", "--extensions", "iso"])

        self.assertIn("- [F] disk.img", output)
        self.assertEqual(config.load_selectable_extensions(), {".iso"})

    def test_recent_mode_lists_existing_recent_files(self) -> None:
        root = self._make_directory()
        kept = root / "disk.img"
        gone = root / "gone.img"
        config.record_recent_file(gone)
        config.record_recent_file(kept)

        output = self._run(["--recent", "--no-color", "--name-limit", "10"])

        self.assertEqual(output.splitlines(), ["  [F] disk.img    1.34 kB"])

    def test_missing_path_exits_with_message(self) -> None:
        missing = Path(self._tmp.name) / "nope"
        with self.assertRaises(SystemExit) as exc_info:
            self._run([str(missing)])
        self.assertEqual(str(exc_info.exception), f"Path not found: {missing}")

    def test_unreadable_directory_exits_with_message(self) -> None:
        root = self._make_directory()
        with mock.patch("filepicker.cli.readdir", side_effect=PermissionError(13, "Permission denied")):
            with self.assertRaises(SystemExit) as exc_info:
                self._run([str(root)])
        self.assertEqual(str(exc_info.exception), f"Cannot read directory: {root}: Permission denied")
        self.assertIsNone(config.load_last_directory())


if __name__ == "__main__":
    unittest.main()
