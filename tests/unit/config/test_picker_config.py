"""Tests for config persistence and input sanitization."""

from __future__ import annotations

import tempfile
import unittest
from pathlib import Path
from unittest import mock

from filepicker import config
from filepicker.picker import DEFAULT_SELECTABLE_EXTENSIONS
from filepicker.render import FILENAME_CHAR_LIMIT


class ConfigBehaviorTests(unittest.TestCase):
    def test_last_directory_round_trip_requires_existing_directory(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            browsed = root / "browsed"
            browsed.mkdir()
            with mock.patch("filepicker.config.CONFIG_PATH", root / "config.json"):
                self.assertIsNone(config.load_last_directory())
                config.save_last_directory(browsed)
                self.assertEqual(config.load_last_directory(), browsed)

                browsed.rmdir()
                self.assertIsNone(config.load_last_directory())

    def test_selectable_extensions_are_normalized(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            with mock.patch("filepicker.config.CONFIG_PATH", Path(tmp) / "config.json"):
                config.save_selectable_extensions(["IMG", ".Raw"])
                self.assertEqual(config.load_config()["selectable_extensions"], [".img", ".raw"])
                self.assertEqual(config.load_selectable_extensions(), {".img", ".raw"})

    def test_invalid_values_fall_back_to_defaults(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            with mock.patch("filepicker.config.CONFIG_PATH", Path(tmp) / "config.json"):
                config.save_config(
                    {
                        "last_directory": 42,
                        "selectable_extensions": [".img", 3],
                        "name_limit": True,
                    }
                )
                self.assertIsNone(config.load_last_directory())
                self.assertEqual(config.load_selectable_extensions(), DEFAULT_SELECTABLE_EXTENSIONS)
                self.assertEqual(config.load_name_limit(), FILENAME_CHAR_LIMIT)

                config.save_config({"name_limit": 32, "selectable_extensions": ["", "."]})
                self.assertEqual(config.load_name_limit(), 32)
                self.assertEqual(config.load_selectable_extensions(), DEFAULT_SELECTABLE_EXTENSIONS)

    def test_recent_files_are_deduped_capped_and_most_recent_first(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            with mock.patch("filepicker.config.CONFIG_PATH", root / "config.json"):
                self.assertEqual(config.load_recent_files(), [])
                for idx in range(config.MAX_RECENT_FILES + 3):
                    config.record_recent_file(root / f"f{idx}.img")
                config.record_recent_file(root / "f5.img")

                recent = config.load_recent_files()
                self.assertEqual(len(recent), config.MAX_RECENT_FILES)
                self.assertEqual(recent[0], str(root / "f5.img"))
                self.assertEqual(recent[1], str(root / f"f{config.MAX_RECENT_FILES + 2}.img"))
                self.assertEqual(len(set(recent)), len(recent))

    def test_recent_files_skip_invalid_items(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            with mock.patch("filepicker.config.CONFIG_PATH", Path(tmp) / "config.json"):
                config.save_config({"recent_files": ["/a.img", 3, "", "/a.img", "/b.img"]})
                self.assertEqual(config.load_recent_files(), ["/a.img", "/b.img"])
                config.save_config({"recent_files": "not-a-list"})
                self.assertEqual(config.load_recent_files(), [])

    def test_malformed_file_loads_as_empty(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "config.json"
            config_path.write_text("{not json", encoding="utf-8")
            with mock.patch("filepicker.config.CONFIG_PATH", config_path):
                self.assertEqual(config.load_config(), {})
            config_path.write_text("[1, 2]", encoding="utf-8")
            with mock.patch("filepicker.config.CONFIG_PATH", config_path):
                self.assertEqual(config.load_config(), {})


if __name__ == "__main__":
    unittest.main()
