"""Tests for persisted run defaults.

Validates that malformed or wrongly typed config values are ignored on load.
"""

from __future__ import annotations

import json
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from folderwalk import config


class DefaultsConfigTests(unittest.TestCase):
    def _load_from(self, config_path: Path, data: object) -> config.RunDefaults:
        config_path.write_text(json.dumps(data) + "\n", encoding="utf-8")
        with mock.patch("folderwalk.config.CONFIG_PATH", config_path):
            return config.load_defaults()

    def test_missing_config_yields_builtin_defaults(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "absent" / "config.json"
            with mock.patch("folderwalk.config.CONFIG_PATH", config_path):
                self.assertEqual(config.load_config(), {})
                self.assertEqual(config.load_defaults(), config.RunDefaults())

    def test_stored_values_are_loaded(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            defaults = self._load_from(Path(tmp) / "config.json", {"ascii": True, "content": True, "max_depth": 3})

            self.assertEqual(defaults, config.RunDefaults(ascii_only=True, show_content=True, max_depth=3))

    def test_zero_depth_is_kept(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            defaults = self._load_from(Path(tmp) / "config.json", {"max_depth": 0})

            self.assertEqual(defaults.max_depth, 0)

    def test_malformed_json_falls_back_to_empty_config(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "config.json"
            config_path.write_text("{not json", encoding="utf-8")
            with mock.patch("folderwalk.config.CONFIG_PATH", config_path):
                self.assertEqual(config.load_config(), {})
                self.assertEqual(config.load_defaults(), config.RunDefaults())

    def test_non_object_json_falls_back_to_empty_config(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            defaults = self._load_from(Path(tmp) / "config.json", [1, 2])

            self.assertEqual(defaults, config.RunDefaults())

    def test_wrongly_typed_values_are_ignored(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "config.json"
            for raw_depth in (True, -1, 2.5, "4"):
                with self.subTest(max_depth=raw_depth):
                    defaults = self._load_from(config_path, {"ascii": "yes", "content": 1, "max_depth": raw_depth})
                    self.assertEqual(defaults, config.RunDefaults())

    def test_config_file_is_read_once_per_load(self) -> None:
        with mock.patch("folderwalk.config.load_config", return_value={"ascii": True}) as load_config:
            defaults = config.load_defaults()

        load_config.assert_called_once_with()
        self.assertTrue(defaults.ascii_only)


if __name__ == "__main__":
    unittest.main()
