"""
Tests for configuration defaults and environment overrides.
"""
import unittest
from pathlib import Path
from unittest.mock import patch

from analizilo import config


class TestConfig(unittest.TestCase):

    def test_default_dictionary_path(self):
        with patch.dict("os.environ", {}, clear=True):
            self.assertEqual(config.dictionary_path(), config.DEFAULT_DICTIONARY_PATH)
        self.assertEqual(config.DEFAULT_DICTIONARY_PATH.name, "vortaro.tsv")

    def test_dictionary_path_override(self):
        with patch.dict("os.environ", {"ANALIZILO_VORTARO": "/tmp/alia.tsv"}):
            self.assertEqual(config.dictionary_path(), Path("/tmp/alia.tsv"))

    def test_log_file(self):
        with patch.dict("os.environ", {}, clear=True):
            self.assertEqual(config.log_file(), "analizilo.log")
        with patch.dict("os.environ", {"ANALIZILO_LOG_FILE": "/tmp/a.log"}):
            self.assertEqual(config.log_file(), "/tmp/a.log")

    def test_supported_python(self):
        pyproject = Path(__file__).parent.parent / "pyproject.toml"
        self.assertIn('requires-python = ">=3.9"', pyproject.read_text(encoding="utf-8"))


if __name__ == '__main__':
    unittest.main()
