#!/usr/bin/env python3
"""
Tests for schema-driven configuration loading.

Validates defaults, environment overrides, .env.local loading, CLI
overrides, and value validation.
"""

import os
import shutil
import tempfile
import unittest
from unittest.mock import patch

from artist_pairs.cli.parser import create_argument_parser
from artist_pairs.config import ConfigError, ConfigLoader, ConfigSchema


class ConfigTestCase(unittest.TestCase):
    """Base class pointing the loader at a dotenv file that does not exist."""

    def setUp(self):
        self.temp_dir = tempfile.mkdtemp()
        self.dotenv_path = os.path.join(self.temp_dir, ".env.local")

    def tearDown(self):
        shutil.rmtree(self.temp_dir)

    def load(self, argv=None):
        args = create_argument_parser().parse_args(argv) if argv is not None else None
        return ConfigLoader.load(schema=ConfigSchema, cli_args=args, dotenv_path=self.dotenv_path)


class TestConfigDefaults(ConfigTestCase):

    @patch.dict(os.environ, {}, clear=True)
    def test_defaults(self):
        config = self.load()
        self.assertEqual(config.input_path, "Artist_lists_small.txt")
        self.assertEqual(config.min_times, 50)
        self.assertIsNone(config.output_path)
        self.assertFalse(config.strip_names)
        self.assertEqual(config.max_artists_per_record, 50)

    @patch.dict(os.environ, {}, clear=True)
    def test_defaults_with_empty_command_line(self):
        config = self.load([])
        self.assertEqual(config.min_times, 50)


class TestConfigOverrides(ConfigTestCase):

    @patch.dict(os.environ, {
        "ARTIST_PAIRS_INPUT_PATH": "favorites.txt",
        "ARTIST_PAIRS_MIN_TIMES": "10",
        "ARTIST_PAIRS_OUTPUT_PATH": "pairs.txt",
        "ARTIST_PAIRS_STRIP_NAMES": "yes",
        "ARTIST_PAIRS_MAX_ARTISTS": "20",
    }, clear=True)
    def test_env_overrides(self):
        config = self.load()
        self.assertEqual(config.input_path, "favorites.txt")
        self.assertEqual(config.min_times, 10)
        self.assertEqual(config.output_path, "pairs.txt")
        self.assertTrue(config.strip_names)
        self.assertEqual(config.max_artists_per_record, 20)

    @patch.dict(os.environ, {"ARTIST_PAIRS_MIN_TIMES": "   "}, clear=True)
    def test_blank_env_value_uses_default(self):
        self.assertEqual(self.load().min_times, 50)

    @patch.dict(os.environ, {
        "ARTIST_PAIRS_INPUT_PATH": "env.txt",
        "ARTIST_PAIRS_MIN_TIMES": "10",
    }, clear=True)
    def test_cli_overrides_env(self):
        config = self.load([
            "--input-file", "cli.txt",
            "--min-times", "3",
            "--strip-names", "true",
            "--output", "out.txt",
            "--max-artists", "7",
        ])
        self.assertEqual(config.input_path, "cli.txt")
        self.assertEqual(config.min_times, 3)
        self.assertTrue(config.strip_names)
        self.assertEqual(config.output_path, "out.txt")
        self.assertEqual(config.max_artists_per_record, 7)

    @patch.dict(os.environ, {"ARTIST_PAIRS_OUTPUT_PATH": "pairs.txt"}, clear=True)
    def test_empty_cli_string_clears_value(self):
        config = self.load(["--output", ""])
        self.assertIsNone(config.output_path)

    @patch.dict(os.environ, {}, clear=True)
    def test_dotenv_file_loaded(self):
        with open(self.dotenv_path, "w", encoding="utf-8") as f:
            f.write("ARTIST_PAIRS_MIN_TIMES=25\n")

        self.assertEqual(self.load().min_times, 25)

    @patch.dict(os.environ, {"ARTIST_PAIRS_MIN_TIMES": "5"}, clear=True)
    def test_environment_wins_over_dotenv_file(self):
        with open(self.dotenv_path, "w", encoding="utf-8") as f:
            f.write("ARTIST_PAIRS_MIN_TIMES=25\n")

        self.assertEqual(self.load().min_times, 5)


class TestConfigValidation(ConfigTestCase):

    @patch.dict(os.environ, {"ARTIST_PAIRS_MIN_TIMES": "-1"}, clear=True)
    def test_negative_threshold_rejected(self):
        with self.assertRaises(ConfigError) as cm:
            self.load()
        self.assertIn("ARTIST_PAIRS_MIN_TIMES", str(cm.exception))

    @patch.dict(os.environ, {"ARTIST_PAIRS_MIN_TIMES": "many"}, clear=True)
    def test_non_integer_threshold_rejected(self):
        with self.assertRaises(ConfigError):
            self.load()

    @patch.dict(os.environ, {"ARTIST_PAIRS_STRIP_NAMES": "maybe"}, clear=True)
    def test_invalid_boolean_rejected(self):
        with self.assertRaises(ConfigError) as cm:
            self.load()
        self.assertIn("ARTIST_PAIRS_STRIP_NAMES", str(cm.exception))

    @patch.dict(os.environ, {"ARTIST_PAIRS_MAX_ARTISTS": "0"}, clear=True)
    def test_max_artists_must_be_positive(self):
        with self.assertRaises(ConfigError):
            self.load()

    def test_unknown_fields_rejected(self):
        with self.assertRaises(Exception):
            ConfigSchema(unknown_option=True)


class TestArgumentParser(unittest.TestCase):
    """Test cases for the generated CLI argument parser."""

    def setUp(self):
        self.parser = create_argument_parser()

    def test_arguments_default_to_none(self):
        args = self.parser.parse_args([])
        self.assertIsNone(args.input_file)
        self.assertIsNone(args.min_times)
        self.assertIsNone(args.output)
        self.assertIsNone(args.strip_names)
        self.assertFalse(args.verbose)

    def test_min_times_is_integer(self):
        args = self.parser.parse_args(["--min-times", "12"])
        self.assertEqual(args.min_times, 12)

    def test_invalid_min_times_exits(self):
        with patch('sys.stderr'):
            with self.assertRaises(SystemExit):
                self.parser.parse_args(["--min-times", "lots"])

    def test_strip_names_choices(self):
        with patch('sys.stderr'):
            with self.assertRaises(SystemExit):
                self.parser.parse_args(["--strip-names", "maybe"])


if __name__ == '__main__':
    unittest.main()
