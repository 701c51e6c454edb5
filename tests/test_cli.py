# ==============================================================================
# File: tests/test_cli.py
# Purpose: Tests for the command-line interface and logging setup.
# ==============================================================================
import unittest
import tempfile
import logging

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from typer.testing import CliRunner

from chunkcodec import __version__
from chunkcodec.cli import app
from chunkcodec.config import ChunkLayout, get_preset
from chunkcodec.logs import setup_logging

runner = CliRunner()


class TestCli(unittest.TestCase):

    def test_version(self):
        result = runner.invoke(app, ["--version"])
        self.assertEqual(result.exit_code, 0)
        self.assertIn(__version__, result.output)

    def test_encode(self):
        result = runner.invoke(app, ["encode", "--", "-3", "7"])
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("204", result.output)

    def test_encode_negative_without_separator(self):
        result = runner.invoke(app, ["encode", "-3", "7"])
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("204", result.output)

    def test_encode_out_of_range(self):
        result = runner.invoke(app, ["encode", "--", "0", "-2147483648"])
        self.assertEqual(result.exit_code, 1)
        self.assertIn("Error", result.output)

    def test_decode(self):
        result = runner.invoke(app, ["decode", "204"])
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("-3 7", result.output)

    def test_decode_negative_key(self):
        result = runner.invoke(app, ["decode", "--", "-1"])
        self.assertEqual(result.exit_code, 1)
        self.assertIn("Error", result.output)

    def test_split(self):
        result = runner.invoke(app, ["split", "--preset", "cubic16", "--", "-33", "70", "12"])
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("-3", result.output)
        self.assertIn("15", result.output)

    def test_split_with_layout_file(self):
        with tempfile.TemporaryDirectory() as tmp_dir:
            path = Path(tmp_dir) / "layout.json"
            ChunkLayout(power_x=2, power_y=2, power_z=2).save(path)
            result = runner.invoke(app, ["split", "--layout", str(path), "--", "9", "0", "-1"])
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("Position (9, 0, -1)", result.output)

    def test_split_with_non_object_layout_file(self):
        with tempfile.TemporaryDirectory() as tmp_dir:
            path = Path(tmp_dir) / "layout.json"
            path.write_text("[5, 6, 5]")
            result = runner.invoke(app, ["split", "--layout", str(path), "1", "2", "3"])
        self.assertEqual(result.exit_code, 1)
        self.assertIsInstance(result.exception, SystemExit)
        self.assertIn("Error", result.output)

    def test_split_unknown_preset(self):
        result = runner.invoke(app, ["split", "--preset", "nope", "1", "2", "3"])
        self.assertEqual(result.exit_code, 1)
        self.assertIn("Unknown preset", result.output)

    def test_power(self):
        result = runner.invoke(app, ["power", "17"])
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("32", result.output)
        self.assertIn("False", result.output)

    def test_power_non_positive(self):
        result = runner.invoke(app, ["power", "--", "-5"])
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("Note", result.output)

    def test_list_presets(self):
        result = runner.invoke(app, ["list-presets"])
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("column16", result.output)

    def test_layout_writes_preset(self):
        with tempfile.TemporaryDirectory() as tmp_dir:
            path = Path(tmp_dir) / "cubic.json"
            result = runner.invoke(app, ["layout", "cubic32", "--output", str(path)])
            self.assertEqual(result.exit_code, 0, result.output)
            self.assertEqual(ChunkLayout.load(path), get_preset("cubic32"))

    def test_layout_unwritable_output(self):
        with tempfile.TemporaryDirectory() as tmp_dir:
            path = Path(tmp_dir) / "missing" / "cubic.json"
            result = runner.invoke(app, ["layout", "cubic32", "--output", str(path)])
        self.assertEqual(result.exit_code, 1)
        self.assertIsInstance(result.exception, SystemExit)
        self.assertIn("Error", result.output)


class TestLogging(unittest.TestCase):

    def test_verbose_enables_debug(self):
        setup_logging(verbose=True)
        self.assertEqual(logging.getLogger("chunkcodec").level, logging.DEBUG)
        setup_logging(verbose=False)
        self.assertEqual(logging.getLogger("chunkcodec").level, logging.WARNING)


if __name__ == "__main__":
    unittest.main()
