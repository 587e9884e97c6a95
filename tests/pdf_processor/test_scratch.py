"""Unit tests for scoped scratch files."""

import tempfile
import unittest
from pathlib import Path

from pdf_optimizer.pdf_processor.scratch import scratch_files


class TestScratchFiles(unittest.TestCase):
    """Test cases for scratch_files."""

    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.dir = Path(self.tmp.name)

    def tearDown(self):
        self.tmp.cleanup()

    def test_paths(self):
        with scratch_files(self.dir, "lesson.pdf") as (original, compressed):
            self.assertEqual(self.dir / "lesson.pdf", original)
            self.assertEqual(self.dir / "lesson_compressed_optimized.pdf", compressed)

    def test_removed_on_success(self):
        with scratch_files(self.dir, "lesson.pdf") as (original, compressed):
            original.write_bytes(b"a")
            compressed.write_bytes(b"b")

        self.assertEqual([], list(self.dir.iterdir()))

    def test_removed_on_error(self):
        with self.assertRaises(RuntimeError):
            with scratch_files(self.dir, "lesson.pdf") as (original, compressed):
                original.write_bytes(b"a")
                raise RuntimeError("boom")

        self.assertEqual([], list(self.dir.iterdir()))

    def test_missing_files_are_fine(self):
        """Exiting before anything was written does not fail."""
        with scratch_files(self.dir, "lesson.pdf"):
            pass

        self.assertEqual([], list(self.dir.iterdir()))
