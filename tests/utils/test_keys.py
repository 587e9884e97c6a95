"""Unit tests for key helpers."""

import unittest

from pdf_optimizer.utils.keys import (
    compressed_file_name,
    compressed_key,
    file_name_from_key,
)


class TestKeys(unittest.TestCase):
    """Test cases for compressed key derivation."""

    def test_compressed_key_replaces_suffix(self):
        self.assertEqual(
            "lessons/1/worksheet_compressed_optimized.pdf",
            compressed_key("lessons/1/worksheet.pdf"),
        )

    def test_compressed_key_only_touches_extension(self):
        """A '.pdf' inside the name is left alone."""
        self.assertEqual(
            "a.pdf.files/b_compressed_optimized.pdf",
            compressed_key("a.pdf.files/b.pdf"),
        )

    def test_compressed_key_without_extension(self):
        self.assertEqual("docs/file_compressed_optimized.pdf", compressed_key("docs/file"))

    def test_file_name_from_key(self):
        self.assertEqual("worksheet.pdf", file_name_from_key("lessons/1/worksheet.pdf"))
        self.assertEqual("plain.pdf", file_name_from_key("plain.pdf"))

    def test_compressed_file_name(self):
        self.assertEqual(
            "worksheet_compressed_optimized.pdf", compressed_file_name("worksheet.PDF")
        )
