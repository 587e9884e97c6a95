"""Helpers deriving object keys and file names for compressed renditions."""

import posixpath

COMPRESSED_SUFFIX = "_compressed_optimized.pdf"
PDF_EXTENSION = ".pdf"


def file_name_from_key(key: str) -> str:
    """Return the last path segment of an object key."""
    return posixpath.basename(key)


def _replace_pdf_suffix(name: str) -> str:
    if name.lower().endswith(PDF_EXTENSION):
        return name[: -len(PDF_EXTENSION)] + COMPRESSED_SUFFIX
    return name + COMPRESSED_SUFFIX


def compressed_key(original_key: str) -> str:
    """Derive the compressed rendition key next to the original.

    ``lessons/a/file.pdf`` becomes ``lessons/a/file_compressed_optimized.pdf``.
    """
    return _replace_pdf_suffix(original_key)


def compressed_file_name(file_name: str) -> str:
    return _replace_pdf_suffix(file_name)
