"""
Module to read PDF document properties
"""

from pathlib import Path

import pypdfium2 as pdfium


def count_pages(file: Path) -> int:
    """
    Count the pages of a PDF file.

    Args:
        file (Path): The path to the PDF file.

    Returns:
        int: The number of pages.
    """
    pdf = pdfium.PdfDocument(file)
    try:
        return len(pdf)
    finally:
        pdf.close()
