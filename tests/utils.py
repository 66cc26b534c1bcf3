"""Test utilities for the doccompare test suite.

This module provides helpers for creating temporary directories and
generating Word and PDF fixture documents at test time.
"""

import shutil
import tempfile
from pathlib import Path

import docx
import pymupdf


def create_test_temp_dir() -> Path:
    """Create a temporary directory for test files."""
    return Path(tempfile.mkdtemp())


def cleanup_test_dir(temp_dir: Path) -> None:
    """Clean up test directory and files."""
    if temp_dir.exists():
        shutil.rmtree(temp_dir)


def write_text_lines(path: Path, lines: list[str], newline: str = "\n") -> Path:
    """Write ``lines`` joined by ``newline`` without a trailing newline."""
    path.write_bytes(newline.join(lines).encode("utf-8"))
    return path


def create_docx(path: Path, paragraphs: list[str]) -> Path:
    """Create a Word document with one paragraph per entry."""
    document = docx.Document()
    for text in paragraphs:
        document.add_paragraph(text)
    document.save(str(path))
    return path


def create_pdf(path: Path, pages: list[list[str]]) -> Path:
    """Create a PDF with the given lines on each page.

    Lines are placed well apart so PyMuPDF extracts each one as its own line.
    """
    document = pymupdf.open()
    for page_lines in pages:
        page = document.new_page()
        for index, text in enumerate(page_lines):
            page.insert_text((72, 72 + index * 24), text, fontsize=11)
    document.save(str(path))
    document.close()
    return path
