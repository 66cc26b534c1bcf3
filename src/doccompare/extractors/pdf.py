#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/doccompare/extractors/pdf.py
"""PDF line extractor.

Page text is extracted with PyMuPDF page by page, each page is split on
``"\\n"`` and the page lines are concatenated in page order.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Union

from doccompare.constants import DEPS_PDF
from doccompare.exceptions import MalformedFileError, ValidationError
from doccompare.extractors.base import BaseExtractor
from doccompare.utils.decorators import requires_dependencies

if TYPE_CHECKING:
    import pymupdf

logger = logging.getLogger(__name__)


class PdfExtractor(BaseExtractor):
    """Extract text lines from ``.pdf`` files."""

    format_name = "pdf"

    @requires_dependencies("pdf", DEPS_PDF)
    def extract(self, path: Union[str, Path]) -> list[str]:
        """Open a PDF and return the lines of the selected pages.

        Raises
        ------
        DependencyError
            If PyMuPDF is not installed
        MalformedFileError
            If the PDF cannot be opened or is encrypted
        ValidationError
            If a requested page does not exist

        """
        import pymupdf

        try:
            doc = pymupdf.open(filename=str(path))
        except Exception as e:
            raise MalformedFileError(
                f"Failed to open PDF document: {e!r}",
                file_path=str(path),
                original_error=e,
            ) from e

        try:
            if doc.needs_pass:
                raise MalformedFileError("PDF document is password protected", file_path=str(path))
            return self.page_lines(doc)
        finally:
            doc.close()

    def page_lines(self, doc: "pymupdf.Document") -> list[str]:
        lines: list[str] = []
        for page_number in self._page_numbers(doc.page_count):
            page_text = doc[page_number - 1].get_text("text")
            # PyMuPDF terminates every text line, including the last one
            if page_text.endswith("\n"):
                page_text = page_text[:-1]
            lines.extend(page_text.split("\n"))

        logger.debug(f"Extracted {len(lines)} lines from {doc.page_count} pages")
        return lines

    def _page_numbers(self, page_count: int) -> list[int]:
        pages = self.options.pdf_pages
        if pages is None:
            return list(range(1, page_count + 1))

        out_of_range = [page for page in pages if page > page_count]
        if out_of_range:
            raise ValidationError(
                f"Pages {out_of_range} out of range; document has {page_count} pages",
                parameter_name="pdf_pages",
                parameter_value=pages,
            )
        return list(pages)
