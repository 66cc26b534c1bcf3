#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/doccompare/extractors/docx.py
"""Word document line extractor.

Each body paragraph becomes one line, in document order, including empty
paragraphs. Legacy binary ``.doc`` files are recognized as Word sources but
python-docx cannot open them; they fail with ``MalformedFileError``.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Union

from doccompare.constants import DEPS_DOCX
from doccompare.exceptions import MalformedFileError
from doccompare.extractors.base import BaseExtractor
from doccompare.utils.decorators import requires_dependencies

if TYPE_CHECKING:
    import docx.document

logger = logging.getLogger(__name__)


class WordExtractor(BaseExtractor):
    """Extract one line per paragraph from ``.docx`` files."""

    format_name = "docx"

    @requires_dependencies("docx", DEPS_DOCX)
    def extract(self, path: Union[str, Path]) -> list[str]:
        """Open a Word document and return its paragraph texts.

        Raises
        ------
        DependencyError
            If python-docx is not installed
        MalformedFileError
            If document loading fails

        """
        import docx

        try:
            doc = docx.Document(str(path))
        except Exception as e:
            raise MalformedFileError(
                f"Failed to open DOCX document: {str(e)}",
                file_path=str(path),
                original_error=e,
            ) from e

        return self.paragraph_lines(doc)

    @staticmethod
    def paragraph_lines(doc: "docx.document.Document") -> list[str]:
        lines = [paragraph.text for paragraph in doc.paragraphs]
        logger.debug(f"Extracted {len(lines)} paragraphs")
        return lines
