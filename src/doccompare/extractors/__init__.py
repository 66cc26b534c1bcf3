#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/doccompare/extractors/__init__.py
"""Line extractors, one per source kind.

``EXTRACTORS`` maps each ``SourceKind`` to the extractor class that handles
it; ``get_extractor`` and ``extract_lines`` dispatch through it.
"""

from __future__ import annotations

from pathlib import Path
from typing import Union

from doccompare.extractors.base import BaseExtractor
from doccompare.extractors.docx import WordExtractor
from doccompare.extractors.pdf import PdfExtractor
from doccompare.extractors.txt import TextExtractor
from doccompare.options import CompareOptions
from doccompare.sources import SourceKind, detect_kind

EXTRACTORS: dict[SourceKind, type[BaseExtractor]] = {
    SourceKind.TEXT: TextExtractor,
    SourceKind.WORD: WordExtractor,
    SourceKind.PDF: PdfExtractor,
}


def get_extractor(kind: SourceKind, options: CompareOptions | None = None) -> BaseExtractor:
    """Instantiate the extractor registered for ``kind``."""
    return EXTRACTORS[kind](options)


def extract_lines(
    path: Union[str, Path],
    kind: SourceKind | None = None,
    options: CompareOptions | None = None,
) -> list[str]:
    """Extract the lines of one document.

    Parameters
    ----------
    path : str or Path
        Document to read
    kind : SourceKind, optional
        Source kind; detected from the extension when omitted
    options : CompareOptions, optional
        Extraction options

    Returns
    -------
    list[str]
        The document's ordered lines

    Raises
    ------
    UnsupportedKindError
        If ``kind`` is omitted and the extension is not recognized

    """
    resolved_kind = kind if kind is not None else detect_kind(path)
    return get_extractor(resolved_kind, options).extract(path)


__all__ = [
    "EXTRACTORS",
    "BaseExtractor",
    "PdfExtractor",
    "TextExtractor",
    "WordExtractor",
    "extract_lines",
    "get_extractor",
]
