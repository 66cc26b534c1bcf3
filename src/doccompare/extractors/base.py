#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/doccompare/extractors/base.py
"""Base class for line extractors.

An extractor turns one source document into an ordered list of lines. The
comparison core never sees a document, only the lines an extractor made.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Union

from doccompare.options import CompareOptions

logger = logging.getLogger(__name__)


class BaseExtractor(ABC):
    """Abstract base class for all line extractors.

    Parameters
    ----------
    options : CompareOptions or None, default None
        Comparison options; extractors read the fields that concern them

    Examples
    --------
        >>> class UpperTextExtractor(BaseExtractor):
        ...     format_name = "upper"
        ...     def extract(self, path):
        ...         return Path(path).read_text().upper().split("\\n")

    """

    format_name: str = ""

    def __init__(self, options: CompareOptions | None = None) -> None:
        self.options = options or CompareOptions()

    @abstractmethod
    def extract(self, path: Union[str, Path]) -> list[str]:
        """Extract the ordered lines of a document.

        Parameters
        ----------
        path : str or Path
            Document to read

        Returns
        -------
        list[str]
            Lines in document order; empty strings are kept

        Raises
        ------
        MalformedFileError
            If the document cannot be opened or read
        DependencyError
            If the library needed for this format is not installed

        """
        raise NotImplementedError
