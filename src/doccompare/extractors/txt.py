#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/doccompare/extractors/txt.py
"""Plain text line extractor.

The file is decoded with encoding detection and split on ``"\\n"`` only.
Carriage returns from Windows line endings stay on the lines, and a
trailing newline produces a final empty line.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Union

from doccompare.exceptions import MalformedFileError
from doccompare.extractors.base import BaseExtractor
from doccompare.utils.encoding import read_text_with_encoding_detection

logger = logging.getLogger(__name__)


class TextExtractor(BaseExtractor):
    """Extract lines from ``.txt`` files."""

    format_name = "txt"

    def extract(self, path: Union[str, Path]) -> list[str]:
        """Read and split a plain text file.

        Raises
        ------
        MalformedFileError
            If the file cannot be read or the forced encoding is invalid

        """
        try:
            with open(path, "rb") as f:
                raw_content = f.read()
        except OSError as e:
            raise MalformedFileError(f"Failed to read plain text: {e}", file_path=str(path), original_error=e) from e

        return self.split_lines(self.decode(raw_content, path))

    def decode(self, raw_content: bytes, path: Union[str, Path] = "<bytes>") -> str:
        """Decode raw bytes, honoring a forced encoding from the options."""
        encoding = self.options.encoding
        if not encoding:
            return read_text_with_encoding_detection(raw_content)

        try:
            return raw_content.decode(encoding)
        except (UnicodeDecodeError, LookupError) as e:
            raise MalformedFileError(
                f"Failed to decode {path} as {encoding}: {e}", file_path=str(path), original_error=e
            ) from e

    @staticmethod
    def split_lines(content: str) -> list[str]:
        return content.split("\n")
