#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/doccompare/sources.py
"""Source kinds and construction-time validation of a source pair.

Every comparison starts here. A pair of paths is rejected before any
extraction or comparison work when the paths name the same file, when a
file is missing, when the two files are of different kinds, or when the
kind is not one doccompare can extract.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Union

from doccompare.constants import PDF_EXTENSIONS, TEXT_EXTENSIONS, WORD_EXTENSIONS
from doccompare.exceptions import (
    IdenticalInputsError,
    SourceNotFoundError,
    TypeMismatchError,
    UnsupportedKindError,
)

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


class SourceKind(str, Enum):
    """Recognized extractable source kinds."""

    TEXT = "text"
    WORD = "word"
    PDF = "pdf"


EXTENSION_KINDS: dict[str, SourceKind] = {
    **{ext: SourceKind.TEXT for ext in TEXT_EXTENSIONS},
    **{ext: SourceKind.WORD for ext in WORD_EXTENSIONS},
    **{ext: SourceKind.PDF for ext in PDF_EXTENSIONS},
}


def supported_extensions() -> list[str]:
    """Return the recognized extensions in table order."""
    return list(EXTENSION_KINDS)


def get_file_type(path: PathLike) -> str:
    """Return the lowercased extension of ``path`` including the dot, or ``""``."""
    return Path(path).suffix.lower()


def detect_kind(path: PathLike) -> SourceKind:
    """Map a path to its source kind by extension.

    Raises
    ------
    UnsupportedKindError
        If the extension is not recognized

    """
    extension = get_file_type(path)
    try:
        return EXTENSION_KINDS[extension]
    except KeyError:
        raise UnsupportedKindError(extension, supported_formats=supported_extensions()) from None


@dataclass(frozen=True)
class SourcePair:
    """A validated original/modified pair of the same kind."""

    original: Path
    modified: Path
    kind: SourceKind


def _same_source(original: Path, modified: Path) -> bool:
    return original.resolve() == modified.resolve()


def validate_sources(original: PathLike, modified: PathLike) -> SourcePair:
    """Validate a pair of source paths.

    Checks run in this order: identical paths, missing files, kind
    mismatch, unsupported kind.

    Parameters
    ----------
    original : str or Path
        Path of the original document
    modified : str or Path
        Path of the modified document

    Returns
    -------
    SourcePair
        The validated paths and their common kind

    Raises
    ------
    IdenticalInputsError
        If both paths refer to the same file
    SourceNotFoundError
        If either file does not exist
    TypeMismatchError
        If the extensions map to different kinds (or differ and one is unknown)
    UnsupportedKindError
        If the shared extension is not a recognized kind

    """
    original_path = Path(original)
    modified_path = Path(modified)

    if _same_source(original_path, modified_path):
        raise IdenticalInputsError(str(original))

    for path in (original_path, modified_path):
        if not path.is_file():
            raise SourceNotFoundError(str(path))

    original_type = get_file_type(original_path)
    modified_type = get_file_type(modified_path)
    original_kind = EXTENSION_KINDS.get(original_type)
    modified_kind = EXTENSION_KINDS.get(modified_type)

    if original_kind is not modified_kind or (original_kind is None and original_type != modified_type):
        raise TypeMismatchError(original_type or "<none>", modified_type or "<none>")

    if original_kind is None:
        raise UnsupportedKindError(original_type, supported_formats=supported_extensions())

    logger.debug(f"Validated {original_path} and {modified_path} as {original_kind.value} sources")
    return SourcePair(original_path, modified_path, original_kind)
