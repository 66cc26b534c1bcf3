#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/doccompare/__init__.py
"""doccompare - line-by-line comparison of text, Word and PDF documents.

doccompare extracts the lines of two documents of the same kind and reports
which lines were added to the modified document and which were removed from
the original, realigning after inserted or deleted lines.

Examples
--------
Compare two files:
    >>> from doccompare import compare_files
    >>> for line in compare_files("notes_v1.txt", "notes_v2.txt").render_lines():
    ...     print(line)

Compare line sequences directly:
    >>> from doccompare import compare_lines
    >>> compare_lines(["a", "b"], ["a", "x", "b"]).render_lines()
    ['1: x <added line to modified>']

"""

from doccompare.api import FileComparer, compare_files
from doccompare.diff import (
    ChangeKind,
    ChangeRecord,
    ChangeSet,
    CollectingSink,
    LoggingSink,
    NotificationSink,
    Strategy,
    compare_lines,
    compare_positional,
    compare_resync,
)
from doccompare.exceptions import (
    DependencyError,
    DocCompareError,
    FileError,
    FormatError,
    IdenticalInputsError,
    MalformedFileError,
    SourceNotFoundError,
    TypeMismatchError,
    UnsupportedKindError,
    ValidationError,
)
from doccompare.extractors import extract_lines
from doccompare.options import CompareOptions
from doccompare.sources import SourceKind, detect_kind, validate_sources

__version__ = "1.0.0"

__all__ = [
    "ChangeKind",
    "ChangeRecord",
    "ChangeSet",
    "CollectingSink",
    "CompareOptions",
    "DependencyError",
    "DocCompareError",
    "FileComparer",
    "FileError",
    "FormatError",
    "IdenticalInputsError",
    "LoggingSink",
    "MalformedFileError",
    "NotificationSink",
    "SourceKind",
    "SourceNotFoundError",
    "Strategy",
    "TypeMismatchError",
    "UnsupportedKindError",
    "ValidationError",
    "compare_files",
    "compare_lines",
    "compare_positional",
    "compare_resync",
    "detect_kind",
    "extract_lines",
    "validate_sources",
]
