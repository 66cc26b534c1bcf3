#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/doccompare/api.py
"""Python API for comparing two documents line by line.

This module ties source validation, line extraction and the diff engine
together. All validation happens before extraction, and extraction of both
documents happens before comparison, so an error never leaves a partial
result behind.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Union

from doccompare.diff.engine import compare_lines
from doccompare.diff.models import ChangeSet, Strategy
from doccompare.diff.sinks import LoggingSink, SinkLike
from doccompare.extractors import BaseExtractor, get_extractor
from doccompare.options import CompareOptions
from doccompare.sources import SourceKind, SourcePair, validate_sources
from doccompare.utils.decorators import debug_timer

logger = logging.getLogger(__name__)


class FileComparer:
    """Compare an original and a modified document of the same kind.

    Construction validates the pair and selects the extractor for its kind;
    ``get_difference`` extracts both documents and compares them.

    Parameters
    ----------
    original : str or Path
        Original document path
    modified : str or Path
        Modified document path
    options : CompareOptions, optional
        Strategy and extraction options
    sink : NotificationSink or callable, optional
        Receives ``(status, text)`` for every added/removed line. When
        omitted and ``options.log_changes`` is set, a ``LoggingSink`` is used.

    Raises
    ------
    IdenticalInputsError, SourceNotFoundError, TypeMismatchError, UnsupportedKindError
        From ``validate_sources``; nothing is retried

    Examples
    --------
        >>> comparer = FileComparer("v1.txt", "v2.txt")
        >>> for line in comparer.get_difference().render_lines():
        ...     print(line)

    """

    def __init__(
        self,
        original: Union[str, Path],
        modified: Union[str, Path],
        options: CompareOptions | None = None,
        sink: SinkLike | None = None,
    ) -> None:
        self.options = options or CompareOptions()
        self.sources: SourcePair = validate_sources(original, modified)
        self.extractor: BaseExtractor = get_extractor(self.sources.kind, self.options)

        if sink is None and self.options.log_changes:
            logging_sink = LoggingSink()
            logging_sink.header(str(self.sources.original), str(self.sources.modified))
            sink = logging_sink
        self.sink = sink

    @property
    def kind(self) -> SourceKind:
        return self.sources.kind

    @property
    def strategy(self) -> Strategy:
        return self.options.resolved_strategy

    def extract(self) -> tuple[list[str], list[str]]:
        """Extract the lines of both documents."""
        with debug_timer(logger, f"Extraction ({self.kind.value})"):
            original_lines = self.extractor.extract(self.sources.original)
            modified_lines = self.extractor.extract(self.sources.modified)
        return original_lines, modified_lines

    def get_difference(self) -> ChangeSet:
        """Extract both documents and return their change set."""
        original_lines, modified_lines = self.extract()
        logger.info(f"Comparing {self.sources.original} and {self.sources.modified} ({self.strategy.value})")
        return compare_lines(original_lines, modified_lines, strategy=self.strategy, sink=self.sink)


def compare_files(
    original: Union[str, Path],
    modified: Union[str, Path],
    strategy: Strategy | str | None = None,
    sink: SinkLike | None = None,
    options: CompareOptions | None = None,
) -> ChangeSet:
    """Compare two documents and return the change set.

    Parameters
    ----------
    original : str or Path
        Original document (.txt, .doc, .docx or .pdf)
    modified : str or Path
        Modified document, same kind as ``original``
    strategy : Strategy or str, optional
        Overrides ``options.strategy`` when given
    sink : NotificationSink or callable, optional
        Receives every added/removed line during a resync comparison
    options : CompareOptions, optional
        Comparison options

    Returns
    -------
    ChangeSet
        The compacted change report

    Raises
    ------
    IdenticalInputsError
        If both paths name the same file
    SourceNotFoundError
        If either file is missing
    TypeMismatchError
        If the files are of different kinds
    UnsupportedKindError
        If the file kind is not recognized
    MalformedFileError
        If a document cannot be read
    DependencyError
        If the library for the file kind is not installed

    Examples
    --------
        >>> from doccompare import compare_files
        >>> changes = compare_files("report_v1.pdf", "report_v2.pdf")
        >>> print("\\n".join(changes.render_lines()))

    """
    options = options or CompareOptions()
    if strategy is not None:
        options = options.create_updated(strategy=Strategy.parse(strategy).value)

    return FileComparer(original, modified, options=options, sink=sink).get_difference()
