#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/doccompare/diff/__init__.py
"""Line-level document comparison.

This package holds the comparison core: the change model, the two matching
strategies, the placeholder compactor, notification sinks and renderers.
It only ever works on already extracted line sequences.

Examples
--------
Compare two line sequences:
    >>> from doccompare.diff import compare_lines
    >>> changes = compare_lines(["a", "b", "c"], ["a", "c"])
    >>> changes.render_lines()
    ['1: b <removed line from original>']

Use the positional strategy:
    >>> compare_lines(["a", "b"], ["a", "c"], strategy="positional").render_lines()
    ['2: c <modified line value for line 2>']

"""

from doccompare.diff.compactor import PendingChange, SlotBuffer, compact
from doccompare.diff.engine import (
    ResyncScanner,
    ScanState,
    SpeculativeBuffer,
    compare_lines,
    compare_positional,
    compare_resync,
)
from doccompare.diff.models import ChangeKind, ChangeRecord, ChangeSet, LineSequence, Strategy
from doccompare.diff.renderers import render_json, render_rich, render_text
from doccompare.diff.sinks import CollectingSink, LoggingSink, NotificationSink

__all__ = [
    "ChangeKind",
    "ChangeRecord",
    "ChangeSet",
    "CollectingSink",
    "LineSequence",
    "LoggingSink",
    "NotificationSink",
    "PendingChange",
    "ResyncScanner",
    "ScanState",
    "SlotBuffer",
    "SpeculativeBuffer",
    "Strategy",
    "compact",
    "compare_lines",
    "compare_positional",
    "compare_resync",
    "render_json",
    "render_rich",
    "render_text",
]
