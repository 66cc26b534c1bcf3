#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/doccompare/diff/engine.py
"""Line matching strategies.

Two strategies are available:

- **positional**: lines are compared index by index with no realignment.
  Every mismatching index and every index past the end of the shorter
  sequence is reported as modified, at its true position.
- **resync**: when two lines differ, the original line is searched for
  further down the modified sequence. If it reappears, the skipped modified
  lines are reported as added and both cursors continue after the match. If
  it never reappears, the original line is reported as removed and the same
  modified line is compared against the next original line.

The resync scan is a small state machine (scanning, resyncing, draining).
Modified lines skipped during a forward search are held in a
``SpeculativeBuffer`` and only reported once the search finds its match; a
failed search rolls the buffer back.

Equality is plain string equality. Nothing is trimmed, so a line that only
differs by a trailing carriage return is reported as changed. The resync
search is O(n*m) in the worst case.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Callable

from doccompare.diff.compactor import PendingChange, SlotBuffer, compact
from doccompare.diff.models import ChangeKind, ChangeRecord, ChangeSet, LineSequence, Strategy
from doccompare.diff.sinks import NotificationSink, SinkLike, as_sink
from doccompare.utils.decorators import debug_timer

logger = logging.getLogger(__name__)


class ScanState(Enum):
    """States of the resync scan."""

    SCANNING = "scanning"
    RESYNCING = "resyncing"
    DRAINING = "draining"
    DONE = "done"


class SpeculativeBuffer:
    """Modified-line indices that are added lines only if a resync succeeds.

    ``stage`` records a tentative index, ``commit`` confirms and returns all
    staged indices in order, ``rollback`` discards them.
    """

    def __init__(self) -> None:
        self._staged: list[int] = []

    def __len__(self) -> int:
        return len(self._staged)

    @property
    def pending(self) -> tuple[int, ...]:
        return tuple(self._staged)

    def stage(self, index: int) -> None:
        self._staged.append(index)

    def commit(self) -> list[int]:
        confirmed, self._staged = self._staged, []
        return confirmed

    def rollback(self) -> int:
        discarded = len(self._staged)
        self._staged = []
        return discarded


class ResyncScanner:
    """Single-use resync comparison over two line sequences.

    Parameters
    ----------
    original : LineSequence
        Lines of the original document
    modified : LineSequence
        Lines of the modified document
    sink : NotificationSink, optional
        Receives ``(status, text)`` for every added or removed line as it is found

    """

    def __init__(self, original: LineSequence, modified: LineSequence, sink: NotificationSink | None = None) -> None:
        self.original = original
        self.modified = modified
        self.sink = sink
        self.orig_idx = 0
        self.mod_idx = 0
        self.buffer = SpeculativeBuffer()
        self.slots = SlotBuffer.sized(max(len(original), len(modified)))
        self.state = ScanState.SCANNING
        self.transitions: list[tuple[ScanState, ScanState]] = []

        self._handlers: dict[ScanState, Callable[[], ScanState]] = {
            ScanState.SCANNING: self._scan,
            ScanState.RESYNCING: self._resync,
            ScanState.DRAINING: self._drain,
        }

    def run(self) -> SlotBuffer:
        """Drive the state machine to completion and return the filled slots."""
        while self.state is not ScanState.DONE:
            next_state = self._handlers[self.state]()
            if next_state is not self.state:
                self.transitions.append((self.state, next_state))
            self.state = next_state
        return self.slots

    def _scan(self) -> ScanState:
        if self.orig_idx >= len(self.original):
            return ScanState.DRAINING

        if self.mod_idx < len(self.modified) and self.original[self.orig_idx] == self.modified[self.mod_idx]:
            self.orig_idx += 1
            self.mod_idx += 1
            return ScanState.SCANNING

        return ScanState.RESYNCING

    def _resync(self) -> ScanState:
        target = self.original[self.orig_idx]

        # First later occurrence wins; everything skipped before it is added
        for j in range(self.mod_idx, len(self.modified)):
            if self.modified[j] != target:
                self.buffer.stage(j)
                continue

            for index in self.buffer.commit():
                self._emit_added(index)
            self.mod_idx = j + 1
            self.orig_idx += 1
            return ScanState.SCANNING

        discarded = self.buffer.rollback()
        if discarded:
            logger.debug(f"No match for original line {self.orig_idx + 1}; discarded {discarded} tentative additions")
        self._emit(
            self.orig_idx,
            PendingChange(ChangeKind.REMOVED, target, original_line=self.orig_idx + 1),
        )
        # The modified cursor stays put so the same modified line is tried against the next original line
        self.orig_idx += 1
        return ScanState.SCANNING

    def _drain(self) -> ScanState:
        for index in range(self.mod_idx, len(self.modified)):
            self._emit_added(index)
        self.mod_idx = len(self.modified)
        return ScanState.DONE

    def _emit_added(self, index: int) -> None:
        self._emit(index, PendingChange(ChangeKind.ADDED, self.modified[index], modified_line=index + 1))

    def _emit(self, slot: int, change: PendingChange) -> None:
        self.slots.write(slot, change)
        if self.sink is not None:
            self.sink.notify(change.kind.status(slot + 1), change.text)


def compare_positional(original: LineSequence, modified: LineSequence) -> ChangeSet:
    """Compare two sequences index by index.

    Parameters
    ----------
    original : LineSequence
        Lines of the original document
    modified : LineSequence
        Lines of the modified document

    Returns
    -------
    ChangeSet
        One ``MODIFIED`` record per differing index, positioned at the true
        line number. The text is the modified line where one exists,
        otherwise the original line.

    """
    min_len = min(len(original), len(modified))
    max_len = max(len(original), len(modified))

    records: list[ChangeRecord] = []
    for i in range(min_len):
        if original[i] != modified[i]:
            records.append(
                ChangeRecord(i + 1, ChangeKind.MODIFIED, modified[i], original_line=i + 1, modified_line=i + 1)
            )

    # Tail lines of the longer sequence are reported as modified too
    for i in range(min_len, max_len):
        if i < len(modified):
            records.append(ChangeRecord(i + 1, ChangeKind.MODIFIED, modified[i], modified_line=i + 1))
        else:
            records.append(ChangeRecord(i + 1, ChangeKind.MODIFIED, original[i], original_line=i + 1))

    return ChangeSet(records=records, strategy=Strategy.POSITIONAL)


def compare_resync(original: LineSequence, modified: LineSequence, sink: SinkLike | None = None) -> ChangeSet:
    """Compare two sequences, realigning after inserted or deleted lines.

    Parameters
    ----------
    original : LineSequence
        Lines of the original document
    modified : LineSequence
        Lines of the modified document
    sink : NotificationSink or callable, optional
        Called with ``(status, text)`` for every added or removed line, in
        the order the lines are discovered

    Returns
    -------
    ChangeSet
        ``ADDED`` and ``REMOVED`` records numbered 1..N in report order

    Examples
    --------
    >>> compare_resync(["a", "b"], ["a", "x", "b"]).render_lines()
    ['1: x <added line to modified>']
    >>> compare_resync(["a", "b"], ["a", "z"]).render_lines()
    ['1: b <removed line from original>', '2: z <added line to modified>']

    """
    scanner = ResyncScanner(original, modified, as_sink(sink))
    slots = scanner.run()
    return compact(slots, strategy=Strategy.RESYNC)


def compare_lines(
    original: LineSequence,
    modified: LineSequence,
    strategy: Strategy | str = Strategy.RESYNC,
    sink: SinkLike | None = None,
) -> ChangeSet:
    """Compare two line sequences with the requested strategy.

    Parameters
    ----------
    original : LineSequence
        Lines of the original document
    modified : LineSequence
        Lines of the modified document
    strategy : Strategy or str, default "resync"
        ``"resync"`` or ``"positional"``
    sink : NotificationSink or callable, optional
        Notification target; only the resync strategy reports to it

    Returns
    -------
    ChangeSet
        The compacted change report

    Raises
    ------
    ValidationError
        If ``strategy`` is not a known strategy

    """
    resolved = Strategy.parse(strategy)
    with debug_timer(logger, f"Comparison ({resolved.value})"):
        if resolved is Strategy.POSITIONAL:
            changes = compare_positional(original, modified)
        else:
            changes = compare_resync(original, modified, sink=sink)

    logger.debug(
        f"Compared {len(original)} original and {len(modified)} modified lines: "
        f"{len(changes)} changes ({resolved.value})"
    )
    return changes
