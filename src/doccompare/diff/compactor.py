#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/doccompare/diff/compactor.py
"""Placeholder slot buffer and its compaction into a ChangeSet.

During a resync comparison each classified line is written into the slot of
the placeholder array that matches its index in its own sequence. Most slots
stay empty. Compaction drops the empty slots and numbers the surviving
entries 1..N in slot order, which is why resync report positions are
sequence numbers rather than file line numbers.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, NamedTuple

from doccompare.diff.models import ChangeKind, ChangeRecord, ChangeSet, Strategy


class PendingChange(NamedTuple):
    """A classified line waiting in a placeholder slot."""

    kind: ChangeKind
    text: str
    original_line: int | None = None
    modified_line: int | None = None


@dataclass
class SlotBuffer:
    """Fixed-length placeholder array.

    A slot can receive more than one entry (a removal and an addition at the
    same index); entries are kept in write order.
    """

    slots: list[list[PendingChange]]

    @classmethod
    def sized(cls, length: int) -> "SlotBuffer":
        """Create a buffer of ``length`` empty slots."""
        return cls([[] for _ in range(length)])

    def __len__(self) -> int:
        return len(self.slots)

    def write(self, index: int, change: PendingChange) -> None:
        """Append ``change`` to slot ``index``."""
        if change.kind is ChangeKind.UNCHANGED:
            return
        self.slots[index].append(change)

    def is_empty(self) -> bool:
        """Return True when no slot holds an entry."""
        return not any(self.slots)


def compact(slots: "SlotBuffer | Iterable[Iterable[PendingChange]]", strategy: Strategy = Strategy.RESYNC) -> ChangeSet:
    """Strip empty placeholders and renumber the remaining entries.

    Parameters
    ----------
    slots : SlotBuffer or iterable of slot contents
        The placeholder array. Each slot is an iterable of pending changes;
        an empty slot is a placeholder that was never filled.
    strategy : Strategy, default Strategy.RESYNC
        Strategy recorded on the resulting change set

    Returns
    -------
    ChangeSet
        Records numbered densely from 1 in slot order

    Examples
    --------
    >>> buffer = SlotBuffer.sized(4)
    >>> buffer.write(3, PendingChange(ChangeKind.ADDED, "x", modified_line=4))
    >>> [record.render() for record in compact(buffer)]
    ['1: x <added line to modified>']

    """
    contents = slots.slots if isinstance(slots, SlotBuffer) else slots

    records: list[ChangeRecord] = []
    for slot in contents:
        for change in slot:
            if change.kind is ChangeKind.UNCHANGED:
                continue
            records.append(
                ChangeRecord(
                    position=len(records) + 1,
                    kind=change.kind,
                    text=change.text,
                    original_line=change.original_line,
                    modified_line=change.modified_line,
                )
            )

    return ChangeSet(records=records, strategy=strategy)
