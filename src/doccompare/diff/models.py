#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/doccompare/diff/models.py
"""Data model for line-level change reports.

A comparison consumes two ``LineSequence`` values and produces a ``ChangeSet``:
an ordered list of ``ChangeRecord`` entries, one per reported line. The
``position`` of a record is its sequence number in the report. The true
line numbers in each input are carried separately so callers that need
them do not have to recompute the alignment.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Iterator, Sequence, overload

from doccompare.constants import ADDED_STATUS, MODIFIED_STATUS_TEMPLATE, POSITION_SEPARATOR, REMOVED_STATUS
from doccompare.exceptions import ValidationError

LineSequence = Sequence[str]


class ChangeKind(str, Enum):
    """Classification of a single line."""

    UNCHANGED = "unchanged"
    ADDED = "added"
    REMOVED = "removed"
    # Positional comparisons do not distinguish additions from removals
    MODIFIED = "modified"

    def status(self, position: int) -> str:
        """Return the status suffix rendered after the line text.

        Parameters
        ----------
        position : int
            Report position, used by the positional marker

        Returns
        -------
        str
            Suffix such as ``" <added line to modified>"``, empty for unchanged lines

        """
        if self is ChangeKind.ADDED:
            return ADDED_STATUS
        if self is ChangeKind.REMOVED:
            return REMOVED_STATUS
        if self is ChangeKind.MODIFIED:
            return MODIFIED_STATUS_TEMPLATE.format(position=position)
        return ""


class Strategy(str, Enum):
    """Line matching strategy used by the diff engine."""

    POSITIONAL = "positional"
    RESYNC = "resync"

    @classmethod
    def parse(cls, value: "Strategy | str") -> "Strategy":
        """Coerce a strategy name (case-insensitive) into a ``Strategy``.

        Raises
        ------
        ValidationError
            If the name is not a known strategy

        """
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError as e:
            valid = ", ".join(member.value for member in cls)
            raise ValidationError(
                f"Invalid strategy: {value}. Must be one of: {valid}",
                parameter_name="strategy",
                parameter_value=value,
                original_error=e,
            ) from e


@dataclass(frozen=True)
class ChangeRecord:
    """A single reported line.

    Parameters
    ----------
    position : int
        1-based sequence number of the record in the report
    kind : ChangeKind
        How the line changed
    text : str
        The line text as extracted (no trimming)
    original_line : int or None
        1-based line number in the original sequence, if the line exists there
    modified_line : int or None
        1-based line number in the modified sequence, if the line exists there

    """

    position: int
    kind: ChangeKind
    text: str
    original_line: int | None = None
    modified_line: int | None = None

    def __post_init__(self) -> None:
        """Validate the report position."""
        if self.position < 1:
            raise ValueError(f"position must be >= 1, got {self.position}")

    @property
    def status(self) -> str:
        """Status suffix for this record."""
        return self.kind.status(self.position)

    def render(self) -> str:
        """Render as ``"<position>: <text><status>"``."""
        return f"{self.position}{POSITION_SEPARATOR}{self.text}{self.status}"

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-serializable dictionary."""
        return {
            "position": self.position,
            "kind": self.kind.value,
            "text": self.text,
            "original_line": self.original_line,
            "modified_line": self.modified_line,
        }


@dataclass
class ChangeSet:
    """Ordered collection of change records; insertion order is report order."""

    records: list[ChangeRecord] = field(default_factory=list)
    strategy: Strategy = Strategy.RESYNC

    def __iter__(self) -> Iterator[ChangeRecord]:
        return iter(self.records)

    def __len__(self) -> int:
        return len(self.records)

    def __bool__(self) -> bool:
        return bool(self.records)

    @overload
    def __getitem__(self, index: int) -> ChangeRecord: ...

    @overload
    def __getitem__(self, index: slice) -> list[ChangeRecord]: ...

    def __getitem__(self, index: int | slice) -> ChangeRecord | list[ChangeRecord]:
        return self.records[index]

    @property
    def added(self) -> list[ChangeRecord]:
        """Records for lines present only in the modified sequence."""
        return [record for record in self.records if record.kind is ChangeKind.ADDED]

    @property
    def removed(self) -> list[ChangeRecord]:
        """Records for lines present only in the original sequence."""
        return [record for record in self.records if record.kind is ChangeKind.REMOVED]

    @property
    def modified(self) -> list[ChangeRecord]:
        """Records produced by the positional strategy."""
        return [record for record in self.records if record.kind is ChangeKind.MODIFIED]

    def render_lines(self) -> list[str]:
        """Render every record as a report line."""
        return [record.render() for record in self.records]

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-serializable dictionary with summary counts."""
        return {
            "strategy": self.strategy.value,
            "summary": {
                "total": len(self.records),
                "added": len(self.added),
                "removed": len(self.removed),
                "modified": len(self.modified),
            },
            "changes": [record.to_dict() for record in self.records],
        }
