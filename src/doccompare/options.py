#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/doccompare/options.py
"""Comparison options.

``CompareOptions`` is a frozen dataclass shared by the Python API and the
CLI. Field metadata carries the help text used when building CLI flags.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field, fields, replace
from typing import Any, Mapping

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self

from doccompare.constants import DEFAULT_STRATEGY
from doccompare.diff.models import Strategy
from doccompare.exceptions import ValidationError


def parse_pages(value: Any) -> list[int]:
    """Coerce a page selection into a list of 1-based page numbers.

    Accepts a list or tuple of integers, or a comma-separated string such as
    ``"1,3,4"``.

    Raises
    ------
    ValidationError
        If the value has another type or holds a non-positive or non-integer page

    """
    if isinstance(value, str):
        try:
            pages = [int(part) for part in value.split(",") if part.strip()]
        except ValueError as e:
            raise ValidationError(
                f"pdf_pages must be comma-separated integers, got '{value}'",
                parameter_name="pdf_pages",
                parameter_value=value,
                original_error=e,
            ) from e
    elif isinstance(value, (list, tuple)) and all(isinstance(page, int) and not isinstance(page, bool) for page in value):
        pages = list(value)
    else:
        raise ValidationError(
            f"pdf_pages must be a list of integers or a comma-separated string, got {value!r}",
            parameter_name="pdf_pages",
            parameter_value=value,
        )

    bad_pages = [page for page in pages if page < 1]
    if not pages or bad_pages:
        raise ValidationError(
            f"pdf_pages must hold positive page numbers, got {value!r}",
            parameter_name="pdf_pages",
            parameter_value=value,
        )
    return pages


@dataclass(frozen=True)
class CloneFrozenMixin:
    """Mixin providing frozen dataclass cloning capabilities."""

    def create_updated(self, **kwargs: Any) -> Self:
        """Create a new instance with updated field values."""
        return replace(self, **kwargs)


@dataclass(frozen=True)
class CompareOptions(CloneFrozenMixin):
    """Configuration options for a document comparison.

    Parameters
    ----------
    strategy : str, default "resync"
        Line matching strategy, ``"resync"`` or ``"positional"``
    encoding : str or None, default None
        Force the text encoding of plain text sources instead of detecting it
    pdf_pages : list[int] or None, default None
        1-based page numbers to extract from PDF sources (all pages when None)
    log_changes : bool, default False
        Report every added/removed line to the ``doccompare.diff.sinks`` logger

    """

    strategy: str = field(
        default=DEFAULT_STRATEGY,
        metadata={"help": "Line matching strategy: resync (realign after inserts/deletes) or positional"},
    )
    encoding: str | None = field(
        default=None,
        metadata={"help": "Text encoding for .txt sources (detected automatically when omitted)"},
    )
    pdf_pages: list[int] | None = field(
        default=None,
        metadata={"help": "1-based PDF pages to compare (all pages when omitted)"},
    )
    log_changes: bool = field(
        default=False,
        metadata={"help": "Log every added/removed line as it is found"},
    )

    def __post_init__(self) -> None:
        """Validate option values.

        Raises
        ------
        ValidationError
            If the strategy is unknown or the page selection is not a list
            of positive integers

        """
        Strategy.parse(self.strategy)
        if self.pdf_pages is not None:
            # Config files may give a comma-separated string
            object.__setattr__(self, "pdf_pages", parse_pages(self.pdf_pages))

    @property
    def resolved_strategy(self) -> Strategy:
        return Strategy.parse(self.strategy)

    @classmethod
    def from_mapping(cls, values: Mapping[str, Any]) -> "CompareOptions":
        """Build options from a config mapping, ignoring unrelated keys."""
        known = {f.name for f in fields(cls)}
        return cls(**{key: value for key, value in values.items() if key in known and value is not None})
