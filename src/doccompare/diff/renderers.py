#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/doccompare/diff/renderers.py
"""Output renderers for change sets."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

from doccompare.diff.models import ChangeKind, ChangeSet

if TYPE_CHECKING:
    from rich.console import Console

KIND_STYLES = {
    ChangeKind.ADDED: "green",
    ChangeKind.REMOVED: "red",
    ChangeKind.MODIFIED: "yellow",
}


def render_text(changes: ChangeSet) -> list[str]:
    """Render each record as ``"<position>: <text><status>"``."""
    return changes.render_lines()


def render_json(changes: ChangeSet, pretty_print: bool = True) -> str:
    """Render the change set as JSON.

    Parameters
    ----------
    changes : ChangeSet
        Change set to render
    pretty_print : bool, default True
        Indent the output

    Returns
    -------
    str
        JSON document with the strategy, summary counts and every record,
        including its true line numbers

    """
    return json.dumps(changes.to_dict(), indent=2 if pretty_print else None, ensure_ascii=False)


def render_rich(changes: ChangeSet, console: "Console") -> None:
    """Print the change set with one color per change kind.

    Record text is printed verbatim; markup in document lines is not interpreted.
    """
    from rich.text import Text

    for record in changes:
        line = Text(f"{record.position}: ")
        line.append(record.text.rstrip("\r"), style=KIND_STYLES.get(record.kind))
        line.append(record.status, style="dim")
        console.print(line, highlight=False)
