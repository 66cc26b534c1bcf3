"""Utility functions for cli output."""

#  Copyright (c) 2025 Tom Villani, Ph.D.

# src/doccompare/cli/output.py
from __future__ import annotations

import sys
from pathlib import Path
from typing import TextIO

from rich.console import Console

from doccompare.diff.models import ChangeSet
from doccompare.diff.renderers import render_json, render_rich, render_text


def should_use_rich_output(use_rich: bool, force_rich: bool = False, stream: TextIO | None = None) -> bool:
    """Determine if rich output should be used.

    Rich output is used when it was requested and either ``force_rich`` is
    set or the target stream is a TTY.
    """
    if not use_rich:
        return False
    if force_rich:
        return True

    target = stream or sys.stdout
    isatty = getattr(target, "isatty", None)
    return bool(callable(isatty) and isatty())


def format_report(changes: ChangeSet, output_format: str) -> str:
    """Format a change set as a single string."""
    if output_format == "json":
        return render_json(changes)
    return "\n".join(render_text(changes))


def write_report(
    changes: ChangeSet,
    output_format: str = "text",
    output_path: str | None = None,
    use_rich: bool = False,
    stream: TextIO | None = None,
) -> None:
    """Write a change set to a file, a rich console, or a plain stream.

    Parameters
    ----------
    changes : ChangeSet
        Report to write
    output_format : {"text", "json"}
        Output format
    output_path : str, optional
        File to write instead of the stream; never colorized
    use_rich : bool, default False
        Colorize text output through rich
    stream : TextIO, optional
        Target stream, defaults to stdout

    """
    if output_path:
        Path(output_path).write_text(format_report(changes, output_format), encoding="utf-8")
        print(f"Report written to: {output_path}", file=sys.stderr)
        return

    target = stream or sys.stdout
    if use_rich and output_format == "text":
        render_rich(changes, Console(file=target, force_terminal=True))
        return

    report = format_report(changes, output_format)
    if report:
        print(report, file=target)
