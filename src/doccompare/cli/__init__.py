#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/doccompare/cli/__init__.py
"""Command-line interface for doccompare.

Usage::

    doccompare original.docx modified.docx
    doccompare notes_v1.txt notes_v2.txt --strategy positional --format json
    doccompare --interactive

When paths are missing, or ``--interactive`` is given, the user is prompted
for them. A rejected pair (same file, missing file, kind mismatch, unknown
kind) is reported and the user is prompted again, up to ``--max-attempts``
times. The library itself never retries.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Any

from rich.console import Console
from rich.prompt import Prompt

from doccompare.api import FileComparer
from doccompare.cli.builder import (
    EXIT_ERROR,
    EXIT_SUCCESS,
    EXIT_VALIDATION_ERROR,
    create_parser,
    get_exit_code_for_exception,
)
from doccompare.cli.config import load_config_with_priority, merge_configs
from doccompare.cli.output import should_use_rich_output, write_report
from doccompare.constants import DEFAULT_LOG_LEVEL, DEFAULT_OUTPUT_FORMAT
from doccompare.exceptions import DocCompareError
from doccompare.logging_utils import configure_logging
from doccompare.options import CompareOptions

logger = logging.getLogger(__name__)

__all__ = ["main", "create_parser", "prompt_for_paths"]

_CLI_CONFIG_KEYS = ("strategy", "format", "log_level", "log_file", "log_changes", "encoding", "rich", "pdf_pages")


def _setup_logging_level(settings: dict[str, Any], parsed_args: argparse.Namespace) -> None:
    """Set up logging from --trace, --verbose and the merged log level."""
    if parsed_args.trace or parsed_args.verbose:
        log_level = logging.DEBUG
    else:
        level_name = str(settings.get("log_level") or DEFAULT_LOG_LEVEL).upper()
        log_level = getattr(logging, level_name, logging.WARNING)
        # Change notifications are logged at INFO
        if settings.get("log_changes"):
            log_level = min(log_level, logging.INFO)

    configure_logging(log_level, log_file=settings.get("log_file"), trace_mode=parsed_args.trace)


def _collect_settings(parsed_args: argparse.Namespace) -> dict[str, Any]:
    """Merge configuration file values with command-line values (CLI wins)."""
    config = load_config_with_priority(parsed_args.config, no_config=parsed_args.no_config)
    cli_values = {key: getattr(parsed_args, key) for key in _CLI_CONFIG_KEYS if getattr(parsed_args, key) is not None}
    return merge_configs(config, cli_values)


def prompt_for_paths(console: Console) -> tuple[str, str]:
    """Ask the user for the original and modified file paths."""
    original = Prompt.ask("Enter original file path", console=console)
    modified = Prompt.ask("Enter modified file path", console=console)
    return original.strip(), modified.strip()


def _build_comparer(
    parsed_args: argparse.Namespace,
    options: CompareOptions,
    console: Console,
) -> FileComparer:
    """Construct a comparer, prompting for paths when needed.

    Raises
    ------
    DocCompareError
        The last validation error when the paths are given on the command
        line, or when every interactive attempt was rejected
    EOFError
        If standard input closes while prompting

    """
    interactive = parsed_args.interactive or not (parsed_args.original and parsed_args.modified)
    if not interactive:
        return FileComparer(parsed_args.original, parsed_args.modified, options=options)

    max_attempts = max(parsed_args.max_attempts, 1)
    attempt = 1
    while True:
        original, modified = prompt_for_paths(console)
        try:
            return FileComparer(original, modified, options=options)
        except DocCompareError as e:
            logger.error(f'{e.message} with "{original}", "{modified}" arguments')
            if attempt >= max_attempts:
                raise
            console.print(f"{e.message}\nPlease provide new information!", markup=False, highlight=False)
            attempt += 1


def main(args: list[str] | None = None) -> int:
    """Run the doccompare command line.

    Parameters
    ----------
    args : list[str], optional
        Command line arguments, defaults to ``sys.argv[1:]``

    Returns
    -------
    int
        Exit code (0 for success)

    """
    parser = create_parser()
    try:
        parsed_args = parser.parse_args(args)
    except SystemExit as e:
        return e.code if isinstance(e.code, int) else EXIT_SUCCESS

    try:
        settings = _collect_settings(parsed_args)
    except argparse.ArgumentTypeError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_VALIDATION_ERROR

    _setup_logging_level(settings, parsed_args)

    try:
        options = CompareOptions.from_mapping(settings)
    except DocCompareError as e:
        print(f"Error: {e}", file=sys.stderr)
        return get_exit_code_for_exception(e)

    output_format = settings.get("format") or DEFAULT_OUTPUT_FORMAT
    if output_format not in ("text", "json"):
        print(f"Error: Invalid format: {output_format}. Must be one of: text, json", file=sys.stderr)
        return EXIT_VALIDATION_ERROR

    console = Console(stderr=True, highlight=False)

    try:
        comparer = _build_comparer(parsed_args, options, console)
        changes = comparer.get_difference()
    except DocCompareError as e:
        print(f"Error: {e}", file=sys.stderr)
        return get_exit_code_for_exception(e)
    except KeyboardInterrupt:
        print("Interrupted", file=sys.stderr)
        return EXIT_ERROR
    except EOFError:
        print("Error: No input available for the file path prompt", file=sys.stderr)
        return EXIT_ERROR

    if not changes:
        print("No differences found.", file=sys.stderr)

    use_rich = should_use_rich_output(bool(settings.get("rich")), force_rich=parsed_args.force_rich)
    try:
        write_report(changes, output_format=output_format, output_path=parsed_args.output, use_rich=use_rich)
    except OSError as e:
        print(f"Error writing report: {e}", file=sys.stderr)
        return EXIT_ERROR

    return EXIT_SUCCESS


if __name__ == "__main__":
    sys.exit(main())
