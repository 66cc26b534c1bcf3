#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/doccompare/cli/builder.py
"""Argument parser construction and exit code mapping for the doccompare CLI."""

from __future__ import annotations

import argparse
from dataclasses import fields

from doccompare.constants import DEFAULT_LOG_LEVEL, DEFAULT_MAX_PROMPT_ATTEMPTS
from doccompare.diff.models import Strategy
from doccompare.exceptions import (
    DependencyError,
    FileError,
    FormatError,
    ValidationError,
)
from doccompare.options import CompareOptions, parse_pages

EXIT_SUCCESS = 0
EXIT_ERROR = 1
EXIT_DEPENDENCY_ERROR = 2
EXIT_VALIDATION_ERROR = 3
EXIT_FILE_ERROR = 4
EXIT_FORMAT_ERROR = 5


def get_exit_code_for_exception(exception: BaseException) -> int:
    """Map an exception to an appropriate CLI exit code.

    Parameters
    ----------
    exception : Exception
        The exception to map to an exit code

    Returns
    -------
    int
        The appropriate exit code for the exception type

    """
    if isinstance(exception, (DependencyError, ImportError)):
        return EXIT_DEPENDENCY_ERROR
    if isinstance(exception, ValidationError):
        return EXIT_VALIDATION_ERROR
    if isinstance(exception, FileError):
        return EXIT_FILE_ERROR
    if isinstance(exception, FormatError):
        return EXIT_FORMAT_ERROR
    return EXIT_ERROR


def _option_help(name: str) -> str:
    for option_field in fields(CompareOptions):
        if option_field.name == name:
            return option_field.metadata.get("help", "")
    return ""


def _parse_pages(value: str) -> list[int]:
    """Parse a comma-separated page list such as ``"1,3,4"``."""
    try:
        return parse_pages(value)
    except ValidationError as e:
        raise argparse.ArgumentTypeError(e.message) from e


def _positive_int(value: str) -> int:
    try:
        ivalue = int(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"expected an integer, got '{value}'") from e
    if ivalue < 1:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got {ivalue}")
    return ivalue


def create_parser() -> argparse.ArgumentParser:
    """Create the argparse parser for the doccompare command.

    Options that can also come from a configuration file default to None so
    that a value given on the command line can be told apart from a default.
    """
    parser = argparse.ArgumentParser(
        prog="doccompare",
        description="Compare two documents (.txt, .doc, .docx, .pdf) line by line and report added and removed lines",
    )

    parser.add_argument("original", nargs="?", help="Original document")
    parser.add_argument("modified", nargs="?", help="Modified document (same kind as the original)")

    # Comparison options
    parser.add_argument(
        "--strategy",
        "-s",
        choices=[strategy.value for strategy in Strategy],
        default=None,
        help=_option_help("strategy") + " (default: resync)",
    )
    parser.add_argument("--encoding", default=None, help=_option_help("encoding"))
    parser.add_argument("--pdf-pages", dest="pdf_pages", type=_parse_pages, default=None, help=_option_help("pdf_pages"))

    # Output options
    parser.add_argument(
        "--format",
        "-f",
        choices=["text", "json"],
        default=None,
        help="Output format: text (default, one '<n>: <line><status>' per change) or json",
    )
    parser.add_argument("--output", "-o", help="Write the report to a file (default: stdout)")
    parser.add_argument("--rich", action="store_true", default=None, help="Colorize text output with rich")
    parser.add_argument(
        "--force-rich", action="store_true", help="Use rich output even when stdout is not a terminal"
    )

    # Input prompting
    parser.add_argument(
        "--interactive",
        "-i",
        action="store_true",
        help="Prompt for file paths, and prompt again when they are rejected",
    )
    parser.add_argument(
        "--max-attempts",
        type=_positive_int,
        default=DEFAULT_MAX_PROMPT_ATTEMPTS,
        help=f"Number of prompts before giving up in interactive mode (default: {DEFAULT_MAX_PROMPT_ATTEMPTS})",
    )

    # Configuration
    parser.add_argument("--config", help="Configuration file (.toml, .yaml, .json or pyproject.toml)")
    parser.add_argument("--no-config", action="store_true", help="Ignore discovered configuration files")

    # Logging
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        type=str.upper,
        default=None,
        help=f"Logging level (default: {DEFAULT_LOG_LEVEL})",
    )
    parser.add_argument("--log-file", default=None, help="Also write log output to this file")
    parser.add_argument("--log-changes", action="store_true", default=None, help=_option_help("log_changes"))
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    parser.add_argument("--trace", action="store_true", help="Debug logging with timestamps and logger names")

    return parser
