#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Constants and default values for the doccompare library.

This module centralizes the status markers, recognized file extensions,
dependency specifications and defaults used across doccompare.

Constants are organized by category:
1. Type Definitions - Literal types and type aliases
2. Report Formatting - Status suffixes appended to rendered change lines
3. File Extensions and Source Kinds - Extension table used for dispatch
4. Dependencies - Third-party packages required by each extractor
5. Defaults - Default option values shared by the API and CLI
"""

from __future__ import annotations

from typing import Literal

# =============================================================================
# Type Definitions
# =============================================================================

StrategyName = Literal["resync", "positional"]
OutputFormat = Literal["text", "json"]

# =============================================================================
# Report Formatting
# =============================================================================

ADDED_STATUS = " <added line to modified>"
REMOVED_STATUS = " <removed line from original>"
# Positional reports carry the line number inside the marker
MODIFIED_STATUS_TEMPLATE = " <modified line value for line {position}>"

POSITION_SEPARATOR = ": "

# =============================================================================
# File Extensions and Source Kinds
# =============================================================================

TEXT_EXTENSIONS: tuple[str, ...] = (".txt",)
WORD_EXTENSIONS: tuple[str, ...] = (".doc", ".docx")
PDF_EXTENSIONS: tuple[str, ...] = (".pdf",)

# =============================================================================
# Dependencies
# =============================================================================

# (install_name, import_name, version_spec)
DEPS_DOCX = [("python-docx", "docx", "")]
DEPS_PDF = [("pymupdf", "pymupdf", ">=1.26.4")]

# =============================================================================
# Defaults
# =============================================================================

DEFAULT_STRATEGY: StrategyName = "resync"
DEFAULT_OUTPUT_FORMAT: OutputFormat = "text"
DEFAULT_LOG_LEVEL = "WARNING"

# Text decoding fallbacks tried in order after chardet detection
DEFAULT_FALLBACK_ENCODINGS = ["utf-8", "utf-8-sig", "latin-1"]
DEFAULT_CHARDET_SAMPLE_SIZE = 8192
DEFAULT_CHARDET_CONFIDENCE = 0.7

# Number of times the interactive CLI re-prompts for paths after a validation failure
DEFAULT_MAX_PROMPT_ATTEMPTS = 3

CONFIG_ENV_VAR = "DOCCOMPARE_CONFIG"
