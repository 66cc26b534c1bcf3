#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/doccompare/utils/__init__.py
"""Utility modules for the doccompare package.

This package contains dependency checking, timing and text decoding helpers
shared by the extractors and the diff engine.
"""

from doccompare.utils.decorators import debug_timer, requires_dependencies
from doccompare.utils.encoding import read_text_with_encoding_detection

__all__ = [
    "debug_timer",
    "requires_dependencies",
    "read_text_with_encoding_detection",
]
