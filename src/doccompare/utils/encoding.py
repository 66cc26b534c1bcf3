#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/doccompare/utils/encoding.py
"""Character encoding detection and handling utilities.

Plain text sources arrive as raw bytes; this module turns them into text
using chardet-based detection with ordered fallbacks.
"""

from __future__ import annotations

import logging

import chardet

from doccompare.constants import (
    DEFAULT_CHARDET_CONFIDENCE,
    DEFAULT_CHARDET_SAMPLE_SIZE,
    DEFAULT_FALLBACK_ENCODINGS,
)

logger = logging.getLogger(__name__)


def detect_encoding(
    data: bytes,
    sample_size: int = DEFAULT_CHARDET_SAMPLE_SIZE,
    confidence_threshold: float = DEFAULT_CHARDET_CONFIDENCE,
) -> str | None:
    """Detect character encoding of binary data using chardet.

    Parameters
    ----------
    data : bytes
        Binary data to analyze
    sample_size : int, default 8192
        Number of bytes to sample for detection (uses first N bytes)
    confidence_threshold : float, default 0.7
        Minimum confidence level (0.0-1.0) required to trust detection

    Returns
    -------
    str | None
        Detected encoding name, or None if detection fails or confidence
        is below threshold

    """
    sample = data[:sample_size]
    if not sample:
        return None

    result = chardet.detect(sample)
    if not result or not result.get("encoding"):
        logger.debug("chardet: No encoding detected")
        return None

    encoding = result["encoding"]
    confidence = result.get("confidence") or 0.0
    logger.debug(f"chardet detected encoding: {encoding} (confidence: {confidence:.2f})")

    if confidence >= confidence_threshold:
        return encoding

    logger.debug(f"chardet confidence {confidence:.2f} below threshold {confidence_threshold}")
    return None


def read_text_with_encoding_detection(
    data: bytes,
    fallback_encodings: list[str] | None = None,
    use_chardet: bool = True,
) -> str:
    """Read binary data as text with automatic encoding detection.

    Attempts to decode binary data using multiple strategies:
    1. chardet-based detection (if enabled)
    2. Fallback encodings in order
    3. Final fallback with error replacement

    Parameters
    ----------
    data : bytes
        Binary data to decode
    fallback_encodings : list[str] | None, default None
        List of encodings to try in order. If None, uses
        ['utf-8', 'utf-8-sig', 'latin-1']
    use_chardet : bool, default True
        Whether to attempt chardet-based detection first

    Returns
    -------
    str
        Decoded text content

    Examples
    --------
    >>> read_text_with_encoding_detection(b"Hello, world!")
    'Hello, world!'

    """
    if fallback_encodings is None:
        fallback_encodings = list(DEFAULT_FALLBACK_ENCODINGS)

    if use_chardet:
        detected_encoding = detect_encoding(data)
        if detected_encoding:
            try:
                text = data.decode(detected_encoding)
                logger.debug(f"Successfully decoded with chardet-detected encoding: {detected_encoding}")
                return text
            except (UnicodeDecodeError, LookupError) as e:
                logger.debug(f"Failed to decode with chardet-detected encoding {detected_encoding}: {e}")

    for encoding in fallback_encodings:
        try:
            text = data.decode(encoding)
            logger.debug(f"Successfully decoded with encoding: {encoding}")
            return text
        except UnicodeDecodeError as e:
            logger.debug(f"Failed to decode with {encoding}: {e}")
        except LookupError as e:
            logger.debug(f"Unknown encoding {encoding}: {e}")

    logger.warning("All encoding attempts failed, using utf-8 with error replacement")
    return data.decode("utf-8", errors="replace")
