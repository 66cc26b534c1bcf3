#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/doccompare/diff/sinks.py
"""Notification sinks for classified lines.

The resync comparison reports every added or removed line to an optional
sink as it is discovered. The sink is passed into the comparison call; the
engine holds no logger of its own.
"""

from __future__ import annotations

import logging
from typing import Callable, Protocol, Union, runtime_checkable

logger = logging.getLogger(__name__)


@runtime_checkable
class NotificationSink(Protocol):
    """Receiver of ``(status, text)`` pairs, called in discovery order."""

    def notify(self, status: str, text: str) -> None:
        """Handle one classified line."""
        ...


SinkLike = Union[NotificationSink, Callable[[str, str], None]]


class LoggingSink:
    """Write each notification to a logger as ``"<text>: <status>"``.

    Carriage returns are stripped from both values before logging. This only
    affects the log output; matching already happened on the raw text.

    Parameters
    ----------
    target : logging.Logger, optional
        Logger to write to, defaults to this module's logger
    level : int, default logging.INFO
        Level of the emitted records

    """

    def __init__(self, target: logging.Logger | None = None, level: int = logging.INFO) -> None:
        self.logger = target or logger
        self.level = level

    def header(self, original: str, modified: str) -> None:
        """Log the pair of sources being compared."""
        self.logger.log(self.level, "%s and %s files:", original, modified)

    def notify(self, status: str, text: str) -> None:
        self.logger.log(self.level, "%s: %s", text.replace("\r", ""), status.replace("\r", ""))


class CollectingSink:
    """Keep every notification in memory."""

    def __init__(self) -> None:
        self.events: list[tuple[str, str]] = []

    def notify(self, status: str, text: str) -> None:
        self.events.append((status, text))

    def __len__(self) -> int:
        return len(self.events)


class _CallableSink:
    def __init__(self, func: Callable[[str, str], None]) -> None:
        self.func = func

    def notify(self, status: str, text: str) -> None:
        self.func(status, text)


def as_sink(sink: SinkLike | None) -> NotificationSink | None:
    """Normalize a sink argument; plain callables are wrapped.

    Raises
    ------
    TypeError
        If ``sink`` has no ``notify`` method and is not callable

    """
    if sink is None:
        return None
    if isinstance(sink, NotificationSink):
        return sink
    if callable(sink):
        return _CallableSink(sink)
    raise TypeError(f"sink must provide notify(status, text) or be callable, got {type(sink).__name__}")
