"""Unit tests for notification sinks and report renderers."""

import io
import json
import logging

import pytest
from rich.console import Console

from doccompare.constants import ADDED_STATUS
from doccompare.diff.engine import compare_resync
from doccompare.diff.renderers import render_json, render_rich, render_text
from doccompare.diff.sinks import CollectingSink, LoggingSink, NotificationSink, as_sink


@pytest.mark.unit
class TestSinks:
    """Tests for sink implementations."""

    def test_logging_sink_strips_carriage_returns(self, caplog):
        """Test carriage returns are removed from logged text."""
        sink = LoggingSink()
        with caplog.at_level(logging.INFO, logger="doccompare.diff.sinks"):
            sink.notify(ADDED_STATUS, "line\r")

        assert len(caplog.records) == 1
        message = caplog.records[0].getMessage()
        assert "\r" not in message
        assert message.startswith("line:")
        assert "<added line to modified>" in message

    def test_logging_sink_custom_logger_and_level(self, caplog):
        """Test the target logger and level are configurable."""
        target = logging.getLogger("doccompare.tests.sink")
        sink = LoggingSink(target, level=logging.WARNING)
        with caplog.at_level(logging.WARNING, logger="doccompare.tests.sink"):
            sink.header("a.txt", "b.txt")
            sink.notify(ADDED_STATUS, "x")

        assert [r.levelno for r in caplog.records] == [logging.WARNING, logging.WARNING]
        assert "a.txt and b.txt" in caplog.records[0].getMessage()

    def test_collecting_sink_order(self):
        """Test notifications arrive in discovery order."""
        sink = CollectingSink()
        compare_resync(["a", "b", "c"], ["x", "a", "c"], sink=sink)
        assert [text for _, text in sink.events] == ["x", "b"]
        assert len(sink) == 2

    def test_as_sink(self):
        """Test sink normalization."""
        collecting = CollectingSink()
        assert as_sink(None) is None
        assert as_sink(collecting) is collecting
        assert isinstance(as_sink(lambda status, text: None), NotificationSink)
        with pytest.raises(TypeError):
            as_sink(42)  # type: ignore[arg-type]


@pytest.mark.unit
class TestRenderers:
    """Tests for report renderers."""

    def test_render_text(self):
        """Test plain text rendering."""
        changes = compare_resync(["a", "b"], ["a", "z"])
        assert render_text(changes) == [
            "1: b <removed line from original>",
            "2: z <added line to modified>",
        ]

    def test_render_json(self):
        """Test JSON rendering includes true line numbers."""
        changes = compare_resync(["a", "b"], ["a", "z"])
        data = json.loads(render_json(changes))
        assert data["summary"]["total"] == 2
        assert data["changes"][0] == {
            "position": 1,
            "kind": "removed",
            "text": "b",
            "original_line": 2,
            "modified_line": None,
        }
        assert "\n" not in render_json(changes, pretty_print=False)

    def test_render_rich(self):
        """Test colored rendering writes every record."""
        buffer = io.StringIO()
        console = Console(file=buffer, force_terminal=False, width=200)
        render_rich(compare_resync(["a", "[b]"], ["a", "z"]), console)

        output = buffer.getvalue()
        assert "1: [b] <removed line from original>" in output
        assert "2: z <added line to modified>" in output
