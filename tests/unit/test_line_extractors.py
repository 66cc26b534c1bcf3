"""Unit tests for the text, Word and PDF line extractors."""

import pytest
from utils import create_docx, create_pdf, write_text_lines

from doccompare.constants import DEPS_PDF
from doccompare.exceptions import MalformedFileError, UnsupportedKindError, ValidationError
from doccompare.extractors import (
    EXTRACTORS,
    PdfExtractor,
    TextExtractor,
    WordExtractor,
    extract_lines,
    get_extractor,
)
from doccompare.options import CompareOptions
from doccompare.sources import SourceKind


@pytest.mark.unit
class TestRegistry:
    """Tests for extractor dispatch."""

    def test_every_kind_has_an_extractor(self):
        """Test the registry covers every source kind."""
        assert set(EXTRACTORS) == set(SourceKind)

    def test_get_extractor_passes_options(self):
        """Test the extractor receives the options."""
        options = CompareOptions(encoding="latin-1")
        extractor = get_extractor(SourceKind.TEXT, options)
        assert isinstance(extractor, TextExtractor)
        assert extractor.options is options

    def test_extract_lines_detects_kind(self, temp_dir):
        """Test the kind is detected from the extension."""
        path = write_text_lines(temp_dir / "a.txt", ["one", "two"])
        assert extract_lines(path) == ["one", "two"]

    def test_extract_lines_unknown_kind(self, temp_dir):
        """Test an unknown extension is rejected."""
        path = write_text_lines(temp_dir / "a.md", ["x"])
        with pytest.raises(UnsupportedKindError):
            extract_lines(path)


@pytest.mark.unit
class TestTextExtractor:
    """Tests for TextExtractor."""

    def test_split_on_newline_only(self, temp_dir):
        """Test Windows line endings keep their carriage returns."""
        path = write_text_lines(temp_dir / "crlf.txt", ["a", "b", "c"], newline="\r\n")
        assert TextExtractor().extract(path) == ["a\r", "b\r", "c"]

    def test_trailing_newline_yields_empty_last_line(self, temp_dir):
        """Test a trailing newline produces a final empty line."""
        path = temp_dir / "trailing.txt"
        path.write_bytes(b"a\nb\n")
        assert TextExtractor().extract(path) == ["a", "b", ""]

    def test_empty_file(self, temp_dir):
        """Test an empty file yields a single empty line."""
        path = temp_dir / "empty.txt"
        path.write_bytes(b"")
        assert TextExtractor().extract(path) == [""]

    def test_no_trimming(self, temp_dir):
        """Test whitespace is kept as is."""
        path = write_text_lines(temp_dir / "ws.txt", ["  indented", "trailing  ", ""])
        assert TextExtractor().extract(path) == ["  indented", "trailing  ", ""]

    def test_forced_encoding(self, temp_dir):
        """Test a forced encoding is used for decoding."""
        path = temp_dir / "latin.txt"
        path.write_bytes("café\nnaïve".encode("latin-1"))
        extractor = TextExtractor(CompareOptions(encoding="latin-1"))
        assert extractor.extract(path) == ["café", "naïve"]

    def test_forced_encoding_failure(self, temp_dir):
        """Test undecodable bytes under a forced encoding are malformed."""
        path = temp_dir / "bad.txt"
        path.write_bytes(b"\xff\xfe\xfa")
        with pytest.raises(MalformedFileError):
            TextExtractor(CompareOptions(encoding="ascii")).extract(path)

    def test_unknown_forced_encoding(self, temp_dir):
        """Test an unknown encoding name is reported as malformed input."""
        path = write_text_lines(temp_dir / "a.txt", ["x"])
        with pytest.raises(MalformedFileError):
            TextExtractor(CompareOptions(encoding="no-such-codec")).extract(path)

    def test_unreadable_path(self, temp_dir):
        """Test a directory path cannot be read as text."""
        with pytest.raises(MalformedFileError):
            TextExtractor().extract(temp_dir)

    def test_utf8_detection(self, temp_dir):
        """Test UTF-8 content decodes without a forced encoding."""
        path = temp_dir / "utf8.txt"
        path.write_bytes("first line\nsecond line with ünïcödé\n".encode("utf-8"))
        assert TextExtractor().extract(path)[:2] == ["first line", "second line with ünïcödé"]


@pytest.mark.unit
class TestWordExtractor:
    """Tests for WordExtractor."""

    def test_paragraphs_become_lines(self, temp_dir):
        """Test one line per paragraph, empty paragraphs included."""
        paragraphs = ["Title", "", "Body text", "Closing"]
        path = create_docx(temp_dir / "doc.docx", paragraphs)
        lines = WordExtractor().extract(path)
        assert lines[-len(paragraphs) :] == paragraphs

    def test_corrupt_docx(self, temp_dir):
        """Test a non-zip .docx is malformed."""
        path = temp_dir / "broken.docx"
        path.write_bytes(b"this is not a word document")
        with pytest.raises(MalformedFileError, match="Failed to open DOCX document"):
            WordExtractor().extract(path)

    def test_legacy_doc_is_malformed(self, temp_dir):
        """Test binary .doc files fail as malformed input."""
        path = temp_dir / "legacy.doc"
        path.write_bytes(b"\xd0\xcf\x11\xe0\xa1\xb1\x1a\xe1" + b"\x00" * 512)
        with pytest.raises(MalformedFileError) as exc_info:
            WordExtractor().extract(path)
        assert exc_info.value.file_path == str(path)


@pytest.mark.unit
class TestPdfExtractor:
    """Tests for PdfExtractor."""

    def test_pages_are_concatenated(self, temp_dir):
        """Test page lines are joined in page order."""
        path = create_pdf(temp_dir / "doc.pdf", [["First page line", "Another line"], ["Second page"]])
        assert PdfExtractor().extract(path) == ["First page line", "Another line", "Second page"]

    def test_page_selection(self, temp_dir):
        """Test only the selected pages are extracted."""
        path = create_pdf(temp_dir / "doc.pdf", [["one"], ["two"], ["three"]])
        extractor = PdfExtractor(CompareOptions(pdf_pages=[3, 1]))
        assert extractor.extract(path) == ["three", "one"]

    def test_page_out_of_range(self, temp_dir):
        """Test a page beyond the document is rejected."""
        path = create_pdf(temp_dir / "doc.pdf", [["one"]])
        with pytest.raises(ValidationError, match="out of range"):
            PdfExtractor(CompareOptions(pdf_pages=[2])).extract(path)

    def test_corrupt_pdf(self, temp_dir):
        """Test garbage bytes are malformed."""
        path = temp_dir / "broken.pdf"
        path.write_bytes(b"definitely not a pdf")
        with pytest.raises(MalformedFileError, match="Failed to open PDF document"):
            PdfExtractor().extract(path)

    def test_extraction_keeps_stdout_clean(self, temp_dir, capsys):
        """Test reading a PDF prints nothing that would corrupt a report on stdout."""
        path = create_pdf(temp_dir / "doc.pdf", [["only line"]])
        assert PdfExtractor().extract(path) == ["only line"]
        assert capsys.readouterr().out == ""

    def test_dependency_import_name(self):
        """Test the PDF dependency is checked under the pymupdf module name."""
        assert [import_name for _, import_name, _ in DEPS_PDF] == ["pymupdf"]
