"""
Tests for PDF validation and text acquisition (pypdf is mocked)
"""
import pytest
from pypdf.errors import PdfReadError

from brief_gate.core.errors import DocumentReadError, NoExtractableContent
from brief_gate.extraction import pdf_reader

PDF_BYTES = b"%PDF-1.4\n%fake"


class FakePage:
    def __init__(self, text=None, error=None):
        self._text = text
        self._error = error

    def extract_text(self):
        if self._error:
            raise self._error
        return self._text


def _fake_reader(pages):
    class _Reader:
        def __init__(self, stream):
            self.pages = pages

    return _Reader


class TestValidation:
    def test_empty_file(self):
        with pytest.raises(DocumentReadError, match="empty"):
            pdf_reader.validate_pdf(b"", "brief.pdf")

    def test_wrong_extension(self):
        with pytest.raises(DocumentReadError, match="PDF file only"):
            pdf_reader.validate_pdf(PDF_BYTES, "brief.docx")

    def test_wrong_magic_bytes(self):
        with pytest.raises(DocumentReadError, match="PDF file only"):
            pdf_reader.validate_pdf(b"PK\x03\x04", "brief.pdf")

    def test_too_large(self, monkeypatch):
        monkeypatch.setenv("MAX_FILE_SIZE_MB", "1")
        with pytest.raises(DocumentReadError, match="too large"):
            pdf_reader.validate_pdf(b"%PDF" + b"0" * (1024 * 1024), "brief.pdf")


class TestReadPdfText:
    def test_pages_joined(self, monkeypatch):
        monkeypatch.setattr(
            pdf_reader, "PdfReader", _fake_reader([FakePage(" Annonceur: Danone "), FakePage("Budget: 12-15K")])
        )
        assert pdf_reader.read_pdf_text(PDF_BYTES, "brief.pdf") == "Annonceur: Danone\n\nBudget: 12-15K"

    def test_broken_and_blank_pages_skipped(self, monkeypatch):
        pages = [FakePage(error=KeyError("/Contents")), FakePage("   "), FakePage(None), FakePage("Cible: 25-34")]
        monkeypatch.setattr(pdf_reader, "PdfReader", _fake_reader(pages))
        assert pdf_reader.read_pdf_text(PDF_BYTES, "brief.pdf") == "Cible: 25-34"

    def test_page_limit(self, monkeypatch):
        monkeypatch.setenv("MAX_PDF_PAGES", "1")
        monkeypatch.setattr(pdf_reader, "PdfReader", _fake_reader([FakePage("one"), FakePage("two")]))
        assert pdf_reader.read_pdf_text(PDF_BYTES, "brief.pdf") == "one"

    def test_no_text_raises(self, monkeypatch):
        monkeypatch.setattr(pdf_reader, "PdfReader", _fake_reader([FakePage(""), FakePage(None)]))
        with pytest.raises(NoExtractableContent):
            pdf_reader.read_pdf_text(PDF_BYTES, "scan.pdf")

    def test_unparseable_pdf(self, monkeypatch):
        def _broken(stream):
            raise PdfReadError("EOF marker not found")

        monkeypatch.setattr(pdf_reader, "PdfReader", _broken)
        with pytest.raises(DocumentReadError, match="Could not read this document"):
            pdf_reader.read_pdf_text(PDF_BYTES, "broken.pdf")

    @pytest.mark.parametrize("error", [ValueError("bad xref offset"), KeyError("/Root")])
    def test_damaged_structure_maps_to_read_error(self, monkeypatch, error):
        def _broken(stream):
            raise error

        monkeypatch.setattr(pdf_reader, "PdfReader", _broken)
        with pytest.raises(DocumentReadError, match="Could not read this document"):
            pdf_reader.read_pdf_text(PDF_BYTES, "damaged.pdf")
