import pytest

from secdoc.extraction.docx_adapter import DocxAdapter
from secdoc.extraction.factory import PDF_ENGINES, decoder_table, pdf_decoder_for
from secdoc.extraction.models import (
    MIME_DOCX,
    MIME_MARKDOWN,
    MIME_MSWORD,
    MIME_PDF,
    MIME_TEXT,
    SUPPORTED_MIME_TYPES,
)
from secdoc.extraction.pdfplumber_adapter import PdfPlumberAdapter
from secdoc.extraction.plain_text_adapter import PlainTextAdapter
from secdoc.extraction.pymupdf_adapter import PyMuPdfAdapter


class TestPdfDecoderFor:
    def test_creates_pdfplumber_adapter(self) -> None:
        assert isinstance(pdf_decoder_for("pdfplumber"), PdfPlumberAdapter)

    def test_creates_pymupdf_adapter(self) -> None:
        assert isinstance(pdf_decoder_for("pymupdf"), PyMuPdfAdapter)

    def test_is_case_insensitive(self) -> None:
        assert isinstance(pdf_decoder_for("PyMuPDF"), PyMuPdfAdapter)

    def test_raises_for_unknown_engine(self) -> None:
        with pytest.raises(ValueError, match="Unknown PDF engine 'pdfminer'"):
            pdf_decoder_for("pdfminer")

    def test_engines_are_read_only(self) -> None:
        with pytest.raises(TypeError):
            PDF_ENGINES["other"] = PdfPlumberAdapter  # type: ignore[index]


class TestDecoderTable:
    def test_covers_every_supported_mime_type(self) -> None:
        assert set(decoder_table()) == set(SUPPORTED_MIME_TYPES)

    def test_defaults_to_pdfplumber(self) -> None:
        assert isinstance(decoder_table()[MIME_PDF], PdfPlumberAdapter)

    def test_uses_given_pdf_decoder(self) -> None:
        pdf = PyMuPdfAdapter()
        assert decoder_table(pdf)[MIME_PDF] is pdf

    def test_word_types_share_one_decoder(self) -> None:
        table = decoder_table()
        assert isinstance(table[MIME_DOCX], DocxAdapter)
        assert table[MIME_MSWORD] is table[MIME_DOCX]

    def test_markdown_is_read_as_plain_text(self) -> None:
        table = decoder_table()
        assert isinstance(table[MIME_TEXT], PlainTextAdapter)
        assert table[MIME_MARKDOWN] is table[MIME_TEXT]
