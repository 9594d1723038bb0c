from collections.abc import Mapping
from types import MappingProxyType

from secdoc.extraction.base import BaseTextDecoder
from secdoc.extraction.docx_adapter import DocxAdapter
from secdoc.extraction.models import MIME_DOCX, MIME_MARKDOWN, MIME_MSWORD, MIME_PDF, MIME_TEXT
from secdoc.extraction.pdfplumber_adapter import PdfPlumberAdapter
from secdoc.extraction.plain_text_adapter import PlainTextAdapter
from secdoc.extraction.pymupdf_adapter import PyMuPdfAdapter

PDF_ENGINES: Mapping[str, type[BaseTextDecoder]] = MappingProxyType({
    "pdfplumber": PdfPlumberAdapter,
    "pymupdf": PyMuPdfAdapter,
})


def pdf_decoder_for(engine: str) -> BaseTextDecoder:
    """Instantiate the PDF decoder named by ``engine`` (case-insensitive)."""
    decoder_cls = PDF_ENGINES.get(engine.lower())
    if decoder_cls is None:
        raise ValueError(
            f"Unknown PDF engine '{engine}'. Choose from: {', '.join(PDF_ENGINES)}"
        )
    return decoder_cls()


def decoder_table(pdf_decoder: BaseTextDecoder | None = None) -> Mapping[str, BaseTextDecoder]:
    """Map every supported mime type to the decoder that reads it.

    Both Word types share one python-docx decoder and Markdown is read as
    plain text. pdfplumber is used when no PDF decoder is given.
    """
    word = DocxAdapter()
    text = PlainTextAdapter()
    return MappingProxyType({
        MIME_PDF: pdf_decoder if pdf_decoder is not None else PdfPlumberAdapter(),
        MIME_MSWORD: word,
        MIME_DOCX: word,
        MIME_TEXT: text,
        MIME_MARKDOWN: text,
    })
