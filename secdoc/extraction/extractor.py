from collections.abc import Mapping

from secdoc.config.settings import Settings
from secdoc.extraction.base import BaseTextDecoder
from secdoc.extraction.exceptions import EmptyContentError, UnsupportedFormatError
from secdoc.extraction.factory import decoder_table, pdf_decoder_for
from secdoc.extraction.models import (
    MIME_DOCX,
    MIME_MARKDOWN,
    MIME_MSWORD,
    MIME_PDF,
    MIME_TEXT,
    SUPPORTED_MIME_TYPES,
    ExtractedText,
    RawDocument,
)
from secdoc.extraction.text_cleanup import normalize_text
from secdoc.logging.logger import Log

__all__ = [
    "MIME_DOCX",
    "MIME_MARKDOWN",
    "MIME_MSWORD",
    "MIME_PDF",
    "MIME_TEXT",
    "SUPPORTED_MIME_TYPES",
    "TextExtractor",
    "build_extractor",
]


class TextExtractor:
    """Turns a raw upload into normalized plain text.

    Dispatch is by declared mime type only; the bytes are never sniffed.
    """

    def __init__(self, pdf_decoder: BaseTextDecoder | None = None) -> None:
        self._decoders: Mapping[str, BaseTextDecoder] = decoder_table(pdf_decoder)

    def extract(self, document: RawDocument) -> ExtractedText:
        """Extract and normalize text from ``document``.

        Raises:
            UnsupportedFormatError: if the mime type has no decoder.
            ExtractionFailureError: if the decoder cannot read the bytes.
            EmptyContentError: if no readable text remains.
        """
        decoder = self._decoders.get(document.mime_type)
        if decoder is None:
            raise UnsupportedFormatError(f"Unsupported file type: {document.mime_type}")

        Log.info(f"Extracting text from {document.filename} ({document.mime_type})")
        raw_text = decoder.decode(document.content)
        if not raw_text.strip():
            raise EmptyContentError(
                f"{document.filename} appears to be empty or contains no readable text"
            )

        text = normalize_text(raw_text)
        if not text:
            raise EmptyContentError(
                f"{document.filename} contains no readable text after cleanup"
            )
        Log.info(f"Extracted {len(text)} characters from {document.filename}")
        return ExtractedText.from_text(text, document.mime_type)


def build_extractor(settings: Settings) -> TextExtractor:
    """Build a TextExtractor using the configured PDF engine."""
    return TextExtractor(pdf_decoder=pdf_decoder_for(settings.pdf_engine))
