import io

import pdfplumber

from secdoc.extraction.base import BaseTextDecoder
from secdoc.extraction.exceptions import ExtractionFailureError


class PdfPlumberAdapter(BaseTextDecoder):
    """Decodes PDF text page by page with pdfplumber."""

    def decode(self, data: bytes) -> str:
        try:
            with pdfplumber.open(io.BytesIO(data)) as pdf:
                pages = [page.extract_text() or "" for page in pdf.pages]
        except Exception as exc:
            raise ExtractionFailureError(f"Failed to extract text from PDF: {exc}") from exc
        return "\n\n".join(pages).strip()
