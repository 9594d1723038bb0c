import pymupdf

from secdoc.extraction.base import BaseTextDecoder
from secdoc.extraction.exceptions import ExtractionFailureError


class PyMuPdfAdapter(BaseTextDecoder):
    """Decodes PDF text with PyMuPDF."""

    def decode(self, data: bytes) -> str:
        try:
            with pymupdf.open(stream=data, filetype="pdf") as doc:  # type: ignore[no-untyped-call]
                pages = [page.get_text() for page in doc]
        except Exception as exc:
            raise ExtractionFailureError(f"Failed to extract text from PDF: {exc}") from exc
        return "\n\n".join(pages).strip()
