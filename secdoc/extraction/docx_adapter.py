import io

import docx

from secdoc.extraction.base import BaseTextDecoder
from secdoc.extraction.exceptions import ExtractionFailureError


class DocxAdapter(BaseTextDecoder):
    """Decodes Word documents with python-docx.

    Paragraph text comes first, followed by one line per table row with
    cells joined by `` | ``. Legacy binary ``.doc`` files are not OOXML
    packages and fail to open.
    """

    def decode(self, data: bytes) -> str:
        try:
            document = docx.Document(io.BytesIO(data))
            parts = [para.text for para in document.paragraphs if para.text.strip()]
            for table in document.tables:
                for row in table.rows:
                    cells = [cell.text.strip() for cell in row.cells if cell.text.strip()]
                    if cells:
                        parts.append(" | ".join(cells))
        except Exception as exc:
            raise ExtractionFailureError(
                f"Failed to extract text from Word document: {exc}"
            ) from exc
        return "\n".join(parts).strip()
