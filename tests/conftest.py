import io
from collections.abc import Generator

import docx
import pytest
from reportlab.lib.pagesizes import letter
from reportlab.pdfgen import canvas

from secdoc.logging.logger import Log


@pytest.fixture(autouse=True)
def _detach_log_handler() -> Generator[None, None, None]:
    """Drop the handler bound to a per-test stream once the test ends."""
    yield
    if Log._handler is not None:
        Log._logger.removeHandler(Log._handler)
        Log._handler = None


@pytest.fixture()
def sample_pdf_bytes() -> bytes:
    """Generate a minimal single-page PDF with known text content."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    c.drawString(72, 720, "Hello PDF World")
    c.save()
    return buf.getvalue()


@pytest.fixture()
def multi_page_pdf_bytes() -> bytes:
    """Generate a two-page PDF with known text on each page."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    c.drawString(72, 720, "Page one content")
    c.showPage()
    c.drawString(72, 720, "Page two content")
    c.save()
    return buf.getvalue()


@pytest.fixture()
def empty_pdf_bytes() -> bytes:
    """Generate a valid PDF with no text content (blank page)."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    c.showPage()
    c.save()
    return buf.getvalue()


@pytest.fixture()
def sample_docx_bytes() -> bytes:
    """Generate a Word document with two paragraphs and a table."""
    document = docx.Document()
    document.add_paragraph("Access Control Policy")
    document.add_paragraph("All    users must   use multi-factor authentication.")
    table = document.add_table(rows=1, cols=2)
    table.rows[0].cells[0].text = "Owner"
    table.rows[0].cells[1].text = "Security Team"
    buf = io.BytesIO()
    document.save(buf)
    return buf.getvalue()


@pytest.fixture()
def empty_docx_bytes() -> bytes:
    """Generate a Word document with no text."""
    buf = io.BytesIO()
    docx.Document().save(buf)
    return buf.getvalue()
