import pytest

from secdoc.extraction.docx_adapter import DocxAdapter
from secdoc.extraction.exceptions import ExtractionFailureError
from secdoc.extraction.plain_text_adapter import PlainTextAdapter


class TestDocxAdapter:
    def test_decode_returns_paragraphs(self, sample_docx_bytes: bytes) -> None:
        result = DocxAdapter().decode(sample_docx_bytes)
        assert "Access Control Policy" in result
        assert "multi-factor authentication" in result

    def test_decode_includes_table_rows(self, sample_docx_bytes: bytes) -> None:
        result = DocxAdapter().decode(sample_docx_bytes)
        assert "Owner | Security Team" in result

    def test_decode_empty_document_returns_empty_string(self, empty_docx_bytes: bytes) -> None:
        assert DocxAdapter().decode(empty_docx_bytes) == ""

    def test_decode_raises_on_legacy_binary(self) -> None:
        with pytest.raises(ExtractionFailureError, match="Word document"):
            DocxAdapter().decode(b"\xd0\xcf\x11\xe0\xa1\xb1\x1a\xe1legacy doc")


class TestPlainTextAdapter:
    def test_decodes_utf8(self) -> None:
        assert PlainTextAdapter().decode("Zugriff über VPN".encode()) == "Zugriff über VPN"

    def test_replaces_invalid_bytes(self) -> None:
        assert PlainTextAdapter().decode(b"ok \xff ok") == "ok \ufffd ok"

    def test_drops_byte_order_mark(self) -> None:
        assert PlainTextAdapter().decode(b"\xef\xbb\xbfpolicy") == "policy"
