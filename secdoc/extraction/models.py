from dataclasses import dataclass

MIME_PDF = "application/pdf"
MIME_MSWORD = "application/msword"
MIME_DOCX = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"
MIME_TEXT = "text/plain"
MIME_MARKDOWN = "text/markdown"

SUPPORTED_MIME_TYPES = (MIME_PDF, MIME_MSWORD, MIME_DOCX, MIME_TEXT, MIME_MARKDOWN)


@dataclass(frozen=True)
class RawDocument:
    """Uploaded file as handed over by the upload boundary."""

    content: bytes
    mime_type: str
    filename: str
    size_bytes: int

    @classmethod
    def from_bytes(cls, content: bytes, mime_type: str, filename: str) -> "RawDocument":
        return cls(
            content=content,
            mime_type=mime_type,
            filename=filename,
            size_bytes=len(content),
        )


@dataclass(frozen=True)
class ExtractedText:
    """Normalized plain text extracted from a document."""

    text: str
    source_mime_type: str
    character_count: int

    @classmethod
    def from_text(cls, text: str, source_mime_type: str) -> "ExtractedText":
        return cls(text=text, source_mime_type=source_mime_type, character_count=len(text))
