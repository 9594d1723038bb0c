from dataclasses import dataclass, field
from datetime import datetime

from secdoc.extraction.models import ExtractedText


@dataclass(frozen=True)
class FileMetadata:
    """Descriptive metadata of an uploaded file."""

    filename: str
    size_bytes: int
    size_formatted: str
    mime_type: str
    extension: str
    uploaded_at: datetime


@dataclass(frozen=True)
class ContentProfile:
    """Cheap lexical statistics over extracted text."""

    length: int
    word_count: int
    line_count: int
    has_security_keywords: bool
    security_keywords: tuple[str, ...] = field(default_factory=tuple)
    estimated_reading_minutes: int = 0


@dataclass(frozen=True)
class ProcessedDocument:
    """Result of the upload flow, ready for persistence and analysis."""

    metadata: FileMetadata
    extracted: ExtractedText
    profile: ContentProfile
    processed_at: datetime
