"""Checks and metadata for files arriving at the upload boundary."""

from datetime import datetime, timezone

from secdoc.documents.models import FileMetadata
from secdoc.extraction.extractor import SUPPORTED_MIME_TYPES
from secdoc.extraction.models import RawDocument

MAX_UPLOAD_BYTES = 50 * 1024 * 1024

_SIZE_UNITS = ("Bytes", "KB", "MB", "GB")


def validate_upload(document: RawDocument, max_bytes: int = MAX_UPLOAD_BYTES) -> list[str]:
    """Return every reason the upload must be rejected; empty when acceptable."""
    problems: list[str] = []
    if document.size_bytes > max_bytes:
        problems.append(
            f"File size ({document.size_bytes / 1024 / 1024:.2f}MB) exceeds maximum "
            f"limit of {max_bytes // (1024 * 1024)}MB"
        )
    if document.mime_type not in SUPPORTED_MIME_TYPES:
        problems.append(
            f"File type {document.mime_type} is not supported. "
            "Allowed types: PDF, Word, Text, Markdown"
        )
    if not document.filename or not document.filename.strip():
        problems.append("File must have a valid filename")
    return problems


def format_file_size(size_bytes: int) -> str:
    """Format a byte count with a binary unit, e.g. ``1.5 KB``."""
    if size_bytes <= 0:
        return "0 Bytes"
    exponent = 0
    while size_bytes >= 1024 ** (exponent + 1) and exponent < len(_SIZE_UNITS) - 1:
        exponent += 1
    value = round(size_bytes / 1024**exponent, 2)
    return f"{value:g} {_SIZE_UNITS[exponent]}"


def file_extension(filename: str) -> str:
    if not filename or "." not in filename:
        return ""
    return filename.rsplit(".", 1)[1].lower()


def get_file_metadata(document: RawDocument) -> FileMetadata:
    return FileMetadata(
        filename=document.filename,
        size_bytes=document.size_bytes,
        size_formatted=format_file_size(document.size_bytes),
        mime_type=document.mime_type,
        extension=file_extension(document.filename),
        uploaded_at=datetime.now(timezone.utc),
    )
