from secdoc.documents.processor import process_document
from secdoc.documents.profile import profile_content
from secdoc.documents.upload import format_file_size, get_file_metadata, validate_upload

__all__ = [
    "format_file_size",
    "get_file_metadata",
    "process_document",
    "profile_content",
    "validate_upload",
]
