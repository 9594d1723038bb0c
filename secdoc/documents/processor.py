from datetime import datetime, timezone

from secdoc.documents.exceptions import UploadRejectedError
from secdoc.documents.models import ProcessedDocument
from secdoc.documents.profile import profile_content
from secdoc.documents.upload import MAX_UPLOAD_BYTES, get_file_metadata, validate_upload
from secdoc.extraction.extractor import TextExtractor
from secdoc.extraction.models import RawDocument
from secdoc.logging.logger import Log
from secdoc.validation.validator import MIN_CONTENT_LENGTH, validate_content


def process_document(
    document: RawDocument,
    extractor: TextExtractor,
    *,
    max_upload_bytes: int = MAX_UPLOAD_BYTES,
    min_content_length: int = MIN_CONTENT_LENGTH,
) -> ProcessedDocument:
    """Run the upload flow: check -> extract -> validate -> profile.

    Raises:
        UploadRejectedError: if the upload fails boundary checks.
        SecdocError: classified extraction or validation failure.
    """
    problems = validate_upload(document, max_upload_bytes)
    if problems:
        raise UploadRejectedError(problems)

    metadata = get_file_metadata(document)
    extracted = extractor.extract(document)
    validate_content(extracted, min_content_length)
    profile = profile_content(extracted.text)

    Log.info(
        f"Document processed successfully: {metadata.filename}",
        characters=extracted.character_count,
        security_keywords=len(profile.security_keywords),
    )
    return ProcessedDocument(
        metadata=metadata,
        extracted=extracted,
        profile=profile,
        processed_at=datetime.now(timezone.utc),
    )
