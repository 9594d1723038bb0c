"""Content policy applied before text leaves the process."""

from secdoc.exceptions import EmptyContentError
from secdoc.extraction.models import ExtractedText
from secdoc.extraction.text_cleanup import normalize_text
from secdoc.validation.exceptions import TooShortError

MIN_CONTENT_LENGTH = 50


def validate_content(
    content: ExtractedText | str,
    min_length: int = MIN_CONTENT_LENGTH,
) -> None:
    """Reject content that is blank or too short to analyze.

    The floor is the same for every provider and analysis type and is
    measured on normalized text. Plain strings are normalized here first;
    ExtractedText already is.

    Raises:
        EmptyContentError: if the content is empty or whitespace only.
        TooShortError: if the content has fewer than ``min_length`` characters.
    """
    text = content.text if isinstance(content, ExtractedText) else normalize_text(content)
    if not text or not text.strip():
        raise EmptyContentError("No content provided for analysis")
    if len(text) < min_length:
        raise TooShortError(
            f"Document content is too short for meaningful analysis "
            f"(minimum {min_length} characters required, got {len(text)})"
        )
