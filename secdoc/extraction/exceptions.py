from secdoc.exceptions import EmptyContentError, SecdocError

__all__ = ["EmptyContentError", "ExtractionFailureError", "UnsupportedFormatError"]


class UnsupportedFormatError(SecdocError):
    """Raised when the declared mime type has no decoder."""

    code = "unsupported_format"


class ExtractionFailureError(SecdocError):
    """Raised when a format decoder cannot read the document bytes."""

    code = "extraction_failure"
