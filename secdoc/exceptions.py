from typing import ClassVar


class SecdocError(Exception):
    """Base exception for every classified pipeline failure.

    Callers branch on ``code`` rather than on the message text.
    ``processing_time_ms`` is set when the failure happened inside a timed
    provider call.
    """

    code: ClassVar[str] = "secdoc_error"
    processing_time_ms: int | None = None


class EmptyContentError(SecdocError):
    """Raised when a document yields no readable text."""

    code = "empty_content"
