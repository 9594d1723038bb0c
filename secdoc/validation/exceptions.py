from secdoc.exceptions import SecdocError


class TooShortError(SecdocError):
    """Raised when content is below the minimum length for analysis."""

    code = "too_short"
