from secdoc.exceptions import SecdocError


class UnsupportedProviderError(SecdocError):
    """Raised when a request names a provider with no adapter."""

    code = "unsupported_provider"
