from secdoc.exceptions import SecdocError


class ProviderError(SecdocError):
    """Base exception for provider adapter failures."""

    code = "provider_error"

    def __init__(self, message: str, *, provider: str = "") -> None:
        super().__init__(message)
        self.provider = provider


class ProviderNotConfiguredError(ProviderError):
    """Raised when the provider credential is missing. No request is sent."""

    code = "not_configured"


class ProviderUnauthorizedError(ProviderError):
    """Raised when the provider rejects the credential (401/403)."""

    code = "unauthorized"


class ProviderRateLimitedError(ProviderError):
    """Raised when the provider answers 429."""

    code = "rate_limited"


class ProviderTimeoutError(ProviderError):
    """Raised when the provider does not answer within the request timeout."""

    code = "timeout"


class ProviderUnavailableError(ProviderError):
    """Raised on connection failures and non-auth HTTP errors."""

    code = "unavailable"


class MalformedResponseError(ProviderError):
    """Raised when the response envelope carries no usable analysis text."""

    code = "malformed_response"


def error_for_status(status_code: int, message: str, *, provider: str) -> ProviderError:
    """Map an HTTP error status to the matching provider error."""
    if status_code in (401, 403):
        return ProviderUnauthorizedError(message, provider=provider)
    if status_code == 429:
        return ProviderRateLimitedError(message, provider=provider)
    return ProviderUnavailableError(message, provider=provider)
