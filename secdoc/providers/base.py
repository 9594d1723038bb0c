from abc import ABC, abstractmethod
from typing import Any, ClassVar

import httpx

from secdoc.logging.logger import Log
from secdoc.prompts.selector import build_user_message
from secdoc.providers.exceptions import (
    MalformedResponseError,
    ProviderNotConfiguredError,
    ProviderTimeoutError,
    ProviderUnavailableError,
    error_for_status,
)
from secdoc.providers.models import ProviderResponse

MAX_CONTENT_CHARS = 50_000
DEFAULT_TIMEOUT_SECONDS = 60.0
DEFAULT_MAX_TOKENS = 4000
DEFAULT_TEMPERATURE = 0.3


def truncate_content(content: str, limit: int = MAX_CONTENT_CHARS) -> str:
    """Keep the first ``limit`` characters. Anything beyond is silently dropped."""
    return content[:limit]


class BaseProviderAdapter(ABC):
    """Contract shared by every AI provider adapter.

    ``analyze`` checks the credential, truncates the content and sends a
    single request. Failures are raised as ProviderError subclasses and are
    never retried here.
    """

    name: ClassVar[str]
    display_name: ClassVar[str]

    def __init__(
        self,
        *,
        api_key: str,
        model: str,
        max_tokens: int = DEFAULT_MAX_TOKENS,
        max_content_chars: int = MAX_CONTENT_CHARS,
    ) -> None:
        self._api_key = api_key
        self._model = model
        self._max_tokens = max_tokens
        self._max_content_chars = max_content_chars

    @property
    def is_configured(self) -> bool:
        return bool(self._api_key)

    def analyze(
        self,
        content: str,
        instruction: str,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
    ) -> ProviderResponse:
        """Send ``instruction`` and ``content`` to the provider.

        Args:
            content: Document text. Only the first ``max_content_chars``
                     characters are transmitted.
            instruction: Instruction block placed before the content.
            timeout: Request timeout in seconds.

        Raises:
            ProviderNotConfiguredError: if no credential is set.
            ProviderError: any other classified provider failure.
        """
        if not self.is_configured:
            raise ProviderNotConfiguredError(
                f"{self.display_name} API key not configured", provider=self.name
            )
        truncated = truncate_content(content, self._max_content_chars)
        if len(truncated) < len(content):
            Log.info(
                f"{self.display_name}: content truncated",
                original=len(content),
                sent=len(truncated),
            )
        user_message = build_user_message(instruction, truncated)
        Log.debug(f"{self.display_name} request message:\n{user_message}")
        return self._send(user_message, timeout)

    @abstractmethod
    def _send(self, user_message: str, timeout: float) -> ProviderResponse:
        """Issue the provider request and parse its envelope."""


class HttpProviderAdapter(BaseProviderAdapter):
    """Adapter base for providers called through plain JSON-over-HTTP.

    ``transport`` replaces the network layer, mainly for tests.
    """

    def __init__(
        self,
        *,
        api_key: str,
        model: str,
        base_url: str,
        max_tokens: int = DEFAULT_MAX_TOKENS,
        max_content_chars: int = MAX_CONTENT_CHARS,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        super().__init__(
            api_key=api_key,
            model=model,
            max_tokens=max_tokens,
            max_content_chars=max_content_chars,
        )
        self._base_url = base_url.rstrip("/")
        self._transport = transport

    def _post_json(
        self,
        url: str,
        *,
        body: dict[str, Any],
        headers: dict[str, str],
        timeout: float,
        params: dict[str, str] | None = None,
    ) -> dict[str, Any]:
        try:
            with httpx.Client(transport=self._transport, timeout=timeout) as client:
                response = client.post(url, json=body, headers=headers, params=params)
        except httpx.TimeoutException as exc:
            raise ProviderTimeoutError(
                f"{self.display_name} request timed out after {timeout}s", provider=self.name
            ) from exc
        except httpx.TransportError as exc:
            raise ProviderUnavailableError(
                f"{self.display_name} service error: {exc}", provider=self.name
            ) from exc

        if response.is_error:
            detail = _error_detail(response)
            Log.error(
                f"{self.display_name} API error",
                status=response.status_code,
                detail=detail,
            )
            raise error_for_status(
                response.status_code,
                f"{self.display_name} service error: {detail}",
                provider=self.name,
            )

        try:
            payload = response.json()
        except ValueError as exc:
            raise MalformedResponseError(
                f"{self.display_name} returned a non-JSON response", provider=self.name
            ) from exc
        if not isinstance(payload, dict):
            raise MalformedResponseError(
                f"{self.display_name} response must be a JSON object", provider=self.name
            )
        Log.debug(f"{self.display_name} raw response:\n{payload}")
        return payload


def _error_detail(response: httpx.Response) -> str:
    try:
        payload = response.json()
    except ValueError:
        return response.text or response.reason_phrase
    if isinstance(payload, dict):
        error = payload.get("error")
        if isinstance(error, dict) and error.get("message"):
            return str(error["message"])
    return response.reason_phrase
