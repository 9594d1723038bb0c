from typing import ClassVar

import httpx
import openai

from secdoc.providers.base import (
    DEFAULT_MAX_TOKENS,
    DEFAULT_TEMPERATURE,
    MAX_CONTENT_CHARS,
    BaseProviderAdapter,
)
from secdoc.providers.exceptions import (
    MalformedResponseError,
    ProviderRateLimitedError,
    ProviderTimeoutError,
    ProviderUnauthorizedError,
    ProviderUnavailableError,
)
from secdoc.providers.models import ProviderResponse

SYSTEM_PERSONA = (
    "You are a cybersecurity expert specializing in document analysis "
    "and security assessments."
)


class OpenAIAdapter(BaseProviderAdapter):
    """Chat Completions adapter built on the OpenAI SDK.

    The SDK client is created on first use so a missing key never reaches
    the SDK, and SDK retries are disabled.
    """

    name: ClassVar[str] = "openai"
    display_name: ClassVar[str] = "OpenAI"

    def __init__(
        self,
        *,
        api_key: str,
        model: str = "gpt-4",
        base_url: str | None = None,
        max_tokens: int = DEFAULT_MAX_TOKENS,
        temperature: float = DEFAULT_TEMPERATURE,
        max_content_chars: int = MAX_CONTENT_CHARS,
        http_client: httpx.Client | None = None,
    ) -> None:
        super().__init__(
            api_key=api_key,
            model=model,
            max_tokens=max_tokens,
            max_content_chars=max_content_chars,
        )
        self._base_url = base_url
        self._temperature = temperature
        self._http_client = http_client
        self._client: openai.OpenAI | None = None

    def _get_client(self) -> openai.OpenAI:
        if self._client is None:
            self._client = openai.OpenAI(
                api_key=self._api_key,
                base_url=self._base_url,
                max_retries=0,
                http_client=self._http_client,
            )
        return self._client

    def _send(self, user_message: str, timeout: float) -> ProviderResponse:
        try:
            response = self._get_client().chat.completions.create(
                model=self._model,
                messages=[
                    {"role": "system", "content": SYSTEM_PERSONA},
                    {"role": "user", "content": user_message},
                ],
                max_tokens=self._max_tokens,
                temperature=self._temperature,
                timeout=timeout,
            )
        except (openai.APITimeoutError, httpx.TimeoutException) as exc:
            raise ProviderTimeoutError(
                f"OpenAI request timed out after {timeout}s", provider=self.name
            ) from exc
        except (openai.APIConnectionError, httpx.TransportError) as exc:
            raise ProviderUnavailableError(
                f"OpenAI network error: {exc}", provider=self.name
            ) from exc
        except (openai.AuthenticationError, openai.PermissionDeniedError) as exc:
            raise ProviderUnauthorizedError(
                f"OpenAI service error: {exc.message}", provider=self.name
            ) from exc
        except openai.RateLimitError as exc:
            raise ProviderRateLimitedError(
                f"OpenAI service error: {exc.message}", provider=self.name
            ) from exc
        except openai.APIStatusError as exc:
            raise ProviderUnavailableError(
                f"OpenAI service error: {exc.message}", provider=self.name
            ) from exc
        except openai.APIError as exc:
            raise MalformedResponseError(
                f"OpenAI returned an unreadable response: {exc}", provider=self.name
            ) from exc

        if not response.choices:
            raise MalformedResponseError("OpenAI returned no choices", provider=self.name)
        content = response.choices[0].message.content
        if not content or not content.strip():
            raise MalformedResponseError("OpenAI returned empty response", provider=self.name)
        usage = response.usage
        return ProviderResponse(
            analysis_text=content,
            model_identifier=response.model or self._model,
            tokens_used=max(0, usage.total_tokens) if usage is not None else 0,
        )
