from typing import Any, ClassVar

import httpx

from secdoc.providers.base import (
    DEFAULT_MAX_TOKENS,
    DEFAULT_TEMPERATURE,
    MAX_CONTENT_CHARS,
    HttpProviderAdapter,
)
from secdoc.providers.exceptions import MalformedResponseError
from secdoc.providers.models import ProviderResponse


class GeminiAdapter(HttpProviderAdapter):
    """Google Generative Language ``generateContent`` adapter.

    The API key travels as the ``key`` query parameter.
    """

    name: ClassVar[str] = "gemini"
    display_name: ClassVar[str] = "Gemini"

    def __init__(
        self,
        *,
        api_key: str,
        model: str = "gemini-pro",
        base_url: str = "https://generativelanguage.googleapis.com/v1beta",
        max_tokens: int = DEFAULT_MAX_TOKENS,
        temperature: float = DEFAULT_TEMPERATURE,
        max_content_chars: int = MAX_CONTENT_CHARS,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        super().__init__(
            api_key=api_key,
            model=model,
            base_url=base_url,
            max_tokens=max_tokens,
            max_content_chars=max_content_chars,
            transport=transport,
        )
        self._temperature = temperature

    def _send(self, user_message: str, timeout: float) -> ProviderResponse:
        payload = self._post_json(
            f"{self._base_url}/models/{self._model}:generateContent",
            body={
                "contents": [{"parts": [{"text": user_message}]}],
                "generationConfig": {
                    "temperature": self._temperature,
                    "maxOutputTokens": self._max_tokens,
                },
            },
            headers={"Content-Type": "application/json"},
            params={"key": self._api_key},
            timeout=timeout,
        )
        return ProviderResponse(
            analysis_text=self._analysis_text(payload),
            model_identifier=str(payload.get("modelVersion") or self._model),
            tokens_used=self._tokens_used(payload),
        )

    def _analysis_text(self, payload: dict[str, Any]) -> str:
        try:
            text = payload["candidates"][0]["content"]["parts"][0]["text"]
        except (KeyError, IndexError, TypeError) as exc:
            raise MalformedResponseError(
                "No analysis text received from Gemini", provider=self.name
            ) from exc
        if not isinstance(text, str) or not text.strip():
            raise MalformedResponseError(
                "No analysis text received from Gemini", provider=self.name
            )
        return text

    @staticmethod
    def _tokens_used(payload: dict[str, Any]) -> int:
        metadata = payload.get("usageMetadata")
        if not isinstance(metadata, dict):
            return 0
        total = metadata.get("totalTokenCount")
        return max(0, total) if isinstance(total, int) else 0
