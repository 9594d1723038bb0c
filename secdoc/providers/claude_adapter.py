from typing import Any, ClassVar

import httpx

from secdoc.providers.base import DEFAULT_MAX_TOKENS, MAX_CONTENT_CHARS, HttpProviderAdapter
from secdoc.providers.exceptions import MalformedResponseError
from secdoc.providers.models import ProviderResponse


class ClaudeAdapter(HttpProviderAdapter):
    """Anthropic Messages API adapter."""

    name: ClassVar[str] = "claude"
    display_name: ClassVar[str] = "Claude"

    def __init__(
        self,
        *,
        api_key: str,
        model: str = "claude-3-sonnet-20240229",
        base_url: str = "https://api.anthropic.com/v1",
        api_version: str = "2023-06-01",
        max_tokens: int = DEFAULT_MAX_TOKENS,
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
        self._api_version = api_version

    def _send(self, user_message: str, timeout: float) -> ProviderResponse:
        payload = self._post_json(
            f"{self._base_url}/messages",
            body={
                "model": self._model,
                "max_tokens": self._max_tokens,
                "messages": [{"role": "user", "content": user_message}],
            },
            headers={
                "Authorization": f"Bearer {self._api_key}",
                "Content-Type": "application/json",
                "x-api-key": self._api_key,
                "anthropic-version": self._api_version,
            },
            timeout=timeout,
        )
        return ProviderResponse(
            analysis_text=self._analysis_text(payload),
            model_identifier=str(payload.get("model") or self._model),
            tokens_used=self._tokens_used(payload),
        )

    def _analysis_text(self, payload: dict[str, Any]) -> str:
        blocks = payload.get("content")
        if not isinstance(blocks, list) or not blocks:
            raise MalformedResponseError("Claude returned no content blocks", provider=self.name)
        first = blocks[0]
        text = first.get("text") if isinstance(first, dict) else None
        if not isinstance(text, str) or not text.strip():
            raise MalformedResponseError("Claude returned empty analysis text", provider=self.name)
        return text

    @staticmethod
    def _tokens_used(payload: dict[str, Any]) -> int:
        usage = payload.get("usage")
        if not isinstance(usage, dict):
            return 0
        input_tokens = usage.get("input_tokens")
        output_tokens = usage.get("output_tokens")
        if not isinstance(input_tokens, int) or not isinstance(output_tokens, int):
            return 0
        return max(0, input_tokens + output_tokens)
