import json
from unittest.mock import MagicMock, patch

import httpx
import openai
import pytest

from secdoc.providers.exceptions import (
    MalformedResponseError,
    ProviderNotConfiguredError,
    ProviderRateLimitedError,
    ProviderTimeoutError,
    ProviderUnauthorizedError,
    ProviderUnavailableError,
)
from secdoc.providers.openai_adapter import SYSTEM_PERSONA, OpenAIAdapter


def _completion_body(content: str | None = "Finding: none") -> dict[str, object]:
    return {
        "id": "chatcmpl-1",
        "object": "chat.completion",
        "created": 1700000000,
        "model": "gpt-4-0613",
        "choices": [
            {
                "index": 0,
                "message": {"role": "assistant", "content": content},
                "finish_reason": "stop",
            }
        ],
        "usage": {"prompt_tokens": 80, "completion_tokens": 20, "total_tokens": 100},
    }


def _status_response(status: int) -> httpx.Response:
    return httpx.Response(
        status,
        json={"error": {"message": "nope"}},
        request=httpx.Request("POST", "https://api.openai.com/v1/chat/completions"),
    )


def _make_mock_response(content: str | None) -> MagicMock:
    choice = MagicMock()
    choice.message.content = content
    response = MagicMock()
    response.choices = [choice]
    response.model = "gpt-4"
    response.usage.total_tokens = 42
    return response


def _adapter_with_transport(
    handler: object,
    api_key: str = "o-key",
) -> OpenAIAdapter:
    http_client = httpx.Client(transport=httpx.MockTransport(handler))  # type: ignore[arg-type]
    return OpenAIAdapter(api_key=api_key, http_client=http_client)


def _adapter_with_mock_client(mock_client: MagicMock) -> OpenAIAdapter:
    adapter = OpenAIAdapter(api_key="o-key")
    adapter._client = mock_client
    return adapter


class TestOpenAIWireFormat:
    def test_posts_chat_completion_payload(self) -> None:
        requests: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            return httpx.Response(200, json=_completion_body())

        _adapter_with_transport(handler).analyze("Document body", "Review this.")

        request = requests[0]
        assert str(request.url) == "https://api.openai.com/v1/chat/completions"
        assert request.headers["Authorization"] == "Bearer o-key"
        assert json.loads(request.content) == {
            "model": "gpt-4",
            "messages": [
                {"role": "system", "content": SYSTEM_PERSONA},
                {"role": "user", "content": "Review this.\n\nDocument content:\nDocument body"},
            ],
            "max_tokens": 4000,
            "temperature": 0.3,
        }

    def test_truncates_content_to_50000_characters(self) -> None:
        requests: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            return httpx.Response(200, json=_completion_body())

        content = "".join(chr(ord("a") + i % 26) for i in range(60_000))
        _adapter_with_transport(handler).analyze(content, "Review this.")

        user_message = json.loads(requests[0].content)["messages"][1]["content"]
        segment = user_message.split("\n\nDocument content:\n", 1)[1]
        assert segment == content[:50_000]

    def test_parses_response(self) -> None:
        adapter = _adapter_with_transport(
            lambda request: httpx.Response(200, json=_completion_body("Risk: stale keys"))
        )
        response = adapter.analyze("Document body", "Review")

        assert response.analysis_text == "Risk: stale keys"
        assert response.model_identifier == "gpt-4-0613"
        assert response.tokens_used == 100

    def test_rate_limit_is_not_retried(self) -> None:
        requests: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            return httpx.Response(429, json={"error": {"message": "slow down"}})

        with pytest.raises(ProviderRateLimitedError):
            _adapter_with_transport(handler).analyze("Document body", "Review")
        assert len(requests) == 1


class TestOpenAINotConfigured:
    def test_missing_key_makes_no_request(self) -> None:
        requests: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            return httpx.Response(200, json=_completion_body())

        with pytest.raises(ProviderNotConfiguredError, match="OpenAI API key not configured"):
            _adapter_with_transport(handler, api_key="").analyze("Document body", "Review")
        assert requests == []

    def test_missing_key_never_builds_sdk_client(self) -> None:
        with patch("secdoc.providers.openai_adapter.openai.OpenAI") as mock_cls:
            with pytest.raises(ProviderNotConfiguredError):
                OpenAIAdapter(api_key="").analyze("Document body", "Review")
        mock_cls.assert_not_called()


class TestOpenAIErrorMapping:
    def test_returns_content(self) -> None:
        mock_client = MagicMock()
        mock_client.chat.completions.create.return_value = _make_mock_response("ok")
        response = _adapter_with_mock_client(mock_client).analyze("Document body", "Review")
        assert response.analysis_text == "ok"
        assert response.tokens_used == 42
        assert mock_client.chat.completions.create.call_args.kwargs["timeout"] == 60.0

    def test_empty_content_is_malformed(self) -> None:
        mock_client = MagicMock()
        mock_client.chat.completions.create.return_value = _make_mock_response(None)
        with pytest.raises(MalformedResponseError, match="empty response"):
            _adapter_with_mock_client(mock_client).analyze("Document body", "Review")

    def test_no_choices_is_malformed(self) -> None:
        mock_client = MagicMock()
        response = _make_mock_response("ok")
        response.choices = []
        mock_client.chat.completions.create.return_value = response
        with pytest.raises(MalformedResponseError, match="no choices"):
            _adapter_with_mock_client(mock_client).analyze("Document body", "Review")

    def test_sdk_timeout(self) -> None:
        mock_client = MagicMock()
        mock_client.chat.completions.create.side_effect = openai.APITimeoutError(
            request=MagicMock()
        )
        with pytest.raises(ProviderTimeoutError):
            _adapter_with_mock_client(mock_client).analyze("Document body", "Review")

    def test_httpx_timeout(self) -> None:
        mock_client = MagicMock()
        mock_client.chat.completions.create.side_effect = httpx.TimeoutException("timeout")
        with pytest.raises(ProviderTimeoutError):
            _adapter_with_mock_client(mock_client).analyze("Document body", "Review")

    def test_connection_failure(self) -> None:
        mock_client = MagicMock()
        mock_client.chat.completions.create.side_effect = openai.APIConnectionError(
            request=MagicMock()
        )
        with pytest.raises(ProviderUnavailableError, match="network error"):
            _adapter_with_mock_client(mock_client).analyze("Document body", "Review")

    def test_authentication_error(self) -> None:
        mock_client = MagicMock()
        mock_client.chat.completions.create.side_effect = openai.AuthenticationError(
            "bad key", response=_status_response(401), body=None
        )
        with pytest.raises(ProviderUnauthorizedError):
            _adapter_with_mock_client(mock_client).analyze("Document body", "Review")

    def test_rate_limit_error(self) -> None:
        mock_client = MagicMock()
        mock_client.chat.completions.create.side_effect = openai.RateLimitError(
            "slow down", response=_status_response(429), body=None
        )
        with pytest.raises(ProviderRateLimitedError):
            _adapter_with_mock_client(mock_client).analyze("Document body", "Review")

    def test_server_error(self) -> None:
        mock_client = MagicMock()
        mock_client.chat.completions.create.side_effect = openai.InternalServerError(
            "boom", response=_status_response(500), body=None
        )
        with pytest.raises(ProviderUnavailableError):
            _adapter_with_mock_client(mock_client).analyze("Document body", "Review")
