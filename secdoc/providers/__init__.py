from secdoc.providers.base import MAX_CONTENT_CHARS, BaseProviderAdapter, truncate_content
from secdoc.providers.claude_adapter import ClaudeAdapter
from secdoc.providers.factory import ProviderAdapterFactory
from secdoc.providers.gemini_adapter import GeminiAdapter
from secdoc.providers.models import ProviderResponse
from secdoc.providers.openai_adapter import OpenAIAdapter

__all__ = [
    "MAX_CONTENT_CHARS",
    "BaseProviderAdapter",
    "ClaudeAdapter",
    "GeminiAdapter",
    "OpenAIAdapter",
    "ProviderAdapterFactory",
    "ProviderResponse",
    "truncate_content",
]
