from collections.abc import Mapping
from types import MappingProxyType
from typing import ClassVar

from secdoc.config.settings import Settings
from secdoc.providers.base import BaseProviderAdapter
from secdoc.providers.claude_adapter import ClaudeAdapter
from secdoc.providers.gemini_adapter import GeminiAdapter
from secdoc.providers.openai_adapter import OpenAIAdapter


class ProviderAdapterFactory:
    """Creates provider adapters from settings."""

    PROVIDERS: ClassVar[tuple[str, ...]] = ("claude", "openai", "gemini")

    @classmethod
    def create(cls, provider: str, settings: Settings) -> BaseProviderAdapter:
        """Create the adapter for one provider name."""
        name = provider.lower()
        if name == "claude":
            return ClaudeAdapter(
                api_key=settings.claude_api_key,
                model=settings.claude_model_name,
                base_url=settings.claude_base_url,
                api_version=settings.claude_api_version,
                max_tokens=settings.provider_max_tokens,
                max_content_chars=settings.max_content_chars,
            )
        if name == "openai":
            return OpenAIAdapter(
                api_key=settings.openai_api_key,
                model=settings.openai_model_name,
                base_url=settings.openai_base_url,
                max_tokens=settings.provider_max_tokens,
                temperature=settings.provider_temperature,
                max_content_chars=settings.max_content_chars,
            )
        if name == "gemini":
            return GeminiAdapter(
                api_key=settings.gemini_api_key,
                model=settings.gemini_model_name,
                base_url=settings.gemini_base_url,
                max_tokens=settings.provider_max_tokens,
                temperature=settings.provider_temperature,
                max_content_chars=settings.max_content_chars,
            )
        raise ValueError(f"Unknown AI provider '{provider}'. Choose from: {list(cls.PROVIDERS)}")

    @classmethod
    def create_all(cls, settings: Settings) -> Mapping[str, BaseProviderAdapter]:
        """Build the provider dispatch table. Unconfigured providers are included."""
        return MappingProxyType({name: cls.create(name, settings) for name in cls.PROVIDERS})

    @classmethod
    def available_providers(cls, settings: Settings) -> dict[str, bool]:
        """Report which providers have a credential configured."""
        return {
            "claude": bool(settings.claude_api_key),
            "openai": bool(settings.openai_api_key),
            "gemini": bool(settings.gemini_api_key),
        }
