from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    pdf_engine: str = "pdfplumber"
    max_upload_bytes: int = 50 * 1024 * 1024
    min_content_chars: int = 50

    provider_timeout_seconds: float = 60.0
    provider_max_tokens: int = 4000
    provider_temperature: float = 0.3
    max_content_chars: int = 50_000

    claude_api_key: str = ""
    claude_model_name: str = "claude-3-sonnet-20240229"
    claude_base_url: str = "https://api.anthropic.com/v1"
    claude_api_version: str = "2023-06-01"

    openai_api_key: str = ""
    openai_model_name: str = "gpt-4"
    openai_base_url: str = "https://api.openai.com/v1"

    gemini_api_key: str = ""
    gemini_model_name: str = "gemini-pro"
    gemini_base_url: str = "https://generativelanguage.googleapis.com/v1beta"
