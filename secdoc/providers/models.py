from dataclasses import dataclass


@dataclass(frozen=True)
class ProviderResponse:
    """Normalized answer from one provider call."""

    analysis_text: str
    model_identifier: str
    tokens_used: int = 0
