from dataclasses import asdict, dataclass
from datetime import datetime

from secdoc.extraction.models import ExtractedText

MAX_CUSTOM_PROMPT_LENGTH = 1000


@dataclass(frozen=True)
class StructuredSections:
    """Five-bucket split of a model answer."""

    summary: str = ""
    findings: tuple[str, ...] = ()
    recommendations: tuple[str, ...] = ()
    risks: tuple[str, ...] = ()
    compliance: tuple[str, ...] = ()


@dataclass(frozen=True)
class AnalysisRequest:
    """One analysis job: which text, which provider, which instruction."""

    content: ExtractedText | str
    provider: str
    analysis_type: str | None = None
    custom_prompt: str | None = None

    def __post_init__(self) -> None:
        if self.custom_prompt is not None and len(self.custom_prompt) > MAX_CUSTOM_PROMPT_LENGTH:
            raise ValueError(
                f"custom_prompt must be at most {MAX_CUSTOM_PROMPT_LENGTH} characters"
            )

    @property
    def text(self) -> str:
        if isinstance(self.content, ExtractedText):
            return self.content.text
        return self.content


@dataclass(frozen=True)
class AnalysisResult:
    """Output of one successful provider call."""

    provider: str
    model_identifier: str
    raw_analysis_text: str
    tokens_used: int
    structured_analysis: StructuredSections
    processing_time_ms: int
    content_length: int
    timestamp: datetime
    analysis_type: str | None = None
    custom_prompt_used: bool = False

    def to_dict(self) -> dict[str, object]:
        """Render as a JSON-ready dict."""
        data = asdict(self)
        data["timestamp"] = self.timestamp.isoformat()
        data["structured_analysis"] = {
            key: list(value) if isinstance(value, tuple) else value
            for key, value in data["structured_analysis"].items()
        }
        return data
