import math
import time
from collections.abc import Mapping
from datetime import datetime, timezone

from secdoc.analysis.exceptions import UnsupportedProviderError
from secdoc.analysis.models import AnalysisRequest, AnalysisResult
from secdoc.analysis.structurer import structure_analysis
from secdoc.config.settings import Settings
from secdoc.exceptions import SecdocError
from secdoc.logging.logger import Log
from secdoc.prompts.selector import select_instruction
from secdoc.providers.base import DEFAULT_TIMEOUT_SECONDS, BaseProviderAdapter
from secdoc.providers.factory import ProviderAdapterFactory
from secdoc.providers.models import ProviderResponse
from secdoc.validation.validator import MIN_CONTENT_LENGTH, validate_content


class AnalysisOrchestrator:
    """Runs one analysis request end to end.

    Pipeline: validate -> select instruction -> dispatch to adapter (timed)
    -> structure. The call either returns one AnalysisResult or raises one
    classified SecdocError; nothing is retried or cached.
    """

    def __init__(
        self,
        adapters: Mapping[str, BaseProviderAdapter],
        *,
        timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
        min_content_length: int = MIN_CONTENT_LENGTH,
    ) -> None:
        self._adapters = adapters
        self._timeout_seconds = timeout_seconds
        self._min_content_length = min_content_length

    def run_analysis(self, request: AnalysisRequest) -> AnalysisResult:
        """Analyze the request content with the requested provider.

        Raises:
            EmptyContentError, TooShortError: content rejected before dispatch.
            UnsupportedProviderError: no adapter for ``request.provider``.
            ProviderError: classified adapter failure, carrying
                ``processing_time_ms``.
        """
        text = request.text
        validate_content(text, self._min_content_length)
        instruction = select_instruction(request.analysis_type, request.custom_prompt)
        provider = request.provider.lower()
        adapter = self._adapters.get(provider)
        if adapter is None:
            raise UnsupportedProviderError(f"Unsupported AI provider: {request.provider}")

        Log.info(
            "Starting AI analysis",
            provider=provider,
            analysis_type=request.analysis_type,
            content_length=len(text),
        )
        response, processing_time_ms = self._dispatch(adapter, provider, text, instruction)

        result = AnalysisResult(
            provider=provider,
            model_identifier=response.model_identifier,
            raw_analysis_text=response.analysis_text,
            tokens_used=response.tokens_used,
            structured_analysis=structure_analysis(
                response.analysis_text, request.analysis_type
            ),
            processing_time_ms=processing_time_ms,
            content_length=len(text),
            timestamp=datetime.now(timezone.utc),
            analysis_type=request.analysis_type,
            custom_prompt_used=bool(request.custom_prompt),
        )
        Log.info(f"AI analysis completed: {provider} ({processing_time_ms}ms)")
        return result

    def _dispatch(
        self,
        adapter: BaseProviderAdapter,
        provider: str,
        text: str,
        instruction: str,
    ) -> tuple[ProviderResponse, int]:
        start = time.perf_counter()
        try:
            response = adapter.analyze(text, instruction, self._timeout_seconds)
        except SecdocError as exc:
            exc.processing_time_ms = _elapsed_ms(start)
            Log.error(
                f"AI analysis failed ({provider}): {exc}",
                code=exc.code,
                processing_time_ms=exc.processing_time_ms,
            )
            raise
        return response, _elapsed_ms(start)


def _elapsed_ms(start: float) -> int:
    return math.ceil((time.perf_counter() - start) * 1000)


def build_orchestrator(settings: Settings) -> AnalysisOrchestrator:
    """Build an AnalysisOrchestrator with adapters for every provider."""
    return AnalysisOrchestrator(
        ProviderAdapterFactory.create_all(settings),
        timeout_seconds=settings.provider_timeout_seconds,
        min_content_length=settings.min_content_chars,
    )
