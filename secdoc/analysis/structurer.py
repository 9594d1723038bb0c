"""Best-effort split of a free-text model answer into sections."""

from secdoc.analysis.models import StructuredSections
from secdoc.logging.logger import Log

_LIST_SECTIONS = ("findings", "recommendations", "risks", "compliance")
_REDIRECT_MARKERS = ("summary", "overview")


def structure_analysis(raw_text: str, analysis_type: str | None = None) -> StructuredSections:
    """Split ``raw_text`` into summary/findings/recommendations/risks/compliance.

    Never raises. Every non-blank line goes into one buffer; a line mentioning
    "summary" or "overview" switches the target bucket to ``compliance`` and
    the buffer lands in the last target. An empty summary falls back to the
    whole text.
    """
    try:
        return _structure(raw_text)
    except Exception as exc:
        Log.warning(
            f"Failed to structure analysis output: {exc}",
            analysis_type=analysis_type,
        )
        return StructuredSections(summary=raw_text if isinstance(raw_text, str) else "")


def _structure(raw_text: str) -> StructuredSections:
    sections: dict[str, str] = {name: "" for name in ("summary", *_LIST_SECTIONS)}
    current_section = "summary"
    buffer = ""

    for line in raw_text.split("\n"):
        if not line.strip():
            continue
        lowered = line.lower()
        if any(marker in lowered for marker in _REDIRECT_MARKERS):
            current_section = "compliance"
        buffer += line + "\n"

    if buffer:
        sections[current_section] += buffer

    lists = {name: _to_lines(sections[name]) for name in _LIST_SECTIONS}
    summary = sections["summary"].strip() or raw_text.strip()
    return StructuredSections(summary=summary, **lists)


def _to_lines(blob: str) -> tuple[str, ...]:
    return tuple(line.strip() for line in blob.split("\n") if line.strip())
