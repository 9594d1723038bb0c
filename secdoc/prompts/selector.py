"""Maps an analysis type or custom prompt to the instruction sent to the model."""

from collections.abc import Mapping

from secdoc.prompts.prompt_loader import load_instructions

SECURITY_REVIEW = "security-review"
POLICY_ANALYSIS = "policy-analysis"
COMPLIANCE_CHECK = "compliance-check"
GENERAL = "general"

ANALYSIS_TYPES = (SECURITY_REVIEW, POLICY_ANALYSIS, COMPLIANCE_CHECK, GENERAL)

ANALYSIS_PROMPTS: Mapping[str, str] = load_instructions(ANALYSIS_TYPES)

DOCUMENT_CONTENT_SEPARATOR = "\n\nDocument content:\n"


def select_instruction(
    analysis_type: str | None = None,
    custom_prompt: str | None = None,
) -> str:
    """Return the instruction text for a request.

    A non-empty custom prompt wins and is returned verbatim. Otherwise the
    typed instruction is used, and an absent or unknown type falls back to
    the general instruction.
    """
    if custom_prompt:
        return custom_prompt
    if analysis_type is None:
        return ANALYSIS_PROMPTS[GENERAL]
    return ANALYSIS_PROMPTS.get(analysis_type, ANALYSIS_PROMPTS[GENERAL])


def build_user_message(instruction: str, content: str) -> str:
    """Render the single user message shared by every provider."""
    return f"{instruction}{DOCUMENT_CONTENT_SEPARATOR}{content}"
