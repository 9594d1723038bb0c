from secdoc.prompts.selector import (
    ANALYSIS_PROMPTS,
    ANALYSIS_TYPES,
    build_user_message,
    select_instruction,
)

__all__ = ["ANALYSIS_PROMPTS", "ANALYSIS_TYPES", "build_user_message", "select_instruction"]
