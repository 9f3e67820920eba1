"""
Guardrails for AI form suggestions.
"""

from form_engine.guardrails.output_guardrails import (
    SuggestionCheckResult,
    check_form_suggestion,
    suggestion_format_guardrail,
)

__all__ = [
    "SuggestionCheckResult",
    "check_form_suggestion",
    "suggestion_format_guardrail",
]
