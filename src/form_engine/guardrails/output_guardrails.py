"""
Output guardrails for AI form suggestions.

These guardrails check a suggested form before it reaches the builder.
"""

from typing import Any

from pydantic import BaseModel, Field
from agents import (
    Agent,
    GuardrailFunctionOutput,
    RunContextWrapper,
    output_guardrail,
)

from form_engine.config import get_config
from form_engine.models.form_suggestion import FormSuggestion
from form_engine.normalizer.field_types import (
    is_editor_type,
    is_heading_type,
    is_persisted_type,
    to_persisted,
)

CHOICE_TYPES = {"select", "radio", "multiSelect"}


class SuggestionCheckResult(BaseModel):
    """Result of checking a suggested form."""

    is_valid: bool = Field(..., description="Whether the suggestion is usable")
    errors: list[str] = Field(
        default_factory=list, description="List of blocking problems"
    )
    warnings: list[str] = Field(
        default_factory=list, description="List of warnings"
    )


def check_form_suggestion(suggestion: FormSuggestion, max_fields: int | None = None) -> SuggestionCheckResult:
    """
    Check a suggested form for problems the builder cannot recover from.

    Errors: no fields, too many fields, duplicate ids, blank labels, choice
    fields without options. Unknown field types only warn, since they
    degrade to short text.
    """
    errors = []
    warnings = []
    max_fields = max_fields if max_fields is not None else get_config().max_suggested_fields

    if not suggestion.fields:
        errors.append("Suggestion has no fields")
    elif len(suggestion.fields) > max_fields:
        errors.append(f"Suggestion has {len(suggestion.fields)} fields, limit is {max_fields}")

    seen: set[str] = set()
    for field in suggestion.fields:
        if field.id in seen:
            errors.append(f"Duplicate field id '{field.id}'")
        seen.add(field.id)

        if not field.label.strip():
            errors.append(f"Field '{field.id}' has an empty label")

        if not (is_editor_type(field.type) or is_persisted_type(field.type)):
            warnings.append(f"Field '{field.id}' has unknown type '{field.type}'")
            continue

        if to_persisted(field.type) in CHOICE_TYPES and not field.options:
            errors.append(f"Choice field '{field.id}' has no options")
        elif is_heading_type(field.type) and field.required:
            warnings.append(f"Heading '{field.id}' is marked required")

    return SuggestionCheckResult(
        is_valid=len(errors) == 0,
        errors=errors,
        warnings=warnings,
    )


@output_guardrail
async def suggestion_format_guardrail(
    ctx: RunContextWrapper[Any],
    agent: Agent[Any],
    output: FormSuggestion,
) -> GuardrailFunctionOutput:
    """Trip when the suggested form would not load in the builder."""
    result = check_form_suggestion(output)
    return GuardrailFunctionOutput(
        output_info=result.model_dump(),
        tripwire_triggered=not result.is_valid,
    )
