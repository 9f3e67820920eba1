"""
Form Builder Agent.

Asks the remote model for a form suggestion from a natural-language
prompt. The suggestion comes back in the editor vocabulary so the builder
can load it directly.
"""

import json
import logging
from typing import Any

from agents import Agent, Runner

from form_engine.agents.instructions import FORM_BUILDER_INSTRUCTIONS
from form_engine.config import get_config
from form_engine.guardrails.output_guardrails import suggestion_format_guardrail
from form_engine.models.field_definitions import field_payload
from form_engine.models.form_suggestion import FormSuggestion
from form_engine.normalizer.field_types import prepare_fields_for_editor

logger = logging.getLogger(__name__)


def create_form_builder_agent(
    model: str | None = None,
    enable_guardrails: bool | None = None,
) -> Agent[None]:
    """
    Create the Form Builder agent.

    Args:
        model: The OpenAI model to use. If None, uses config.default_model.
        enable_guardrails: Whether to check suggestions before returning them.
            If None, uses config.enable_guardrails.

    Returns:
        Configured Agent instance.
    """
    config = get_config()
    model = model or config.default_model
    if enable_guardrails is None:
        enable_guardrails = config.enable_guardrails

    output_guardrails = [suggestion_format_guardrail] if enable_guardrails else []

    return Agent[None](
        name="Form Builder",
        instructions=FORM_BUILDER_INSTRUCTIONS,
        model=model,
        model_settings=config.get_model_settings(),
        output_type=FormSuggestion,
        output_guardrails=output_guardrails,
    )


def build_form_builder_prompt(
    prompt: str,
    context: str | None = None,
    existing_fields: list[Any] | None = None,
) -> str:
    """Assemble the user message sent to the Form Builder agent."""
    parts = [f"Request: {prompt}"]
    if context:
        parts.append(f"Context: {context}")
    if existing_fields:
        fields = [field_payload(field) for field in prepare_fields_for_editor(existing_fields)]
        parts.append(f"Existing fields:\n{json.dumps(fields, indent=2)}")
    return "\n\n".join(parts)


async def suggest_form(
    prompt: str,
    context: str | None = None,
    existing_fields: list[Any] | None = None,
    agent: Agent[None] | None = None,
) -> FormSuggestion:
    """
    Generate a form suggestion.

    Args:
        prompt: What the form should collect (e.g., "Event registration").
        context: Optional extra context (workspace name, previous forms).
        existing_fields: Current fields when editing an existing form.
        agent: Agent to run. If None, a default Form Builder agent is created.

    Returns:
        FormSuggestion with field types in the editor vocabulary.

    Raises:
        ValueError: If the agent returned no structured suggestion.
    """
    agent = agent or create_form_builder_agent()
    message = build_form_builder_prompt(prompt, context, existing_fields)

    result = await Runner.run(agent, message)
    suggestion = result.final_output
    if not isinstance(suggestion, FormSuggestion):
        raise ValueError(f"Form Builder returned unexpected output: {type(suggestion).__name__}")

    logger.info(f"Form Builder suggested {len(suggestion.fields)} field(s)")
    return suggestion.model_copy(
        update={"fields": prepare_fields_for_editor(suggestion.fields)}
    )
