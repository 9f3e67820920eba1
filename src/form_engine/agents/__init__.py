"""
Agent definitions for the form engine.

This module contains the Form Builder agent, which suggests fields for a
new or edited form.
"""

from form_engine.agents.form_builder import (
    build_form_builder_prompt,
    create_form_builder_agent,
    suggest_form,
)

__all__ = [
    "create_form_builder_agent",
    "build_form_builder_prompt",
    "suggest_form",
]
