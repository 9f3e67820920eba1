"""
AI form-builder suggestion model.

The shape the form-builder agent answers with: a title, a description
and a list of suggested fields.
"""

from pydantic import BaseModel, Field

from form_engine.models.field_definitions import FieldDefinition


class FormSuggestion(BaseModel):
    """Form suggested by the AI form builder."""

    title: str = Field(..., description="Suggested form title")
    description: str | None = Field(default=None, description="Suggested form description")
    fields: list[FieldDefinition] = Field(
        default_factory=list,
        description="Suggested fields, in display order",
    )
