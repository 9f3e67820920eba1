"""
Field and form definition models.

These are the shapes that cross the boundary between the form builder,
storage and the validation engine. Field types may arrive in either the
editor or the persisted vocabulary; the models do not force one.
"""

from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

from form_engine.normalizer.field_types import is_ai_computed_field, is_exempt_field

if TYPE_CHECKING:
    from form_engine.validation.compiler import FormValidator


class FieldValidation(BaseModel):
    """
    Optional constraint bundle attached to a field.

    ``min``/``max`` are string length bounds on text fields, value bounds
    on number fields and item count bounds on multi-select fields.
    """

    model_config = ConfigDict(populate_by_name=True)

    min: float | None = Field(default=None, description="Lower bound")
    max: float | None = Field(default=None, description="Upper bound")
    pattern: str | None = Field(default=None, description="Regex the value must fully match")
    file_size: float | None = Field(
        default=None,
        alias="fileSize",
        description="Maximum upload size in megabytes",
    )
    file_types: list[str] | None = Field(
        default=None,
        alias="fileTypes",
        description="Accepted MIME types or extensions",
    )


class FieldDefinition(BaseModel):
    """One authored field in a form."""

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(..., description="Stable identifier, used as the response payload key")
    type: str = Field(..., description="Field type from either vocabulary")
    label: str = Field(..., min_length=1, description="Display label")
    required: bool = Field(default=False, description="Whether a value must be supplied")
    options: list[str] | None = Field(
        default=None,
        description="Allowed values for choice fields",
    )
    validation: FieldValidation | None = Field(default=None)
    description: str | None = Field(default=None, description="Help text")
    placeholder: str | None = Field(default=None, description="Placeholder text")

    # AI-computed fields are filled in by an external process
    is_ai_field: bool = Field(default=False)
    ai_metadata_prompt: str | None = Field(
        default=None,
        description="Prompt used to compute the field value",
    )
    ai_computed_value: str | None = Field(default=None)

    @property
    def is_ai_computed(self) -> bool:
        return is_ai_computed_field(self)

    @property
    def is_exempt(self) -> bool:
        """Whether respondents never supply a value for this field."""
        return is_exempt_field(self)


class FormDefinition(BaseModel):
    """
    An ordered list of fields plus form metadata.

    Field ids must be unique within a form. Duplicates are rejected here,
    at authoring time, so a stored form never compiles to a validator
    where one field's rule silently shadows another's.
    """

    model_config = ConfigDict(populate_by_name=True)

    title: str = Field(..., min_length=1, description="Form title")
    description: str | None = Field(default=None)
    fields: list[FieldDefinition] = Field(default_factory=list)
    published: bool = Field(default=False)
    workspace_id: str | None = Field(default=None, alias="workspaceId")
    banner: str | None = Field(default=None)

    @model_validator(mode="after")
    def _check_unique_field_ids(self) -> "FormDefinition":
        seen: set[str] = set()
        duplicates: list[str] = []
        for field in self.fields:
            if field.id in seen and field.id not in duplicates:
                duplicates.append(field.id)
            seen.add(field.id)
        if duplicates:
            raise ValueError(f"Duplicate field ids: {', '.join(duplicates)}")
        return self

    def ai_fields(self) -> list[FieldDefinition]:
        """Fields whose values are computed externally rather than entered."""
        return [field for field in self.fields if field.is_ai_computed]

    def compile_validator(self) -> "FormValidator":
        """Compile this form's fields into a response validator."""
        from form_engine.validation.compiler import build_form_validator

        return build_form_validator(self.fields)


def field_payload(field: Any) -> Any:
    """Plain mapping view of a field, as stored in a form schema blob."""
    if isinstance(field, BaseModel):
        return field.model_dump(by_alias=True, exclude_none=True)
    return field
