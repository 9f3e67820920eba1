"""
form_engine: schema-driven validation for form responses.

Normalize field types between the builder and stored schemas, then
compile a form's fields into a validator for incoming responses.

Simple Usage:
    from form_engine import build_form_validator

    validator = build_form_validator([
        {"id": "email", "type": "email", "label": "Email", "required": True},
        {"id": "age", "type": "number", "label": "Age", "validation": {"min": 18}},
    ])

    result = validator({"email": "someone@example.com", "age": "21"})
    result.is_valid          # True
    result.validated_data    # {"email": "someone@example.com", "age": 21}

Field Types:
    from form_engine import prepare_fields_for_persistence, to_editor

    stored = prepare_fields_for_persistence(builder_fields)  # "text" -> "shortText"
    to_editor("radio")                                       # "multiple_choice"

Forms:
    from form_engine import FormDefinition

    form = FormDefinition.model_validate(stored_form)  # rejects duplicate field ids
    result = form.compile_validator()(payload)

AI Suggestions:
    from form_engine.agents import suggest_form

    suggestion = await suggest_form("Event registration with dietary needs")
"""

from form_engine.models.field_definitions import (
    FieldDefinition,
    FieldValidation,
    FormDefinition,
)
from form_engine.models.form_suggestion import FormSuggestion
from form_engine.models.validation_result import (
    ErrorKind,
    FieldValidationError,
    ValidationResult,
)
from form_engine.normalizer import (
    prepare_fields_for_editor,
    prepare_fields_for_persistence,
    to_editor,
    to_persisted,
)
from form_engine.validation import (
    FormValidator,
    build_form_validator,
)

__all__ = [
    # Models
    "FieldDefinition",
    "FieldValidation",
    "FormDefinition",
    "FormSuggestion",
    # Normalizer
    "to_persisted",
    "to_editor",
    "prepare_fields_for_persistence",
    "prepare_fields_for_editor",
    # Validation
    "FormValidator",
    "build_form_validator",
    "ValidationResult",
    "FieldValidationError",
    "ErrorKind",
]

__version__ = "0.1.0"
