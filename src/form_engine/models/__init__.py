"""
Data models for the form engine.

This module contains Pydantic models for:
- Field and form definitions
- Validation results
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

__all__ = [
    # Definitions
    "FieldDefinition",
    "FieldValidation",
    "FormDefinition",
    "FormSuggestion",
    # Validation
    "ErrorKind",
    "FieldValidationError",
    "ValidationResult",
]
