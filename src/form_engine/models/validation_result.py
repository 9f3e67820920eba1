"""
Validation result models for response payload validation.

These models represent the output of a compiled form validator.
"""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ErrorKind(str, Enum):
    """Which kind of constraint a payload value failed."""

    REQUIRED_FIELD_MISSING = "RequiredFieldMissing"
    CONSTRAINT_VIOLATION = "ConstraintViolation"
    TYPE_COERCION_FAILURE = "TypeCoercionFailure"


class FieldValidationError(BaseModel):
    """Validation error for a specific field."""

    model_config = ConfigDict(populate_by_name=True)

    field_id: str = Field(..., alias="fieldId", description="Id of the field with error")
    kind: ErrorKind = Field(..., description="Type of validation error")
    message: str = Field(..., description="Human-readable error message")
    expected: Any | None = Field(default=None, description="Expected value/format")
    received: Any | None = Field(default=None, description="Received value")

    def to_dict(self) -> dict[str, str]:
        """The ``{fieldId, kind, message}`` shape handed to callers."""
        return {
            "fieldId": self.field_id,
            "kind": self.kind.value,
            "message": self.message,
        }


class ValidationResult(BaseModel):
    """Result of validating one response payload."""

    is_valid: bool = Field(..., description="Whether the payload is valid")
    errors: list[FieldValidationError] = Field(
        default_factory=list, description="List of validation errors"
    )
    validated_data: dict[str, Any] | None = Field(
        default=None, description="Coerced payload if valid"
    )
    warnings: list[str] = Field(
        default_factory=list, description="Non-blocking warnings"
    )

    @property
    def error_count(self) -> int:
        """Get the number of validation errors."""
        return len(self.errors)

    def get_field_errors(self, field_id: str) -> list[FieldValidationError]:
        """Get all errors for a specific field."""
        return [e for e in self.errors if e.field_id == field_id]

    def to_error_dict(self) -> dict[str, list[str]]:
        """Convert errors to a dict mapping field ids to error messages."""
        result: dict[str, list[str]] = {}
        for error in self.errors:
            if error.field_id not in result:
                result[error.field_id] = []
            result[error.field_id].append(error.message)
        return result

    def to_error_list(self) -> list[dict[str, str]]:
        return [error.to_dict() for error in self.errors]
