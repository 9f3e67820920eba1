"""
Response payload validation.

Compiles a form's field definitions into a FormValidator and exposes the
per-type rules it is built from.
"""

from form_engine.validation.compiler import (
    FormValidator,
    build_form_validator,
    compile_field_rule,
    is_exempt_field,
)
from form_engine.validation.constants import ERROR_MESSAGES, PATTERNS
from form_engine.validation.rules import MISSING, Violation

__all__ = [
    "FormValidator",
    "build_form_validator",
    "compile_field_rule",
    "is_exempt_field",
    "ERROR_MESSAGES",
    "PATTERNS",
    "MISSING",
    "Violation",
]
