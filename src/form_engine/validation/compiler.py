"""
Dynamic validator compiler.

Compiles an ordered list of field definitions into one validator for a
response payload. Compilation never fails on malformed definitions: bad
entries are skipped, unknown types validate as short text, and a broken
pattern is dropped. Each problem is logged instead.
"""

import logging
import math
import re
from typing import Any, Callable, Mapping

from form_engine.models.field_definitions import field_payload
from form_engine.models.validation_result import (
    ErrorKind,
    FieldValidationError,
    ValidationResult,
)
from form_engine.normalizer.field_types import (
    is_editor_type,
    is_exempt_field,
    is_persisted_type,
    to_persisted,
)
from form_engine.validation.constants import ERROR_MESSAGES, PAYLOAD_FIELD_ID
from form_engine.validation.rules import (
    MISSING,
    Rule,
    checkbox_rule,
    choice_rule,
    email_rule,
    file_rule,
    multi_choice_rule,
    number_rule,
    phone_rule,
    text_rule,
    url_rule,
)

logger = logging.getLogger(__name__)


class FormValidator:
    """
    Composite validator for one form's response payloads.

    Usage:
        validator = build_form_validator(fields)
        result = validator({"f1": "someone@example.com"})
        if not result.is_valid:
            print(result.to_error_list())
    """

    def __init__(self, rules: dict[str, Rule] | None = None, permissive: bool = False):
        self._rules = dict(rules or {})
        self.permissive = permissive

    @property
    def field_ids(self) -> list[str]:
        """Ids of the fields that carry a rule, in reporting order."""
        return list(self._rules)

    def __contains__(self, field_id: str) -> bool:
        return field_id in self._rules

    def __len__(self) -> int:
        return len(self._rules)

    def validate(self, payload: Any) -> ValidationResult:
        """
        Validate a response payload.

        Every field is checked; the result lists all violations found.
        Keys without a rule pass through into ``validated_data`` unchanged.

        Args:
            payload: Field-id keyed mapping submitted by a respondent.

        Returns:
            ValidationResult with coerced data when valid.
        """
        if self.permissive:
            data = dict(payload) if isinstance(payload, Mapping) else None
            return ValidationResult(is_valid=True, validated_data=data)

        if not isinstance(payload, Mapping):
            return ValidationResult(
                is_valid=False,
                errors=[FieldValidationError(
                    field_id=PAYLOAD_FIELD_ID,
                    kind=ErrorKind.TYPE_COERCION_FAILURE,
                    message=ERROR_MESSAGES["EXPECTED_OBJECT"],
                    expected="object",
                    received=type(payload).__name__,
                )],
            )

        data = dict(payload)
        errors: list[FieldValidationError] = []
        for field_id, rule in self._rules.items():
            value = payload.get(field_id, MISSING)
            coerced, violations = rule(value)
            for violation in violations:
                errors.append(FieldValidationError(
                    field_id=field_id,
                    kind=violation.kind,
                    message=violation.message,
                    expected=violation.expected,
                    received=None if value is MISSING else value,
                ))
            if not violations and value is not MISSING:
                data[field_id] = coerced

        return ValidationResult(
            is_valid=not errors,
            errors=errors,
            validated_data=None if errors else data,
        )

    __call__ = validate


def _number(value: Any) -> float | None:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    return value


def _lower_count(value: Any) -> int | None:
    number = _number(value)
    return None if number is None else math.ceil(number)


def _upper_count(value: Any) -> int | None:
    number = _number(value)
    return None if number is None else math.floor(number)


def _compile_pattern(pattern: Any, field_id: str) -> re.Pattern[str] | None:
    if not isinstance(pattern, str) or not pattern:
        return None
    try:
        return re.compile(pattern)
    except re.error as e:
        logger.warning(f"Ignoring invalid pattern on field '{field_id}': {e}")
        return None


def _text(field: Mapping[str, Any], required: bool, validation: Mapping[str, Any]) -> Rule:
    return text_rule(
        required=required,
        min_length=_lower_count(validation.get("min")),
        max_length=_upper_count(validation.get("max")),
        pattern=_compile_pattern(validation.get("pattern"), field["id"]),
    )


def _number_field(field: Mapping[str, Any], required: bool, validation: Mapping[str, Any]) -> Rule:
    return number_rule(
        required=required,
        minimum=_number(validation.get("min")),
        maximum=_number(validation.get("max")),
    )


def _choice(field: Mapping[str, Any], required: bool, validation: Mapping[str, Any]) -> Rule:
    return choice_rule(required=required, options=_options(field))


def _multi_choice(field: Mapping[str, Any], required: bool, validation: Mapping[str, Any]) -> Rule:
    return multi_choice_rule(
        required=required,
        options=_options(field),
        min_items=_lower_count(validation.get("min")),
        max_items=_upper_count(validation.get("max")),
    )


def _file(field: Mapping[str, Any], required: bool, validation: Mapping[str, Any]) -> Rule:
    file_types = validation.get("fileTypes", validation.get("file_types"))
    if not isinstance(file_types, list):
        file_types = None
    return file_rule(
        required=required,
        max_size_mb=_number(validation.get("fileSize", validation.get("file_size"))),
        file_types=[t for t in file_types if isinstance(t, str)] if file_types else None,
    )


def _options(field: Mapping[str, Any]) -> list[str] | None:
    options = field.get("options")
    if not isinstance(options, list):
        return None
    return [option for option in options if isinstance(option, str)] or None


RuleBuilder = Callable[[Mapping[str, Any], bool, Mapping[str, Any]], Rule]

# Keyed by persisted type
RULE_BUILDERS: dict[str, RuleBuilder] = {
    "shortText": _text,
    "longText": _text,
    "date": _text,
    "email": lambda field, required, validation: email_rule(required),
    "phone": lambda field, required, validation: phone_rule(required),
    "url": lambda field, required, validation: url_rule(required),
    "number": _number_field,
    "checkbox": lambda field, required, validation: checkbox_rule(required),
    "select": _choice,
    "radio": _choice,
    "multiSelect": _multi_choice,
    "fileUpload": _file,
}


def compile_field_rule(field: Mapping[str, Any]) -> Rule:
    """
    Build the rule for one field definition.

    Dispatches on the persisted form of the field's type; anything the
    table does not cover validates as short text.
    """
    field_type = field.get("type")
    if not (is_editor_type(field_type) or is_persisted_type(field_type)):
        logger.warning(f"Unknown type {field_type!r} on field '{field['id']}', validating as short text")

    validation = field.get("validation")
    if not isinstance(validation, Mapping):
        validation = {}
    required = bool(field.get("required"))

    builder = RULE_BUILDERS.get(to_persisted(field_type), _text)
    return builder(field, required, validation)


def build_form_validator(fields: Any) -> FormValidator:
    """
    Compile a list of field definitions into a form validator.

    Args:
        fields: Ordered list of field dicts or FieldDefinition models.

    Returns:
        FormValidator. An empty or non-list input gives a validator that
        accepts any payload.

    Example:
        >>> validator = build_form_validator(
        ...     [{"id": "f1", "type": "email", "required": True}]
        ... )
        >>> validator({}).to_error_list()[0]["kind"]
        'RequiredFieldMissing'
    """
    if not isinstance(fields, list) or not fields:
        return FormValidator(permissive=True)

    rules: dict[str, Rule] = {}
    for raw_field in fields:
        field = field_payload(raw_field)
        if not isinstance(field, Mapping):
            continue
        field_id = field.get("id")
        if not isinstance(field_id, str) or not field_id or not field.get("type"):
            continue
        if is_exempt_field(field):
            continue

        if field_id in rules:
            logger.warning(f"Duplicate field id '{field_id}', later definition replaces earlier rule")
        rules[field_id] = compile_field_rule(field)

    logger.debug(f"Compiled validator with {len(rules)} rule(s) from {len(fields)} field(s)")
    return FormValidator(rules)
