"""
Per-type field validation rules.

Each constructor takes a field's constraints and returns a rule: a
callable that receives the submitted value (or ``MISSING`` when the key
is absent) and returns ``(value, violations)``. The returned value is the
coerced value to store; ``violations`` is empty when the value is
acceptable. Rules report every violation they find rather than stopping
at the first.
"""

import math
import re
from typing import Any, Callable, Mapping, NamedTuple, Sequence

from form_engine.models.validation_result import ErrorKind
from form_engine.validation.constants import ERROR_MESSAGES, PATTERNS


class _Missing:
    def __repr__(self) -> str:
        return "MISSING"


MISSING: Any = _Missing()


class Violation(NamedTuple):
    """One failed constraint for a single value."""

    kind: ErrorKind
    message: str
    expected: Any = None


RuleResult = tuple[Any, list[Violation]]
Rule = Callable[[Any], RuleResult]


def _fmt(number: float) -> str:
    if isinstance(number, float) and number.is_integer():
        return str(int(number))
    return str(number)


def _is_missing(value: Any) -> bool:
    return value is MISSING or value is None


def _is_blank(value: Any) -> bool:
    return _is_missing(value) or (isinstance(value, str) and not value.strip())


def _required(required: bool) -> list[Violation]:
    if required:
        return [Violation(ErrorKind.REQUIRED_FIELD_MISSING, ERROR_MESSAGES["REQUIRED"])]
    return []


def _type_error(message_key: str, expected: str) -> list[Violation]:
    return [Violation(ErrorKind.TYPE_COERCION_FAILURE, ERROR_MESSAGES[message_key], expected)]


def text_rule(
    required: bool = False,
    min_length: int | None = None,
    max_length: int | None = None,
    pattern: re.Pattern[str] | None = None,
) -> Rule:
    """Plain string; optional length bounds and full-match pattern."""

    def validate(value: Any) -> RuleResult:
        if _is_missing(value):
            return value, _required(required)
        if not isinstance(value, str):
            return value, _type_error("EXPECTED_TEXT", "string")
        if value == "":
            return value, _required(required)

        violations = []
        if min_length is not None and len(value) < min_length:
            violations.append(Violation(
                ErrorKind.CONSTRAINT_VIOLATION,
                ERROR_MESSAGES["MIN_LENGTH"].format(min=min_length),
                min_length,
            ))
        if max_length is not None and len(value) > max_length:
            violations.append(Violation(
                ErrorKind.CONSTRAINT_VIOLATION,
                ERROR_MESSAGES["MAX_LENGTH"].format(max=max_length),
                max_length,
            ))
        if pattern is not None and pattern.fullmatch(value) is None:
            violations.append(Violation(
                ErrorKind.CONSTRAINT_VIOLATION,
                ERROR_MESSAGES["INVALID_FORMAT"],
                pattern.pattern,
            ))
        return value, violations

    return validate


def pattern_rule(pattern: re.Pattern[str], message_key: str, required: bool = False) -> Rule:
    """String that must match a fixed pattern (email, phone, url)."""

    def validate(value: Any) -> RuleResult:
        if _is_missing(value):
            return value, _required(required)
        if not isinstance(value, str):
            return value, _type_error("EXPECTED_TEXT", "string")
        if value == "":
            return value, _required(required)
        if pattern.fullmatch(value) is None:
            return value, [Violation(
                ErrorKind.CONSTRAINT_VIOLATION,
                ERROR_MESSAGES[message_key],
                pattern.pattern,
            )]
        return value, []

    return validate


def email_rule(required: bool = False) -> Rule:
    return pattern_rule(PATTERNS["EMAIL"], "INVALID_EMAIL", required)


def phone_rule(required: bool = False) -> Rule:
    return pattern_rule(PATTERNS["PHONE"], "INVALID_PHONE", required)


def url_rule(required: bool = False) -> Rule:
    return pattern_rule(PATTERNS["URL"], "INVALID_URL", required)


def coerce_number(value: Any) -> int | float | None:
    """
    Coerce a submitted value to a number.

    Accepts ints, floats and numeric strings. Booleans, non-finite values
    and anything else give ``None``.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return value if math.isfinite(value) else None
    if isinstance(value, str):
        text = value.strip()
        try:
            return int(text)
        except ValueError:
            pass
        try:
            number = float(text)
        except ValueError:
            return None
        return number if math.isfinite(number) else None
    return None


def number_rule(
    required: bool = False,
    minimum: float | None = None,
    maximum: float | None = None,
) -> Rule:
    """Numeric value with inclusive bounds."""

    def validate(value: Any) -> RuleResult:
        if _is_blank(value):
            return value, _required(required)

        number = coerce_number(value)
        if number is None:
            return value, _type_error("EXPECTED_NUMBER", "number")

        violations = []
        if minimum is not None and number < minimum:
            violations.append(Violation(
                ErrorKind.CONSTRAINT_VIOLATION,
                ERROR_MESSAGES["MIN_VALUE"].format(min=_fmt(minimum)),
                minimum,
            ))
        if maximum is not None and number > maximum:
            violations.append(Violation(
                ErrorKind.CONSTRAINT_VIOLATION,
                ERROR_MESSAGES["MAX_VALUE"].format(max=_fmt(maximum)),
                maximum,
            ))
        return number, violations

    return validate


def checkbox_rule(required: bool = False) -> Rule:
    """Boolean; a required checkbox must be ticked."""

    def validate(value: Any) -> RuleResult:
        if _is_missing(value):
            return value, _required(required)
        if not isinstance(value, bool):
            return value, _type_error("EXPECTED_BOOLEAN", "boolean")
        if required and value is not True:
            return value, _required(required)
        return value, []

    return validate


def choice_rule(required: bool = False, options: Sequence[str] | None = None) -> Rule:
    """
    Single choice from a closed list.

    Without options there is nothing to check membership against, so the
    field is validated as plain text.
    """
    if not options:
        return text_rule(required=required)

    allowed = list(options)

    def validate(value: Any) -> RuleResult:
        if _is_missing(value):
            return value, _required(required)
        if not isinstance(value, str):
            return value, _type_error("EXPECTED_TEXT", "string")
        if value == "":
            return value, _required(required)
        if value not in allowed:
            return value, [Violation(
                ErrorKind.CONSTRAINT_VIOLATION,
                ERROR_MESSAGES["INVALID_OPTION"].format(options=", ".join(allowed)),
                allowed,
            )]
        return value, []

    return validate


def multi_choice_rule(
    required: bool = False,
    options: Sequence[str] | None = None,
    min_items: int | None = None,
    max_items: int | None = None,
) -> Rule:
    """
    List of strings.

    A required field needs at least one element, or ``min_items`` when that
    is configured. An empty list on an optional field counts as unanswered.
    """
    allowed = list(options) if options else None
    minimum = min_items or (1 if required else None)

    def validate(value: Any) -> RuleResult:
        if _is_missing(value):
            return value, _required(required)
        if not isinstance(value, (list, tuple)):
            return value, _type_error("EXPECTED_LIST", "array")
        if any(not isinstance(item, str) for item in value):
            return value, _type_error("EXPECTED_LIST", "array of strings")

        items = list(value)
        if not items:
            return items, _required(required)

        violations = []
        if minimum is not None and len(items) < minimum:
            violations.append(Violation(
                ErrorKind.CONSTRAINT_VIOLATION,
                ERROR_MESSAGES["MIN_ITEMS"].format(min=minimum),
                minimum,
            ))
        if max_items is not None and len(items) > max_items:
            violations.append(Violation(
                ErrorKind.CONSTRAINT_VIOLATION,
                ERROR_MESSAGES["MAX_ITEMS"].format(max=max_items),
                max_items,
            ))
        if allowed is not None and any(item not in allowed for item in items):
            violations.append(Violation(
                ErrorKind.CONSTRAINT_VIOLATION,
                ERROR_MESSAGES["INVALID_OPTIONS"],
                allowed,
            ))
        return items, violations

    return validate


def _file_type_accepted(file_types: Sequence[str], name: Any, mime: Any) -> bool:
    name = name.lower() if isinstance(name, str) else ""
    mime = mime.lower() if isinstance(mime, str) else ""
    for entry in file_types:
        entry = entry.lower()
        if entry.startswith("."):
            if name.endswith(entry):
                return True
        elif entry.endswith("/*"):
            if mime.startswith(entry[:-1]):
                return True
        elif mime == entry:
            return True
    return False


def file_rule(
    required: bool = False,
    max_size_mb: float | None = None,
    file_types: Sequence[str] | None = None,
) -> Rule:
    """
    Uploaded file.

    The value is either an opaque string reference (an upload URL or key)
    or a descriptor mapping with ``name``, ``size`` in bytes and MIME
    ``type``. Size and type constraints apply to descriptors only.
    """

    def validate(value: Any) -> RuleResult:
        if _is_blank(value):
            return value, _required(required)
        if isinstance(value, str):
            return value, []
        if not isinstance(value, Mapping):
            return value, _type_error("EXPECTED_FILE", "file")

        violations = []
        size = value.get("size")
        if (
            max_size_mb is not None
            and isinstance(size, (int, float))
            and not isinstance(size, bool)
            and size > max_size_mb * 1024 * 1024
        ):
            violations.append(Violation(
                ErrorKind.CONSTRAINT_VIOLATION,
                ERROR_MESSAGES["FILE_TOO_LARGE"].format(max_mb=_fmt(max_size_mb)),
                max_size_mb,
            ))
        if file_types and not _file_type_accepted(file_types, value.get("name"), value.get("type")):
            violations.append(Violation(
                ErrorKind.CONSTRAINT_VIOLATION,
                ERROR_MESSAGES["INVALID_FILE_TYPE"],
                list(file_types),
            ))
        return dict(value), violations

    return validate
