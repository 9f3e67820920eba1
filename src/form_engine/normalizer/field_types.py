"""
Field-type normalizer.

Maps field-type identifiers between the editor vocabulary (used while a
form is being built) and the persisted vocabulary (used in stored form
schemas). Both directions are total and idempotent: an identifier already
in the target vocabulary is returned unchanged, and anything neither
vocabulary knows degrades to short text.
"""

from typing import Any, Mapping

from pydantic import BaseModel

from form_engine.normalizer.constants import (
    AI_FIELD_TYPE,
    DEFAULT_EDITOR_TYPE,
    DEFAULT_PERSISTED_TYPE,
    EDITOR_FIELD_TYPES,
    EDITOR_TO_PERSISTED,
    HEADING_TYPES,
    PERSISTED_FIELD_TYPES,
    PERSISTED_TO_EDITOR,
)


def is_editor_type(field_type: Any) -> bool:
    """Whether ``field_type`` belongs to the editor vocabulary."""
    return isinstance(field_type, str) and field_type in EDITOR_FIELD_TYPES


def is_persisted_type(field_type: Any) -> bool:
    """Whether ``field_type`` belongs to the persisted vocabulary."""
    return isinstance(field_type, str) and field_type in PERSISTED_FIELD_TYPES


def is_heading_type(field_type: Any) -> bool:
    """Headings are layout only and never carry a value."""
    return isinstance(field_type, str) and field_type in HEADING_TYPES


def _get_flag(field: Any, name: str) -> bool:
    if isinstance(field, Mapping):
        return bool(field.get(name))
    return bool(getattr(field, name, False))


def is_ai_computed_field(field: Any) -> bool:
    """Whether the field's value is produced by an external process."""
    return _get_type(field) == AI_FIELD_TYPE or _get_flag(field, "is_ai_field")


def is_exempt_field(field: Any) -> bool:
    """
    Whether respondents never supply a value for this field.

    Headings and AI-computed fields are exempt. Accepts field dicts or
    FieldDefinition models.
    """
    return is_heading_type(_get_type(field)) or is_ai_computed_field(field)


def to_persisted(field_type: Any) -> str:
    """
    Map a field type to the persisted vocabulary.

    Args:
        field_type: Identifier from either vocabulary (or anything else).

    Returns:
        The persisted identifier. Persisted identifiers come back unchanged,
        unknown values become ``"shortText"``.

    Example:
        >>> to_persisted("multiple_choice")
        'radio'
        >>> to_persisted("radio")
        'radio'
    """
    if is_persisted_type(field_type):
        return field_type
    if is_editor_type(field_type):
        return EDITOR_TO_PERSISTED[field_type]
    return DEFAULT_PERSISTED_TYPE


def to_editor(field_type: Any) -> str:
    """
    Map a field type to the editor vocabulary.

    Editor identifiers come back unchanged, unknown values become ``"text"``.

    Example:
        >>> to_editor("multiSelect")
        'multi_select'
    """
    if is_editor_type(field_type):
        return field_type
    if is_persisted_type(field_type):
        return PERSISTED_TO_EDITOR[field_type]
    return DEFAULT_EDITOR_TYPE


def _get_type(field: Any) -> Any:
    if isinstance(field, Mapping):
        return field.get("type")
    return getattr(field, "type", None)


def _with_type(field: Any, field_type: str) -> Any:
    """Return a copy of ``field`` carrying ``field_type``."""
    if isinstance(field, BaseModel):
        return field.model_copy(update={"type": field_type})
    new_field = dict(field)
    new_field["type"] = field_type
    return new_field


def _copy(field: Any) -> Any:
    if isinstance(field, BaseModel):
        return field.model_copy()
    if isinstance(field, Mapping):
        return dict(field)
    return field


def prepare_fields_for_persistence(fields: Any) -> list[Any]:
    """
    Convert a field list to the persisted vocabulary.

    Only fields whose type is editor-only are rewritten; types already in
    the persisted vocabulary (including the shared ones) are left alone.
    Inputs are not mutated.

    Args:
        fields: List of field dicts or FieldDefinition models.

    Returns:
        New list of copies. Non-list input yields an empty list.
    """
    if not isinstance(fields, list):
        return []

    prepared = []
    for field in fields:
        field_type = _get_type(field)
        if is_editor_type(field_type) and not is_persisted_type(field_type):
            prepared.append(_with_type(field, to_persisted(field_type)))
        else:
            prepared.append(_copy(field))
    return prepared


def prepare_fields_for_editor(fields: Any) -> list[Any]:
    """
    Convert a field list to the editor vocabulary.

    Mirror of :func:`prepare_fields_for_persistence`.
    """
    if not isinstance(fields, list):
        return []

    prepared = []
    for field in fields:
        field_type = _get_type(field)
        if is_persisted_type(field_type) and not is_editor_type(field_type):
            prepared.append(_with_type(field, to_editor(field_type)))
        else:
            prepared.append(_copy(field))
    return prepared
