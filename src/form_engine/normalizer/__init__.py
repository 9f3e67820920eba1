"""
Field-type normalization between the editor and persisted vocabularies.
"""

from form_engine.normalizer.field_types import (
    is_ai_computed_field,
    is_exempt_field,
    is_editor_type,
    is_heading_type,
    is_persisted_type,
    prepare_fields_for_editor,
    prepare_fields_for_persistence,
    to_editor,
    to_persisted,
)

__all__ = [
    "to_persisted",
    "to_editor",
    "prepare_fields_for_persistence",
    "prepare_fields_for_editor",
    "is_editor_type",
    "is_persisted_type",
    "is_heading_type",
    "is_ai_computed_field",
    "is_exempt_field",
]
