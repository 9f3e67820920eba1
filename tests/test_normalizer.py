"""Tests for field-type normalization."""

import pytest

from form_engine.models.field_definitions import FieldDefinition
from form_engine.normalizer import (
    is_heading_type,
    prepare_fields_for_editor,
    prepare_fields_for_persistence,
    to_editor,
    to_persisted,
)
from form_engine.normalizer.constants import (
    EDITOR_FIELD_TYPES,
    EDITOR_TO_PERSISTED,
    PERSISTED_FIELD_TYPES,
    PERSISTED_TO_EDITOR,
)

ALL_TYPES = sorted(EDITOR_FIELD_TYPES | PERSISTED_FIELD_TYPES)


class TestScalarMapping:
    """Tests for to_persisted / to_editor."""

    @pytest.mark.parametrize(
        "editor_type,persisted_type",
        [
            ("text", "shortText"),
            ("long_answer", "longText"),
            ("dropdown", "select"),
            ("multi_select", "multiSelect"),
            ("multiple_choice", "radio"),
            ("file", "fileUpload"),
            ("link", "url"),
            ("time", "date"),
            ("email", "email"),
            ("h1", "h1"),
        ],
    )
    def test_to_persisted(self, editor_type, persisted_type):
        """Test editor identifiers map to their stored counterpart."""
        assert to_persisted(editor_type) == persisted_type

    def test_to_editor(self):
        """Test stored identifiers map back to the builder's."""
        assert to_editor("shortText") == "text"
        assert to_editor("radio") == "multiple_choice"
        assert to_editor("url") == "link"

    @pytest.mark.parametrize("field_type", ALL_TYPES)
    def test_idempotent(self, field_type):
        """Test mapping twice is the same as mapping once."""
        assert to_persisted(to_persisted(field_type)) == to_persisted(field_type)
        assert to_editor(to_editor(field_type)) == to_editor(field_type)

    def test_target_vocabulary_unchanged(self):
        """Test identifiers already in the target vocabulary pass through."""
        for field_type in PERSISTED_FIELD_TYPES:
            assert to_persisted(field_type) == field_type
        for field_type in EDITOR_FIELD_TYPES:
            assert to_editor(field_type) == field_type

    def test_round_trip(self):
        """Test pairs with an inverse survive a round trip."""
        for editor_type in EDITOR_TO_PERSISTED:
            if editor_type == "time":
                continue
            assert to_editor(to_persisted(editor_type)) == editor_type
        for persisted_type in PERSISTED_TO_EDITOR:
            assert to_persisted(to_editor(persisted_type)) == persisted_type

    @pytest.mark.parametrize("field_type", ["signature", "", None, 42])
    def test_unknown_falls_back_to_short_text(self, field_type):
        """Test unrecognized identifiers degrade instead of failing."""
        assert to_persisted(field_type) == "shortText"
        assert to_editor(field_type) == "text"

    def test_heading_types(self):
        """Test heading detection."""
        assert is_heading_type("h3")
        assert not is_heading_type("text")
        assert not is_heading_type(None)


class TestBatchMapping:
    """Tests for the list variants."""

    def test_prepare_for_persistence(self):
        """Test only editor-only types are rewritten."""
        fields = [
            {"id": "f1", "type": "text", "label": "Name"},
            {"id": "f2", "type": "shortText", "label": "Nick"},
            {"id": "f3", "type": "email", "label": "Email"},
            {"id": "f4", "type": "multiple_choice", "label": "Pick", "options": ["a"]},
        ]
        prepared = prepare_fields_for_persistence(fields)
        assert [f["type"] for f in prepared] == ["shortText", "shortText", "email", "radio"]
        assert prepared[3]["options"] == ["a"]

    def test_prepare_for_editor(self):
        """Test only persisted-only types are rewritten."""
        fields = [
            {"id": "f1", "type": "longText", "label": "Bio"},
            {"id": "f2", "type": "dropdown", "label": "Size"},
            {"id": "f3", "type": "checkbox", "label": "Agree"},
        ]
        prepared = prepare_fields_for_editor(fields)
        assert [f["type"] for f in prepared] == ["long_answer", "dropdown", "checkbox"]

    def test_inputs_not_mutated(self):
        """Test the batch variants return copies."""
        fields = [{"id": "f1", "type": "text", "label": "Name"}]
        prepared = prepare_fields_for_persistence(fields)
        assert fields[0]["type"] == "text"
        assert prepared[0] is not fields[0]

    def test_no_double_translation(self):
        """Test converting an already converted list is a no-op."""
        fields = [{"id": "f1", "type": "link", "label": "Site"}]
        once = prepare_fields_for_persistence(fields)
        assert prepare_fields_for_persistence(once) == once

    def test_models_are_copied(self):
        """Test FieldDefinition models are converted with model copies."""
        field = FieldDefinition(id="f1", type="multiSelect", label="Tags", options=["x"])
        prepared = prepare_fields_for_editor([field])
        assert isinstance(prepared[0], FieldDefinition)
        assert prepared[0].type == "multi_select"
        assert field.type == "multiSelect"

    def test_unknown_type_left_alone(self):
        """Test types neither vocabulary knows are not rewritten in batch."""
        fields = [{"id": "f1", "type": "signature", "label": "Sign"}]
        assert prepare_fields_for_persistence(fields)[0]["type"] == "signature"

    @pytest.mark.parametrize("fields", [None, "text", {"id": "f1"}])
    def test_non_list_input(self, fields):
        """Test non-list input yields an empty list."""
        assert prepare_fields_for_persistence(fields) == []
        assert prepare_fields_for_editor(fields) == []
