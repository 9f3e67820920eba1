"""
Field-type vocabularies.

The builder UI and the stored form schema name the same field kinds
differently. Both vocabularies and the mapping tables between them live
here so the normalizer and the validator compiler agree on them.
"""

# Stored form schema identifiers
PERSISTED_FIELD_TYPES = frozenset({
    "shortText",
    "longText",
    "number",
    "email",
    "phone",
    "date",
    "select",
    "multiSelect",
    "checkbox",
    "radio",
    "fileUpload",
    "url",
    "h1",
    "h2",
    "h3",
    "ai",
})

# Interactive builder identifiers
EDITOR_FIELD_TYPES = frozenset({
    "text",
    "long_answer",
    "number",
    "email",
    "phone",
    "date",
    "dropdown",
    "multi_select",
    "checkbox",
    "multiple_choice",
    "file",
    "h1",
    "h2",
    "h3",
    "time",
    "link",
    "ai",
})

EDITOR_TO_PERSISTED = {
    "text": "shortText",
    "long_answer": "longText",
    "number": "number",
    "email": "email",
    "phone": "phone",
    "date": "date",
    "dropdown": "select",
    "multi_select": "multiSelect",
    "checkbox": "checkbox",
    "multiple_choice": "radio",
    "file": "fileUpload",
    "h1": "h1",
    "h2": "h2",
    "h3": "h3",
    "ai": "ai",
    # No persisted time type; stored as a date.
    "time": "date",
    "link": "url",
}

PERSISTED_TO_EDITOR = {
    "shortText": "text",
    "longText": "long_answer",
    "number": "number",
    "email": "email",
    "phone": "phone",
    "date": "date",
    "select": "dropdown",
    "multiSelect": "multi_select",
    "checkbox": "checkbox",
    "radio": "multiple_choice",
    "fileUpload": "file",
    "url": "link",
    "h1": "h1",
    "h2": "h2",
    "h3": "h3",
    "ai": "ai",
}

# Fallbacks for identifiers neither vocabulary knows
DEFAULT_PERSISTED_TYPE = "shortText"
DEFAULT_EDITOR_TYPE = "text"

# Non-interactive layout fields
HEADING_TYPES = frozenset({"h1", "h2", "h3"})

AI_FIELD_TYPE = "ai"

