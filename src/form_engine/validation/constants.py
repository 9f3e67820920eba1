"""
Patterns and messages shared by the field validation rules.
"""

import re

PATTERNS = {
    # Basic email shape: something@something.tld
    "EMAIL": re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$"),
    # 10-15 digits, optional leading +
    "PHONE": re.compile(r"^\+?[0-9]{10,15}$"),
    # Scheme and www are optional
    "URL": re.compile(
        r"^(https?://)?(www\.)?[a-zA-Z0-9-]+(\.[a-zA-Z]{2,})+[/\w-]*(\?[^\s]*)?$"
    ),
}

ERROR_MESSAGES = {
    "REQUIRED": "This field is required",
    "INVALID_EMAIL": "Please enter a valid email address",
    "INVALID_PHONE": "Please enter a valid phone number",
    "INVALID_URL": "Please enter a valid URL",
    "INVALID_FORMAT": "Value does not match the required format",
    "MIN_LENGTH": "Must be at least {min} characters",
    "MAX_LENGTH": "Must be at most {max} characters",
    "MIN_VALUE": "Must be greater than or equal to {min}",
    "MAX_VALUE": "Must be less than or equal to {max}",
    "MIN_ITEMS": "Select at least {min} option(s)",
    "MAX_ITEMS": "Select at most {max} option(s)",
    "INVALID_OPTION": "Must be one of: {options}",
    "INVALID_OPTIONS": "One or more selected values are invalid",
    "FILE_TOO_LARGE": "File size exceeds the maximum limit of {max_mb}MB",
    "INVALID_FILE_TYPE": "Invalid file type",
    "EXPECTED_TEXT": "Expected text",
    "EXPECTED_NUMBER": "Expected a number",
    "EXPECTED_BOOLEAN": "Expected true or false",
    "EXPECTED_LIST": "Expected a list of values",
    "EXPECTED_FILE": "Expected a file",
    "EXPECTED_OBJECT": "Expected an object keyed by field id",
}

# Pseudo field id for errors about the payload as a whole
PAYLOAD_FIELD_ID = "_payload"
