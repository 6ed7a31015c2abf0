"""
Field escaping.

A field is quoted when it contains a comma, a double quote or the row
separator token, or when it starts or ends with a space. Quoting doubles
every embedded double quote and wraps the field in double quotes. Other
fields are written as they are.

Escaping is not idempotent: run it exactly once per field, after encoding.
"""

from typing import Any

from .configuration import EncoderConfiguration
from .encodable import encode_value
from .rules import ESCAPED_QUOTE, PADDING, QUOTE, QUOTE_TRIGGERS


def needs_quoting(field: str) -> bool:
    """True if ``field`` must be wrapped in quotes to survive as one CSV field."""
    if any(trigger in field for trigger in QUOTE_TRIGGERS):
        return True
    return field.startswith(PADDING) or field.endswith(PADDING)


def escape_field(field: str) -> str:
    if not needs_quoting(field):
        return field
    return QUOTE + field.replace(QUOTE, ESCAPED_QUOTE) + QUOTE


def encode_field(value: Any, configuration: EncoderConfiguration) -> str:
    """Encode ``value`` with ``configuration`` and escape the result."""
    return escape_field(encode_value(value, configuration))
