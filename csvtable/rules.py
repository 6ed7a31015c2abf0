"""
CSV output format rules.

This file exists to keep the format decisions in one place: the escaping
layer and the table assembly layer both read from here.
"""

FIELD_SEPARATOR = ","
# Rows are joined with a literal backslash followed by "n", not a newline character.
ROW_SEPARATOR = "\\n"

QUOTE = '"'
ESCAPED_QUOTE = QUOTE * 2

# Any of these inside a field forces the field to be quoted.
QUOTE_TRIGGERS = (FIELD_SEPARATOR, QUOTE, ROW_SEPARATOR)
# A field starting or ending with this is quoted so the padding survives.
PADDING = " "
