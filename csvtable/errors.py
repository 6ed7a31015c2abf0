"""
Exceptions raised by csvtable.

Encoding and escaping are total over supported values, so there is very
little here. Exceptions raised by derivation functions or custom date
formatters are never wrapped; they reach the caller unchanged.
"""
from typing import Any


class CSVTableError(Exception):
    """Base class for csvtable errors."""

    pass


class UnencodableValueError(CSVTableError, TypeError):
    """Raised when a column derivation returns a value with no CSV encoding."""

    def __init__(self, value: Any):
        self.value = value
        super().__init__(
            f"Cannot encode value of type {type(value).__name__!r} as a CSV field; "
            "give it an encode(configuration) method or register it with encode_value"
        )
