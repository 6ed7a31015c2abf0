"""
Raw field encoding.

``encode_value(value, configuration)`` renders one value to the text that
appears in the CSV output. It never quotes or escapes; that happens once,
afterwards, in ``csvtable.escaping``.

Supported out of the box:

- ``str``: unchanged
- ``int``, ``float``, ``Decimal``: plain decimal text, no grouping
- ``bool``: per the configuration's bool strategy
- ``datetime``, ``date``: per the configuration's date strategy
- ``UUID``: the canonical hyphenated form
- ``None``: empty string

Other types take part by defining ``encode(configuration) -> str`` or by
registering an encoder:

    >>> @encode_value.register(Money)
    ... def _(value, configuration):
    ...     return f"{value.amount:.2f}"
"""

from __future__ import annotations

from datetime import date
from decimal import Decimal
from functools import singledispatch
from typing import Any, Protocol
from uuid import UUID

from .configuration import EncoderConfiguration
from .errors import UnencodableValueError


class CSVEncodable(Protocol):
    """A value that knows how to render itself as a raw CSV field."""

    def encode(self, configuration: EncoderConfiguration) -> str:
        ...


@singledispatch
def encode_value(value: Any, configuration: EncoderConfiguration) -> str:
    encode = getattr(value, "encode", None)
    if callable(encode):
        return encode(configuration)
    raise UnencodableValueError(value)


@encode_value.register(type(None))
def _encode_none(value: None, configuration: EncoderConfiguration) -> str:
    return ""


@encode_value.register(str)
def _encode_str(value: str, configuration: EncoderConfiguration) -> str:
    return value


@encode_value.register(bool)
def _encode_bool(value: bool, configuration: EncoderConfiguration) -> str:
    return configuration.bool_strategy.encode(value)


@encode_value.register(int)
def _encode_int(value: int, configuration: EncoderConfiguration) -> str:
    # int() strips IntEnum and friends down to the number
    return str(int(value))


@encode_value.register(float)
def _encode_float(value: float, configuration: EncoderConfiguration) -> str:
    return repr(float(value))


@encode_value.register(Decimal)
def _encode_decimal(value: Decimal, configuration: EncoderConfiguration) -> str:
    return str(value)


# datetime is a date subclass, so this covers both
@encode_value.register(date)
def _encode_date(value: date, configuration: EncoderConfiguration) -> str:
    return configuration.date_strategy.encode(value)


@encode_value.register(UUID)
def _encode_uuid(value: UUID, configuration: EncoderConfiguration) -> str:
    return str(value)
