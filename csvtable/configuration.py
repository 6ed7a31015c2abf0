"""
Encoder configuration: how dates and booleans are written to CSV fields.

Strategies are small frozen pydantic models carrying a ``kind`` plus the
payload that kind needs (a formatter object, a function, or a pair of
strings). Build them through the classmethod constructors:

    >>> DateEncodingStrategy.formatted("%d/%m/%Y")
    >>> BoolEncodingStrategy.custom("Y", "N")

``DEFAULT_CONFIGURATION`` is shared by every table that does not supply its
own configuration. It is never mutated; construct a new
``EncoderConfiguration`` to change behaviour.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, timezone, tzinfo
from enum import Enum
from typing import Any, Callable, Dict, Optional, Protocol, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, StrictStr, field_validator, model_validator

DateValue = Union[datetime, date]


class DateFormatter(Protocol):
    """Anything with a ``format(value) -> str`` method can format dates."""

    def format(self, value: DateValue) -> str:
        ...


@dataclass(frozen=True)
class StrftimeFormatter:
    """
    Date formatter driven by a ``strftime`` pattern.

    If ``timezone`` is given, datetimes are converted to it before
    formatting. Naive datetimes are treated as UTC for that conversion.
    """

    pattern: str
    timezone: Optional[tzinfo] = None

    def format(self, value: DateValue) -> str:
        if self.timezone is not None and isinstance(value, datetime):
            if value.tzinfo is None:
                value = value.replace(tzinfo=timezone.utc)
            value = value.astimezone(self.timezone)
        return value.strftime(self.pattern)


def format_iso8601(value: DateValue) -> str:
    """
    Render a datetime as ``YYYY-MM-DDTHH:MM:SSZ`` in UTC.

    Fractional seconds are dropped. Naive datetimes are assumed to be UTC
    already. Plain dates render as ``YYYY-MM-DD``.
    """
    if not isinstance(value, datetime):
        return value.isoformat()
    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc)
    return value.replace(microsecond=0, tzinfo=None).isoformat() + "Z"


class DateStrategyKind(str, Enum):
    DEFERRED_TO_DATE = "deferred_to_date"
    ISO8601 = "iso8601"
    FORMATTED = "formatted"
    CUSTOM = "custom"


class DateEncodingStrategy(BaseModel):
    """How ``datetime`` and ``date`` values are encoded."""

    model_config = ConfigDict(frozen=True)

    kind: DateStrategyKind = DateStrategyKind.ISO8601
    formatter: Optional[Any] = None
    function: Optional[Callable[[Any], str]] = None

    @field_validator("formatter", mode="before")
    @classmethod
    def _pattern_to_formatter(cls, v: Any) -> Any:
        # str has its own format() method, so a bare pattern must be wrapped
        if isinstance(v, str):
            return StrftimeFormatter(v)
        return v

    @model_validator(mode="after")
    def _check_payload(self) -> "DateEncodingStrategy":
        if self.kind is DateStrategyKind.FORMATTED:
            if not callable(getattr(self.formatter, "format", None)):
                raise ValueError("formatted date strategy needs an object with a format(value) method")
        elif self.formatter is not None:
            raise ValueError("formatter only applies to the formatted date strategy")

        if self.kind is DateStrategyKind.CUSTOM:
            if self.function is None:
                raise ValueError("custom date strategy needs a function")
        elif self.function is not None:
            raise ValueError("function only applies to the custom date strategy")
        return self

    @classmethod
    def deferred_to_date(cls) -> "DateEncodingStrategy":
        """Use Python's own string form of the value, ``str(value)``."""
        return cls(kind=DateStrategyKind.DEFERRED_TO_DATE)

    @classmethod
    def iso8601(cls) -> "DateEncodingStrategy":
        """ISO 8601 in UTC with a ``Z`` designator, e.g. ``2023-11-07T17:34:21Z``."""
        return cls(kind=DateStrategyKind.ISO8601)

    @classmethod
    def formatted(cls, formatter: Union[DateFormatter, str]) -> "DateEncodingStrategy":
        """Delegate to ``formatter.format(value)``; a string is taken as a strftime pattern."""
        return cls(kind=DateStrategyKind.FORMATTED, formatter=formatter)

    @classmethod
    def custom(cls, function: Callable[[DateValue], str]) -> "DateEncodingStrategy":
        """Delegate to ``function(value)``."""
        return cls(kind=DateStrategyKind.CUSTOM, function=function)

    def encode(self, value: DateValue) -> str:
        if self.kind is DateStrategyKind.DEFERRED_TO_DATE:
            return str(value)
        if self.kind is DateStrategyKind.ISO8601:
            return format_iso8601(value)
        if self.kind is DateStrategyKind.FORMATTED:
            return self.formatter.format(value)
        return self.function(value)


class BoolStrategyKind(str, Enum):
    TRUE_FALSE = "true_false"
    TRUE_FALSE_UPPERCASE = "true_false_uppercase"
    YES_NO = "yes_no"
    YES_NO_UPPERCASE = "yes_no_uppercase"
    INTEGER = "integer"
    CUSTOM = "custom"


_BOOL_VALUES: Dict[BoolStrategyKind, Tuple[str, str]] = {
    BoolStrategyKind.TRUE_FALSE: ("true", "false"),
    BoolStrategyKind.TRUE_FALSE_UPPERCASE: ("TRUE", "FALSE"),
    BoolStrategyKind.YES_NO: ("yes", "no"),
    BoolStrategyKind.YES_NO_UPPERCASE: ("YES", "NO"),
    BoolStrategyKind.INTEGER: ("1", "0"),
}


class BoolEncodingStrategy(BaseModel):
    """How ``bool`` values are encoded."""

    model_config = ConfigDict(frozen=True)

    kind: BoolStrategyKind = BoolStrategyKind.TRUE_FALSE
    true_value: Optional[StrictStr] = None
    false_value: Optional[StrictStr] = None

    @model_validator(mode="after")
    def _check_values(self) -> "BoolEncodingStrategy":
        has_values = self.true_value is not None or self.false_value is not None
        if self.kind is BoolStrategyKind.CUSTOM:
            if self.true_value is None or self.false_value is None:
                raise ValueError("custom bool strategy needs both true_value and false_value")
        elif has_values:
            raise ValueError("true_value/false_value only apply to the custom bool strategy")
        return self

    @classmethod
    def true_false(cls) -> "BoolEncodingStrategy":
        return cls(kind=BoolStrategyKind.TRUE_FALSE)

    @classmethod
    def true_false_uppercase(cls) -> "BoolEncodingStrategy":
        return cls(kind=BoolStrategyKind.TRUE_FALSE_UPPERCASE)

    @classmethod
    def yes_no(cls) -> "BoolEncodingStrategy":
        return cls(kind=BoolStrategyKind.YES_NO)

    @classmethod
    def yes_no_uppercase(cls) -> "BoolEncodingStrategy":
        return cls(kind=BoolStrategyKind.YES_NO_UPPERCASE)

    @classmethod
    def integer(cls) -> "BoolEncodingStrategy":
        return cls(kind=BoolStrategyKind.INTEGER)

    @classmethod
    def custom(cls, true_value: str, false_value: str) -> "BoolEncodingStrategy":
        return cls(kind=BoolStrategyKind.CUSTOM, true_value=true_value, false_value=false_value)

    @property
    def encoding_values(self) -> Tuple[str, str]:
        """The ``(true, false)`` strings for this strategy."""
        if self.kind is BoolStrategyKind.CUSTOM:
            return self.true_value, self.false_value
        return _BOOL_VALUES[self.kind]

    def encode(self, value: bool) -> str:
        true_value, false_value = self.encoding_values
        return true_value if value else false_value


class EncoderConfiguration(BaseModel):
    """
    The set of encoding decisions for one table.

    Defaults to ISO 8601 dates and ``true``/``false`` booleans.
    """

    model_config = ConfigDict(frozen=True)

    date_strategy: DateEncodingStrategy = Field(default_factory=DateEncodingStrategy.iso8601)
    bool_strategy: BoolEncodingStrategy = Field(default_factory=BoolEncodingStrategy.true_false)

    @classmethod
    def default(cls) -> "EncoderConfiguration":
        """The shared process-wide default configuration."""
        return DEFAULT_CONFIGURATION

    def to_dict(self) -> dict:
        """Strategy names, for logging and display."""
        return {
            "date_strategy": self.date_strategy.kind.value,
            "bool_strategy": self.bool_strategy.kind.value,
        }


DEFAULT_CONFIGURATION = EncoderConfiguration()
