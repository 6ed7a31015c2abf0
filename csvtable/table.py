"""
Column and table definitions.

A ``Table`` is keyed to one record type. Each ``Column`` pairs a header with
a derivation that pulls the column's value out of a record:

    >>> people = Table(
    ...     columns=[
    ...         Column("First name", "first_name"),
    ...         Column("Employer", "employer.name"),
    ...         Column("Tags", lambda person: ", ".join(person.tags)),
    ...     ],
    ... )
    >>> text = people.export(rows)

``Table.export`` only builds the text. Writing it somewhere is up to the
caller.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Callable, Generic, Iterable, List, Optional, Sequence, TypeVar, Union

from .configuration import EncoderConfiguration
from .escaping import encode_field
from .rules import FIELD_SEPARATOR, ROW_SEPARATOR

logger = logging.getLogger(__name__)

Record = TypeVar("Record")


def field_getter(path: str) -> Callable[[Any], Any]:
    """
    Build a derivation that reads ``path`` from a record.

    Dotted paths walk nested attributes (or mapping keys). A ``None`` part
    way along ends the walk with ``None``, which encodes as an empty field.
    """
    parts = path.split(".")

    def getter(record: Any) -> Any:
        value = record
        for part in parts:
            if value is None:
                return None
            if isinstance(value, Mapping):
                value = value[part]
            else:
                value = getattr(value, part)
        return value

    getter.__name__ = f"get_{path.replace('.', '_')}"
    return getter


@dataclass(frozen=True)
class Column(Generic[Record]):
    """
    The definition of a single column within a ``Table``.

    Args:
        header: Header name written in the first row. Duplicates are allowed.
        derivation: Function returning the column's value for a record, or
            the name of an attribute/key to read (see ``field_getter``).
    """

    header: str
    derivation: Union[Callable[[Record], Any], str]
    field_name: Optional[str] = field(default=None, init=False, compare=False)

    def __post_init__(self):
        if not isinstance(self.header, str):
            raise TypeError(f"Column header must be a str, got {type(self.header).__name__}")

        if isinstance(self.derivation, str):
            object.__setattr__(self, "field_name", self.derivation)
            object.__setattr__(self, "derivation", field_getter(self.derivation))
        elif not callable(self.derivation):
            raise TypeError(
                f"Column {self.header!r} needs a callable or a field name, "
                f"got {type(self.derivation).__name__}"
            )

    def value_for(self, record: Record) -> Any:
        return self.derivation(record)


@dataclass(frozen=True)
class Table(Generic[Record]):
    """
    The definition of a CSV file structure.

    Columns are written left to right in the order given. The same table can
    export any number of row collections; it holds no per-export state.
    """

    columns: Sequence[Column[Record]]
    configuration: EncoderConfiguration = field(default_factory=EncoderConfiguration.default)

    def __post_init__(self):
        object.__setattr__(self, "columns", tuple(self.columns))
        if self.configuration is None:
            object.__setattr__(self, "configuration", EncoderConfiguration.default())

    @property
    def headers(self) -> List[str]:
        return [column.header for column in self.columns]

    def header_line(self) -> str:
        return FIELD_SEPARATOR.join(
            encode_field(column.header, self.configuration) for column in self.columns
        )

    def encode_row(self, record: Record) -> str:
        """Encode one record as a single CSV line (no row separator)."""
        return FIELD_SEPARATOR.join(
            encode_field(column.value_for(record), self.configuration) for column in self.columns
        )

    def export(self, rows: Iterable[Record]) -> str:
        """
        Build CSV text for ``rows``, header line first.

        Lines are joined with the row separator token; there is no trailing
        separator. ``rows`` may be any iterable and is consumed once.

        Args:
            rows: Records to write, in output order

        Returns:
            The whole CSV document as one string
        """
        lines = [self.header_line()]
        lines.extend(self.encode_row(record) for record in rows)

        logger.debug(
            "Exported %s rows across %s columns (dates=%s, booleans=%s)",
            len(lines) - 1,
            len(self.columns),
            self.configuration.date_strategy.kind.value,
            self.configuration.bool_strategy.kind.value,
        )
        return ROW_SEPARATOR.join(lines)
