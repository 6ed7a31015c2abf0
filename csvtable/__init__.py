"""
csvtable - declarative, typed CSV export for in-memory records.

Define the columns once, export any number of row collections:

    >>> from csvtable import Column, Table
    >>> table = Table([Column("Title", "title"), Column("Count", "count")])
    >>> table.export([{"title": "A, B", "count": 3}])
    'Title,Count\\\\n"A, B",3'

Rows are joined with a literal backslash-n token rather than a newline
character. The result is an in-memory string; persisting it is left to the
caller.
"""

__version__ = "0.1.0"

from .configuration import (
    DEFAULT_CONFIGURATION,
    BoolEncodingStrategy,
    BoolStrategyKind,
    DateEncodingStrategy,
    DateFormatter,
    DateStrategyKind,
    EncoderConfiguration,
    StrftimeFormatter,
)
from .encodable import CSVEncodable, encode_value
from .errors import CSVTableError, UnencodableValueError
from .escaping import encode_field, escape_field, needs_quoting
from .settings import EncoderSettings, load_configuration
from .table import Column, Table, field_getter

__all__ = [
    "__version__",
    # Configuration
    "DEFAULT_CONFIGURATION",
    "BoolEncodingStrategy",
    "BoolStrategyKind",
    "DateEncodingStrategy",
    "DateFormatter",
    "DateStrategyKind",
    "EncoderConfiguration",
    "StrftimeFormatter",
    "EncoderSettings",
    "load_configuration",
    # Encoding
    "CSVEncodable",
    "encode_value",
    "encode_field",
    "escape_field",
    "needs_quoting",
    # Tables
    "Column",
    "Table",
    "field_getter",
    # Errors
    "CSVTableError",
    "UnencodableValueError",
]
