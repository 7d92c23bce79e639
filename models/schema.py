"""
models/schema.py
----------------
Typed data models for the source schema, the target schema and the
schema-issue ledger.

Design Decision:
    ``@dataclass`` and ``Enum`` instead of plain dicts give a single source
    of truth for column/key shapes and for the set of valid issue codes.
    ``TargetType`` is frozen so the dialect mapper can hand instances back
    and forth without anyone mutating a shared value.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

# ---------------------------------------------------------------------------
# Target type names and limits
# ---------------------------------------------------------------------------
BOOL = "BOOL"
BYTES = "BYTES"
DATE = "DATE"
FLOAT32 = "FLOAT32"
FLOAT64 = "FLOAT64"
INT64 = "INT64"
JSON = "JSON"
NUMERIC = "NUMERIC"
STRING = "STRING"
TIMESTAMP = "TIMESTAMP"

# Sentinel length meaning "unbounded" (STRING(MAX) / BYTES(MAX)).
MAX_LENGTH = 2**63 - 1
STRING_MAX_LENGTH = 2_621_440
BYTES_MAX_LENGTH = 10_485_760


class SchemaIssue(str, Enum):
    """Coded note that a table or column needed a compatibility compromise."""
    DEFAULT_VALUE = "DefaultValue"
    FOREIGN_KEY = "ForeignKey"
    MISSING_PRIMARY_KEY = "MissingPrimaryKey"
    UNIQUE_INDEX_PRIMARY_KEY = "UniqueIndexPrimaryKey"
    MULTI_DIMENSIONAL_ARRAY = "MultiDimensionalArray"
    NO_GOOD_TYPE = "NoGoodType"
    NUMERIC = "Numeric"
    DECIMAL = "Decimal"
    SERIAL = "Serial"
    AUTO_INCREMENT = "AutoIncrement"
    TIMESTAMP = "Timestamp"
    DATETIME = "Datetime"
    WIDENED = "Widened"
    TIME = "Time"
    STRING_OVERFLOW = "StringOverflow"
    HOTSPOT_TIMESTAMP = "HotspotTimestamp"
    HOTSPOT_AUTO_INCREMENT = "HotspotAutoIncrement"
    REDUNDANT_INDEX = "RedundantIndex"
    ILLEGAL_NAME = "IllegalName"
    ROW_LIMIT_EXCEEDED = "RowLimitExceeded"
    ARRAY_TYPE_NOT_SUPPORTED = "ArrayTypeNotSupported"
    NUMERIC_PK_NOT_SUPPORTED = "NumericPKNotSupported"


# ---------------------------------------------------------------------------
# Source schema
# ---------------------------------------------------------------------------

@dataclass
class Key:
    """One primary-key or index key column; ``order`` is 1-based once initialised."""
    col_id: str
    desc: bool = False
    order: int = 0


@dataclass
class Index:
    name: str
    keys: list[Key] = field(default_factory=list)
    unique: bool = False


@dataclass
class SourceColumn:
    """
    A column as ingested from the source database.

    Attributes:
        id:        Stable column identifier, unique within the table.
        name:      Column name in the source database.
        datatype:  Source type name, e.g. ``"varchar"``.
        is_array:  True for array columns.
        size:      Declared length/precision (0 when not applicable).
        is_null:   True when the column is nullable.
    """
    id: str
    name: str
    datatype: str
    is_array: bool = False
    size: int = 0
    is_null: bool = True


@dataclass
class SourceTable:
    id: str
    name: str
    col_ids: list[str] = field(default_factory=list)
    col_defs: dict[str, SourceColumn] = field(default_factory=dict)
    primary_keys: list[Key] = field(default_factory=list)
    indexes: list[Index] = field(default_factory=list)


# ---------------------------------------------------------------------------
# Target schema
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class TargetType:
    """A target engine type; ``length`` only matters for STRING and BYTES."""
    name: str
    length: int = 0
    is_array: bool = False


@dataclass
class TargetColumn:
    id: str
    name: str
    type: TargetType
    not_null: bool = False


@dataclass
class IndexKey:
    col_id: str
    desc: bool = False
    order: int = 0


@dataclass
class TargetTable:
    id: str
    name: str
    col_ids: list[str] = field(default_factory=list)
    col_defs: dict[str, TargetColumn] = field(default_factory=dict)
    primary_keys: list[IndexKey] = field(default_factory=list)


SourceSchema = dict[str, SourceTable]
TargetSchema = dict[str, TargetTable]


@dataclass
class TableIssues:
    """Per-table issue ledger entry. Lists may hold duplicate codes."""
    table_level_issues: list[SchemaIssue] = field(default_factory=list)
    column_level_issues: dict[str, list[SchemaIssue]] = field(default_factory=dict)
