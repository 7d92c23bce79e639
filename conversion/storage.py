"""
conversion/storage.py
---------------------
Storage-size lookup and the per-table row-limit check.

The target engine caps the summed size of non-key columns in a row. Sizes
follow the engine's published storage-size table; STRING and BYTES use
their declared length, or the type maximum when declared unbounded.
"""
from __future__ import annotations

from conversion.context import ConversionContext, get_target_table
from conversion.dialect import is_primary_key
from conversion.issues import add_table_issue, remove_table_issue
from logger import get_logger
from models.schema import (
    BOOL,
    BYTES,
    BYTES_MAX_LENGTH,
    DATE,
    FLOAT32,
    FLOAT64,
    INT64,
    JSON,
    MAX_LENGTH,
    NUMERIC,
    STRING,
    STRING_MAX_LENGTH,
    TIMESTAMP,
    SchemaIssue,
)

log = get_logger(__name__)

DATATYPE_TO_STORAGE_SIZE: dict[str, int] = {
    BOOL: 1,
    DATE: 4,
    FLOAT32: 4,
    FLOAT64: 8,
    INT64: 8,
    JSON: STRING_MAX_LENGTH,
    NUMERIC: 22,
    TIMESTAMP: 12,
}


def get_column_size(data_type: str, length: int) -> int:
    """Return the storage size in bytes of one column value (0 if unknown)."""
    if data_type == STRING:
        return STRING_MAX_LENGTH if length == MAX_LENGTH else length
    if data_type == BYTES:
        return BYTES_MAX_LENGTH if length == MAX_LENGTH else length
    return DATATYPE_TO_STORAGE_SIZE.get(data_type, 0)


def compute_non_key_column_size(ctx: ConversionContext, table_id: str) -> int:
    """
    Sum the storage size of the target table's non-key columns and keep the
    table's ``RowLimitExceeded`` issue in step with the result.

    Safe to call repeatedly: the last ``RowLimitExceeded`` entry is removed
    before it is conditionally added back, so repeated calls never add a
    second copy. Copies added separately through :func:`add_table_issue`
    are not cleared; only one is removed per call.

    Returns:
        The computed non-key size in bytes.

    Raises:
        TableLookupError: If the target schema has no entry for *table_id*.
    """
    table = get_target_table(ctx, table_id)
    remove_table_issue(ctx, table_id, SchemaIssue.ROW_LIMIT_EXCEEDED)

    total = 0
    for col in table.col_defs.values():
        if not is_primary_key(col.id, table):
            total += get_column_size(col.type.name, col.type.length)

    if total > ctx.max_non_key_column_length:
        add_table_issue(ctx, table_id, SchemaIssue.ROW_LIMIT_EXCEEDED)
        log.warning(
            "Table %s: non-key columns need %d bytes, limit is %d.",
            table.name, total, ctx.max_non_key_column_length,
        )
    else:
        log.debug("Table %s: non-key column size %d bytes.", table.name, total)
    return total
