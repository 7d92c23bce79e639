"""
conversion/dialect.py
---------------------
Maps generic target types onto the PostgreSQL-dialect flavour of the
target engine, which supports neither array columns nor NUMERIC primary
keys.

Design Decision:
    :func:`to_pg_dialect_type` is a pure function of ``(type, is_pk)``;
    only :func:`convert_table_to_dialect` touches the context.
"""
from __future__ import annotations

from conversion.context import ConversionContext, get_target_table
from conversion.issues import add_column_issues
from logger import get_logger
from models.schema import (
    MAX_LENGTH,
    NUMERIC,
    STRING,
    SchemaIssue,
    SourceTable,
    TargetTable,
    TargetType,
)

log = get_logger(__name__)


def to_pg_dialect_type(standard_type: TargetType, is_pk: bool) -> tuple[TargetType, list[SchemaIssue]]:
    """
    Return the dialect-legal type for *standard_type* and the issues raised.

    Rules, first match wins:
        1. Array columns become ``STRING(MAX)``  → ArrayTypeNotSupported.
        2. NUMERIC primary-key columns become ``STRING(MAX)`` → NumericPKNotSupported.
        3. Anything else passes through unchanged with no issues.
    """
    if standard_type.is_array:
        return (
            TargetType(name=STRING, length=MAX_LENGTH, is_array=False),
            [SchemaIssue.ARRAY_TYPE_NOT_SUPPORTED],
        )
    if is_pk and standard_type.name == NUMERIC:
        return (
            TargetType(name=STRING, length=MAX_LENGTH, is_array=False),
            [SchemaIssue.NUMERIC_PK_NOT_SUPPORTED],
        )
    return standard_type, []


def is_primary_key(col_id: str, table: SourceTable | TargetTable) -> bool:
    return any(pk.col_id == col_id for pk in table.primary_keys)


def convert_table_to_dialect(ctx: ConversionContext, table_id: str) -> None:
    """
    Rewrite every column type of the target table through
    :func:`to_pg_dialect_type` and record the resulting column issues.

    Raises:
        TableLookupError: If the target schema has no entry for *table_id*.
    """
    table = get_target_table(ctx, table_id)
    for col_id in table.col_ids:
        col = table.col_defs[col_id]
        new_type, issues = to_pg_dialect_type(col.type, is_primary_key(col_id, table))
        if issues:
            log.info(
                "Column %s.%s: %s → %s (%s)",
                table.name, col.name, col.type.name, new_type.name,
                ", ".join(i.value for i in issues),
            )
        col.type = new_type
        add_column_issues(ctx, table_id, col_id, issues)
