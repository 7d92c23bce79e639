"""
conversion/columns.py
---------------------
Cross-schema column correspondence used when copying rows: which columns
exist on both sides, and how to realign a row's values to that order.
"""
from __future__ import annotations

from typing import Iterable, TypeVar

from conversion.context import (
    ConversionContext,
    get_col_id_from_src_name,
    get_src_table,
    get_target_table,
)
from conversion.errors import LengthMismatchError, NoCommonColumnsError

T = TypeVar("T")


def intersection(a: Iterable[str], b: Iterable[str]) -> list[str]:
    """
    Return the elements of *a* that also occur in *b*, in *a*'s order and
    without duplicates.
    """
    members = set(b)
    seen: set[str] = set()
    result: list[str] = []
    for v in a:
        if v in members and v not in seen:
            seen.add(v)
            result.append(v)
    return result


def prepare_columns(ctx: ConversionContext, table_id: str, src_cols: list[str]) -> list[str]:
    """
    Resolve *src_cols* (source column names) to ids and keep those the
    target table also has.

    Raises:
        TableLookupError: If either schema has no entry for *table_id*.
        ColumnNotFoundError: If a name is not a column of the source table.
        NoCommonColumnsError: If nothing is shared with the target table.
    """
    src_col_defs = get_src_table(ctx, table_id).col_defs
    src_col_ids = [get_col_id_from_src_name(src_col_defs, name) for name in src_cols]
    common_ids = intersection(src_col_ids, get_target_table(ctx, table_id).col_ids)
    if not common_ids:
        raise NoCommonColumnsError(
            f"no common columns between source and target table '{table_id}'"
        )
    return common_ids


def prepare_values(
    ctx: ConversionContext,
    table_id: str,
    col_name_id_map: dict[str, str],
    common_col_ids: list[str],
    src_cols: list[str],
    values: list[T],
) -> list[T]:
    """
    Reorder one row's *values* (aligned with *src_cols*) to *common_col_ids*.

    Values for columns outside the common set are dropped; a common id with
    no value in the row yields None.

    Raises:
        LengthMismatchError: If *src_cols* and *values* differ in length.
    """
    if len(src_cols) != len(values):
        raise LengthMismatchError(
            f"prepare_values: src_cols and values don't have the same length for "
            f"table '{table_id}': len(src_cols)={len(src_cols)}, len(values)={len(values)}"
        )
    col_id_to_val: dict[str | None, T] = {
        col_name_id_map.get(name): value for name, value in zip(src_cols, values)
    }
    return [col_id_to_val.get(col_id) for col_id in common_col_ids]


def common_column_ids(ctx: ConversionContext, table_id: str, col_ids: list[str]) -> list[str]:
    """
    Keep the ids in *col_ids* that the source table defines, in input order.

    Raises:
        TableLookupError: If the source schema has no entry for *table_id*.
    """
    col_defs = get_src_table(ctx, table_id).col_defs
    return [col_id for col_id in col_ids if col_id in col_defs]
