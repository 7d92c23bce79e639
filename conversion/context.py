"""
conversion/context.py
---------------------
The conversion context and the source/target lookups built on top of it.

Design Decisions:
    * ``ConversionContext`` is an explicitly owned object passed to every
      operation; nothing in the engine keeps module-level state.
    * Data-validation problems (e.g. an unknown nullability flag) are
      counted through :meth:`ConversionContext.unexpected` instead of
      raising, so one bad element never stops the run.
    * Lookup failures that happen together are reported together.
"""
from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field

from config import CONFIG
from conversion.errors import ColumnNotFoundError, TableLookupError
from logger import get_logger
from models.schema import (
    SourceColumn,
    SourceSchema,
    SourceTable,
    TableIssues,
    TargetSchema,
    TargetTable,
)

log = get_logger(__name__)


@dataclass
class ConversionContext:
    """
    Mutable aggregate that is the single source of truth for one run.

    Attributes:
        src_schema:     Ingested source tables keyed by table id.
        target_schema:  Target tables keyed by table id (built incrementally).
        schema_issues:  Issue ledger keyed by table id.
        unexpecteds:    Count of each unexpected-condition message seen.
        max_non_key_column_length: Row-size cap used by the validator.
    """
    src_schema: SourceSchema = field(default_factory=dict)
    target_schema: TargetSchema = field(default_factory=dict)
    schema_issues: dict[str, TableIssues] = field(default_factory=dict)
    unexpecteds: Counter = field(default_factory=Counter)
    max_non_key_column_length: int = field(
        default_factory=lambda: CONFIG.conversion.max_non_key_column_length
    )

    def unexpected(self, message: str) -> None:
        """Record a data-validation problem; the run continues."""
        self.unexpecteds[message] += 1
        log.warning("Unexpected condition: %s", message)

    def issues_for(self, table_id: str) -> TableIssues:
        """Return the ledger entry for *table_id*, creating it if missing."""
        return self.schema_issues.setdefault(table_id, TableIssues())


def to_not_null(ctx: ConversionContext, is_nullable: str) -> bool:
    """
    Translate an ``information_schema``-style nullability flag.

    ``"YES"`` → False, ``"NO"`` → True. Anything else is reported as an
    unexpected condition and treated as nullable.
    """
    if is_nullable == "YES":
        return False
    if is_nullable == "NO":
        return True
    ctx.unexpected(f"isNullable column has unknown value: {is_nullable}")
    return False


def get_col_id_from_src_name(col_defs: dict[str, SourceColumn], name: str) -> str:
    for col_id, col in col_defs.items():
        if col.name == name:
            return col_id
    raise ColumnNotFoundError(f"column id not found for source column '{name}'")


def get_src_table(ctx: ConversionContext, table_id: str) -> SourceTable:
    src_table = ctx.src_schema.get(table_id)
    if src_table is None:
        raise TableLookupError(table_id, ["table not found in source schema"])
    return src_table


def get_target_table(ctx: ConversionContext, table_id: str) -> TargetTable:
    target_table = ctx.target_schema.get(table_id)
    if target_table is None:
        raise TableLookupError(table_id, ["table not found in target schema"])
    return target_table


def get_target_table_name(ctx: ConversionContext, table_id: str) -> str:
    if not table_id:
        raise TableLookupError(table_id, ["table id is empty"])
    return get_target_table(ctx, table_id).name


def get_target_cols(ctx: ConversionContext, table_id: str, src_cols: list[str]) -> list[str]:
    """
    Map source column names to target column names for one table.

    Raises:
        TableLookupError: If either schema has no entry for *table_id*.
        ColumnNotFoundError: If a source column has no target counterpart.
    """
    src_table = ctx.src_schema.get(table_id)
    target_table = ctx.target_schema.get(table_id)
    if src_table is None or target_table is None:
        raise TableLookupError(table_id, ["table missing from source or target schema"])

    target_cols: list[str] = []
    for name in src_cols:
        col_id = get_col_id_from_src_name(src_table.col_defs, name)
        target_col = target_table.col_defs.get(col_id)
        if target_col is None:
            raise ColumnNotFoundError(
                f"target column not found for source column '{name}' (id {col_id})"
            )
        target_cols.append(target_col.name)
    return target_cols


def get_cols_and_schemas(
    ctx: ConversionContext, table_id: str
) -> tuple[SourceTable, str, list[str], TargetTable]:
    """
    Gather the source table, target table name, target column names and
    target table for *table_id*.

    All three lookups are attempted even if an earlier one fails.

    Raises:
        TableLookupError: With one entry in ``faults`` per failed lookup.
    """
    faults: list[str] = []
    src_table = ctx.src_schema.get(table_id)
    if src_table is None:
        faults.append("table not found in source schema")
        src_table = SourceTable(id=table_id, name="")

    target_name = ""
    try:
        target_name = get_target_table_name(ctx, table_id)
    except TableLookupError as exc:
        faults.extend(f"target table name: {f}" for f in exc.faults)

    target_cols: list[str] = []
    src_names = [src_table.col_defs[c].name for c in src_table.col_ids if c in src_table.col_defs]
    try:
        target_cols = get_target_cols(ctx, table_id, src_names)
    except TableLookupError as exc:
        faults.extend(f"target columns: {f}" for f in exc.faults)
    except ColumnNotFoundError as exc:
        faults.append(f"target columns: {exc}")

    target_table = ctx.target_schema.get(table_id)
    if target_table is None:
        faults.append("target schema entry missing")

    if faults:
        log.debug("Lookup failures for table %s: %s", table_id, faults)
        raise TableLookupError(table_id, faults)
    return src_table, target_name, target_cols, target_table
