"""
tests/test_storage.py
---------------------
Unit tests for conversion/storage.py (storage sizes and the row-limit check).
Run with: python -m pytest tests/
"""
from __future__ import annotations

import pytest

from conversion.context import ConversionContext
from conversion.errors import ConversionError, TableLookupError
from conversion.storage import compute_non_key_column_size, get_column_size
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
    IndexKey,
    SchemaIssue,
    TableIssues,
    TargetColumn,
    TargetTable,
    TargetType,
)

LIMIT = 100


class TestGetColumnSize:
    @pytest.mark.parametrize(
        "name, expected",
        [
            (BOOL, 1),
            (DATE, 4),
            (FLOAT32, 4),
            (FLOAT64, 8),
            (INT64, 8),
            (JSON, STRING_MAX_LENGTH),
            (NUMERIC, 22),
            (TIMESTAMP, 12),
        ],
    )
    def test_fixed_sizes(self, name: str, expected: int) -> None:
        assert get_column_size(name, 0) == expected

    def test_declared_lengths(self) -> None:
        assert get_column_size(STRING, 40) == 40
        assert get_column_size(BYTES, 16) == 16

    def test_unbounded_lengths(self) -> None:
        assert get_column_size(STRING, MAX_LENGTH) == STRING_MAX_LENGTH
        assert get_column_size(BYTES, MAX_LENGTH) == BYTES_MAX_LENGTH

    def test_unknown_type_is_zero(self) -> None:
        assert get_column_size("INTERVAL", 0) == 0


@pytest.fixture
def ctx() -> ConversionContext:
    # Non-key: INT64 (8) + STRING(70) + NUMERIC (22) = 100 == LIMIT
    table = TargetTable(
        id="t1",
        name="events",
        col_ids=["pk", "c1", "c2", "c3"],
        col_defs={
            "pk": TargetColumn("pk", "id", TargetType(STRING, 5000)),
            "c1": TargetColumn("c1", "count", TargetType(INT64)),
            "c2": TargetColumn("c2", "label", TargetType(STRING, 70)),
            "c3": TargetColumn("c3", "amount", TargetType(NUMERIC)),
        },
        primary_keys=[IndexKey("pk")],
    )
    return ConversionContext(target_schema={"t1": table}, max_non_key_column_length=LIMIT)


def _row_limit_count(ctx: ConversionContext) -> int:
    return ctx.schema_issues["t1"].table_level_issues.count(SchemaIssue.ROW_LIMIT_EXCEEDED)


class TestComputeNonKeyColumnSize:
    def test_exactly_at_limit_has_no_issue(self, ctx: ConversionContext) -> None:
        assert compute_non_key_column_size(ctx, "t1") == LIMIT
        assert _row_limit_count(ctx) == 0

    def test_primary_key_excluded(self, ctx: ConversionContext) -> None:
        ctx.target_schema["t1"].col_defs["pk"].type = TargetType(STRING, MAX_LENGTH)
        assert compute_non_key_column_size(ctx, "t1") == LIMIT

    def test_one_byte_over_adds_issue(self, ctx: ConversionContext) -> None:
        ctx.target_schema["t1"].col_defs["c2"].type = TargetType(STRING, 71)
        assert compute_non_key_column_size(ctx, "t1") == LIMIT + 1
        assert _row_limit_count(ctx) == 1

    def test_add_then_remove_column(self, ctx: ConversionContext) -> None:
        table = ctx.target_schema["t1"]
        compute_non_key_column_size(ctx, "t1")
        assert _row_limit_count(ctx) == 0

        table.col_ids.append("c4")
        table.col_defs["c4"] = TargetColumn("c4", "flag", TargetType(BOOL))
        compute_non_key_column_size(ctx, "t1")
        assert _row_limit_count(ctx) == 1

        table.col_ids.remove("c4")
        del table.col_defs["c4"]
        compute_non_key_column_size(ctx, "t1")
        assert _row_limit_count(ctx) == 0

    def test_repeated_calls_never_duplicate(self, ctx: ConversionContext) -> None:
        ctx.target_schema["t1"].col_defs["c2"].type = TargetType(STRING, MAX_LENGTH)
        for _ in range(3):
            compute_non_key_column_size(ctx, "t1")
        assert _row_limit_count(ctx) == 1

    def test_other_issues_and_column_issues_kept(self, ctx: ConversionContext) -> None:
        ctx.schema_issues["t1"] = TableIssues(
            table_level_issues=[SchemaIssue.MISSING_PRIMARY_KEY, SchemaIssue.ROW_LIMIT_EXCEEDED],
            column_level_issues={"c1": [SchemaIssue.WIDENED]},
        )
        compute_non_key_column_size(ctx, "t1")
        assert ctx.schema_issues["t1"].table_level_issues == [SchemaIssue.MISSING_PRIMARY_KEY]
        assert ctx.schema_issues["t1"].column_level_issues == {"c1": [SchemaIssue.WIDENED]}

    def test_creates_ledger_entry(self, ctx: ConversionContext) -> None:
        assert "t1" not in ctx.schema_issues
        compute_non_key_column_size(ctx, "t1")
        assert ctx.schema_issues["t1"] == TableIssues()

    def test_one_stale_copy_removed_per_call(self, ctx: ConversionContext) -> None:
        ctx.schema_issues["t1"] = TableIssues(
            table_level_issues=[SchemaIssue.ROW_LIMIT_EXCEEDED, SchemaIssue.ROW_LIMIT_EXCEEDED],
        )
        compute_non_key_column_size(ctx, "t1")
        assert _row_limit_count(ctx) == 1
        compute_non_key_column_size(ctx, "t1")
        assert _row_limit_count(ctx) == 0

    def test_unknown_table(self, ctx: ConversionContext) -> None:
        with pytest.raises(TableLookupError) as exc_info:
            compute_non_key_column_size(ctx, "missing")
        assert isinstance(exc_info.value, ConversionError)
        assert "missing" not in ctx.schema_issues
