"""
tests/test_report.py
--------------------
Unit tests for assessment/collect.py and assessment/report.py.
Run with: python -m pytest tests/
"""
from __future__ import annotations

import logging
from pathlib import Path

import pytest

from assessment.collect import collect_schema_assessment
from assessment.report import SCHEMA_REPORT_HEADER, generate_report, generate_schema_report
from config import CONFIG
from conversion.context import ConversionContext
from models.assessment import AssessmentOutput, ColumnDetails, SchemaAssessment
from models.schema import SourceColumn, SourceTable


@pytest.fixture
def ctx() -> ConversionContext:
    return ConversionContext(
        src_schema={
            "t2": SourceTable(
                id="t2",
                name="users",
                col_ids=["c2", "c1"],
                col_defs={
                    "c1": SourceColumn("c1", "id", "bigint", is_null=False),
                    "c2": SourceColumn("c2", "tags", "text", is_array=True, size=3),
                },
            ),
            "t1": SourceTable(
                id="t1",
                name="orders",
                col_ids=["c1"],
                col_defs={"c1": SourceColumn("c1", "total", "numeric")},
            ),
        },
        max_non_key_column_length=100,
    )


@pytest.fixture
def output(ctx: ConversionContext) -> AssessmentOutput:
    return collect_schema_assessment(ctx)


class TestCollectSchemaAssessment:
    def test_tables_sorted_by_name(self, output: AssessmentOutput) -> None:
        assert output.schema_assessment.table_names == ["orders", "users"]

    def test_columns_in_declared_order(self, output: AssessmentOutput) -> None:
        cols = output.schema_assessment.columns["users"]
        assert [c.name for c in cols] == ["tags", "id"]
        assert cols[0] == ColumnDetails("tags", "text", is_array=True, size=3, is_null=True)

    def test_undefined_column_id_skipped(self, ctx: ConversionContext) -> None:
        ctx.src_schema["t1"].col_ids.append("c7")
        output = collect_schema_assessment(ctx)
        assert [c.name for c in output.schema_assessment.columns["orders"]] == ["total"]
        assert ctx.unexpecteds == {"table orders lists column id c7 with no definition": 1}


class TestGenerateSchemaReport:
    def test_header(self, output: AssessmentOutput) -> None:
        assert generate_schema_report(output)[0] == [
            "Element", "Element Type", "Source Definition", "Target Name",
            "Target Definition", "DB Change Effort", "DB Change Type",
            "Code Change Effort", "Code Change Type", "Impacted Files",
            "Related Code Snippets",
        ]

    def test_rows(self, output: AssessmentOutput) -> None:
        records = generate_schema_report(output)
        assert records[1:] == [
            ["orders", "Table", "N/A", "N/A", "N/A", "Automatic", "None", "", "", "", ""],
            ["users", "Table", "N/A", "N/A", "N/A", "Automatic", "None", "", "", "", ""],
            ["total", "Column", "", "", "numeric", "", "", "", "", "", ""],
            ["tags", "Column", "", "", "text (3)", "", "", "", "", "", ""],
            ["id", "Column", "", "", "bigint NOT NULL", "", "", "", "", "", ""],
        ]

    def test_every_row_has_header_width(self, output: AssessmentOutput) -> None:
        assert all(len(r) == len(SCHEMA_REPORT_HEADER) for r in generate_schema_report(output))

    def test_empty_output(self) -> None:
        assert generate_schema_report(AssessmentOutput()) == [SCHEMA_REPORT_HEADER]


class TestGenerateReport:
    def test_file_format(self, tmp_path: Path) -> None:
        output = AssessmentOutput(
            SchemaAssessment(
                table_names=["users"],
                columns={"users": [ColumnDetails("id", "bigint", is_null=False)]},
            )
        )
        path = generate_report("shop", output, tmp_path)
        assert path == tmp_path / "shop_schema.txt"
        assert path.read_bytes() == (
            b"Element|Element Type|Source Definition|Target Name|Target Definition|"
            b"DB Change Effort|DB Change Type|Code Change Effort|Code Change Type|"
            b"Impacted Files|Related Code Snippets\r\n"
            b"users|Table|N/A|N/A|N/A|Automatic|None||||\r\n"
            b"id|Column|||bigint NOT NULL||||||\r\n"
        )

    def test_log_names_application(self, tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.INFO, logger="schemaconv"):
            generate_report("shop", AssessmentOutput(), tmp_path)
        assert f"{CONFIG.app_name} {CONFIG.app_version}" in caplog.text

    def test_unwritable_directory_returns_none(self, tmp_path: Path) -> None:
        assert generate_report("shop", AssessmentOutput(), tmp_path / "missing") is None
