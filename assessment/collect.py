"""
assessment/collect.py
---------------------
Builds the :class:`AssessmentOutput` consumed by the report writer from a
conversion context.
"""
from __future__ import annotations

from conversion.context import ConversionContext
from conversion.ordering import get_sorted_table_ids_by_src_name
from logger import get_logger
from models.assessment import AssessmentOutput, ColumnDetails, SchemaAssessment
from models.schema import SourceColumn, SourceTable

log = get_logger(__name__)


def _declared_columns(ctx: ConversionContext, table: SourceTable) -> list[SourceColumn]:
    columns: list[SourceColumn] = []
    for col_id in table.col_ids:
        col = table.col_defs.get(col_id)
        if col is None:
            ctx.unexpected(f"table {table.name} lists column id {col_id} with no definition")
            continue
        columns.append(col)
    return columns


def collect_schema_assessment(ctx: ConversionContext) -> AssessmentOutput:
    """
    Summarise the source schema in report order: tables by name, columns in
    each table's declared column order. A column id with no definition is
    skipped and reported as an unexpected condition.
    """
    assessment = SchemaAssessment()
    for table_id in get_sorted_table_ids_by_src_name(ctx.src_schema):
        table = ctx.src_schema[table_id]
        assessment.table_names.append(table.name)
        assessment.columns[table.name] = [
            ColumnDetails(
                name=col.name,
                datatype=col.datatype,
                is_array=col.is_array,
                size=col.size,
                is_null=col.is_null,
            )
            for col in _declared_columns(ctx, table)
        ]
    log.debug(
        "Collected assessment for %d table(s), %d column(s).",
        len(assessment.table_names),
        sum(len(cols) for cols in assessment.columns.values()),
    )
    return AssessmentOutput(schema_assessment=assessment)
