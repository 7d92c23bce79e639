"""
assessment/report.py
--------------------
Writes the schema assessment report: one pipe-delimited row per table and
per column, CRLF line endings, file named ``<database>_schema.txt``.

File Format::

    Element|Element Type|Source Definition|Target Name|Target Definition|…
    users|Table|N/A|N/A|N/A|Automatic|None||||
    id|Column|||bigint NOT NULL||||||
"""
from __future__ import annotations

import csv
from pathlib import Path

from config import CONFIG
from logger import get_logger
from models.assessment import AssessmentOutput, ColumnDetails

log = get_logger(__name__)

SCHEMA_REPORT_HEADER = [
    "Element",
    "Element Type",
    "Source Definition",
    "Target Name",
    "Target Definition",
    "DB Change Effort",
    "DB Change Type",
    "Code Change Effort",
    "Code Change Type",
    "Impacted Files",
    "Related Code Snippets",
]


def column_definition_to_string(column: ColumnDetails) -> str:
    s = column.datatype
    if column.is_array:
        s += f" ({column.size})"
    if not column.is_null:
        s += " NOT NULL"
    return s


def generate_schema_report(output: AssessmentOutput) -> list[list[str]]:
    """Return the report as rows of fields, header first."""
    records: list[list[str]] = [list(SCHEMA_REPORT_HEADER)]
    assessment = output.schema_assessment

    for table_name in assessment.table_names:
        records.append(
            [table_name, "Table", "N/A", "N/A", "N/A", "Automatic", "None", "", "", "", ""]
        )

    for table_name in assessment.table_names:
        for column in assessment.columns.get(table_name, []):
            records.append(
                [column.name, "Column", "", "", column_definition_to_string(column),
                 "", "", "", "", "", ""]
            )
    return records


def generate_report(
    db_name: str, output: AssessmentOutput, out_dir: str | Path | None = None
) -> Path | None:
    """
    Write ``<db_name>_schema.txt`` into *out_dir* (default: configured
    report directory).

    Returns:
        The written path, or None if the file could not be created.
    """
    directory = Path(out_dir) if out_dir is not None else CONFIG.conversion.report_dir
    path = directory / f"{db_name}_schema.txt"
    try:
        with path.open("w", encoding="utf-8", newline="") as f:
            writer = csv.writer(f, delimiter="|", lineterminator="\r\n")
            writer.writerows(generate_schema_report(output))
    except OSError as exc:
        log.error("Can't create schema file %s: %s", path, exc)
        return None
    log.info("Wrote schema report '%s' (%s %s).", path, CONFIG.app_name, CONFIG.app_version)
    return path
