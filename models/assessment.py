"""
models/assessment.py
--------------------
Assessment output handed from the conversion engine to the report writer.
"""
from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class ColumnDetails:
    """Column facts shown in the schema report."""
    name: str
    datatype: str
    is_array: bool = False
    size: int = 0
    is_null: bool = True


@dataclass
class SchemaAssessment:
    """
    Attributes:
        table_names:  Table names in report order.
        columns:      ``{table_name: [ColumnDetails, …]}`` in report order.
    """
    table_names: list[str] = field(default_factory=list)
    columns: dict[str, list[ColumnDetails]] = field(default_factory=dict)


@dataclass
class AssessmentOutput:
    schema_assessment: SchemaAssessment = field(default_factory=SchemaAssessment)
