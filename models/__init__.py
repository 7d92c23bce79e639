"""models/__init__.py"""
from models.assessment import AssessmentOutput, ColumnDetails, SchemaAssessment
from models.schema import (
    Index,
    IndexKey,
    Key,
    SchemaIssue,
    SourceColumn,
    SourceSchema,
    SourceTable,
    TableIssues,
    TargetColumn,
    TargetSchema,
    TargetTable,
    TargetType,
)

__all__ = [
    "AssessmentOutput",
    "ColumnDetails",
    "SchemaAssessment",
    "Index",
    "IndexKey",
    "Key",
    "SchemaIssue",
    "SourceColumn",
    "SourceSchema",
    "SourceTable",
    "TableIssues",
    "TargetColumn",
    "TargetSchema",
    "TargetTable",
    "TargetType",
]
