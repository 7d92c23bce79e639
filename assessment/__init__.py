"""assessment/__init__.py"""
from assessment.collect import collect_schema_assessment
from assessment.report import SCHEMA_REPORT_HEADER, generate_report, generate_schema_report

__all__ = [
    "collect_schema_assessment",
    "SCHEMA_REPORT_HEADER",
    "generate_report",
    "generate_schema_report",
]
