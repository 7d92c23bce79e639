"""
conversion/issues.py
--------------------
Schema issue ledger helpers.

Issue lists are plain ordered lists and may hold the same code more than
once. Removal drops the *last* matching occurrence only.
"""
from __future__ import annotations

from typing import Iterable

from conversion.context import ConversionContext
from models.schema import SchemaIssue


def find_schema_issue(issues: list[SchemaIssue], issue: SchemaIssue) -> int:
    """Return the index of the last occurrence of *issue*, or -1."""
    ind = -1
    for i, current in enumerate(issues):
        if current == issue:
            ind = i
    return ind


def remove_schema_issue(issues: list[SchemaIssue], issue: SchemaIssue) -> list[SchemaIssue]:
    """Return *issues* without its last occurrence of *issue*."""
    ind = find_schema_issue(issues, issue)
    if ind == -1:
        return issues
    return issues[:ind] + issues[ind + 1:]


def add_table_issue(ctx: ConversionContext, table_id: str, issue: SchemaIssue) -> None:
    ctx.issues_for(table_id).table_level_issues.append(issue)


def remove_table_issue(ctx: ConversionContext, table_id: str, issue: SchemaIssue) -> None:
    entry = ctx.issues_for(table_id)
    entry.table_level_issues = remove_schema_issue(entry.table_level_issues, issue)


def add_column_issues(
    ctx: ConversionContext, table_id: str, col_id: str, issues: Iterable[SchemaIssue]
) -> None:
    issues = list(issues)
    if not issues:
        return
    entry = ctx.issues_for(table_id)
    entry.column_level_issues.setdefault(col_id, []).extend(issues)
