"""
conversion/errors.py
--------------------
Exceptions raised to the immediate caller when a precondition fails. The
caller aborts the current table or row and may carry on with the others.
"""
from __future__ import annotations


class ConversionError(Exception):
    """Base class for conversion precondition failures."""


class LengthMismatchError(ConversionError):
    """Raised when column names and row values differ in length."""


class NoCommonColumnsError(ConversionError):
    """Raised when a table shares no columns between source and target."""


class ColumnNotFoundError(ConversionError):
    """Raised when a source column name has no matching column definition."""


class TableLookupError(ConversionError):
    """
    Raised when one or more lookups for a table fail.

    Attributes:
        faults: Every failure encountered, in the order the lookups ran.
    """

    def __init__(self, table_id: str, faults: list[str]) -> None:
        self.table_id = table_id
        self.faults = list(faults)
        super().__init__(f"table '{table_id}': " + "; ".join(self.faults))
