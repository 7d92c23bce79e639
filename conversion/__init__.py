"""conversion/__init__.py"""
from conversion.columns import common_column_ids, intersection, prepare_columns, prepare_values
from conversion.context import (
    ConversionContext,
    get_col_id_from_src_name,
    get_cols_and_schemas,
    get_src_table,
    get_target_cols,
    get_target_table,
    get_target_table_name,
    to_not_null,
)
from conversion.dialect import convert_table_to_dialect, is_primary_key, to_pg_dialect_type
from conversion.errors import (
    ColumnNotFoundError,
    ConversionError,
    LengthMismatchError,
    NoCommonColumnsError,
    TableLookupError,
)
from conversion.issues import (
    add_column_issues,
    add_table_issue,
    find_schema_issue,
    remove_schema_issue,
    remove_table_issue,
)
from conversion.ordering import (
    get_sorted_table_ids_by_src_name,
    get_sorted_table_ids_by_target_name,
    init_index_order,
    init_key_orders,
    init_primary_key_order,
)
from conversion.storage import DATATYPE_TO_STORAGE_SIZE, compute_non_key_column_size, get_column_size

__all__ = [
    "common_column_ids",
    "intersection",
    "prepare_columns",
    "prepare_values",
    "ConversionContext",
    "get_col_id_from_src_name",
    "get_cols_and_schemas",
    "get_src_table",
    "get_target_cols",
    "get_target_table",
    "get_target_table_name",
    "to_not_null",
    "convert_table_to_dialect",
    "is_primary_key",
    "to_pg_dialect_type",
    "ColumnNotFoundError",
    "ConversionError",
    "LengthMismatchError",
    "NoCommonColumnsError",
    "TableLookupError",
    "add_column_issues",
    "add_table_issue",
    "find_schema_issue",
    "remove_schema_issue",
    "remove_table_issue",
    "get_sorted_table_ids_by_src_name",
    "get_sorted_table_ids_by_target_name",
    "init_index_order",
    "init_key_orders",
    "init_primary_key_order",
    "DATATYPE_TO_STORAGE_SIZE",
    "compute_non_key_column_size",
    "get_column_size",
]
