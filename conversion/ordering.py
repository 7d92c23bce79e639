"""
conversion/ordering.py
----------------------
Deterministic orderings over the conversion context: 1-based key order for
primary keys and index keys, and name-sorted table id traversal.

Design Decision:
    Callers must never depend on dict iteration order for anything that
    ends up in a report or a batch plan, so every ordering here is built
    as an explicit sorted list.
"""
from __future__ import annotations

from conversion.context import ConversionContext
from logger import get_logger
from models.schema import SourceSchema, TargetSchema

log = get_logger(__name__)


def init_primary_key_order(ctx: ConversionContext) -> None:
    """Set ``order = position + 1`` on every source primary key."""
    for table in ctx.src_schema.values():
        for i, key in enumerate(table.primary_keys):
            key.order = i + 1


def init_index_order(ctx: ConversionContext) -> None:
    """Set ``order = position + 1`` on the keys of every source index."""
    for table in ctx.src_schema.values():
        for index in table.indexes:
            for j, key in enumerate(index.keys):
                key.order = j + 1


def init_key_orders(ctx: ConversionContext) -> None:
    """Run both initialisers; call once after ingestion."""
    init_primary_key_order(ctx)
    init_index_order(ctx)
    log.debug("Initialised key order for %d table(s).", len(ctx.src_schema))


def _sorted_ids_by_name(schema: SourceSchema | TargetSchema) -> list[str]:
    # Code-point order on str matches byte-wise order of the UTF-8 encoding.
    # Equal names fall back to table id.
    return [
        table_id
        for table_id, _ in sorted(schema.items(), key=lambda item: (item[1].name, item[0]))
    ]


def get_sorted_table_ids_by_src_name(src_schema: SourceSchema) -> list[str]:
    return _sorted_ids_by_name(src_schema)


def get_sorted_table_ids_by_target_name(target_schema: TargetSchema) -> list[str]:
    return _sorted_ids_by_name(target_schema)
