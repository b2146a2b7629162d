"""
services.table_service - Rows for the part listing and comparison table.

Both views show the session's visible fields in the session's order,
scoped to the selected category.  Values come from the property
extractor and go through services.presentation before they reach the page.
"""

from __future__ import annotations

from db.models import Part
from property_engine.extractor import extract_part
from property_engine.ordering import OrderingStore
from schema.categories import CategoryTag
from schema.registry import field_kinds, part_field_names
from services.presentation import present


def visible_fields(ordering: OrderingStore, tag: CategoryTag) -> list[str]:
    return ordering.visible_and_ordered_fields(part_field_names(tag))


def listing_rows(
    parts: list[Part],
    ordering: OrderingStore,
    tag: CategoryTag,
) -> dict:
    """
    One row per part with the visible fields of the selected category.
    A part in another category shows "" for fields it does not have.
    """
    columns = visible_fields(ordering, tag)
    rows = []
    for part in parts:
        properties = part.to_properties()
        values = present(extract_part(properties), field_kinds(properties.tag))
        rows.append({
            "id": part.id,
            "category": properties.tag.value,
            "values": [values.get(name, "") for name in columns],
        })
    return {"columns": columns, "rows": rows}


def comparison_table(
    parts: list[Part],
    ordering: OrderingStore,
    tag: CategoryTag,
) -> dict:
    """
    Transposed table: one row per visible field, one column per part.
    """
    columns = visible_fields(ordering, tag)
    per_part = []
    for part in parts:
        properties = part.to_properties()
        per_part.append(present(extract_part(properties),
                                field_kinds(properties.tag)))
    return {
        "parts": [{"id": p.id, "name": p.name} for p in parts],
        "rows": [
            {"field": name, "values": [values.get(name, "") for values in per_part]}
            for name in columns
        ],
    }
