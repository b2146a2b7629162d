"""
property_engine.differ - Reconcile an edit buffer with a new category.

Fields that exist in both the old and the new field set keep whatever
the user typed.  Fields only the old category had are dropped, not
hidden: switching CPU → GPU → CPU brings CPU-only fields back with
their defaults.  Base fields and fields shared by name survive.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from schema.categories import CategoryTag
from schema.registry import parse_tag
from property_engine.buffer import EditBuffer
from property_engine.extractor import default_fields
from property_engine.ordering import OrderingStore


@dataclass
class CategorySwitch:
    buffer: EditBuffer
    added: list[str] = field(default_factory=list)
    removed: list[str] = field(default_factory=list)


def diff_category(buffer: EditBuffer, new_tag: str | CategoryTag) -> CategorySwitch:
    """Return the buffer as it should look in new_tag.  Input is untouched."""
    new_tag = parse_tag(new_tag)
    new_fields = default_fields(new_tag)

    removed = [name for name in buffer.values if name not in new_fields]
    added = [name for name in new_fields if name not in buffer.values]

    values = {
        name: buffer.values.get(name, default)
        for name, default in new_fields.items()
    }
    return CategorySwitch(
        buffer=EditBuffer(category=new_tag, values=values),
        added=added,
        removed=removed,
    )


def switch_category(
    buffer: EditBuffer,
    new_tag: str | CategoryTag,
    ordering: OrderingStore | None = None,
) -> CategorySwitch:
    """diff_category() plus the matching ordering merge for added fields."""
    result = diff_category(buffer, new_tag)
    if ordering is not None:
        ordering.merge(result.added)
    return result
