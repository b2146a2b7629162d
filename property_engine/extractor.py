"""
property_engine.extractor - Record → ordered {display name: string}.

Display strings at this layer are raw: booleans are "true"/"false",
numbers use str(), strings pass through.  The Yes/No remap for the
screen happens later in ui.presentation.
"""

from __future__ import annotations

from schema.categories import CategoryTag, PartProperties
from schema.fields import FieldKind, schema_of
from schema.registry import default_properties


def display_string(kind: FieldKind, value) -> str:
    if kind is FieldKind.BOOL:
        return "true" if value else "false"
    return str(value)


def extract(record) -> dict[str, str]:
    """Flatten one record dataclass in field declaration order."""
    return {
        spec.name: display_string(spec.kind, getattr(record, spec.identifier))
        for spec in schema_of(type(record))
    }


def extract_part(properties: PartProperties) -> dict[str, str]:
    """Base fields first, then the active category's fields."""
    values = extract(properties.base)
    values.update(extract(properties.category))
    return values


def default_fields(tag: str | CategoryTag) -> dict[str, str]:
    """Field set (with default display values) of a new part in a category."""
    return extract_part(default_properties(tag))
