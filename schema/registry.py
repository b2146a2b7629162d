"""
schema.registry - Lookups over the closed category set.

check_schemas() runs when this module is imported, so a malformed
record class (missing kind, non-snake identifier, base/category name
collision, tag without a shape) stops the process before any request
is served.
"""

from __future__ import annotations

import logging
from typing import NamedTuple

from schema.categories import (
    BaseProperties, Category, CategoryTag, CATEGORY_SHAPES, PartProperties,
)
from schema.fields import FieldKind, FieldSpec, SchemaError, schema_of

logger = logging.getLogger(__name__)

DEFAULT_TAG = CategoryTag.BASIC


class TagLookup(NamedTuple):
    tag: CategoryTag
    recognized: bool


# ── Categories ────────────────────────────────────────────────────────

def all_categories() -> tuple[CategoryTag, ...]:
    """Every category tag, in declaration order."""
    return tuple(CategoryTag)


def lookup_tag(text: str) -> TagLookup:
    """
    Resolve a tag's display string.  Unknown or empty text resolves to
    Basic with recognized=False so callers can surface it if they care.
    """
    try:
        return TagLookup(CategoryTag(str(text).strip()), True)
    except ValueError:
        logger.warning("Unrecognised category %r, defaulting to %s",
                       text, DEFAULT_TAG.value)
        return TagLookup(DEFAULT_TAG, False)


def parse_tag(text: str | CategoryTag) -> CategoryTag:
    if isinstance(text, CategoryTag):
        return text
    return lookup_tag(text).tag


def default_instance(tag: str | CategoryTag) -> Category:
    """Zero-valued category record for a tag (unknown → Basic)."""
    return CATEGORY_SHAPES[parse_tag(tag)]()


def default_properties(tag: str | CategoryTag) -> PartProperties:
    return PartProperties(base=BaseProperties(), category=default_instance(tag))


# ── Field views ───────────────────────────────────────────────────────

def base_fields() -> tuple[FieldSpec, ...]:
    return schema_of(BaseProperties)


def category_fields(tag: str | CategoryTag) -> tuple[FieldSpec, ...]:
    return schema_of(CATEGORY_SHAPES[parse_tag(tag)])


def part_fields(tag: str | CategoryTag) -> tuple[FieldSpec, ...]:
    """Flattened field set of a part in the given category."""
    return base_fields() + category_fields(tag)


def part_field_names(tag: str | CategoryTag) -> list[str]:
    return [spec.name for spec in part_fields(tag)]


def field_kinds(tag: str | CategoryTag) -> dict[str, FieldKind]:
    return {spec.name: spec.kind for spec in part_fields(tag)}


# ── Startup checks ────────────────────────────────────────────────────

def check_schemas() -> None:
    """Raise SchemaError unless every record shape is well formed."""
    missing = [t.value for t in CategoryTag if t not in CATEGORY_SHAPES]
    if missing:
        raise SchemaError(f"Categories without a record shape: {missing}")

    base_names = {spec.identifier for spec in schema_of(BaseProperties)}
    for tag, shape in CATEGORY_SHAPES.items():
        if shape.tag is not tag:
            raise SchemaError(
                f"{shape.__name__} is registered as {tag.value} "
                f"but declares {shape.tag.value}")
        clash = base_names & {spec.identifier for spec in schema_of(shape)}
        if clash:
            raise SchemaError(
                f"{shape.__name__} reuses base field(s) {sorted(clash)}")


check_schemas()
