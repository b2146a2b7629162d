"""
property_engine.wire - PartProperties ↔ JSON wire shape.

    {
      "name": "...", "image_url": "...", "model": "...",
      "manufacturer": "...", "release_date": "...", "rating": 3.5,
      "category": "Basic"                      # fieldless category
      "category": {"CPU": {"cores": 14, ...}}  # otherwise
    }

Keys are the record identifiers (lower snake case).  Missing keys take
their default; a value of the wrong JSON type raises WireFormatError.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Mapping

from schema.categories import BaseProperties, CATEGORY_SHAPES, PartProperties
from schema.fields import FieldKind, INT_RANGE, UINT_RANGE, schema_of
from schema.registry import DEFAULT_TAG, lookup_tag

logger = logging.getLogger(__name__)


class WireFormatError(ValueError):
    """Raised when a wire payload does not match the record schema."""
    pass


def _record_to_wire(record) -> dict:
    return {spec.identifier: getattr(record, spec.identifier)
            for spec in schema_of(type(record))}


def to_wire(properties: PartProperties) -> dict:
    payload = _record_to_wire(properties.base)
    category = properties.category
    if schema_of(type(category)):
        payload["category"] = {category.tag.value: _record_to_wire(category)}
    else:
        payload["category"] = category.tag.value
    return payload


def _wire_value(kind: FieldKind, key: str, value):
    # bool is a subclass of int; keep the two apart
    if kind is FieldKind.BOOL:
        if isinstance(value, bool):
            return value
    elif kind in (FieldKind.UINT, FieldKind.INT):
        if isinstance(value, int) and not isinstance(value, bool):
            lo, hi = UINT_RANGE if kind is FieldKind.UINT else INT_RANGE
            if lo <= value <= hi:
                return value
    elif kind is FieldKind.FLOAT:
        # Older clients send floats as strings
        if isinstance(value, (int, float, str)) and not isinstance(value, bool):
            try:
                number = float(value)
            except (ValueError, OverflowError):
                pass
            else:
                if math.isfinite(number):
                    return number
    elif kind is FieldKind.STR:
        if isinstance(value, str):
            return value
    raise WireFormatError(f"{key}: expected {kind.value}, got {value!r}")


def _record_from_wire(record_cls: type, data: Mapping):
    kwargs = {}
    for spec in schema_of(record_cls):
        if spec.identifier in data:
            value = _wire_value(spec.kind, spec.identifier, data[spec.identifier])
            if not spec.in_bounds(value):
                raise WireFormatError(
                    f"{spec.identifier}: {value!r} is outside {spec.bounds}")
            kwargs[spec.identifier] = value
    return record_cls(**kwargs)


def from_wire(payload: Mapping) -> PartProperties:
    if not isinstance(payload, Mapping):
        raise WireFormatError("part payload must be a JSON object")

    raw = payload.get("category", DEFAULT_TAG.value)
    if isinstance(raw, str):
        tag_text, body = raw, {}
    elif isinstance(raw, Mapping) and len(raw) == 1:
        (tag_text, body), = raw.items()
        if not isinstance(body, Mapping):
            raise WireFormatError("category properties must be a JSON object")
    else:
        raise WireFormatError(
            "category must be a tag string or a single-key object")

    lookup = lookup_tag(tag_text)
    if not lookup.recognized:
        body = {}

    return PartProperties(
        base=_record_from_wire(BaseProperties, payload),
        category=_record_from_wire(CATEGORY_SHAPES[lookup.tag], body),
    )
