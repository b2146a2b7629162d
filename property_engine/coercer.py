"""
property_engine.coercer - Edit buffer strings → typed PartProperties.

The target type of every field comes from the record schema of the
base fields and the selected category.  Parsing is strict so hand-made
or tampered buffers are rejected rather than guessed at; the first
failing field aborts the whole record.
"""

from __future__ import annotations

import math
import re
from collections.abc import Mapping

from schema.categories import BaseProperties, CategoryTag, CATEGORY_SHAPES, PartProperties
from schema.fields import FieldKind, INT_RANGE, UINT_RANGE, schema_of
from schema.registry import parse_tag
from property_engine.buffer import EditBuffer

_INT_RE   = re.compile(r"[+-]?[0-9]+")
_FLOAT_RE = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


class CoercionError(ValueError):
    """Raised when one buffer field cannot be parsed as its declared kind."""

    def __init__(self, field_name: str, kind: FieldKind, value: str | None = None):
        self.field_name = field_name
        self.kind = kind
        self.value = value
        if value is None:
            msg = f"{field_name}: missing, expected {kind.value}"
        else:
            msg = f"{field_name}: {value!r} is not a valid {kind.value}"
        super().__init__(msg)

    def to_dict(self) -> dict:
        return {
            "error": str(self),
            "field": self.field_name,
            "expected": self.kind.value,
        }


def parse_value(kind: FieldKind, text: str):
    """Parse one display string.  Raises ValueError on mismatch."""
    if kind is FieldKind.STR:
        return text.strip()

    if kind is FieldKind.BOOL:
        if text == "true":
            return True
        if text == "false":
            return False
        raise ValueError(text)

    if kind in (FieldKind.UINT, FieldKind.INT):
        if not _INT_RE.fullmatch(text):
            raise ValueError(text)
        value = int(text)
        lo, hi = UINT_RANGE if kind is FieldKind.UINT else INT_RANGE
        if not lo <= value <= hi:
            raise ValueError(text)
        return value

    if kind is FieldKind.FLOAT:
        if not _FLOAT_RE.fullmatch(text):
            raise ValueError(text)
        value = float(text)
        if not math.isfinite(value):
            raise ValueError(text)
        return value

    raise ValueError(f"unsupported kind {kind!r}")


def _build(record_cls: type, values: Mapping[str, str]):
    kwargs = {}
    for spec in schema_of(record_cls):
        text = values.get(spec.name)
        if text is None:
            raise CoercionError(spec.name, spec.kind)
        try:
            value = parse_value(spec.kind, text)
        except ValueError:
            raise CoercionError(spec.name, spec.kind, text) from None
        if not spec.in_bounds(value):
            raise CoercionError(spec.name, spec.kind, text)
        kwargs[spec.identifier] = value
    return record_cls(**kwargs)


def coerce(values: Mapping[str, str], tag: str | CategoryTag) -> PartProperties:
    """
    Build a PartProperties in category `tag` from display strings.

    Keys outside the target field set are ignored.  Raises CoercionError
    naming the first field that is missing or fails to parse.
    """
    shape = CATEGORY_SHAPES[parse_tag(tag)]
    base = _build(BaseProperties, values)
    category = _build(shape, values)
    return PartProperties(base=base, category=category)


def coerce_buffer(buffer: EditBuffer) -> PartProperties:
    return coerce(buffer.values, buffer.category)
