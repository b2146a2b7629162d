"""
schema.fields - Explicit per-field schema for record dataclasses.

Every record class declares its fields with one of the *_field()
helpers below.  The helper stores the primitive kind in the dataclass
field metadata, so schema_of() can list (identifier, display name,
kind, default) in declaration order without touching a serialised form.
"""

from __future__ import annotations

import dataclasses
import enum
import re
from dataclasses import dataclass
from functools import lru_cache
from typing import Any

KIND_KEY   = "pcpc_kind"
BOUNDS_KEY = "pcpc_bounds"

_IDENTIFIER_RE = re.compile(r"[a-z][a-z0-9]*(?:_[a-z0-9]+)*")


class FieldKind(str, enum.Enum):
    BOOL  = "bool"
    UINT  = "uint"
    INT   = "int"
    FLOAT = "float"
    STR   = "str"


# Inclusive integer bounds per kind
UINT_RANGE = (0, 2**32 - 1)
INT_RANGE  = (-(2**31), 2**31 - 1)


class SchemaError(RuntimeError):
    """Raised at startup when a record schema is malformed."""
    pass


@dataclass(frozen=True)
class FieldSpec:
    identifier: str
    name: str
    kind: FieldKind
    default: Any
    bounds: tuple[float, float] | None = None   # inclusive, numeric kinds only

    def in_bounds(self, value) -> bool:
        return self.bounds is None or self.bounds[0] <= value <= self.bounds[1]


# ── Field declaration helpers ─────────────────────────────────────────

def flag_field(default: bool = False):
    return dataclasses.field(default=default, metadata={KIND_KEY: FieldKind.BOOL})


def uint_field(default: int = 0):
    return dataclasses.field(default=default, metadata={KIND_KEY: FieldKind.UINT})


def int_field(default: int = 0):
    return dataclasses.field(default=default, metadata={KIND_KEY: FieldKind.INT})


def float_field(default: float = 0.0, bounds: tuple[float, float] | None = None):
    metadata = {KIND_KEY: FieldKind.FLOAT}
    if bounds is not None:
        metadata[BOUNDS_KEY] = bounds
    return dataclasses.field(default=default, metadata=metadata)


def text_field(default: str = ""):
    return dataclasses.field(default=default, metadata={KIND_KEY: FieldKind.STR})


# ── Name mapping ──────────────────────────────────────────────────────

def humanize(identifier: str) -> str:
    """'max_pcie_lanes' → 'Max Pcie Lanes'."""
    return " ".join(word.capitalize() for word in identifier.split("_"))


def dehumanize(name: str) -> str:
    """'Max Pcie Lanes' → 'max_pcie_lanes'.  Exact inverse of humanize()."""
    return name.lower().replace(" ", "_")


# ── Introspection ─────────────────────────────────────────────────────

@lru_cache(maxsize=None)
def schema_of(record_cls: type) -> tuple[FieldSpec, ...]:
    """
    Return the ordered field schema of a record dataclass.

    Raises SchemaError if a field has no declared kind or an identifier
    that would not survive humanize/dehumanize.
    """
    if not dataclasses.is_dataclass(record_cls):
        raise SchemaError(f"{record_cls.__name__} is not a record dataclass")

    specs = []
    for f in dataclasses.fields(record_cls):
        kind = f.metadata.get(KIND_KEY)
        if kind is None:
            raise SchemaError(
                f"{record_cls.__name__}.{f.name} has no declared field kind")
        if not _IDENTIFIER_RE.fullmatch(f.name):
            raise SchemaError(
                f"{record_cls.__name__}.{f.name} is not lower snake case")
        spec = FieldSpec(
            identifier=f.name,
            name=humanize(f.name),
            kind=kind,
            default=f.default,
            bounds=f.metadata.get(BOUNDS_KEY),
        )
        if not spec.in_bounds(spec.default):
            raise SchemaError(
                f"{record_cls.__name__}.{f.name} default is outside its bounds")
        specs.append(spec)
    return tuple(specs)
