"""
schema.categories - Record shapes for parts.

A part carries the fixed BaseProperties plus exactly one category
record.  The set of categories is closed: CategoryTag enumerates the
tags and CATEGORY_SHAPES maps each tag to its record class.  Adding a
category means adding a tag, a record class and its CATEGORY_SHAPES
entry; schema.registry.check_schemas() refuses to start otherwise.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import ClassVar, Union

from schema.fields import (
    flag_field, float_field, text_field, uint_field,
)

# Star rating shown as a fraction of five
RATING_RANGE = (0.0, 5.0)


class CategoryTag(str, enum.Enum):
    BASIC = "Basic"
    CPU   = "CPU"
    GPU   = "GPU"
    RAM   = "RAM"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class BaseProperties:
    name:         str   = text_field()
    image_url:    str   = text_field()
    model:        str   = text_field()
    manufacturer: str   = text_field()
    release_date: str   = text_field()
    rating:       float = float_field(bounds=RATING_RANGE)


# ── Category records ──────────────────────────────────────────────────

@dataclass(frozen=True)
class BasicProperties:
    """No extra properties; placeholder parts and anything uncategorised."""
    tag: ClassVar[CategoryTag] = CategoryTag.BASIC


@dataclass(frozen=True)
class CPUProperties:
    tag: ClassVar[CategoryTag] = CategoryTag.CPU

    cores:                      int  = uint_field()
    threads:                    int  = uint_field()
    max_frequency:              str  = text_field()
    base_frequency:             str  = text_field()
    max_tdp:                    str  = text_field()
    base_tdp:                   str  = text_field()
    cache:                      str  = text_field()
    max_ram_size:               str  = text_field()
    max_memory_channels:        int  = uint_field()
    ecc_memory_supported:       bool = flag_field()
    max_pcie_lanes:             int  = uint_field()
    max_supported_pcie_version: str  = text_field()
    socket:                     str  = text_field()
    max_temperature:            str  = text_field()


@dataclass(frozen=True)
class GPUProperties:
    tag: ClassVar[CategoryTag] = CategoryTag.GPU

    shading_units:              int  = uint_field()
    max_frequency:              str  = text_field()
    base_frequency:             str  = text_field()
    memory_size:                str  = text_field()
    memory_type:                str  = text_field()
    memory_bus_width:           int  = uint_field()
    max_tdp:                    str  = text_field()
    max_supported_pcie_version: str  = text_field()
    ray_tracing_supported:      bool = flag_field()


@dataclass(frozen=True)
class RAMProperties:
    tag: ClassVar[CategoryTag] = CategoryTag.RAM

    capacity:             str   = text_field()
    memory_type:          str   = text_field()
    speed:                str   = text_field()
    modules:              int   = uint_field()
    cas_latency:          int   = uint_field()
    voltage:              float = float_field()
    ecc_memory_supported: bool  = flag_field()


Category = Union[BasicProperties, CPUProperties, GPUProperties, RAMProperties]

CATEGORY_SHAPES: dict[CategoryTag, type] = {
    CategoryTag.BASIC: BasicProperties,
    CategoryTag.CPU:   CPUProperties,
    CategoryTag.GPU:   GPUProperties,
    CategoryTag.RAM:   RAMProperties,
}


@dataclass(frozen=True)
class PartProperties:
    """Everything a client submits for a part: base fields + one category."""
    base: BaseProperties = field(default_factory=BaseProperties)
    category: Category = field(default_factory=BasicProperties)

    @property
    def tag(self) -> CategoryTag:
        return self.category.tag
