import logging
from dataclasses import dataclass
from typing import ClassVar

import pytest

from schema import (
    BaseProperties, BasicProperties, CPUProperties, CategoryTag,
    SchemaError, all_categories, check_schemas, default_instance,
    dehumanize, humanize, lookup_tag, parse_tag, schema_of,
)
from schema.categories import CATEGORY_SHAPES
from schema.fields import FieldKind, float_field, text_field


def all_record_classes():
    return [BaseProperties, *CATEGORY_SHAPES.values()]


def test_humanize_examples():
    assert humanize("name") == "Name"
    assert humanize("max_pcie_lanes") == "Max Pcie Lanes"
    assert humanize("image_url") == "Image Url"


def test_humanize_is_reversible_for_every_declared_field():
    for record_cls in all_record_classes():
        for spec in schema_of(record_cls):
            assert dehumanize(humanize(spec.identifier)) == spec.identifier
            assert spec.name == humanize(spec.identifier)


def test_schema_keeps_declaration_order_and_kinds():
    specs = schema_of(CPUProperties)
    assert specs[0].identifier == "cores"
    assert specs[0].kind is FieldKind.UINT
    assert specs[-1].identifier == "max_temperature"
    ecc = next(s for s in specs if s.identifier == "ecc_memory_supported")
    assert ecc.kind is FieldKind.BOOL
    assert ecc.default is False


def test_basic_has_no_fields():
    assert schema_of(BasicProperties) == ()


def test_field_without_kind_is_rejected():
    @dataclass(frozen=True)
    class Untyped:
        speed: int = 0

    with pytest.raises(SchemaError):
        schema_of(Untyped)


def test_non_snake_identifier_is_rejected():
    @dataclass(frozen=True)
    class Shouty:
        maxSpeed: str = text_field()

    with pytest.raises(SchemaError):
        schema_of(Shouty)


def test_default_outside_bounds_is_rejected():
    @dataclass(frozen=True)
    class Skewed:
        score: float = float_field(default=9.0, bounds=(0.0, 5.0))

    with pytest.raises(SchemaError):
        schema_of(Skewed)


def test_rating_declares_its_bounds():
    rating = next(s for s in schema_of(BaseProperties) if s.identifier == "rating")
    assert rating.bounds == (0.0, 5.0)


def test_check_schemas_passes_for_shipped_categories():
    check_schemas()


def test_base_and_category_collision_fails_fast(monkeypatch):
    @dataclass(frozen=True)
    class ClashingProperties:
        tag: ClassVar[CategoryTag] = CategoryTag.RAM
        name: str = text_field()

    monkeypatch.setitem(CATEGORY_SHAPES, CategoryTag.RAM, ClashingProperties)
    with pytest.raises(SchemaError, match="name"):
        check_schemas()


def test_shape_registered_under_wrong_tag_fails(monkeypatch):
    monkeypatch.setitem(CATEGORY_SHAPES, CategoryTag.GPU, CPUProperties)
    with pytest.raises(SchemaError):
        check_schemas()


def test_all_categories_is_stable_and_exhaustive():
    assert all_categories() == (CategoryTag.BASIC, CategoryTag.CPU,
                                CategoryTag.GPU, CategoryTag.RAM)
    assert set(all_categories()) == set(CATEGORY_SHAPES)


def test_default_instance_is_zero_valued():
    cpu = default_instance("CPU")
    assert cpu == CPUProperties()
    assert cpu.cores == 0
    assert cpu.socket == ""
    assert cpu.ecc_memory_supported is False


def test_parse_tag_round_trips_display_string():
    for tag in all_categories():
        assert parse_tag(str(tag)) is tag


def test_unknown_category_falls_back_to_basic(caplog):
    with caplog.at_level(logging.WARNING, logger="schema.registry"):
        assert parse_tag("Nonexistent") is CategoryTag.BASIC
    assert "Nonexistent" in caplog.text

    lookup = lookup_tag("Nonexistent")
    assert lookup.tag is CategoryTag.BASIC
    assert lookup.recognized is False
    assert lookup_tag("CPU").recognized is True
    assert default_instance("Nonexistent") == BasicProperties()
