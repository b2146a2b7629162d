"""
schema - Part record shapes and the closed category registry.

Public API:
    categories.CategoryTag / BaseProperties / PartProperties / *Properties
    fields.schema_of / humanize / dehumanize / FieldKind
    registry.all_categories / default_instance / parse_tag / lookup_tag
    registry.part_fields / field_kinds / check_schemas
"""

from schema.categories import (                     # noqa: F401
    BaseProperties,
    BasicProperties,
    CPUProperties,
    GPUProperties,
    RAMProperties,
    Category,
    CategoryTag,
    PartProperties,
)
from schema.fields import (                         # noqa: F401
    FieldKind,
    FieldSpec,
    SchemaError,
    dehumanize,
    humanize,
    schema_of,
)
from schema.registry import (                       # noqa: F401
    all_categories,
    check_schemas,
    default_instance,
    default_properties,
    field_kinds,
    lookup_tag,
    parse_tag,
    part_field_names,
    part_fields,
)
