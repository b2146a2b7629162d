"""
property_engine.buffer - Edit buffer for one create/edit session.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from schema.categories import CategoryTag, PartProperties
from schema.registry import DEFAULT_TAG, parse_tag
from property_engine.extractor import default_fields, extract_part


@dataclass
class EditBuffer:
    category: CategoryTag = DEFAULT_TAG
    values: dict[str, str] = field(default_factory=dict)   # name → text

    @classmethod
    def fresh(cls, tag: str | CategoryTag = DEFAULT_TAG) -> "EditBuffer":
        """Buffer seeded with the default display values of a category."""
        tag = parse_tag(tag)
        return cls(category=tag, values=default_fields(tag))

    @classmethod
    def from_properties(cls, properties: PartProperties) -> "EditBuffer":
        """Buffer pre-filled from an existing part (edit / use-as-template)."""
        return cls(category=properties.tag, values=extract_part(properties))

    def set(self, name: str, value: str) -> None:
        """
        Update one field.  Names outside the current field set are
        rejected so a stale form cannot smuggle fields in.
        """
        if name not in self.values:
            raise KeyError(name)
        self.values[name] = value

    def copy(self) -> "EditBuffer":
        return EditBuffer(category=self.category, values=dict(self.values))

    def to_dict(self) -> dict:
        return {
            "category": self.category.value,
            "values": dict(self.values),
        }
