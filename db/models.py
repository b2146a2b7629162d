"""
db.models - SQLAlchemy ORM declarations.

Tables
------
parts  - one row per part.  Base fields are real columns so the
         listing can sort/filter on them; the category tag is its own
         indexed column and the category's properties are stored as a
         JSON blob in wire form, so adding a category needs no migration.
users  - accounts allowed to write parts (Basic auth).
"""

from __future__ import annotations

import json
import uuid
from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, Float, String, Text
from sqlalchemy.orm import DeclarativeBase

from schema.categories import PartProperties
from property_engine.wire import from_wire, to_wire


def _new_id() -> str:
    return uuid.uuid4().hex[:20]


class Base(DeclarativeBase):
    pass


class Part(Base):
    __tablename__ = "parts"

    id = Column(String(32), primary_key=True, default=_new_id)

    # ── Base fields ────────────────────────────────────────────────────
    name         = Column(String(200), nullable=False, index=True, default="")
    image_url    = Column(Text, default="")
    model        = Column(String(200), index=True, default="")
    manufacturer = Column(String(200), index=True, default="")
    release_date = Column(String(20), default="")
    rating       = Column(Float, default=0.0)

    # ── Category ───────────────────────────────────────────────────────
    category       = Column(String(40), nullable=False, index=True, default="Basic")
    category_json  = Column(Text, default="{}")

    # ── Timestamps ─────────────────────────────────────────────────────
    created_at = Column(DateTime, default=lambda: datetime.now(timezone.utc))
    updated_at = Column(DateTime, default=lambda: datetime.now(timezone.utc),
                        onupdate=lambda: datetime.now(timezone.utc))

    # ── Conversion ─────────────────────────────────────────────────────
    @classmethod
    def from_properties(cls, properties: PartProperties, **kwargs) -> "Part":
        part = cls(**kwargs)
        part.apply(properties)
        return part

    def apply(self, properties: PartProperties) -> None:
        """Overwrite every stored field with `properties`."""
        payload = to_wire(properties)
        category = payload.pop("category")
        for key, value in payload.items():
            setattr(self, key, value)
        self.category = properties.tag.value
        body = category[self.category] if isinstance(category, dict) else {}
        self.category_json = json.dumps(body, ensure_ascii=False)

    def to_properties(self) -> PartProperties:
        return from_wire(self.to_wire())

    def to_wire(self) -> dict:
        payload = {
            "name": self.name or "",
            "image_url": self.image_url or "",
            "model": self.model or "",
            "manufacturer": self.manufacturer or "",
            "release_date": self.release_date or "",
            "rating": self.rating or 0.0,
        }
        body = json.loads(self.category_json) if self.category_json else {}
        payload["category"] = {self.category: body} if body else self.category
        return payload

    def to_dict(self) -> dict:
        d = {"id": self.id}
        d.update(self.to_wire())
        return d


class User(Base):
    __tablename__ = "users"

    username      = Column(String(200), primary_key=True)
    password_hash = Column(String(300), nullable=False)
    created_at    = Column(DateTime, default=lambda: datetime.now(timezone.utc))
