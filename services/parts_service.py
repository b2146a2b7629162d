"""
services.parts_service - CRUD operations on Part records.

All session management is the caller's responsibility (open before,
close/commit after).  This keeps the service testable and allows
the caller to batch multiple operations in one transaction.
"""

from __future__ import annotations

import logging

from sqlalchemy.orm import Session

from db.models import Part
from schema.categories import PartProperties

logger = logging.getLogger(__name__)


class PartsService:

    # ── Create ─────────────────────────────────────────────────────────

    @staticmethod
    def create(session: Session, properties: PartProperties) -> Part:
        """Store a new part; the id is assigned here."""
        part = Part.from_properties(properties)
        session.add(part)
        session.flush()
        logger.info("Created part %s (%s, %s)",
                    part.id, part.name, part.category)
        return part

    # ── Read ───────────────────────────────────────────────────────────

    @staticmethod
    def get(session: Session, part_id: str) -> Part | None:
        return session.get(Part, part_id)

    @staticmethod
    def get_many(session: Session, part_ids: list[str]) -> list[Part]:
        """Fetch parts by id, keeping the order of part_ids; unknown ids skipped."""
        if not part_ids:
            return []
        found = {p.id: p for p in
                 session.query(Part).filter(Part.id.in_(part_ids)).all()}
        return [found[i] for i in part_ids if i in found]

    # ── Update ─────────────────────────────────────────────────────────

    @staticmethod
    def update(session: Session, part: Part, properties: PartProperties) -> Part:
        """Replace every field of an existing part, category included."""
        part.apply(properties)
        session.flush()
        return part

    # ── Delete ─────────────────────────────────────────────────────────

    @staticmethod
    def delete(session: Session, part: Part) -> None:
        session.delete(part)
        session.flush()
