"""
services.search_service - Text search and filtered listing.

Builds SQLAlchemy queries with optional filters and ILIKE matching
across the base-field columns.
"""

from __future__ import annotations

from sqlalchemy.orm import Query, Session

from db.models import Part
from schema.registry import lookup_tag


class SearchService:

    # Sortable columns mapping
    SORTABLE_COLUMNS = {
        "name": Part.name,
        "model": Part.model,
        "manufacturer": Part.manufacturer,
        "release_date": Part.release_date,
        "rating": Part.rating,
        "category": Part.category,
        "created_at": Part.created_at,
    }

    @staticmethod
    def search(
        session: Session,
        *,
        q: str = "",
        category: str = "",
        sort_by: str = "created_at",
        sort_order: str = "asc",
        limit: int = 100,
        offset: int = 0,
    ) -> tuple[list[Part], int]:
        """
        Search parts.  Returns (parts_list, total_count).
        """
        query = session.query(Part)
        query = SearchService._apply_filters(query, q=q, category=category)
        total = query.count()

        sort_col = SearchService.SORTABLE_COLUMNS.get(sort_by, Part.created_at)
        if sort_order == "desc":
            query = query.order_by(sort_col.desc(), Part.id)
        else:
            query = query.order_by(sort_col.asc(), Part.id)
        parts = query.offset(offset).limit(limit).all()

        return parts, total

    @staticmethod
    def first(session: Session, limit: int) -> list[Part]:
        """The first `limit` parts in insertion order."""
        return (session.query(Part)
                .order_by(Part.created_at, Part.id)
                .limit(limit).all())

    # ── Internal ───────────────────────────────────────────────────────

    @staticmethod
    def _apply_filters(query: Query, *, q: str, category: str) -> Query:
        if category:
            # Unknown tags resolve to Basic, same as everywhere else
            query = query.filter(Part.category == lookup_tag(category).tag.value)
        if q:
            query = SearchService._apply_text_filter(query, q)
        return query

    @staticmethod
    def _apply_text_filter(query: Query, q: str) -> Query:
        like = f"%{q}%"
        return query.filter(
            Part.name.ilike(like)
            | Part.model.ilike(like)
            | Part.manufacturer.ilike(like)
            | Part.release_date.ilike(like)
        )
