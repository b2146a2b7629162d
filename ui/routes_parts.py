"""
ui.routes_parts - Listing, detail, comparison picks and favorites.
"""

from __future__ import annotations

from flask import abort, jsonify, request

import config
from db import get_session
from property_engine.extractor import extract_part
from schema.registry import field_kinds
from services.parts_service import PartsService
from services.presentation import present
from services.search_service import SearchService
from services.table_service import comparison_table, listing_rows
from ui import ui_bp
from ui.session_state import current_ui_session


def _json_body() -> dict:
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        abort(400)
    return data


def _mark_body() -> tuple[str, bool]:
    data = _json_body()
    part_id, on = data.get("id"), data.get("on")
    if not isinstance(part_id, str) or not isinstance(on, bool):
        abort(400)
    return part_id, on


@ui_bp.route("/parts")
def ui_parts():
    """
    GET /ui-api/parts?q=&limit=&offset=

    Listing rows for the selected category's visible fields.  Parts of
    every category are listed; the panel's category only picks columns.
    """
    q = request.args.get("q", "").strip()
    try:
        limit = min(int(request.args.get("limit", config.DEFAULT_PART_LIMIT)),
                    config.MAX_PART_LIMIT)
        offset = int(request.args.get("offset", 0))
    except ValueError:
        abort(400)

    ui = current_ui_session()
    session = get_session()
    try:
        parts, total = SearchService.search(
            session, q=q, limit=max(limit, 0), offset=max(offset, 0))
        table = listing_rows(parts, ui.ordering, ui.selected_category)
        for row in table["rows"]:
            row["selected"] = row["id"] in ui.selected_parts
            row["favorite"] = row["id"] in ui.favorites
        table["total"] = total
        return jsonify(table)
    finally:
        session.close()


@ui_bp.route("/part/<part_id>")
def ui_part_detail(part_id: str):
    """All fields of one part in its own category, presented."""
    session = get_session()
    try:
        part = PartsService.get(session, part_id)
        if not part:
            abort(404)
        properties = part.to_properties()
        values = present(extract_part(properties), field_kinds(properties.tag))
        return jsonify({
            "id": part.id,
            "category": properties.tag.value,
            "image_url": part.image_url,
            "fields": [{"name": n, "value": v} for n, v in values.items()],
        })
    finally:
        session.close()


# ── Comparison ─────────────────────────────────────────────────────────

@ui_bp.route("/selected", methods=["POST"])
def ui_set_selected():
    """{"id": "...", "on": true} - tick / untick a part for comparison."""
    part_id, on = _mark_body()
    ui = current_ui_session()
    ui.set_selected(part_id, on)
    return jsonify({"selected_parts": list(ui.selected_parts)})


@ui_bp.route("/comparison")
def ui_comparison():
    ui = current_ui_session()
    session = get_session()
    try:
        parts = PartsService.get_many(session, ui.selected_parts)
        return jsonify(comparison_table(parts, ui.ordering, ui.selected_category))
    finally:
        session.close()


# ── Favorites ──────────────────────────────────────────────────────────

@ui_bp.route("/favorites", methods=["POST"])
def ui_set_favorite():
    """{"id": "...", "on": true}"""
    part_id, on = _mark_body()
    ui = current_ui_session()
    ui.set_favorite(part_id, on)
    return jsonify({"favorites": list(ui.favorites)})


@ui_bp.route("/favorites")
def ui_favorites():
    ui = current_ui_session()
    session = get_session()
    try:
        parts = PartsService.get_many(session, ui.favorites)
        table = listing_rows(parts, ui.ordering, ui.selected_category)
        for row in table["rows"]:
            row["selected"] = row["id"] in ui.selected_parts
            row["favorite"] = True
        return jsonify(table)
    finally:
        session.close()
