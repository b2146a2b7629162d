"""
api.routes_parts - /api/part CRUD endpoints.
"""

from flask import abort, jsonify, request

import config
from api import api_bp
from api.auth import basic_auth_required
from db import get_session
from property_engine.wire import from_wire
from services.parts_service import PartsService
from services.search_service import SearchService


def _json_body() -> dict:
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        abort(400)
    return data


def _int_arg(value) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        abort(400)


@api_bp.route("")
def status():
    """GET /api - liveness probe."""
    return jsonify({"functional": True})


@api_bp.route("/part", methods=["POST"])
def get_part():
    """
    POST /api/part   {"id": "<id>" | null, "limit": N}

    With an id: that part, or 404.  Without: up to `limit` parts in
    insertion order, or 404 when the catalog is empty.
    """
    data = _json_body()
    part_id = data.get("id")
    limit = min(_int_arg(data.get("limit", config.DEFAULT_PART_LIMIT)),
                config.MAX_PART_LIMIT)

    session = get_session()
    try:
        if part_id is not None:
            part = PartsService.get(session, str(part_id))
            if not part:
                return jsonify({"error": "not found"}), 404
            return jsonify(part.to_dict())

        parts = SearchService.first(session, max(limit, 0))
        if not parts:
            return jsonify({"error": "not found"}), 404
        return jsonify([p.to_dict() for p in parts])
    finally:
        session.close()


@api_bp.route("/parts")
def list_parts():
    """
    GET /api/parts?q=&category=&sort=&order=asc&limit=50&offset=0

    Search / list parts with pagination.
    """
    q        = request.args.get("q", "").strip()
    category = request.args.get("category", "").strip()
    sort_by  = request.args.get("sort", "created_at").strip()
    order    = request.args.get("order", "asc").strip()
    limit    = min(_int_arg(request.args.get("limit", config.DEFAULT_PART_LIMIT)),
                   config.MAX_PART_LIMIT)
    offset   = _int_arg(request.args.get("offset", 0))

    if sort_by not in SearchService.SORTABLE_COLUMNS:
        sort_by = "created_at"
    if order not in ("asc", "desc"):
        order = "asc"

    session = get_session()
    try:
        parts, total = SearchService.search(
            session, q=q, category=category,
            sort_by=sort_by, sort_order=order,
            limit=max(limit, 0), offset=max(offset, 0),
        )
        return jsonify({
            "total": total,
            "offset": offset,
            "limit": limit,
            "parts": [p.to_dict() for p in parts],
        })
    finally:
        session.close()


@api_bp.route("/part/create", methods=["POST"])
@basic_auth_required
def create_part():
    """POST /api/part/create  (Basic auth, wire-shaped JSON body)"""
    properties = from_wire(_json_body())
    session = get_session()
    try:
        part = PartsService.create(session, properties)
        session.commit()
        return jsonify(part.to_dict())
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()


@api_bp.route("/part/<part_id>", methods=["PUT"])
@basic_auth_required
def update_part(part_id: str):
    """PUT /api/part/{id}  (Basic auth, full wire-shaped JSON body)"""
    properties = from_wire(_json_body())
    session = get_session()
    try:
        part = PartsService.get(session, part_id)
        if not part:
            return jsonify({"error": "not found"}), 404
        PartsService.update(session, part, properties)
        session.commit()
        return jsonify(part.to_dict())
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()


@api_bp.route("/part/<part_id>", methods=["DELETE"])
@basic_auth_required
def delete_part(part_id: str):
    """DELETE /api/part/{id}  (Basic auth)"""
    session = get_session()
    try:
        part = PartsService.get(session, part_id)
        if not part:
            return jsonify({"error": "not found"}), 404
        PartsService.delete(session, part)
        session.commit()
        return jsonify({"deleted": part_id})
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()
