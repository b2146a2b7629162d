"""
ui.routes_create - Create-part form backed by the session edit buffer.

The browser edits display strings; the buffer is reconciled on category
switches and only turned into a typed record on submit.  Submitting is
a write, so it takes the same Basic credentials as /api/part/create.
"""

from __future__ import annotations

import logging

from flask import abort, jsonify, request

from api.auth import basic_auth_required
from db import get_session
from property_engine.buffer import EditBuffer
from property_engine.coercer import CoercionError, coerce_buffer
from schema.registry import field_kinds
from services.parts_service import PartsService
from ui import ui_bp
from ui.session_state import current_ui_session

logger = logging.getLogger(__name__)


def _json_body() -> dict:
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        abort(400)
    return data


def _buffer_response(buffer: EditBuffer, **extra):
    kinds = field_kinds(buffer.category)
    body = {
        "category": buffer.category.value,
        "fields": [{"name": n, "value": v, "kind": kinds[n].value}
                   for n, v in buffer.values.items()],
    }
    body.update(extra)
    return jsonify(body)


@ui_bp.route("/create")
def ui_create_form():
    return _buffer_response(current_ui_session().edit_buffer)


@ui_bp.route("/create/template/<part_id>", methods=["POST"])
def ui_create_from_part(part_id: str):
    """Pre-fill the buffer from an existing part ("use as template")."""
    session = get_session()
    try:
        part = PartsService.get(session, part_id)
        if not part:
            abort(404)
        properties = part.to_properties()
    finally:
        session.close()

    ui = current_ui_session()
    ui.edit_buffer = EditBuffer.from_properties(properties)
    ui.ordering.merge(ui.edit_buffer.values)
    return _buffer_response(ui.edit_buffer)


@ui_bp.route("/create/field", methods=["POST"])
def ui_create_set_field():
    """{"name": "Cores", "value": "14"} - raw text, checked on submit."""
    data = _json_body()
    name, value = data.get("name"), data.get("value")
    if not isinstance(name, str) or not isinstance(value, str):
        abort(400)

    ui = current_ui_session()
    try:
        ui.edit_buffer.set(name, value)
    except KeyError:
        return jsonify({"error": f"{name!r} is not a field of "
                                 f"{ui.edit_buffer.category.value}"}), 404
    return _buffer_response(ui.edit_buffer)


@ui_bp.route("/create/category", methods=["POST"])
def ui_create_category():
    """{"category": "GPU"} - reconcile the buffer with another category."""
    ui = current_ui_session()
    result = ui.switch_edit_category(str(_json_body().get("category", "")))
    return _buffer_response(result.buffer,
                            added=result.added, removed=result.removed)


@ui_bp.route("/create/reset", methods=["POST"])
def ui_create_reset():
    ui = current_ui_session()
    ui.reset_edit_buffer()
    return _buffer_response(ui.edit_buffer)


@ui_bp.route("/create/submit", methods=["POST"])
@basic_auth_required
def ui_create_submit():
    """
    Coerce the buffer and store the part.  A field that does not parse
    answers 400 naming the field and its expected kind; nothing is saved.
    """
    ui = current_ui_session()
    try:
        properties = coerce_buffer(ui.edit_buffer)
    except CoercionError as exc:
        logger.info("Create rejected: %s", exc)
        return jsonify(exc.to_dict()), 400

    session = get_session()
    try:
        part = PartsService.create(session, properties)
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()

    ui.reset_edit_buffer()
    return jsonify(part.to_dict()), 201
