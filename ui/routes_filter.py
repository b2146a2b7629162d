"""
ui.routes_filter - Filter panel: category pick, field visibility, order.
"""

from __future__ import annotations

from flask import abort, jsonify, request

from schema.registry import all_categories
from ui import ui_bp
from ui.session_state import current_ui_session


def _json_body() -> dict:
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        abort(400)
    return data


@ui_bp.route("/categories")
def ui_categories():
    ui = current_ui_session()
    return jsonify({
        "categories": [t.value for t in all_categories()],
        "selected": ui.selected_category.value,
    })


@ui_bp.route("/category", methods=["POST"])
def ui_select_category():
    """
    {"category": "CPU"} - switch the panel's category.  New fields join
    the ordering as visible; fields of the old category keep their entry.
    """
    ui = current_ui_session()
    lookup = ui.select_category(str(_json_body().get("category", "")))
    return jsonify({
        "selected": lookup.tag.value,
        "recognized": lookup.recognized,
        "fields": ui.ordering.visible_and_ordered_fields(ui.scope()),
    })


@ui_bp.route("/fields")
def ui_visible_fields():
    """Visible field names for the selected category, in display order."""
    ui = current_ui_session()
    return jsonify({
        "category": ui.selected_category.value,
        "fields": ui.ordering.visible_and_ordered_fields(ui.scope()),
    })


@ui_bp.route("/filter")
def ui_filter_panel():
    """Every field of the selected category with its checkbox state."""
    ui = current_ui_session()
    return jsonify({
        "category": ui.selected_category.value,
        "properties": [{"name": n, "visible": v}
                       for n, v in ui.ordering.entries(ui.scope())],
    })


@ui_bp.route("/fields/visibility", methods=["POST"])
def ui_set_visibility():
    """{"name": "Cores", "visible": false}"""
    data = _json_body()
    name = data.get("name")
    visible = data.get("visible")
    if not isinstance(name, str) or not isinstance(visible, bool):
        abort(400)

    ui = current_ui_session()
    try:
        ui.ordering.set_visibility(name, visible)
    except KeyError:
        return jsonify({"error": f"unknown field {name!r}"}), 404
    return jsonify({"fields": ui.ordering.visible_and_ordered_fields(ui.scope())})


@ui_bp.route("/fields/order", methods=["POST"])
def ui_set_order():
    """{"order": ["Name", "Rating", ...]} - listed names move to the front."""
    order = _json_body().get("order")
    if not isinstance(order, list) or not all(isinstance(n, str) for n in order):
        abort(400)

    ui = current_ui_session()
    ui.ordering.set_order(order)
    return jsonify({"fields": ui.ordering.visible_and_ordered_fields(ui.scope())})
