"""
ui.routes_session - Snapshot / discard of the browser's UI state.
"""

from flask import current_app, jsonify, session

from ui import ui_bp
from ui.session_state import COOKIE_KEY, EXTENSION_KEY, current_ui_session


@ui_bp.route("/session")
def session_state():
    ui = current_ui_session()
    return jsonify({
        "selected_category": ui.selected_category.value,
        "ordering": ui.ordering.to_dict(),
        "edit_buffer": ui.edit_buffer.to_dict(),
        "selected_parts": list(ui.selected_parts),
        "favorites": list(ui.favorites),
    })


@ui_bp.route("/session", methods=["DELETE"])
def session_discard():
    """Forget this browser's UI state; the next request starts fresh."""
    sid = session.pop(COOKIE_KEY, None)
    if sid:
        current_app.extensions[EXTENSION_KEY].drop(sid)
    return jsonify({"discarded": bool(sid)})
