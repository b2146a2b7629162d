"""
ui.errors - JSON error handlers for the UI blueprint.
"""

from flask import jsonify

from ui import ui_bp


@ui_bp.errorhandler(400)
def ui_bad_request(_e):
    return jsonify({"error": "bad request"}), 400


@ui_bp.errorhandler(404)
def ui_not_found(_e):
    return jsonify({"error": "not found"}), 404


@ui_bp.errorhandler(500)
def ui_server_error(_e):
    return jsonify({"error": "internal server error"}), 500
