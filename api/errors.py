"""
api.errors - JSON error handlers for the API blueprint.
"""

from flask import jsonify

from api import api_bp
from property_engine.wire import WireFormatError


@api_bp.errorhandler(404)
def api_not_found(_e):
    return jsonify({"error": "not found"}), 404


@api_bp.errorhandler(400)
def api_bad_request(_e):
    return jsonify({"error": "bad request"}), 400


@api_bp.errorhandler(405)
def api_method_not_allowed(_e):
    return jsonify({"error": "method not allowed"}), 405


@api_bp.errorhandler(413)
def api_too_large(_e):
    return jsonify({"error": "request body too large"}), 413


@api_bp.errorhandler(WireFormatError)
def api_wire_format(exc):
    return jsonify({"error": str(exc)}), 400


@api_bp.errorhandler(500)
def api_server_error(_e):
    return jsonify({"error": "internal server error"}), 500
