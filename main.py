#!/usr/bin/env python3
"""
PCPC - PC Part Catalog web application
=======================================

Single-command run:  python main.py

See config.py for all environment-variable tunables.
"""

from __future__ import annotations

import logging

from flask import Flask, jsonify
from flask_cors import CORS

import config
from api import api_bp
from db import get_session, init_db
from schema.registry import all_categories, check_schemas
from services.seed_service import seed_if_empty
from ui import ui_bp
from ui.session_state import init_sessions

logger = logging.getLogger(__name__)


def configure_logging() -> None:
    logging.basicConfig(level=config.LOG_LEVEL, format=config.LOG_FORMAT)


def create_app(db_url: str | None = None, *, seed: bool | None = None) -> Flask:
    """Flask application factory."""

    app = Flask(__name__)
    app.secret_key = config.SECRET
    app.config["MAX_CONTENT_LENGTH"] = config.JSON_LIMIT

    # ── Record schemas ──────────────────────────────────────────────
    check_schemas()
    logger.info("Schema: %d categories", len(all_categories()))

    # ── Initialise database ─────────────────────────────────────────
    db_url = db_url or config.DB_URL
    init_db(db_url)
    logger.info("Database: %s", db_url)

    if (config.SEED_ON_EMPTY if seed is None else seed):
        _seed()

    # ── Per-browser UI state ────────────────────────────────────────
    init_sessions(app)

    # ── Register blueprints ─────────────────────────────────────────
    CORS(app, resources={r"/api/*": {"origins": config.ALLOWED_ORIGIN}},
         supports_credentials=True, max_age=3600)
    app.register_blueprint(api_bp)
    app.register_blueprint(ui_bp)

    # ── Error handlers ──────────────────────────────────────────────
    @app.errorhandler(404)
    def _404(e):
        return jsonify({"error": "not found"}), 404

    @app.errorhandler(500)
    def _500(e):
        return jsonify({"error": "internal server error"}), 500

    return app


def _seed() -> None:
    session = get_session()
    try:
        seed_if_empty(session)
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()


def main():
    configure_logging()
    print("=" * 56)
    print("  PCPC - PC Part Catalog")
    print("=" * 56)

    app = create_app()

    print(f"\n  http://{config.HOST}:{config.PORT}/api")
    print("=" * 56)

    app.run(host=config.HOST, port=config.PORT, debug=config.DEBUG)


if __name__ == "__main__":
    main()
