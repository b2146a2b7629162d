"""
api.auth - Basic-auth gate for write endpoints.

Shared with the UI blueprint, whose create flow submits through the
same check.
"""

from __future__ import annotations

import functools
import logging

from flask import jsonify, request

import config
from db import get_session
from services.auth_service import check_credentials

logger = logging.getLogger(__name__)


def unauthorized():
    response = jsonify({"error": "unauthorized"})
    response.status_code = 401
    response.headers["WWW-Authenticate"] = f'Basic realm="{config.AUTH_REALM}"'
    return response


def request_is_authorized() -> bool:
    auth = request.authorization
    if auth is None or auth.type != "basic" or not auth.password:
        return False
    session = get_session()
    try:
        return check_credentials(session, auth.username or "", auth.password)
    finally:
        session.close()


def basic_auth_required(view):
    """Answer 401 with a Basic challenge unless the credentials check out."""

    @functools.wraps(view)
    def wrapper(*args, **kwargs):
        if not request_is_authorized():
            logger.info("Rejected unauthenticated write to %s", request.path)
            return unauthorized()
        return view(*args, **kwargs)

    return wrapper
