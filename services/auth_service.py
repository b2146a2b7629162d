"""
services.auth_service - Credential checks for the write path.

Passwords are stored as werkzeug hashes.  Strength of the scheme is
not a concern of this app; it only gates who may create parts.
"""

from __future__ import annotations

import logging

from sqlalchemy.orm import Session
from werkzeug.security import check_password_hash, generate_password_hash

from db.models import User

logger = logging.getLogger(__name__)


def check_credentials(session: Session, username: str, password: str) -> bool:
    user = session.get(User, username)
    if user is None:
        return False
    return check_password_hash(user.password_hash, password)


def ensure_user(session: Session, username: str, password: str) -> bool:
    """Create `username` if missing.  Returns True when a user was added."""
    if session.get(User, username) is not None:
        return False
    session.add(User(username=username,
                     password_hash=generate_password_hash(password)))
    session.flush()
    logger.info("Created user %s", username)
    return True
