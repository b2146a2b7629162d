"""
db - Database layer.

Public API:
    init_db()       → create engine + tables
    get_session()   → new Session
    Part, User      → ORM models
"""

from db.engine import init_db, get_session          # noqa: F401
from db.models import Base, Part, User              # noqa: F401
