"""
PCPC - Centralised configuration.

All tunables live here.  Every other module imports from config
instead of reading os.environ directly.  A .env file next to this
module (or in the working directory) is loaded first.
"""

from __future__ import annotations
import os
from pathlib import Path

import dotenv


# ── Paths ──────────────────────────────────────────────────────────────
BASE_DIR = Path(__file__).resolve().parent
dotenv.load_dotenv(BASE_DIR / ".env")

# ── Database ───────────────────────────────────────────────────────────
DB_URL = os.environ.get("PCPC_DATABASE_URL", f"sqlite:///{BASE_DIR / 'pcpc.sqlite'}")

# ── Server ─────────────────────────────────────────────────────────────
HOST   = os.environ.get("PCPC_HOST", "127.0.0.1")
PORT   = int(os.environ.get("PCPC_PORT", "8088"))
DEBUG  = os.environ.get("PCPC_DEBUG", "0") == "1"
SECRET = os.environ.get("PCPC_SECRET", "pcpc-dev-key-change-in-prod")
ALLOWED_ORIGIN = os.environ.get("PCPC_ALLOWED_ORIGIN", "http://127.0.0.1:8080")
JSON_LIMIT     = int(os.environ.get("PCPC_JSON_LIMIT", "4096"))    # bytes

# ── Logging ────────────────────────────────────────────────────────────
LOG_LEVEL  = os.environ.get("PCPC_LOG_LEVEL", "INFO").upper()
LOG_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"

# ── Seed data ──────────────────────────────────────────────────────────
# Seeded on startup when the parts table is empty
SEED_ON_EMPTY  = os.environ.get("PCPC_SEED", "1") == "1"
ADMIN_USER     = os.environ.get("PCPC_ADMIN_USER", "Admin")
ADMIN_PASSWORD = os.environ.get("PCPC_ADMIN_PASSWORD", "admin")
AUTH_REALM     = "Admin rights"

# ── Listing ────────────────────────────────────────────────────────────
DEFAULT_PART_LIMIT = 50
MAX_PART_LIMIT     = 1000

# ── UI sessions ────────────────────────────────────────────────────────
# Least recently used sessions are dropped past this count
UI_SESSION_LIMIT = int(os.environ.get("PCPC_UI_SESSION_LIMIT", "1000"))
