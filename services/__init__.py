"""
services - Business-logic layer sitting between API/UI and DB.
"""

from services.parts_service import PartsService       # noqa: F401
from services.search_service import SearchService     # noqa: F401
from services.auth_service import check_credentials, ensure_user   # noqa: F401
from services.seed_service import seed_if_empty       # noqa: F401
