"""
ui - JSON endpoints consumed by the single-page browser UI.

Separate from the REST API so per-session UI concerns (field ordering,
visibility, the create-form buffer, comparison picks) stay out of the
public API.  All route modules register on a single Flask Blueprint.
"""

from flask import Blueprint

ui_bp = Blueprint("ui", __name__, url_prefix="/ui-api")

# Import route modules so their @ui_bp decorators execute
from ui import routes_session     # noqa: F401, E402
from ui import routes_filter      # noqa: F401, E402
from ui import routes_parts       # noqa: F401, E402
from ui import routes_create      # noqa: F401, E402
from ui import errors             # noqa: F401, E402
