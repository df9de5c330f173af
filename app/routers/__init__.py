# =============================================================================
# app/routers/ - API Route Definitions
# =============================================================================
# This package contains FastAPI routers organized by feature:
# - users.py: User CRUD and nested post path endpoints
# - search.py: Query-string echo endpoint
#
# Each router is mounted in main.py with a URL prefix.
# =============================================================================

from . import search
from . import users

__all__ = [
    "search",
    "users",
]
