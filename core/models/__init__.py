# =============================================================================
# core/models/ - Data Models
# =============================================================================
# - user.py: User record and request schemas
# - result.py: Result / StoreError / ErrorKind returned by store operations
# =============================================================================

from .result import (
    ErrorKind,
    Result,
    StoreError,
)

from .user import (
    NestedResource,
    User,
    UserCreate,
    UserList,
    UserUpdate,
)

__all__ = [
    # Result
    "ErrorKind",
    "Result",
    "StoreError",
    # User
    "NestedResource",
    "User",
    "UserCreate",
    "UserList",
    "UserUpdate",
]
