# =============================================================================
# app/dependencies.py - Shared Dependencies
# =============================================================================
# FastAPI dependency injection for shared resources.
# These are injected into route handlers using Depends().
# =============================================================================

from typing import Annotated

from fastapi import Depends, Request

from core.services.user_store import UserStore


def get_user_store(request: Request) -> UserStore:
    """
    Get the UserStore owned by the running application.

    The store is built by create_app() and kept on app.state, so each
    app instance (and each test) has its own collection.
    """
    return request.app.state.user_store


# Type alias for dependency injection
UserStoreDep = Annotated[UserStore, Depends(get_user_store)]
