# =============================================================================
# app/routers/users.py - User CRUD Endpoints
# =============================================================================
# Thin HTTP layer over UserStore. Each handler calls one store operation
# and either wraps the value in a {"success": true, ...} envelope or lets
# raise_for_error() turn the store error into an HTTP exception.
# =============================================================================

from typing import Annotated, Any

from fastapi import APIRouter, Path, status
from pydantic import BaseModel

from app.dependencies import UserStoreDep
from app.exceptions import raise_for_error
from core.models.user import UserCreate, UserUpdate

router = APIRouter()

# Ids stay strings at this layer so the store decides how to treat
# malformed values (NotFound on lookup, BadRequest on delete).
UserIdPath = Annotated[str, Path(description="User id")]


# =============================================================================
# Response Models
# =============================================================================

class UserEnvelope(BaseModel):
    """Response wrapping a single user."""
    success: bool = True
    data: dict[str, Any]
    message: str | None = None


class UserListEnvelope(BaseModel):
    """Response wrapping the whole collection."""
    success: bool = True
    data: list[dict[str, Any]]
    count: int


class NestedResourceResponse(BaseModel):
    """Echo of the nested path parameters."""
    userId: str
    postId: str


# =============================================================================
# Endpoints
# =============================================================================

@router.get("", response_model=UserListEnvelope)
async def list_users(store: UserStoreDep):
    """
    List all users.

    Returns users in insertion order together with the total count.
    """
    listing = raise_for_error(store.list_all())

    return UserListEnvelope(
        data=[user.to_response() for user in listing.users],
        count=listing.count,
    )


@router.get("/{user_id}", response_model=UserEnvelope, response_model_exclude_none=True)
async def get_user(user_id: UserIdPath, store: UserStoreDep):
    """Get a single user by id."""
    user = raise_for_error(store.get_by_id(user_id))

    return UserEnvelope(data=user.to_response())


@router.post(
    "",
    response_model=UserEnvelope,
    status_code=status.HTTP_201_CREATED,
)
async def create_user(request: UserCreate, store: UserStoreDep):
    """
    Create a new user.

    Both name and email are required. The email must not belong to any
    existing user.
    """
    result = store.create(name=request.name, email=request.email)
    user = raise_for_error(result)

    return UserEnvelope(data=user.to_response(), message=result.message)


@router.patch("/{user_id}", response_model=UserEnvelope)
async def update_user(user_id: UserIdPath, request: UserUpdate, store: UserStoreDep):
    """
    Partially update a user.

    Only the fields present in the body are changed.
    """
    result = store.patch_by_id(user_id, name=request.name, email=request.email)
    user = raise_for_error(result)

    return UserEnvelope(data=user.to_response(), message=result.message)


@router.delete("/{user_id}", response_model=UserEnvelope)
async def delete_user(user_id: UserIdPath, store: UserStoreDep):
    """Delete a user and return the removed record."""
    result = store.delete_by_id(user_id)
    user = raise_for_error(result)

    return UserEnvelope(data=user.to_response(), message=result.message)


@router.get("/{user_id}/posts/{post_id}", response_model=NestedResourceResponse)
async def get_user_post(
    user_id: UserIdPath,
    post_id: Annotated[str, Path(description="Post id")],
    store: UserStoreDep,
):
    """Echo nested path parameters. No post lookup happens."""
    nested = raise_for_error(store.get_nested_resource(user_id, post_id))

    return nested.model_dump(by_alias=True)
