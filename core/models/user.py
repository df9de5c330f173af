# =============================================================================
# core/models/user.py - User Schemas
# =============================================================================
# These models define the API contract for user records:
# - User: A stored user record (what the store owns and returns)
# - UserCreate: Input for creating a new user
# - UserUpdate: Input for a partial update (name and/or email)
# - UserList: The full ordered collection plus its size
# - NestedResource: Echo of the /users/{userId}/posts/{postId} parameters
#
# Wire format uses camelCase keys (createdAt, updatedAt).
# =============================================================================

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class User(BaseModel):
    """
    A single user record.

    `id` is assigned by the store and never reused. `updated_at` stays
    None until the first successful patch and is left out of the
    serialized body while unset.

    Example:
        {
            "id": 1,
            "name": "Park Changgi",
            "email": "kim@example.com",
            "createdAt": "2024-01-15T10:30:00Z"
        }
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: int = Field(..., ge=1, description="Store-assigned identifier")
    name: str = Field(..., min_length=1, description="Display name")
    email: str = Field(..., min_length=1, description="Unique email address")

    created_at: datetime | None = Field(
        default=None,
        description="Timestamp when the user was created"
    )

    updated_at: datetime | None = Field(
        default=None,
        description="Timestamp of the last successful modification"
    )

    def to_response(self) -> dict:
        """Serialize with camelCase keys, omitting unset timestamps."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class UserCreate(BaseModel):
    """
    Body of POST /users.

    Both fields are optional at the schema level so that missing values
    reach the store and come back as a BadRequest with the usual message
    instead of a schema error.
    """
    name: str | None = Field(default=None, examples=["Kim Yushin"])
    email: str | None = Field(default=None, examples=["yushin@example.com"])


class UserUpdate(BaseModel):
    """Body of PATCH /users/{id}. Omitted fields keep their prior values."""
    name: str | None = Field(default=None, examples=["New Name"])
    email: str | None = Field(default=None, examples=["new@example.com"])


class UserList(BaseModel):
    """The full ordered collection with its size."""
    users: list[User] = Field(default_factory=list)
    count: int = Field(default=0, ge=0)


class NestedResource(BaseModel):
    """Path parameters of a nested post lookup, echoed verbatim."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    user_id: str
    post_id: str
