# =============================================================================
# app/routers/search.py - Search Endpoint
# =============================================================================
# Echoes query-string parameters back to the caller.
# =============================================================================

from typing import Annotated

from fastapi import APIRouter, Query
from pydantic import BaseModel

router = APIRouter()


class SearchResponse(BaseModel):
    """Echo of the parsed search parameters."""
    query: str | None
    limit: int


@router.get("", response_model=SearchResponse)
async def search(
    q: Annotated[str | None, Query(description="Search text")] = None,
    limit: Annotated[int, Query(description="Maximum number of results")] = 10,
):
    """Return the parsed query parameters."""
    return SearchResponse(query=q, limit=limit)
