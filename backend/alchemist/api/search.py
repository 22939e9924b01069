"""Search API — basic keyword queries over a roster snapshot."""

from fastapi import APIRouter

from alchemist.config import get_settings
from alchemist.models.requests import SearchRequest
from alchemist.search.basic_query import SearchResult, search

router = APIRouter()


@router.post("/search", response_model=SearchResult)
async def search_roster(request: SearchRequest):
    """Filter one collection by the phrases recognised in ``query``."""
    settings = get_settings()

    if request.largest_collection() > settings.MAX_ROWS_PER_ENTITY:
        raise ValueError(
            f"Each collection is limited to {settings.MAX_ROWS_PER_ENTITY} rows"
        )

    return search(request.query, request.to_context())
