"""Product search API endpoints."""

import time
from typing import List, Optional

from fastapi import APIRouter, HTTPException, Query, Path

from ..models.request import SearchRequest
from ..models.response import CacheClearResponse, ProductHit, ProductSearchResponse
from ..config import get_settings

router = APIRouter(prefix="/api/v1", tags=["search"])
settings = get_settings()

# Import the global search service instance
from ..engine_instance import search_service


def _run_search(
    query: str,
    max_results: Optional[int],
    include_suggestions: bool
) -> ProductSearchResponse:
    start_time = time.time()
    limit = max_results or settings.max_results

    cache_hit = search_service.is_cached(query, limit)
    results = search_service.search(query, limit)

    suggestions = None
    if not results and include_suggestions:
        suggestions = search_service.suggest(query)

    return ProductSearchResponse(
        query=query,
        execution_time_ms=(time.time() - start_time) * 1000,
        total_results=len(results),
        results=[
            ProductHit(product=r.item, score=r.score, matched_fields=r.matched_fields)
            for r in results
        ],
        cache_hit=cache_hit,
        suggestions=suggestions
    )


@router.get(
    "/products/search",
    response_model=ProductSearchResponse,
    summary="Search products",
    description="Fuzzy search over product names, descriptions and SKUs"
)
async def search_products(
    q: str = Query(..., description="Free-text search query", min_length=1),
    max_results: Optional[int] = Query(
        None,
        ge=1,
        le=100,
        description="Maximum number of results to return"
    ),
    include_suggestions: bool = Query(
        True,
        description="Whether to include suggestions for no-match queries"
    )
) -> ProductSearchResponse:
    """
    Search products by name, description and SKU.

    Tolerates typos through prefix, substring, edit distance and common
    typo heuristics. Results are ranked by weighted score.
    """
    if len(q) > settings.max_query_length:
        raise HTTPException(
            status_code=400,
            detail=f"Query too long. Maximum length is {settings.max_query_length} characters"
        )

    try:
        return _run_search(q, max_results, include_suggestions)
    except Exception as e:
        raise HTTPException(
            status_code=500,
            detail=f"Search failed: {str(e)}"
        )


@router.post(
    "/products/search",
    response_model=ProductSearchResponse,
    summary="Search with request body",
    description="Search products using a structured request body"
)
async def search_with_body(request: SearchRequest) -> ProductSearchResponse:
    """Search products using a JSON request body."""
    try:
        return _run_search(request.query, request.max_results, request.include_suggestions)
    except Exception as e:
        raise HTTPException(
            status_code=500,
            detail=f"Search failed: {str(e)}"
        )


@router.get(
    "/products/suggestions/{query}",
    response_model=List[str],
    summary="Get search suggestions",
    description="Get catalog words close to a misspelled query"
)
async def get_suggestions(
    query: str = Path(..., description="The query to get suggestions for", min_length=1),
    max_suggestions: int = Query(5, ge=1, le=20, description="Maximum number of suggestions")
) -> List[str]:
    """Get 'did you mean' suggestions from the catalog vocabulary."""
    try:
        return search_service.suggest(query, max_suggestions)
    except Exception as e:
        raise HTTPException(
            status_code=500,
            detail=f"Failed to get suggestions: {str(e)}"
        )


@router.delete(
    "/search/cache",
    response_model=CacheClearResponse,
    summary="Clear search cache",
    description="Drop every memoized search result"
)
async def clear_search_cache() -> CacheClearResponse:
    """
    Clear the search engine cache.

    Cached results are never refreshed automatically, so this must be called
    after the catalog changes outside of a reload.
    """
    cleared = search_service.clear_cache()
    return CacheClearResponse(
        message="Search cache cleared",
        cleared_entries=cleared
    )
