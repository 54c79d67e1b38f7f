"""Helpers shared by the management entity routers."""

from typing import Optional

from fastapi import Query, Response, status

from assethub.core.config import settings
from assethub.domain.labels import Label
from assethub.domain.search import SearchResults
from assethub.schemas.common import SearchResultsResponse

# Keeps the row offset within a signed 64-bit integer at the largest page size
MAX_PAGE_NUMBER = (2**63 - 1) // settings.max_page_size


def pagination(
    page: int = Query(1, ge=1, le=MAX_PAGE_NUMBER, description="1-based page number"),
    page_size: Optional[int] = Query(
        None,
        alias="pageSize",
        ge=1,
        le=settings.max_page_size,
        description="Results per page",
    ),
) -> dict:
    """Page parameters as SearchCriteria keyword arguments."""
    return {"page_number": page, "page_size": page_size or settings.default_page_size}


def search_response(matches: SearchResults, view: type) -> SearchResultsResponse:
    return SearchResultsResponse[view](
        results=list(matches.results),
        num_results=matches.num_results,
    )


def label_response(label: Optional[Label]) -> Response:
    """Binary label, or an empty 404 when the generator produced nothing."""
    if label is None:
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    return Response(content=label.content, media_type=label.media_type)
