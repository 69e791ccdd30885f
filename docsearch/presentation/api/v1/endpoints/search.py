"""Search endpoint — ranked retrieval over loaded chunks."""

import logging

from fastapi import APIRouter, Depends, HTTPException, status

from docsearch.application.schemas import SearchRequest, SearchResponse, SearchResultSchema
from docsearch.application.services import SearchService
from docsearch.domain.exceptions import DimensionMismatchError, EmbeddingUnavailableError
from docsearch.infrastructure.dependencies import get_search_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/search", tags=["Search"])


@router.post("", response_model=SearchResponse)
async def search(
    body: SearchRequest,
    service: SearchService = Depends(get_search_service),
) -> SearchResponse:
    """Rank chunks against the query using the requested mode."""
    try:
        results = await service.search(
            body.query,
            top_k=body.top_k,
            document_id=body.document_id,
            mode=body.mode,
        )
    except EmbeddingUnavailableError as e:
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=str(e))
    except DimensionMismatchError as e:
        logger.error("Search aborted on inconsistent vectors: %s", e)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e))

    return SearchResponse(
        query=body.query,
        mode=body.mode,
        results=[SearchResultSchema.model_validate(r, from_attributes=True) for r in results],
        count=len(results),
    )
