"""POST /search endpoint: Filter, search, sort and limit records."""

import logging
from typing import Any

from fastapi import APIRouter, Body, Depends

from src.api.dependencies import get_pipeline, get_store
from src.config.settings import settings
from src.models.api_models import ErrorResponse, SearchRequest, SearchResponse
from src.search.errors import SearchError
from src.search.pipeline import SearchPipeline
from src.storage.record_store import RecordStore

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "/search",
    response_model=SearchResponse,
    responses={500: {"model": ErrorResponse}},
)
def search_records(
    body: Any = Body(default=None),
    store: RecordStore = Depends(get_store),
    pipeline: SearchPipeline = Depends(get_pipeline),
) -> SearchResponse:
    """Search the record collection.

    Any failure, including a malformed body, is reported as ``SEARCH_ERROR``.
    """
    try:
        request = SearchRequest.model_validate({} if body is None else body)
        result = pipeline.run(store.collection(settings.RECORDS_COLLECTION), request)
    except SearchError:
        logger.exception("SEARCH_ERROR")
        raise
    except Exception as e:
        logger.exception("SEARCH_ERROR")
        raise SearchError(str(e)) from e

    return SearchResponse(count=result.count, items=result.items)
