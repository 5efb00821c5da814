"""FastAPI application: Record Search API."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exception_handlers import request_validation_exception_handler
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from src.api.routes import health, records, search
from src.config.settings import settings
from src.models.api_models import ErrorResponse
from src.observability.langfuse_client import LangfuseTracer, shutdown
from src.search.errors import SearchError
from src.search.pipeline import SearchPipeline
from src.storage.record_store import RecordStore

logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application startup/shutdown lifecycle."""
    logger.info("Record Search API starting up...")
    app.state.store = RecordStore.from_file(settings.RECORDS_PATH)
    app.state.pipeline = SearchPipeline(tracer=LangfuseTracer())
    yield
    shutdown()
    logger.info("Record Search API shutting down...")


app = FastAPI(
    title="Record Search API",
    description="Filter, search and sort an in-memory record collection",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(SearchError)
async def search_error_handler(request: Request, exc: SearchError) -> JSONResponse:
    return JSONResponse(
        status_code=500,
        content=ErrorResponse(error=exc.code, message=exc.message).model_dump(),
    )


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Unparseable search bodies are search errors; other routes keep the 422."""
    if request.scope.get("endpoint") is search.search_records:
        logger.error("SEARCH_ERROR invalid request body: %s", exc.errors())
        return await search_error_handler(request, SearchError(f"Invalid request body: {exc}"))
    return await request_validation_exception_handler(request, exc)


app.include_router(health.router, tags=["Health"])
app.include_router(search.router, tags=["Search"])
app.include_router(records.router, tags=["Records"])


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=settings.API_HOST, port=settings.API_PORT)
