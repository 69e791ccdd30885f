"""FastAPI application factory."""

import logging
from contextlib import asynccontextmanager
from collections.abc import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from docsearch.config import get_settings
from docsearch.infrastructure.database import Base, engine
from docsearch.infrastructure.database.session import ensure_sqlite_directory
from docsearch.infrastructure.logging.log_config import setup_logging
from docsearch.presentation.api.v1.router import router as v1_router

logger = logging.getLogger(__name__)


async def _create_tables() -> None:
    """Create the documents / text_chunks / vector_records tables if missing."""
    settings = get_settings()
    ensure_sqlite_directory(settings.database_url)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Document tables ready (%s)", engine.url.render_as_string(hide_password=True))


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan — configure logging, prepare the document store."""
    settings = get_settings()
    setup_logging()

    if settings.document_store == "database":
        await _create_tables()
    else:
        logger.info("Using in-memory document store; documents are lost on restart")

    if not settings.embedding_api_key.strip():
        logger.warning(
            "EMBEDDING_API_KEY is not configured; semantic and hybrid search will fail."
        )

    yield

    await engine.dispose()


def create_app() -> FastAPI:
    """Factory function that builds and configures the FastAPI application."""
    settings = get_settings()

    app = FastAPI(
        title=settings.app_title,
        version=settings.app_version,
        lifespan=lifespan,
    )

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Mount API routes
    app.include_router(v1_router, prefix="/api")

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "docsearch.main:app",
        host="0.0.0.0",
        port=3001,
        reload=True,
    )
