"""FastAPI dependency injection — wires infrastructure to application layer."""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from functools import lru_cache

from fastapi import Depends

from docsearch.config import get_settings
from docsearch.application.interfaces import DocumentRepository, EmbeddingProvider
from docsearch.application.services import DocumentService, SearchService
from docsearch.infrastructure.database.repositories import SQLAlchemyDocumentRepository
from docsearch.infrastructure.database.session import get_db_session
from docsearch.infrastructure.memory import InMemoryDocumentRepository
from docsearch.infrastructure.openai import OpenAIEmbeddingProvider


@lru_cache
def get_in_memory_repository() -> InMemoryDocumentRepository:
    """Process-wide in-memory document store (used when document_store == "memory")."""
    return InMemoryDocumentRepository()


async def get_document_repository() -> AsyncGenerator[DocumentRepository, None]:
    """Provides the configured DocumentRepository.

    The SQL repository gets a session per request that commits on success
    and rolls back on error.
    """
    settings = get_settings()
    if settings.document_store == "memory":
        yield get_in_memory_repository()
        return

    async with asynccontextmanager(get_db_session)() as session:
        yield SQLAlchemyDocumentRepository(session)


def get_embedding_provider() -> EmbeddingProvider:
    """Provides the OpenAI-compatible embedding provider configured in Settings."""
    settings = get_settings()
    return OpenAIEmbeddingProvider(
        api_key=settings.embedding_api_key,
        base_url=settings.embedding_base_url,
        model=settings.embedding_model,
        dimensions=settings.embedding_dimensions,
        timeout=settings.embedding_timeout,
    )


async def get_document_service(
    repository: DocumentRepository = Depends(get_document_repository),
) -> AsyncGenerator[DocumentService, None]:
    """Provides a DocumentService instance with its repository wired up."""
    yield DocumentService(repository)


async def get_search_service(
    repository: DocumentRepository = Depends(get_document_repository),
    embedding_provider: EmbeddingProvider = Depends(get_embedding_provider),
) -> AsyncGenerator[SearchService, None]:
    """Provides a SearchService with the embedding provider and document repository."""
    yield SearchService(
        embedding_provider=embedding_provider,
        document_repository=repository,
    )
