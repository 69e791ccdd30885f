from .document_repository import DocumentRepository
from .embedding_provider import EmbeddingProvider

__all__ = [
    "DocumentRepository",
    "EmbeddingProvider",
]
