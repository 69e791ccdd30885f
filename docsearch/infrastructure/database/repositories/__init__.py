from .document_repository import SQLAlchemyDocumentRepository

__all__ = [
    "SQLAlchemyDocumentRepository",
]
