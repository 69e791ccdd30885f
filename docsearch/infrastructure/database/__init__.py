from .base import Base
from .session import async_session_factory, engine, get_db_session
from .models import DocumentModel, TextChunkModel, VectorRecordModel

__all__ = [
    "Base",
    "engine",
    "async_session_factory",
    "get_db_session",
    "DocumentModel",
    "TextChunkModel",
    "VectorRecordModel",
]
