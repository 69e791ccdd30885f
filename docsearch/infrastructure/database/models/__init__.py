from .document_models import DocumentModel, TextChunkModel, VectorRecordModel

__all__ = [
    "DocumentModel",
    "TextChunkModel",
    "VectorRecordModel",
]
