from .document import Document, DocumentSummary, TextChunk, VectorRecord
from .search import NeighborChunks, SearchMode, SearchResult, VectorMetadata

__all__ = [
    "Document",
    "DocumentSummary",
    "TextChunk",
    "VectorRecord",
    "NeighborChunks",
    "SearchMode",
    "SearchResult",
    "VectorMetadata",
]
