from .document import (
    DocumentDetailResponse,
    DocumentListResponse,
    DocumentLoadRequest,
    DocumentLoadResponse,
    DocumentSummarySchema,
    TextChunkSchema,
    VectorRecordSchema,
)
from .search import (
    NeighborChunksSchema,
    SearchRequest,
    SearchResponse,
    SearchResultSchema,
)

__all__ = [
    "DocumentDetailResponse",
    "DocumentListResponse",
    "DocumentLoadRequest",
    "DocumentLoadResponse",
    "DocumentSummarySchema",
    "TextChunkSchema",
    "VectorRecordSchema",
    "NeighborChunksSchema",
    "SearchRequest",
    "SearchResponse",
    "SearchResultSchema",
]
