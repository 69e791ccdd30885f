from .document_index import DocumentIndex, build_document_index
from .document_service import DocumentService
from .scoring import (
    HybridScoring,
    KeywordScoring,
    ScoredCandidate,
    ScoringStrategy,
    SemanticScoring,
    build_strategy,
)
from .search_service import SearchService

__all__ = [
    "DocumentIndex",
    "build_document_index",
    "DocumentService",
    "HybridScoring",
    "KeywordScoring",
    "ScoredCandidate",
    "ScoringStrategy",
    "SemanticScoring",
    "build_strategy",
    "SearchService",
]
