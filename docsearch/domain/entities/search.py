"""Domain entities for ranked retrieval over chunked documents."""

from dataclasses import dataclass, field
from enum import Enum


class SearchMode(str, Enum):
    """Scoring strategy selected by the caller."""

    SEMANTIC = "semantic"
    KEYWORD = "keyword"
    HYBRID = "hybrid"


@dataclass(frozen=True)
class VectorMetadata:
    """Per-chunk context captured while flattening documents for one search call.

    Never persisted — rebuilt on every call from the chunk order of the
    owning document.
    """

    doc_id: str
    chunk_id: str
    chunk_index: int
    total_chunks: int
    text: str
    doc_title: str | None = None
    prev_chunk_id: str | None = None
    next_chunk_id: str | None = None


@dataclass
class NeighborChunks:
    """Ids of the chunks immediately before/after a result chunk."""

    prev: str | None = None
    next: str | None = None


@dataclass
class SearchResult:
    """A single ranked chunk returned by the retrieval engine.

    ``similarity`` is mode-dependent: cosine (semantic), Jaccard (keyword)
    or the reciprocal-rank-fusion score (hybrid).
    """

    id: str
    text: str
    similarity: float
    document_id: str
    rank: int
    chunk_index: int
    total_chunks: int
    semantic_score: float | None = None
    keyword_score: float | None = None
    document_title: str | None = None
    highlights: list[str] = field(default_factory=list)
    neighbor_chunks: NeighborChunks = field(default_factory=NeighborChunks)
