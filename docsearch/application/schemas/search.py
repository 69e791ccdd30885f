"""Pydantic schemas for search API requests and responses."""

from pydantic import BaseModel, Field, field_validator

from docsearch.domain.entities import SearchMode


# ── Request Schemas ──────────────────────────────────────────────────


class SearchRequest(BaseModel):
    """Request body for a ranked chunk search."""

    query: str = Field(..., min_length=1, description="Free-text query")
    top_k: int = Field(default=5, ge=1, le=100, description="Maximum number of results")
    document_id: str | None = Field(default=None, description="Restrict the search to one document")
    mode: SearchMode = Field(default=SearchMode.SEMANTIC, description="semantic | keyword | hybrid")

    @field_validator("query")
    @classmethod
    def _strip_query(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("query must not be blank")
        return value


# ── Response Schemas ─────────────────────────────────────────────────


class NeighborChunksSchema(BaseModel):
    prev: str | None = None
    next: str | None = None


class SearchResultSchema(BaseModel):
    """A single ranked chunk."""

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
    highlights: list[str] = []
    neighbor_chunks: NeighborChunksSchema = NeighborChunksSchema()

    model_config = {"from_attributes": True}


class SearchResponse(BaseModel):
    """Ranked results for a query."""

    query: str
    mode: SearchMode
    results: list[SearchResultSchema] = []
    count: int = 0
