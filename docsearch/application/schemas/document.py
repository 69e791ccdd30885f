"""Pydantic DTOs (Data Transfer Objects) for loading and listing documents."""

from pydantic import BaseModel, ConfigDict, Field

from docsearch.domain.entities import Document, TextChunk, VectorRecord


# ── Request Schemas ──────────────────────────────────────────────────


class TextChunkSchema(BaseModel):
    """A chunk as produced by the external segmenter."""

    id: str = Field(..., min_length=1)
    text: str


class VectorRecordSchema(BaseModel):
    """The embedding of one chunk."""

    id: str = Field(..., min_length=1)
    vector: list[float]


class DocumentLoadRequest(BaseModel):
    """Request body for loading a document.

    Accepts the segmenter's camelCase JSON (``textChunks``/``vectorRecords``)
    as well as snake_case field names.
    """

    model_config = ConfigDict(populate_by_name=True)

    title: str | None = None
    text_chunks: list[TextChunkSchema] = Field(..., alias="textChunks")
    vector_records: list[VectorRecordSchema] = Field(..., alias="vectorRecords")

    def to_entity(self) -> Document:
        return Document(
            title=self.title,
            text_chunks=[TextChunk(id=c.id, text=c.text) for c in self.text_chunks],
            vector_records=[VectorRecord(id=r.id, vector=r.vector) for r in self.vector_records],
        )


# ── Response Schemas ─────────────────────────────────────────────────


class DocumentLoadResponse(BaseModel):
    """Returned after a document has been stored."""

    message: str
    document_id: str
    chunks: int
    vectors: int
    skipped_vectors: list[str] = []


class DocumentSummarySchema(BaseModel):
    """One row of the document listing."""

    id: str
    title: str | None = None
    chunk_count: int

    model_config = {"from_attributes": True}


class DocumentListResponse(BaseModel):
    documents: list[DocumentSummarySchema] = []
    total: int = 0


class DocumentDetailResponse(BaseModel):
    """A stored document with its ordered chunks."""

    id: str
    title: str | None = None
    chunk_count: int
    vector_count: int
    dimensions: int | None = None
    text_chunks: list[TextChunkSchema] = []
