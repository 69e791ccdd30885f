"""Domain entities for loaded documents — ordered text chunks plus their embeddings."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class TextChunk:
    """A contiguous slice of a document's text, the unit of retrieval."""

    id: str
    text: str


@dataclass(frozen=True)
class VectorRecord:
    """The embedding of one chunk. ``id`` matches a TextChunk id."""

    id: str
    vector: list[float] = field(default_factory=list)

    @property
    def dimensions(self) -> int:
        return len(self.vector)


@dataclass
class Document:
    """A chunked, embedded document.

    Identified externally by its document id (the repository key). Chunk
    order is significant: it defines each chunk's index and its neighbors.
    Vector records whose id matches no chunk are tolerated and ignored by
    ranking.
    """

    text_chunks: list[TextChunk] = field(default_factory=list)
    vector_records: list[VectorRecord] = field(default_factory=list)
    title: str | None = None

    @property
    def chunk_count(self) -> int:
        return len(self.text_chunks)

    def orphan_vector_ids(self) -> list[str]:
        """Ids of vector records that reference no chunk of this document."""
        chunk_ids = {chunk.id for chunk in self.text_chunks}
        return [record.id for record in self.vector_records if record.id not in chunk_ids]


@dataclass
class DocumentSummary:
    """Listing row for a loaded document."""

    id: str
    chunk_count: int
    title: str | None = None
