"""Document index builder — flattens scoped documents into ranking-ready arrays.

Produces, for one search call:
1. one VectorMetadata entry per vector record that resolves to a chunk, and
2. a single contiguous float64 buffer holding every vector, ``dim`` floats
   per entry, in the same order as the metadata.
"""

import logging
from array import array
from collections.abc import Iterable
from dataclasses import dataclass, field

from docsearch.domain.entities import Document, VectorMetadata
from docsearch.domain.exceptions import DimensionMismatchError

logger = logging.getLogger(__name__)


@dataclass
class DocumentIndex:
    """Parallel metadata + flat vector buffer for one retrieval call."""

    metadata: list[VectorMetadata] = field(default_factory=list)
    vectors: array = field(default_factory=lambda: array("d"))
    dim: int = 0

    @property
    def size(self) -> int:
        return len(self.metadata)

    @property
    def is_empty(self) -> bool:
        return not self.metadata


def build_document_index(documents: Iterable[tuple[str, Document]]) -> DocumentIndex:
    """Flatten ``(document_id, document)`` pairs into a DocumentIndex.

    Vector records referencing an unknown chunk are skipped. All vectors must
    share one dimensionality across the scoped set.

    Raises:
        DimensionMismatchError: If two vectors in scope differ in length.
    """
    index = DocumentIndex()
    dim: int | None = None
    skipped = 0

    for doc_id, document in documents:
        chunks = document.text_chunks
        total_chunks = len(chunks)
        positions = {chunk.id: i for i, chunk in enumerate(chunks)}

        for record in document.vector_records:
            position = positions.get(record.id)
            if position is None:
                skipped += 1
                continue

            if dim is None:
                dim = len(record.vector)
            elif len(record.vector) != dim:
                raise DimensionMismatchError(
                    dim,
                    len(record.vector),
                    f"document '{doc_id}', chunk '{record.id}'",
                )

            index.metadata.append(
                VectorMetadata(
                    doc_id=doc_id,
                    doc_title=document.title,
                    chunk_id=record.id,
                    chunk_index=position,
                    total_chunks=total_chunks,
                    text=chunks[position].text,
                    prev_chunk_id=chunks[position - 1].id if position > 0 else None,
                    next_chunk_id=chunks[position + 1].id if position + 1 < total_chunks else None,
                )
            )
            index.vectors.extend(record.vector)

    index.dim = dim or 0
    if skipped:
        logger.warning("Skipped %d vector record(s) without a matching chunk", skipped)
    return index
