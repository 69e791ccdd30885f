"""Unit tests for the document index builder."""

import pytest

from docsearch.application.services.document_index import build_document_index
from docsearch.domain.entities import Document, TextChunk, VectorRecord
from docsearch.domain.exceptions import DimensionMismatchError


def _document(title: str | None = None) -> Document:
    return Document(
        title=title,
        text_chunks=[
            TextChunk(id="c0", text="first chunk"),
            TextChunk(id="c1", text="second chunk"),
            TextChunk(id="c2", text="third chunk"),
        ],
        vector_records=[
            VectorRecord(id="c0", vector=[1.0, 0.0]),
            VectorRecord(id="c1", vector=[0.0, 1.0]),
            VectorRecord(id="c2", vector=[0.5, 0.5]),
        ],
    )


def test_flattens_metadata_and_vectors_in_parallel():
    index = build_document_index([("doc-1", _document("Guide"))])

    assert index.size == 3
    assert index.dim == 2
    assert list(index.vectors) == [1.0, 0.0, 0.0, 1.0, 0.5, 0.5]
    assert [m.chunk_id for m in index.metadata] == ["c0", "c1", "c2"]
    assert all(m.doc_id == "doc-1" and m.doc_title == "Guide" for m in index.metadata)
    assert all(m.total_chunks == 3 for m in index.metadata)


def test_neighbor_links_follow_chunk_order():
    index = build_document_index([("doc-1", _document())])
    first, middle, last = index.metadata

    assert (first.prev_chunk_id, first.next_chunk_id) == (None, "c1")
    assert (middle.prev_chunk_id, middle.next_chunk_id) == ("c0", "c2")
    assert (last.prev_chunk_id, last.next_chunk_id) == ("c1", None)


def test_chunk_index_comes_from_chunk_order_not_vector_order():
    document = _document()
    document.vector_records.reverse()
    index = build_document_index([("doc-1", document)])

    assert [(m.chunk_id, m.chunk_index) for m in index.metadata] == [("c2", 2), ("c1", 1), ("c0", 0)]


def test_vector_without_chunk_is_skipped():
    document = _document()
    document.vector_records.append(VectorRecord(id="ghost", vector=[1.0, 1.0]))
    index = build_document_index([("doc-1", document)])

    assert index.size == 3
    assert "ghost" not in {m.chunk_id for m in index.metadata}
    assert len(index.vectors) == 6


def test_chunk_without_vector_counts_toward_total_but_is_not_indexed():
    document = _document()
    document.text_chunks.append(TextChunk(id="c3", text=""))
    index = build_document_index([("doc-1", document)])

    assert index.size == 3
    assert index.metadata[-1].next_chunk_id == "c3"
    assert all(m.total_chunks == 4 for m in index.metadata)


def test_empty_collection_gives_empty_index():
    index = build_document_index([])
    assert index.is_empty
    assert index.dim == 0
    assert len(index.vectors) == 0


def test_documents_without_vectors_give_empty_index():
    document = Document(text_chunks=[TextChunk(id="c0", text="lonely")])
    assert build_document_index([("doc-1", document)]).is_empty


def test_multiple_documents_are_concatenated():
    index = build_document_index([("a", _document()), ("b", _document())])
    assert index.size == 6
    assert [m.doc_id for m in index.metadata] == ["a"] * 3 + ["b"] * 3


def test_mixed_dimensions_across_documents_are_rejected():
    other = Document(
        text_chunks=[TextChunk(id="x0", text="wide")],
        vector_records=[VectorRecord(id="x0", vector=[1.0, 0.0, 0.0])],
    )
    with pytest.raises(DimensionMismatchError) as exc_info:
        build_document_index([("doc-1", _document()), ("doc-2", other)])
    assert exc_info.value.expected == 2
    assert exc_info.value.actual == 3
