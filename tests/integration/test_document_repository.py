"""Integration tests for SQLAlchemyDocumentRepository against a file-backed SQLite database."""

from collections.abc import AsyncIterator

import pytest
import pytest_asyncio
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from docsearch.domain.entities import Document, TextChunk, VectorRecord
from docsearch.infrastructure.database import Base, TextChunkModel, VectorRecordModel
from docsearch.infrastructure.database.repositories import SQLAlchemyDocumentRepository
from docsearch.infrastructure.database.session import build_engine


@pytest_asyncio.fixture
async def session_factory(tmp_path) -> AsyncIterator[async_sessionmaker[AsyncSession]]:
    engine = build_engine(f"sqlite:///{tmp_path}/documents.db")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    await engine.dispose()


def _document(*chunk_ids: str, title: str | None = None, dim: int = 3) -> Document:
    return Document(
        title=title,
        text_chunks=[TextChunk(id=cid, text=f"text of {cid}") for cid in chunk_ids],
        vector_records=[
            VectorRecord(id=cid, vector=[float(i + 1)] + [0.5] * (dim - 1))
            for i, cid in enumerate(chunk_ids)
        ],
    )


async def _save(factory, document_id: str, document: Document) -> None:
    async with factory() as session:
        await SQLAlchemyDocumentRepository(session).save(document_id, document)
        await session.commit()


async def _count(factory, model) -> int:
    async with factory() as session:
        result = await session.execute(select(func.count()).select_from(model))
        return result.scalar_one()


@pytest.mark.asyncio
async def test_save_and_find_round_trip(session_factory):
    await _save(session_factory, "doc-1", _document("c0", "c1", "c2", title="Guide"))

    async with session_factory() as session:
        found = await SQLAlchemyDocumentRepository(session).find("doc-1")

    assert found is not None
    assert found.title == "Guide"
    assert [c.id for c in found.text_chunks] == ["c0", "c1", "c2"]
    assert [c.text for c in found.text_chunks] == ["text of c0", "text of c1", "text of c2"]
    vectors = {r.id: r.vector for r in found.vector_records}
    assert vectors["c1"] == [2.0, 0.5, 0.5]


@pytest.mark.asyncio
async def test_chunk_order_survives_storage(session_factory):
    await _save(session_factory, "doc-1", _document("zeta", "alpha", "mid"))

    async with session_factory() as session:
        found = await SQLAlchemyDocumentRepository(session).find("doc-1")

    assert [c.id for c in found.text_chunks] == ["zeta", "alpha", "mid"]


@pytest.mark.asyncio
async def test_find_unknown_returns_none(session_factory):
    async with session_factory() as session:
        assert await SQLAlchemyDocumentRepository(session).find("missing") is None


@pytest.mark.asyncio
async def test_save_overwrites_previous_version(session_factory):
    await _save(session_factory, "doc-1", _document("a", "b", "c", title="Old"))
    await _save(session_factory, "doc-1", _document("x", title="New", dim=2))

    async with session_factory() as session:
        found = await SQLAlchemyDocumentRepository(session).find("doc-1")

    assert found.title == "New"
    assert [c.id for c in found.text_chunks] == ["x"]
    assert [r.vector for r in found.vector_records] == [[1.0, 0.5]]
    assert await _count(session_factory, TextChunkModel) == 1
    assert await _count(session_factory, VectorRecordModel) == 1


@pytest.mark.asyncio
async def test_orphan_vectors_are_stored(session_factory):
    document = _document("a")
    document.vector_records.append(VectorRecord(id="ghost", vector=[0.0, 0.0, 1.0]))
    await _save(session_factory, "doc-1", document)

    async with session_factory() as session:
        found = await SQLAlchemyDocumentRepository(session).find("doc-1")

    assert {r.id for r in found.vector_records} == {"a", "ghost"}


@pytest.mark.asyncio
async def test_get_all_and_exists(session_factory):
    await _save(session_factory, "doc-b", _document("b0"))
    await _save(session_factory, "doc-a", _document("a0", "a1"))

    async with session_factory() as session:
        repository = SQLAlchemyDocumentRepository(session)
        documents = await repository.get_all()

        assert [doc_id for doc_id, _ in documents] == ["doc-a", "doc-b"]
        assert documents[0][1].chunk_count == 2
        assert await repository.exists("doc-a") is True
        assert await repository.exists("doc-z") is False


@pytest.mark.asyncio
async def test_delete_removes_chunks_and_vectors(session_factory):
    await _save(session_factory, "doc-1", _document("a", "b"))
    await _save(session_factory, "doc-2", _document("c"))

    async with session_factory() as session:
        repository = SQLAlchemyDocumentRepository(session)
        assert await repository.delete("doc-1") is True
        assert await repository.delete("doc-1") is False
        await session.commit()

    async with session_factory() as session:
        repository = SQLAlchemyDocumentRepository(session)
        assert await repository.find("doc-1") is None
        assert [doc_id for doc_id, _ in await repository.get_all()] == ["doc-2"]
    assert await _count(session_factory, TextChunkModel) == 1
    assert await _count(session_factory, VectorRecordModel) == 1
