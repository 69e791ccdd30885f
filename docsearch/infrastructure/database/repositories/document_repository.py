"""SQLAlchemy implementation of DocumentRepository — relational documents/chunks/vectors."""

import logging

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from docsearch.application.interfaces import DocumentRepository
from docsearch.domain.entities import Document, TextChunk, VectorRecord
from docsearch.infrastructure.database.models import (
    DocumentModel,
    TextChunkModel,
    VectorRecordModel,
)

logger = logging.getLogger(__name__)


class SQLAlchemyDocumentRepository(DocumentRepository):
    """Implements the DocumentRepository port using SQLAlchemy async sessions.

    Writes are flushed into the caller's transaction; committing is the
    session owner's job (``get_db_session`` per request).
    """

    def __init__(self, session: AsyncSession):
        self._session = session

    async def save(self, document_id: str, document: Document) -> None:
        """Replace the stored document wholesale: delete children and parent, then insert."""
        await self._delete_rows(document_id)

        self._session.add(DocumentModel(id=document_id, title=document.title))
        self._session.add_all(
            TextChunkModel(
                document_id=document_id,
                chunk_id=chunk.id,
                chunk_index=i,
                text=chunk.text,
            )
            for i, chunk in enumerate(document.text_chunks)
        )
        self._session.add_all(
            VectorRecordModel(
                document_id=document_id,
                chunk_id=record.id,
                vector=list(record.vector),
            )
            for record in document.vector_records
        )
        await self._session.flush()
        logger.info(
            "Stored document %s: %d chunks, %d vectors",
            document_id,
            len(document.text_chunks),
            len(document.vector_records),
        )

    async def find(self, document_id: str) -> Document | None:
        model = await self._session.get(DocumentModel, document_id)
        if model is None:
            return None
        return await self._load_document(model)

    async def get_all(self) -> list[tuple[str, Document]]:
        result = await self._session.execute(select(DocumentModel).order_by(DocumentModel.id))
        documents: list[tuple[str, Document]] = []
        for model in result.scalars().all():
            documents.append((model.id, await self._load_document(model)))
        return documents

    async def exists(self, document_id: str) -> bool:
        result = await self._session.execute(
            select(DocumentModel.id).where(DocumentModel.id == document_id)
        )
        return result.scalar_one_or_none() is not None

    async def delete(self, document_id: str) -> bool:
        deleted = await self._delete_rows(document_id)
        if deleted:
            logger.info("Deleted document %s", document_id)
        return deleted

    # ── Private helpers ──────────────────────────────────────────────

    async def _load_document(self, model: DocumentModel) -> Document:
        """Map ORM rows → domain entity, chunks ordered by chunk_index."""
        chunks = await self._session.execute(
            select(TextChunkModel.chunk_id, TextChunkModel.text)
            .where(TextChunkModel.document_id == model.id)
            .order_by(TextChunkModel.chunk_index.asc())
        )
        vectors = await self._session.execute(
            select(VectorRecordModel.chunk_id, VectorRecordModel.vector)
            .where(VectorRecordModel.document_id == model.id)
        )
        return Document(
            title=model.title,
            text_chunks=[TextChunk(id=row.chunk_id, text=row.text) for row in chunks.all()],
            vector_records=[
                VectorRecord(id=row.chunk_id, vector=[float(v) for v in row.vector])
                for row in vectors.all()
            ],
        )

    async def _delete_rows(self, document_id: str) -> bool:
        """Delete a document and cascade to its chunks and vectors explicitly.

        SQLite only enforces ON DELETE CASCADE with the foreign_keys pragma on,
        so child rows are removed by hand.
        """
        await self._session.execute(
            delete(VectorRecordModel).where(VectorRecordModel.document_id == document_id)
        )
        await self._session.execute(
            delete(TextChunkModel).where(TextChunkModel.document_id == document_id)
        )
        result = await self._session.execute(
            delete(DocumentModel).where(DocumentModel.id == document_id)
        )
        return result.rowcount > 0
