"""Application service (use case) for loading and browsing documents."""

import logging

from docsearch.application.interfaces import DocumentRepository
from docsearch.domain.entities import Document, DocumentSummary
from docsearch.domain.exceptions import (
    DimensionMismatchError,
    DuplicateIdError,
    EntityNotFoundError,
)

logger = logging.getLogger(__name__)


class DocumentService:
    """Orchestrates document loading and listing. Depends on the repository port (DI)."""

    def __init__(self, repository: DocumentRepository):
        self._repository = repository

    async def load_document(self, document_id: str, document: Document) -> list[str]:
        """Store ``document`` under ``document_id``, replacing any previous version.

        Returns:
            Ids of vector records that match no chunk. They are stored but
            never ranked.

        Raises:
            DuplicateIdError: If a chunk id or vector id repeats.
            DimensionMismatchError: If the document's vectors differ in length.
        """
        self._reject_duplicates("chunk", [chunk.id for chunk in document.text_chunks])
        self._reject_duplicates("vector", [record.id for record in document.vector_records])

        if document.vector_records:
            expected = document.vector_records[0].dimensions
            for record in document.vector_records:
                if record.dimensions != expected:
                    raise DimensionMismatchError(
                        expected, record.dimensions, f"document '{document_id}', chunk '{record.id}'"
                    )

        orphans = document.orphan_vector_ids()
        if orphans:
            logger.warning(
                "Document %s has %d vector record(s) without a matching chunk",
                document_id,
                len(orphans),
            )

        await self._repository.save(document_id, document)
        logger.info(
            "Loaded document %s (%d chunks, %d vectors)",
            document_id,
            document.chunk_count,
            len(document.vector_records),
        )
        return orphans

    async def list_documents(self) -> list[DocumentSummary]:
        return [
            DocumentSummary(id=doc_id, title=document.title, chunk_count=document.chunk_count)
            for doc_id, document in await self._repository.get_all()
        ]

    async def get_document(self, document_id: str) -> Document:
        document = await self._repository.find(document_id)
        if document is None:
            raise EntityNotFoundError("Document", document_id)
        return document

    async def delete_document(self, document_id: str) -> bool:
        if not await self._repository.exists(document_id):
            raise EntityNotFoundError("Document", document_id)
        return await self._repository.delete(document_id)

    # ── Private helpers ──────────────────────────────────────────────

    @staticmethod
    def _reject_duplicates(kind: str, ids: list[str]) -> None:
        seen: set[str] = set()
        duplicates: list[str] = []
        for item_id in ids:
            if item_id in seen and item_id not in duplicates:
                duplicates.append(item_id)
            seen.add(item_id)
        if duplicates:
            raise DuplicateIdError(kind, duplicates)
