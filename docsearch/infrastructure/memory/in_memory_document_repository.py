"""Process-local DocumentRepository backed by a dict."""

from docsearch.application.interfaces.document_repository import DocumentRepository
from docsearch.domain.entities import Document


class InMemoryDocumentRepository(DocumentRepository):
    """Keeps documents in memory. Each save replaces the stored document in one assignment."""

    def __init__(self) -> None:
        self._documents: dict[str, Document] = {}

    async def save(self, document_id: str, document: Document) -> None:
        self._documents[document_id] = document

    async def find(self, document_id: str) -> Document | None:
        return self._documents.get(document_id)

    async def get_all(self) -> list[tuple[str, Document]]:
        return list(self._documents.items())

    async def exists(self, document_id: str) -> bool:
        return document_id in self._documents

    async def delete(self, document_id: str) -> bool:
        return self._documents.pop(document_id, None) is not None
