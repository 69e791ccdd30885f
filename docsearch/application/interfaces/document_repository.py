"""Abstract repository interface (port) for chunked documents."""

from abc import ABC, abstractmethod

from docsearch.domain.entities import Document


class DocumentRepository(ABC):
    """Port for document persistence — implemented in the infrastructure layer.

    Documents are stored and replaced wholesale, keyed by document id.
    """

    @abstractmethod
    async def save(self, document_id: str, document: Document) -> None:
        """Create or fully overwrite the document stored under ``document_id``."""
        ...

    @abstractmethod
    async def find(self, document_id: str) -> Document | None:
        """Retrieve a document with its chunks in sequence order."""
        ...

    @abstractmethod
    async def get_all(self) -> list[tuple[str, Document]]:
        """Retrieve every stored document as ``(document_id, document)`` pairs."""
        ...

    @abstractmethod
    async def exists(self, document_id: str) -> bool:
        """Whether a document is stored under ``document_id``."""
        ...

    @abstractmethod
    async def delete(self, document_id: str) -> bool:
        """Delete a document with its chunks and vectors. Returns False if not found."""
        ...
