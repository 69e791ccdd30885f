"""Document endpoints — load (full overwrite), list, inspect and delete."""

from fastapi import APIRouter, Depends, HTTPException, status

from docsearch.application.schemas import (
    DocumentDetailResponse,
    DocumentListResponse,
    DocumentLoadRequest,
    DocumentLoadResponse,
    DocumentSummarySchema,
    TextChunkSchema,
)
from docsearch.application.services import DocumentService
from docsearch.domain.exceptions import DimensionMismatchError, DuplicateIdError, EntityNotFoundError
from docsearch.infrastructure.dependencies import get_document_service

router = APIRouter(prefix="/documents", tags=["Documents"])


@router.get("", response_model=DocumentListResponse)
async def list_documents(
    service: DocumentService = Depends(get_document_service),
) -> DocumentListResponse:
    """List loaded documents with their chunk counts."""
    documents = await service.list_documents()
    return DocumentListResponse(
        documents=[DocumentSummarySchema.model_validate(d, from_attributes=True) for d in documents],
        total=len(documents),
    )


@router.post("/{document_id}", response_model=DocumentLoadResponse)
async def load_document(
    document_id: str,
    data: DocumentLoadRequest,
    service: DocumentService = Depends(get_document_service),
) -> DocumentLoadResponse:
    """Load a chunked, embedded document, replacing any document with the same id."""
    document = data.to_entity()
    try:
        skipped = await service.load_document(document_id, document)
    except (DimensionMismatchError, DuplicateIdError) as e:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(e))
    return DocumentLoadResponse(
        message=f"Document '{document_id}' loaded successfully",
        document_id=document_id,
        chunks=document.chunk_count,
        vectors=len(document.vector_records),
        skipped_vectors=skipped,
    )


@router.get("/{document_id}", response_model=DocumentDetailResponse)
async def get_document(
    document_id: str,
    service: DocumentService = Depends(get_document_service),
) -> DocumentDetailResponse:
    """Retrieve a single document with its ordered chunks."""
    try:
        document = await service.get_document(document_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return DocumentDetailResponse(
        id=document_id,
        title=document.title,
        chunk_count=document.chunk_count,
        vector_count=len(document.vector_records),
        dimensions=document.vector_records[0].dimensions if document.vector_records else None,
        text_chunks=[TextChunkSchema(id=c.id, text=c.text) for c in document.text_chunks],
    )


@router.delete("/{document_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_document(
    document_id: str,
    service: DocumentService = Depends(get_document_service),
) -> None:
    """Delete a document together with its chunks and vectors."""
    try:
        await service.delete_document(document_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
