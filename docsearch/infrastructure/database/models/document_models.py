"""SQLAlchemy ORM models for documents, their ordered chunks and vector records."""

from sqlalchemy import JSON, ForeignKey, Index, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from docsearch.infrastructure.database.base import Base


class DocumentModel(Base):
    """ORM model — one row per loaded document, keyed by the external document id."""

    __tablename__ = "documents"

    id: Mapped[str] = mapped_column(String(255), primary_key=True)
    title: Mapped[str | None] = mapped_column(Text, nullable=True)

    text_chunks: Mapped[list["TextChunkModel"]] = relationship(
        back_populates="document",
        cascade="all, delete-orphan",
        order_by="TextChunkModel.chunk_index",
    )
    vector_records: Mapped[list["VectorRecordModel"]] = relationship(
        back_populates="document",
        cascade="all, delete-orphan",
    )

    def __repr__(self) -> str:
        return f"<DocumentModel(id='{self.id}', title='{self.title}')>"


class TextChunkModel(Base):
    """A chunk of document text; ``chunk_index`` preserves the segmenter's order."""

    __tablename__ = "text_chunks"

    document_id: Mapped[str] = mapped_column(
        String(255),
        ForeignKey("documents.id", ondelete="CASCADE"),
        primary_key=True,
    )
    chunk_id: Mapped[str] = mapped_column(String(255), primary_key=True)
    chunk_index: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    text: Mapped[str] = mapped_column(Text, nullable=False)

    document: Mapped[DocumentModel] = relationship(back_populates="text_chunks")

    __table_args__ = (
        Index("idx_chunks_doc", "document_id"),
    )


class VectorRecordModel(Base):
    """The embedding of one chunk, stored as an ordered JSON array of floats."""

    __tablename__ = "vector_records"

    document_id: Mapped[str] = mapped_column(
        String(255),
        ForeignKey("documents.id", ondelete="CASCADE"),
        primary_key=True,
    )
    chunk_id: Mapped[str] = mapped_column(String(255), primary_key=True)
    vector: Mapped[list[float]] = mapped_column(JSON, nullable=False)

    document: Mapped[DocumentModel] = relationship(back_populates="vector_records")

    __table_args__ = (
        Index("idx_vectors_doc", "document_id"),
    )
