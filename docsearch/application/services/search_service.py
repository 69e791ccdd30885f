"""Search service — ranked retrieval over loaded document chunks.

Flow for one call:
  1. Resolve the document scope (one document or the whole collection).
  2. Flatten it into a DocumentIndex (metadata + flat vector buffer).
  3. Rank with the strategy for the requested mode (semantic/keyword/hybrid).
  4. Cut to top-K and assemble SearchResults with highlights and neighbors.

The only await after the repository read is the query embedding
(semantic and hybrid modes). Nothing is cached and the repository is never
written to.
"""

import logging

from docsearch.application.interfaces.document_repository import DocumentRepository
from docsearch.application.interfaces.embedding_provider import EmbeddingProvider
from docsearch.application.services.document_index import DocumentIndex, build_document_index
from docsearch.application.services.scoring import ScoredCandidate, build_strategy
from docsearch.domain.entities import Document, NeighborChunks, SearchMode, SearchResult
from docsearch.domain.tokenizer import extract_highlights
from docsearch.infrastructure.logging.colored_logger import SearchLogger, SearchStage

logger = logging.getLogger(__name__)
slog = SearchLogger("SearchService")


class SearchService:
    """Application service for ranked chunk retrieval.

    Collaborators are passed in explicitly; the service holds no state
    between calls, so concurrent searches are safe.
    """

    def __init__(
        self,
        embedding_provider: EmbeddingProvider,
        document_repository: DocumentRepository,
    ):
        self._embedding_provider = embedding_provider
        self._document_repository = document_repository

    async def search(
        self,
        query: str,
        top_k: int = 5,
        document_id: str | None = None,
        mode: SearchMode | str = SearchMode.SEMANTIC,
    ) -> list[SearchResult]:
        """Rank chunks against ``query`` and return at most ``top_k`` results.

        An unknown ``document_id`` or an empty collection yields ``[]``.

        Raises:
            EmbeddingUnavailableError: The query could not be embedded
                (semantic/hybrid only).
            DimensionMismatchError: Stored vectors in scope, or the query
                vector, disagree on dimensionality.
            ValueError: ``mode`` is not a known SearchMode.
        """
        mode = SearchMode(mode)
        if top_k <= 0:
            return []

        documents = await self._documents_in_scope(document_id)

        with slog.timed_step(SearchStage.INDEX, "Flattening documents", documents=len(documents)):
            index = build_document_index(documents)
        if index.is_empty:
            logger.info(
                "Search skipped: no vector records in scope (document_id=%s)", document_id
            )
            return []
        slog.detail("Index built", candidates=index.size, dim=index.dim)

        strategy = build_strategy(mode, self._embedding_provider)
        with slog.timed_step(SearchStage.RANK, f"Ranking ({strategy.mode.value})", candidates=index.size):
            candidates = await strategy.rank(query, index)

        with slog.timed_step(SearchStage.ASSEMBLE, "Assembling results", top_k=top_k):
            results = self._assemble(candidates[:top_k], index, query)

        slog.stats(mode=strategy.mode.value, candidates=index.size, returned=len(results))
        return results

    # ── Private helpers ──────────────────────────────────────────────

    async def _documents_in_scope(self, document_id: str | None) -> list[tuple[str, Document]]:
        if document_id:
            document = await self._document_repository.find(document_id)
            return [(document_id, document)] if document is not None else []
        return await self._document_repository.get_all()

    @staticmethod
    def _assemble(
        candidates: list[ScoredCandidate],
        index: DocumentIndex,
        query: str,
    ) -> list[SearchResult]:
        results: list[SearchResult] = []
        for rank, candidate in enumerate(candidates, start=1):
            meta = index.metadata[candidate.index]
            results.append(
                SearchResult(
                    id=meta.chunk_id,
                    text=meta.text,
                    similarity=candidate.similarity,
                    document_id=meta.doc_id,
                    rank=rank,
                    chunk_index=meta.chunk_index,
                    total_chunks=meta.total_chunks,
                    semantic_score=candidate.semantic_score,
                    keyword_score=candidate.keyword_score,
                    document_title=meta.doc_title,
                    highlights=extract_highlights(meta.text, query),
                    neighbor_chunks=NeighborChunks(
                        prev=meta.prev_chunk_id,
                        next=meta.next_chunk_id,
                    ),
                )
            )
        return results
