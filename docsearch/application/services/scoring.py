"""Scoring strategies — one per SearchMode.

Each strategy ranks every candidate of a DocumentIndex against a query and
returns the full ordered candidate list; truncation to top-K and result
assembly belong to the SearchService.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass

from docsearch.application.interfaces.embedding_provider import EmbeddingProvider
from docsearch.application.services.document_index import DocumentIndex
from docsearch.domain.entities import SearchMode
from docsearch.domain.rank_fusion import reciprocal_rank_fusion
from docsearch.domain.similarity import batch_cosine_rank, jaccard_index
from docsearch.domain.tokenizer import tokenize
from docsearch.infrastructure.logging.colored_logger import SearchLogger, SearchStage

slog = SearchLogger("SearchService")


@dataclass
class ScoredCandidate:
    """One ranked candidate, referring to an entry of the DocumentIndex."""

    index: int
    similarity: float
    semantic_score: float | None = None
    keyword_score: float | None = None


class ScoringStrategy(ABC):
    """Ranks the candidates of an index for a query."""

    mode: SearchMode

    @abstractmethod
    async def rank(self, query: str, index: DocumentIndex) -> list[ScoredCandidate]:
        """Return candidates ordered best-first."""
        ...


class SemanticScoring(ScoringStrategy):
    """Cosine similarity between the query embedding and every chunk vector."""

    mode = SearchMode.SEMANTIC

    def __init__(self, embedding_provider: EmbeddingProvider):
        self._embedding_provider = embedding_provider

    async def rank(self, query: str, index: DocumentIndex) -> list[ScoredCandidate]:
        with slog.timed_step(SearchStage.EMBED, "Embedding query", provider=self._embedding_provider.provider_name):
            query_vector = await self._embedding_provider.embed(query)
        return self.rank_vector(query_vector, index)

    def rank_vector(self, query_vector: list[float], index: DocumentIndex) -> list[ScoredCandidate]:
        """Rank against an already computed query vector."""
        rankings = batch_cosine_rank(index.vectors, index.size, index.dim, query_vector)
        return [
            ScoredCandidate(index=i, similarity=score, semantic_score=score)
            for score, i in rankings
        ]


class KeywordScoring(ScoringStrategy):
    """Jaccard overlap between hashed query tokens and hashed chunk tokens."""

    mode = SearchMode.KEYWORD

    async def rank(self, query: str, index: DocumentIndex) -> list[ScoredCandidate]:
        return [c for c in self.rank_all(query, index) if c.similarity > 0]

    def rank_all(self, query: str, index: DocumentIndex) -> list[ScoredCandidate]:
        """Rank every candidate, zero scores included (stable on index order)."""
        query_tokens = tokenize(query)
        candidates = [
            ScoredCandidate(index=i, similarity=score, keyword_score=score)
            for i, score in enumerate(
                jaccard_index(query_tokens, tokenize(meta.text)) for meta in index.metadata
            )
        ]
        candidates.sort(key=lambda c: c.similarity, reverse=True)
        return candidates


class HybridScoring(ScoringStrategy):
    """Reciprocal rank fusion of the full semantic and full keyword rankings."""

    mode = SearchMode.HYBRID

    def __init__(self, semantic: SemanticScoring, keyword: KeywordScoring):
        self._semantic = semantic
        self._keyword = keyword

    async def rank(self, query: str, index: DocumentIndex) -> list[ScoredCandidate]:
        semantic = await self._semantic.rank(query, index)
        keyword = self._keyword.rank_all(query, index)

        semantic_ranks = {c.index: position for position, c in enumerate(semantic, start=1)}
        keyword_ranks = {c.index: position for position, c in enumerate(keyword, start=1)}
        semantic_scores = {c.index: c.similarity for c in semantic}
        keyword_scores = {c.index: c.similarity for c in keyword}

        with slog.timed_step(SearchStage.FUSE, "Fusing rankings", semantic=len(semantic), keyword=len(keyword)):
            fused = reciprocal_rank_fusion(semantic_ranks, keyword_ranks)
            ordered = sorted(fused.items(), key=lambda item: (-item[1], item[0]))
        return [
            ScoredCandidate(
                index=i,
                similarity=score,
                semantic_score=semantic_scores.get(i),
                keyword_score=keyword_scores.get(i),
            )
            for i, score in ordered
        ]


def build_strategy(mode: SearchMode, embedding_provider: EmbeddingProvider) -> ScoringStrategy:
    """Select the scoring strategy for ``mode``."""
    if mode == SearchMode.KEYWORD:
        return KeywordScoring()
    semantic = SemanticScoring(embedding_provider)
    if mode == SearchMode.HYBRID:
        return HybridScoring(semantic, KeywordScoring())
    return semantic
