"""Reciprocal rank fusion of two independent candidate rankings."""

from collections.abc import Mapping

# Dampens rank-1 dominance; fixed engine parameter.
RRF_K = 60


def reciprocal_rank_fusion(
    ranking_a: Mapping[int, int],
    ranking_b: Mapping[int, int],
    k: int = RRF_K,
) -> dict[int, float]:
    """Fuse two ``index -> rank`` maps (1-based ranks) into ``index -> score``.

    Every index present in either ranking gets
    ``1/(k + rank_a) + 1/(k + rank_b)``; a ranking that does not contain the
    index contributes nothing for it.
    """
    fused: dict[int, float] = {}
    for index in (*ranking_a, *(i for i in ranking_b if i not in ranking_a)):
        score = 0.0
        if index in ranking_a:
            score += 1.0 / (k + ranking_a[index])
        if index in ranking_b:
            score += 1.0 / (k + ranking_b[index])
        fused[index] = score
    return fused
