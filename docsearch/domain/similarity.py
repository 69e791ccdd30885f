"""Numeric similarity kernels — cosine over vectors, Jaccard over hashed token sets.

All kernels are pure functions. Vector work goes through numpy; the batch
kernel reads candidates straight out of one flat float64 buffer.
"""

from collections.abc import Sequence
from typing import Any

import numpy as np

from docsearch.domain.exceptions import DimensionMismatchError

_INT32_MASK = 0xFFFFFFFF
_INT32_SIGN = 0x80000000


def cosine_similarity(a: Sequence[float], b: Sequence[float]) -> float:
    """Cosine of the angle between two equal-length vectors.

    Returns 0.0 when either vector has zero magnitude.
    """
    va = np.asarray(a, dtype=np.float64)
    vb = np.asarray(b, dtype=np.float64)
    if va.shape[0] != vb.shape[0]:
        raise DimensionMismatchError(va.shape[0], vb.shape[0], "cosine_similarity")

    norm = float(np.linalg.norm(va) * np.linalg.norm(vb))
    if norm == 0.0:
        return 0.0
    return float(np.clip(np.dot(va, vb) / norm, -1.0, 1.0))


def batch_cosine_rank(
    vectors: Any,
    n: int,
    dim: int,
    query: Sequence[float],
) -> list[tuple[float, int]]:
    """Score ``n`` candidate vectors against ``query`` and rank them.

    Args:
        vectors: Flat buffer of ``n * dim`` floats (``array('d')``, list or
            ndarray). Row ``i`` starts at offset ``i * dim``.
        n: Number of candidates.
        dim: Dimensionality of every candidate.
        query: Query vector of length ``dim``.

    Returns:
        ``(score, original_index)`` pairs sorted by score descending, ties
        broken by index ascending.
    """
    if n <= 0:
        return []

    flat = np.asarray(vectors, dtype=np.float64)
    if flat.shape[0] != n * dim:
        raise DimensionMismatchError(n * dim, flat.shape[0], "flat vector buffer")
    q = np.asarray(query, dtype=np.float64)
    if q.shape[0] != dim:
        raise DimensionMismatchError(dim, q.shape[0], "query vector")

    # View over the buffer, one row per candidate.
    matrix = flat.reshape(n, dim)
    norms = np.linalg.norm(matrix, axis=1) * np.linalg.norm(q)
    scores = np.divide(matrix @ q, norms, out=np.zeros(n, dtype=np.float64), where=norms > 0)
    np.clip(scores, -1.0, 1.0, out=scores)

    order = np.argsort(-scores, kind="stable")
    return [(float(scores[i]), int(i)) for i in order]


def hash_token(token: str) -> int:
    """32-bit signed polynomial rolling hash (``h * 31 + ch``) of a token."""
    h = 0
    for ch in token:
        h = (h * 31 + ord(ch)) & _INT32_MASK
    return h - 0x100000000 if h & _INT32_SIGN else h


def jaccard_index(a: set[int] | frozenset[int], b: set[int] | frozenset[int]) -> float:
    """Intersection over union of two token-hash sets; 0.0 if either is empty."""
    if not a or not b:
        return 0.0
    intersection = len(a & b)
    return intersection / (len(a) + len(b) - intersection)
