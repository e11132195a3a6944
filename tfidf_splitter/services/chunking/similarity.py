"""Cosine similarity between sentence vectors."""

from typing import Sequence

import numpy as np


def cosine_similarity(a: Sequence[float] | np.ndarray, b: Sequence[float] | np.ndarray) -> float:
    """
    Dot product over the product of L2 norms. Returns 0.0 for empty vectors,
    vectors of different length, or when either norm is zero.
    """
    v1 = np.asarray(a, dtype=np.float64).ravel()
    v2 = np.asarray(b, dtype=np.float64).ravel()
    if v1.size == 0 or v1.shape != v2.shape:
        return 0.0
    norm1 = np.linalg.norm(v1)
    norm2 = np.linalg.norm(v2)
    if norm1 == 0 or norm2 == 0:
        return 0.0
    sim = float(np.dot(v1, v2) / (norm1 * norm2))
    # Rounding can push |sim| a hair past 1
    return max(-1.0, min(1.0, sim))
