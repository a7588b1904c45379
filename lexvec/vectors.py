from __future__ import annotations

import numpy as np

from .exceptions import DimensionMismatchError


def l2_norm(vec: np.ndarray) -> float:
    # float32 squares overflow past ~1.8e19
    v64 = np.asarray(vec, dtype=np.float64)
    return float(np.sqrt(np.dot(v64, v64)))


def normalize(vec: np.ndarray) -> np.ndarray | None:
    """Scale ``vec`` to unit length; None when it has zero or non-finite norm."""
    norm = l2_norm(vec)
    if norm == 0.0 or not np.isfinite(norm):
        return None
    return (np.asarray(vec, dtype=np.float64) / norm).astype(np.float32)


def cosine(vec1: np.ndarray, vec2: np.ndarray) -> float:
    """Cosine similarity of two unit vectors, i.e. their dot product."""
    if len(vec1) != len(vec2):
        raise DimensionMismatchError(len(vec1), len(vec2))
    return float(np.dot(vec1, vec2))


__all__ = ["l2_norm", "normalize", "cosine"]
