from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Iterator

import numpy as np

from .exceptions import OutOfVocabularyError


class Vocabulary(Mapping):
    """Read-only mapping from word to its unit-length vector.

    All vectors live in one ``(len(words), dim)`` float32 matrix whose rows
    follow ``words``; lookups hand back read-only row views. Nothing mutates
    the vocabulary after construction.
    """

    def __init__(self, vectors: Mapping[str, np.ndarray], dim: int):
        self._dim = dim
        self._words = tuple(vectors.keys())
        if self._words:
            matrix = np.vstack([np.asarray(vectors[w], dtype=np.float32) for w in self._words])
        else:
            matrix = np.empty((0, dim), dtype=np.float32)
        if matrix.shape[1] != dim:
            raise ValueError(f"Vectors have dimension {matrix.shape[1]}, expected {dim}")
        matrix.setflags(write=False)
        self._matrix = matrix
        self._rows = MappingProxyType({w: i for i, w in enumerate(self._words)})

    @property
    def dim(self) -> int:
        return self._dim

    @property
    def words(self) -> tuple[str, ...]:
        return self._words

    @property
    def matrix(self) -> np.ndarray:
        return self._matrix

    def contains(self, word: str) -> bool:
        return word in self._rows

    def vector_of(self, word: str) -> np.ndarray:
        row = self._rows.get(word)
        if row is None:
            raise OutOfVocabularyError([word])
        return self._matrix[row]

    def __getitem__(self, word: str) -> np.ndarray:
        return self.vector_of(word)

    def __contains__(self, word: object) -> bool:
        return word in self._rows

    def __iter__(self) -> Iterator[str]:
        return iter(self._words)

    def __len__(self) -> int:
        return len(self._words)

    def __repr__(self) -> str:
        return f"Vocabulary(words={len(self)}, dim={self._dim})"


__all__ = ["Vocabulary"]
