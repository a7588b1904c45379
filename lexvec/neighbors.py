from __future__ import annotations

import heapq
from typing import Container, NamedTuple, Protocol

import numpy as np

from .exceptions import DimensionMismatchError
from .vocabulary import Vocabulary


class ScoredWord(NamedTuple):
    word: str
    score: float


class TopN:
    """Keeps the ``n`` highest-scoring words pushed into it.

    A min-heap capped at ``n`` entries: once full, each push evicts the
    lowest score. Among equal scores the earlier push wins, both for
    eviction and for the final order.
    """

    def __init__(self, n: int):
        if n < 1:
            raise ValueError(f"n must be positive, got {n}")
        self.n = n
        self._heap: list[tuple[float, int, str]] = []
        self._seq = 0

    def __len__(self) -> int:
        return len(self._heap)

    def push(self, word: str, score: float) -> None:
        # negated sequence makes earlier entries compare larger on ties
        entry = (score, -self._seq, word)
        self._seq += 1
        if len(self._heap) < self.n:
            heapq.heappush(self._heap, entry)
        elif entry > self._heap[0]:
            heapq.heapreplace(self._heap, entry)

    def drain(self) -> list[ScoredWord]:
        ordered = sorted(self._heap, reverse=True)
        self._heap = []
        return [ScoredWord(word, score) for score, _, word in ordered]


class NeighborIndex(Protocol):
    def build(self, vocab: Vocabulary) -> None:
        ...

    def query(self, vec: np.ndarray, top_k: int, exclude: Container[str] = ()) -> list[ScoredWord]:
        ...


class ExactNeighborIndex:
    """Brute-force cosine search over every word of a vocabulary."""

    def __init__(self):
        self.vocab: tuple[str, ...] = ()
        self.matrix: np.ndarray = np.empty((0, 0), dtype=np.float32)

    def build(self, vocab: Vocabulary) -> None:
        self.vocab = vocab.words
        self.matrix = vocab.matrix

    def query(self, vec: np.ndarray, top_k: int, exclude: Container[str] = ()) -> list[ScoredWord]:
        if len(vec) != self.matrix.shape[1]:
            raise DimensionMismatchError(len(vec), self.matrix.shape[1])
        top = TopN(top_k)
        if not self.vocab:
            return []
        sims = self.matrix @ np.asarray(vec, dtype=np.float32)
        for word, sim in zip(self.vocab, sims.tolist()):
            if word in exclude:
                continue
            top.push(word, sim)
        return top.drain()


__all__ = ["ScoredWord", "TopN", "NeighborIndex", "ExactNeighborIndex"]
