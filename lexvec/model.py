from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, Iterator, Sequence

import numpy as np

from .config import Word2VecConfig
from .exceptions import ModelNotLoadedError, OutOfVocabularyError
from .loader import VocabularyLoader
from .neighbors import ExactNeighborIndex, NeighborIndex, ScoredWord
from .vectors import cosine, normalize
from .vocabulary import Vocabulary

logger = logging.getLogger(__name__)


@dataclass
class QueryResult:
    """Ranked matches of a query, plus why the list may be empty.

    ``missing`` lists query words that are not in the vocabulary and
    ``degenerate`` is set when the combined query vector had zero length.
    The result iterates, indexes and measures like its ``matches`` list.
    """

    matches: list[ScoredWord] = field(default_factory=list)
    missing: tuple[str, ...] = ()
    degenerate: bool = False

    @property
    def ok(self) -> bool:
        return not self.missing and not self.degenerate

    def words(self) -> list[str]:
        return [m.word for m in self.matches]

    def __iter__(self) -> Iterator[ScoredWord]:
        return iter(self.matches)

    def __len__(self) -> int:
        return len(self.matches)

    def __getitem__(self, idx):
        return self.matches[idx]


class Word2Vec:
    """Nearest-neighbor and analogy queries over word2vec binary vectors.

    Example::

        model = Word2Vec()
        model.load("vectors.bin")
        for word, score in model.distance(["france"], n=10):
            ...
    """

    def __init__(self, cfg: Word2VecConfig | None = None):
        self.cfg = cfg or Word2VecConfig()
        self.cfg.query.validate()
        self.loader = VocabularyLoader(self.cfg.loader)
        self.index: NeighborIndex = ExactNeighborIndex()
        self._vocab: Vocabulary | None = None

    @classmethod
    def from_vocabulary(cls, vocab: Vocabulary, cfg: Word2VecConfig | None = None) -> "Word2Vec":
        model = cls(cfg)
        model._attach(vocab)
        return model

    def load(self, path: str | Path | None = None) -> Vocabulary:
        path = path or self.cfg.model_path
        if not path:
            raise ModelNotLoadedError("No vector file given and config.model_path is empty")
        vocab = self.loader.load(path)
        self._attach(vocab)
        return vocab

    def _attach(self, vocab: Vocabulary) -> None:
        self.index.build(vocab)
        self._vocab = vocab

    @property
    def vocab(self) -> Vocabulary:
        if self._vocab is None:
            raise ModelNotLoadedError("Call load() before querying")
        return self._vocab

    @property
    def num_words(self) -> int:
        return len(self.vocab)

    @property
    def vec_size(self) -> int:
        return self.vocab.dim

    def contains(self, word: str) -> bool:
        return self.vocab.contains(word)

    def vector(self, word: str) -> np.ndarray:
        return self.vocab.vector_of(word)

    def cosine(self, word1: str, word2: str) -> float:
        missing = self._missing([word1, word2])
        if missing:
            raise OutOfVocabularyError(missing)
        return cosine(self.vocab.vector_of(word1), self.vocab.vector_of(word2))

    def _missing(self, words: Iterable[str]) -> tuple[str, ...]:
        out: list[str] = []
        for w in words:
            if not self.vocab.contains(w) and w not in out:
                out.append(w)
        return tuple(out)

    def _out_of_vocabulary(self, missing: tuple[str, ...]) -> QueryResult:
        if self.cfg.query.oov_policy == "raise":
            raise OutOfVocabularyError(missing)
        logger.warning("Out of dictionary word(s): %s", ", ".join(missing))
        return QueryResult(missing=missing)

    def _top(self, vec: np.ndarray, n: int, exclude: set[str]) -> QueryResult:
        unit = normalize(vec)
        if unit is None:
            logger.warning("Query vector has zero length; no neighbors computed")
            return QueryResult(degenerate=True)
        return QueryResult(matches=self.index.query(unit, n, exclude))

    def _resolve_n(self, n: int | None) -> int:
        n = self.cfg.query.top_n if n is None else n
        if n < 1:
            raise ValueError(f"N must be a positive integer, got {n}")
        return n

    def distance(self, words: Sequence[str], n: int | None = None) -> QueryResult:
        """Find the ``n`` words closest to the sum of the query word vectors.

        Query words never appear in the result. A single unknown word
        aborts the whole query.
        """
        n = self._resolve_n(n)
        if isinstance(words, str):
            words = [words]
        if not words:
            return QueryResult()
        missing = self._missing(words)
        if missing:
            return self._out_of_vocabulary(missing)

        vec = np.zeros(self.vocab.dim, dtype=np.float32)
        for w in words:
            vec += self.vocab.vector_of(w)
        return self._top(vec, n, set(words))

    def analogy(self, word1: str, word2: str, word3: str, n: int | None = None) -> QueryResult:
        """[word1] is to [word2] as [word3] is to ???

        Ranks words against ``vec(word2) - vec(word1) + vec(word3)``,
        leaving out the three input words.
        """
        n = self._resolve_n(n)
        missing = self._missing([word1, word2, word3])
        if missing:
            return self._out_of_vocabulary(missing)

        vocab = self.vocab
        vec = vocab.vector_of(word2) - vocab.vector_of(word1) + vocab.vector_of(word3)
        return self._top(vec, n, {word1, word2, word3})

    def rank(self, term: str, candidates: Iterable[str]) -> QueryResult:
        """Order ``candidates`` by similarity to ``term``, most similar first.

        Unknown candidates are dropped and reported in ``missing``; an
        unknown ``term`` follows the configured out-of-vocabulary policy.
        """
        if isinstance(candidates, str):
            candidates = [candidates]
        if not self.vocab.contains(term):
            return self._out_of_vocabulary((term,))

        target = self.vocab.vector_of(term)
        scored: list[ScoredWord] = []
        skipped: list[str] = []
        for cand in dict.fromkeys(candidates):
            if not self.vocab.contains(cand):
                skipped.append(cand)
                continue
            scored.append(ScoredWord(cand, cosine(target, self.vocab.vector_of(cand))))
        if skipped:
            logger.info("Skipping out of dictionary candidate(s): %s", ", ".join(skipped))
        scored.sort(key=lambda x: x.score, reverse=True)
        return QueryResult(matches=scored, missing=tuple(skipped))


__all__ = ["Word2Vec", "QueryResult"]
