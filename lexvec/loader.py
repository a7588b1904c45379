from __future__ import annotations

import logging
from pathlib import Path

import numpy as np

from .config import LoaderConfig
from .exceptions import (
    DegenerateVectorError,
    MalformedHeaderError,
    MalformedRecordError,
    VectorFileNotFoundError,
)
from .reader import VecBinaryReader
from .vectors import normalize
from .vocabulary import Vocabulary

logger = logging.getLogger(__name__)


def _parse_count(token: str, name: str) -> int:
    if not (token.isascii() and token.isdigit()):
        raise MalformedHeaderError(f"Header field {name} is not a non-negative integer: {token!r}", token)
    return int(token)


class VocabularyLoader:
    """Builds a :class:`Vocabulary` from a file in the word2vec binary format.

    Layout::

        <num_words> <vec_size>\\n
        <word> <vec_size little-endian float32><delimiter>   (num_words times)

    Every vector is scaled to unit length as it is read. What happens to
    all-zero vectors is decided by ``LoaderConfig.zero_vector``; records
    holding NaN or infinite values are rejected.
    """

    def __init__(self, cfg: LoaderConfig | None = None):
        self.cfg = cfg or LoaderConfig()
        self.cfg.validate()

    def load(self, path: str | Path) -> Vocabulary:
        path = Path(path)
        if not path.is_file():
            raise VectorFileNotFoundError(f"Binary vector file not found <{path}>")

        with VecBinaryReader(path, self.cfg.encoding, self.cfg.unicode_errors) as reader:
            num_words = _parse_count(self._read_header_token(reader), "num_words")
            vec_size = _parse_count(self._read_header_token(reader), "vec_size")
            vectors = self._read_records(reader, num_words, vec_size)

        logger.info("Loaded %d words (dim=%d) from %s", len(vectors), vec_size, path)
        return Vocabulary(vectors, vec_size)

    def _read_header_token(self, reader: VecBinaryReader) -> str:
        try:
            return reader.read_token()
        except UnicodeDecodeError as exc:
            raise MalformedHeaderError(f"Header is not valid {self.cfg.encoding}: {exc}") from exc

    def _read_word(self, reader: VecBinaryReader, index: int) -> str:
        try:
            word = reader.read_token()
        except UnicodeDecodeError as exc:
            raise MalformedRecordError(f"Record {index} has an undecodable word: {exc}", index) from exc
        if not word:
            raise MalformedRecordError(f"Record {index} has an empty word", index)
        return word

    def _read_records(self, reader: VecBinaryReader, num_words: int, vec_size: int) -> dict[str, np.ndarray]:
        vectors: dict[str, np.ndarray] = {}
        for i in range(num_words):
            word = self._read_word(reader, i)
            raw = reader.read_floats(vec_size)
            # one separator byte trails every float block
            reader.read_byte()

            if not np.isfinite(raw).all():
                raise MalformedRecordError(f"Record {i} ({word!r}) contains NaN or infinite values", i)
            vec = normalize(raw)
            if vec is None:
                vec = self._handle_zero_vector(word, raw)
            if word in vectors:
                logger.warning("Duplicate word %r at record %d; keeping the later vector", word, i)
            if vec is None:
                # a skipped record still overrides an earlier one
                vectors.pop(word, None)
                continue
            vectors[word] = vec
        return vectors

    def _handle_zero_vector(self, word: str, raw: np.ndarray) -> np.ndarray | None:
        policy = self.cfg.zero_vector
        if policy == "error":
            raise DegenerateVectorError(f"Word {word!r} has a zero-length vector", word)
        if policy == "skip":
            logger.warning("Skipping word %r with a zero-length vector", word)
            return None
        logger.warning("Keeping unnormalized zero-length vector for word %r", word)
        return raw


def load(path: str | Path, cfg: LoaderConfig | None = None) -> Vocabulary:
    return VocabularyLoader(cfg).load(path)


__all__ = ["VocabularyLoader", "load"]
