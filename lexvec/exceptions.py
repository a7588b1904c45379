from __future__ import annotations

from typing import Iterable


class LexvecError(Exception):
    """Base exception for all lexvec errors."""


class ConfigError(LexvecError, ValueError):
    """Raised when a configuration value is not one of the accepted options."""


class VectorFileError(LexvecError):
    """Raised when a vector file cannot be loaded."""


class VectorFileNotFoundError(VectorFileError, FileNotFoundError):
    """Raised when the vector file path does not resolve to a file."""


class MalformedHeaderError(VectorFileError):
    """Raised when the word count or vector size header is not a non-negative integer."""

    def __init__(self, message: str, token: str = ""):
        super().__init__(message)
        self.token = token


class MalformedRecordError(VectorFileError):
    """Raised when a word record cannot be parsed."""

    def __init__(self, message: str, index: int = -1):
        super().__init__(message)
        self.index = index


class EndOfStreamError(VectorFileError, EOFError):
    """Raised when the byte stream ends before the requested data was read."""


class DegenerateVectorError(VectorFileError):
    """Raised when a record has a zero-length vector and the loader refuses to keep it."""

    def __init__(self, message: str, word: str = ""):
        super().__init__(message)
        self.word = word


class DimensionMismatchError(LexvecError, ValueError):
    """Raised when two vectors of different lengths are compared."""

    def __init__(self, left: int, right: int):
        super().__init__(f"Uneven vectors: {left} != {right}")
        self.left = left
        self.right = right


class OutOfVocabularyError(LexvecError, KeyError):
    """Raised when query words are missing from the vocabulary."""

    def __init__(self, words: Iterable[str]):
        self.words = tuple(words)
        super().__init__(f"Out of dictionary word(s): {', '.join(self.words)}")

    def __str__(self) -> str:
        # KeyError would repr() the message
        return self.args[0]


class ModelNotLoadedError(LexvecError):
    """Raised when a query is issued before any vectors were loaded."""


__all__ = [
    "LexvecError",
    "ConfigError",
    "VectorFileError",
    "VectorFileNotFoundError",
    "MalformedHeaderError",
    "MalformedRecordError",
    "EndOfStreamError",
    "DegenerateVectorError",
    "DimensionMismatchError",
    "OutOfVocabularyError",
    "ModelNotLoadedError",
]
