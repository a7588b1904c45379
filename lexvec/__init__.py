from .config import LoaderConfig, LoggingConfig, QueryConfig, Word2VecConfig
from .exceptions import (
    LexvecError,
    VectorFileError,
    VectorFileNotFoundError,
    MalformedHeaderError,
    MalformedRecordError,
    EndOfStreamError,
    DegenerateVectorError,
    DimensionMismatchError,
    OutOfVocabularyError,
    ModelNotLoadedError,
)
from .loader import VocabularyLoader, load
from .model import QueryResult, Word2Vec
from .neighbors import ScoredWord
from .vocabulary import Vocabulary

__all__ = [
    "LoaderConfig",
    "LoggingConfig",
    "QueryConfig",
    "Word2VecConfig",
    "LexvecError",
    "VectorFileError",
    "VectorFileNotFoundError",
    "MalformedHeaderError",
    "MalformedRecordError",
    "EndOfStreamError",
    "DegenerateVectorError",
    "DimensionMismatchError",
    "OutOfVocabularyError",
    "ModelNotLoadedError",
    "VocabularyLoader",
    "load",
    "QueryResult",
    "Word2Vec",
    "ScoredWord",
    "Vocabulary",
]
