from __future__ import annotations

from pathlib import Path
from typing import BinaryIO, Iterable

import numpy as np

from .exceptions import EndOfStreamError

SPACE = 0x20
LF = 0x0A
DEFAULT_DELIMITERS = frozenset({SPACE, LF})

# word2vec writes raw floats in the byte order of the training machine, which
# in practice is always little-endian.
FLOAT32 = np.dtype("<f4")


class VecBinaryReader:
    """Forward-only reader over a word2vec binary file.

    Knows how to pull delimiter-terminated tokens and little-endian float32
    values off the stream; it has no notion of words or vocabularies. Use it
    as a context manager, or call :meth:`close` when done.
    """

    def __init__(self, path: str | Path, encoding: str = "utf-8", unicode_errors: str = "replace"):
        self.path = Path(path)
        self.encoding = encoding
        self.unicode_errors = unicode_errors
        self._stream: BinaryIO | None = open(self.path, "rb")

    def __enter__(self) -> "VecBinaryReader":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    @property
    def closed(self) -> bool:
        return self._stream is None

    def close(self) -> None:
        if self._stream is not None:
            self._stream.close()
            self._stream = None

    def _read_exact(self, size: int) -> bytes:
        if self._stream is None:
            raise ValueError("I/O operation on closed reader")
        data = self._stream.read(size)
        if len(data) != size:
            raise EndOfStreamError(
                f"Unexpected end of {self.path}: wanted {size} bytes, got {len(data)}"
            )
        return data

    def read_byte(self) -> int:
        return self._read_exact(1)[0]

    def read_token(self, delimiters: Iterable[int] = DEFAULT_DELIMITERS) -> str:
        """Read bytes up to the next delimiter and decode them.

        The delimiter is consumed but not returned.
        """
        if not isinstance(delimiters, (set, frozenset)):
            delimiters = frozenset(delimiters)
        buf = bytearray()
        byte = self.read_byte()
        while byte not in delimiters:
            buf.append(byte)
            byte = self.read_byte()
        return buf.decode(self.encoding, self.unicode_errors)

    def read_float32(self) -> float:
        return float(np.frombuffer(self._read_exact(4), dtype=FLOAT32)[0])

    def read_floats(self, count: int) -> np.ndarray:
        """Read ``count`` consecutive float32 values as a native-order array."""
        data = self._read_exact(count * FLOAT32.itemsize)
        return np.frombuffer(data, dtype=FLOAT32, count=count).astype(np.float32)


__all__ = ["VecBinaryReader", "DEFAULT_DELIMITERS", "SPACE", "LF", "FLOAT32"]
