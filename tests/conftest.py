from pathlib import Path

import numpy as np
import pytest


def encode_vectors(entries, dim=None, header=None):
    if dim is None:
        dim = len(entries[0][1]) if entries else 0
    if header is None:
        header = f"{len(entries)} {dim}\n".encode()
    body = b"".join(
        (word if isinstance(word, bytes) else word.encode("utf-8")) + b" " + np.asarray(vec, dtype="<f4").tobytes() + b"\n" for word, vec in entries
    )
    return header + body


@pytest.fixture
def write_vectors(tmp_path):
    def _write(entries, dim=None, header=None, name="vectors.bin") -> Path:
        path = tmp_path / name
        path.write_bytes(encode_vectors(entries, dim=dim, header=header))
        return path

    return _write


@pytest.fixture
def royal_vectors(write_vectors):
    return write_vectors(
        [
            ("king", [1.0, 0.0]),
            ("queen", [0.8, 0.6]),
            ("man", [0.0, 1.0]),
            ("woman", [0.6, 0.8]),
        ]
    )
