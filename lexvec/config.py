from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any
import json

import yaml

from .exceptions import ConfigError


ZERO_VECTOR_POLICIES = ("keep", "skip", "error")
OOV_POLICIES = ("empty", "raise")


@dataclass
class LoaderConfig:
    encoding: str = "utf-8"
    unicode_errors: str = "replace"  # passed to bytes.decode
    zero_vector: str = "keep"  # "keep" | "skip" | "error"

    def validate(self) -> None:
        if self.zero_vector not in ZERO_VECTOR_POLICIES:
            raise ConfigError(f"Unknown zero_vector policy: {self.zero_vector}")


@dataclass
class QueryConfig:
    top_n: int = 40
    oov_policy: str = "empty"  # "empty" | "raise"

    def validate(self) -> None:
        if self.oov_policy not in OOV_POLICIES:
            raise ConfigError(f"Unknown oov_policy: {self.oov_policy}")
        if self.top_n < 1:
            raise ConfigError(f"top_n must be positive, got {self.top_n}")


@dataclass
class LoggingConfig:
    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


@dataclass
class Word2VecConfig:
    model_path: str = ""
    loader: LoaderConfig = field(default_factory=LoaderConfig)
    query: QueryConfig = field(default_factory=QueryConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @classmethod
    def from_mapping(cls, data: dict[str, Any]) -> "Word2VecConfig":
        try:
            return cls(
                model_path=data.get("model_path", ""),
                loader=LoaderConfig(**data.get("loader", {})),
                query=QueryConfig(**data.get("query", {})),
                logging=LoggingConfig(**data.get("logging", {})),
            )
        except TypeError as exc:
            raise ConfigError(f"Invalid configuration: {exc}") from exc

    @classmethod
    def load(cls, path: str | Path) -> "Word2VecConfig":
        path = Path(path)
        if path.suffix.lower() in {".yaml", ".yml"}:
            data = yaml.safe_load(path.read_text())
        else:
            data = json.loads(path.read_text())
        return cls.from_mapping(data or {})

    def to_dict(self) -> dict[str, Any]:
        return {
            "model_path": self.model_path,
            "loader": dict(self.loader.__dict__),
            "query": dict(self.query.__dict__),
            "logging": dict(self.logging.__dict__),
        }


__all__ = [
    "LoaderConfig",
    "QueryConfig",
    "LoggingConfig",
    "Word2VecConfig",
]
