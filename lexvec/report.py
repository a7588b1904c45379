from __future__ import annotations

import json

from .model import QueryResult


class ReportFormatter:
    def __init__(self, result: QueryResult):
        self.result = result

    def to_table(self) -> str:
        header = "\n%50s" % "Word" + " " * 7 + "Cosine distance\n" + "-" * 72
        rows = ["%50s" % m.word + " " * 7 + "%15f" % m.score for m in self.result.matches]
        return "\n".join([header, *rows])

    def to_json(self, indent: int = 2) -> str:
        payload = {
            "matches": [{"word": m.word, "score": m.score} for m in self.result.matches],
            "missing": list(self.result.missing),
            "degenerate": self.result.degenerate,
        }
        return json.dumps(payload, indent=indent)

    def to_markdown_table(self) -> str:
        lines = ["| Word | Cosine distance |", "| --- | --- |"]
        for m in self.result.matches:
            lines.append(f"| {m.word} | {m.score:.6f} |")
        return "\n".join(lines)


__all__ = ["ReportFormatter"]
