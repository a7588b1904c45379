from __future__ import annotations

import argparse
import logging
import sys

from .config import LoggingConfig, Word2VecConfig
from .exceptions import LexvecError
from .model import QueryResult, Word2Vec
from .report import ReportFormatter


def configure_logging(cfg: LoggingConfig, level: str | None = None) -> None:
    logging.basicConfig(
        level=getattr(logging, (level or cfg.level).upper(), logging.INFO),
        format=cfg.format,
        stream=sys.stderr,
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Nearest-neighbor and analogy queries over word2vec vectors")
    parser.add_argument("vectors", help="Path to a word2vec binary vector file")
    parser.add_argument("--config", "-c", help="Path to YAML/JSON config", default=None)
    fmt = parser.add_mutually_exclusive_group()
    fmt.add_argument("--json", action="store_true", help="Output JSON instead of a table")
    fmt.add_argument("--markdown", action="store_true", help="Output a markdown table instead of plain text")
    parser.add_argument("--log-level", default=None, help="Override the configured log level")

    sub = parser.add_subparsers(dest="command", required=True)

    p_dist = sub.add_parser("distance", help="Closest words to one or more words")
    p_dist.add_argument("words", nargs="+")
    p_dist.add_argument("-n", type=int, default=None, help="Number of results (default from config)")

    p_ana = sub.add_parser("analogy", help="WORD1 is to WORD2 as WORD3 is to ?")
    p_ana.add_argument("word1")
    p_ana.add_argument("word2")
    p_ana.add_argument("word3")
    p_ana.add_argument("-n", type=int, default=None, help="Number of results (default from config)")

    p_rank = sub.add_parser("rank", help="Order candidate words by similarity to a term")
    p_rank.add_argument("term")
    p_rank.add_argument("candidates", nargs="+")
    return parser


def _run(model: Word2Vec, args: argparse.Namespace) -> QueryResult:
    if args.command == "distance":
        return model.distance(args.words, n=args.n)
    if args.command == "analogy":
        return model.analogy(args.word1, args.word2, args.word3, n=args.n)
    return model.rank(args.term, args.candidates)


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)

    try:
        cfg = Word2VecConfig.load(args.config) if args.config else Word2VecConfig()
        configure_logging(cfg.logging, args.log_level)
        model = Word2Vec(cfg)
        model.load(args.vectors)
        result = _run(model, args)
    except (LexvecError, ValueError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    if result.missing and not result.matches:
        print(f"Out of dictionary word(s): {', '.join(result.missing)}", file=sys.stderr)
        return 1

    report = ReportFormatter(result)
    if args.json:
        output = report.to_json()
    elif args.markdown:
        output = report.to_markdown_table()
    else:
        output = report.to_table()
    print(output)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
