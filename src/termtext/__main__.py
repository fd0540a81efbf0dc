"""Entry point for termtext."""

from __future__ import annotations

import argparse
import json
import logging
import sys

import yaml

from termtext.collation import make_comparator
from termtext.config import TermTextConfig, get_config, load_config
from termtext.exceptions import ConfigurationError, LocaleError, MalformedRowError
from termtext.humanize import humanize
from termtext.oplog import setup_logging
from termtext.parsers.array_parser import read_arrays
from termtext.width import (
    rune_slice_width,
    rune_slice_width_last_range,
    rune_slice_width_range,
)

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="termtext",
        description="Config line parsing, natural sorting and column width tools",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="Path to YAML config file (default: environment only)",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    p_sort = sub.add_parser("sort", help="Print names in natural or locale order")
    p_sort.add_argument("names", nargs="+")
    p_sort.add_argument(
        "--locale",
        default=None,
        help='Sort locale: "" for natural order, "*" for environment, or a tag',
    )

    p_width = sub.add_parser("width", help="Print column width of text, or a slice of it")
    p_width.add_argument("text")
    group = p_width.add_mutually_exclusive_group()
    group.add_argument("--range", nargs=2, type=int, metavar=("BEG", "END"))
    group.add_argument("--last", type=int, metavar="N")

    p_pairs = sub.add_parser("pairs", help="Parse a key/value file and print rows as JSON")
    p_pairs.add_argument("file")

    p_arrays = sub.add_parser("arrays", help="Parse a config file and print rows as JSON")
    p_arrays.add_argument("file")
    p_arrays.add_argument("--min", type=int, default=1, dest="min_cols")
    p_arrays.add_argument("--max", type=int, default=sys.maxsize, dest="max_cols")

    p_humanize = sub.add_parser("humanize", help="Format a byte count")
    p_humanize.add_argument("size", type=int)

    return parser


def _load(config_path: str | None) -> TermTextConfig:
    if config_path is None:
        return get_config()
    return load_config(config_path)


def _read_file(path: str, min_cols: int, max_cols: int) -> list[list[str]]:
    # Binary mode; read_arrays decodes with replacement for invalid UTF-8
    with open(path, "rb") as f:
        return read_arrays(f, min_cols, max_cols)


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)

    try:
        config = _load(args.config)
    except FileNotFoundError:
        print(f"ERROR: Config file not found: {args.config}", file=sys.stderr)
        return 1
    except (yaml.YAMLError, ConfigurationError) as exc:
        print(f"ERROR: Invalid config {args.config}: {exc}", file=sys.stderr)
        return 1

    setup_logging(config)

    if args.command == "sort":
        locale_str = config.locale if args.locale is None else args.locale
        try:
            comparator = make_comparator(locale_str)
        except LocaleError as exc:
            print(f"ERROR: {exc}", file=sys.stderr)
            return 1
        for name in comparator.sort(args.names):
            print(name)
        return 0

    if args.command == "width":
        if args.range:
            print(rune_slice_width_range(args.text, args.range[0], args.range[1]))
        elif args.last is not None:
            print(rune_slice_width_last_range(args.text, args.last))
        else:
            print(rune_slice_width(args.text))
        return 0

    if args.command in ("pairs", "arrays"):
        if args.command == "pairs":
            min_cols, max_cols = 2, 2
        else:
            min_cols, max_cols = args.min_cols, args.max_cols
        try:
            rows = _read_file(args.file, min_cols, max_cols)
        except OSError as exc:
            logger.error("Cannot read %s: %s", args.file, exc, extra={"path": args.file})
            print(f"ERROR: Cannot read {args.file}: {exc}", file=sys.stderr)
            return 1
        except MalformedRowError as exc:
            logger.debug(
                "Rejected %s", args.file, extra={"path": args.file, "line_no": exc.line_no}
            )
            print(f"ERROR: {args.file}:{exc.line_no}: {exc}", file=sys.stderr)
            return 1
        print(json.dumps(rows, ensure_ascii=False))
        return 0

    if args.command == "humanize":
        print(humanize(args.size))
        return 0

    return 2


if __name__ == "__main__":
    sys.exit(main())
