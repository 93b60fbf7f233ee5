"""Command line interface for swapgen."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

from .api import SwapOptions, create_swap, inspect_swap, parse_size
from .format.errors import SwapError
from .logging import configure_logging, step
from .reporting import (
    JsonLinesReporter,
    PlainReporter,
    RichReporter,
    SilentReporter,
    get_reporter,
    set_reporter,
    set_verbosity,
)


def _size_arg(text: str) -> int:
    try:
        return parse_size(text)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc


def _create_cmd(args: argparse.Namespace) -> int:
    opts = SwapOptions(
        path=args.path,
        size=args.size,
        label=args.label,
        identifier=args.uuid,
        page_size=args.pagesize,
        bad_pages=tuple(args.bad_pages or ()),
    )
    result = create_swap(opts)
    get_reporter().status(
        "Swap summary: "
        + f"path={result.path} pages={result.page_count} "
        + f"bytes={result.usable_bytes} uuid={result.identifier}"
    )
    return 0


def _inspect_cmd(args: argparse.Namespace) -> int:
    step(f"reading header of {args.path}")
    info = inspect_swap(args.path, page_size=args.pagesize)
    rep = get_reporter()
    rep.flush()
    print(json.dumps(info, indent=2, sort_keys=True))
    return 0


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="swapgen", description="Linux swap area header generator"
    )
    p.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Increase verbosity (repeatable)",
    )
    p.add_argument(
        "-r",
        "--reporter",
        choices=["plain", "rich", "json", "silent"],
        default="plain",
        help="Select reporter backend: plain (default), rich, json (JSONL events), silent",
    )
    sub = p.add_subparsers(dest="cmd", required=True)

    c = sub.add_parser("create", help="Write a swap header to a file or device")
    c.add_argument("path", type=Path)
    c.add_argument(
        "size",
        nargs="?",
        type=_size_arg,
        help="Area size in bytes, K/M/G/T suffixes allowed (default: current size)",
    )
    c.add_argument("-L", "--label", help="Volume label (at most 16 UTF-8 bytes)")
    c.add_argument("-U", "--uuid", help="Volume UUID (default: random)")
    c.add_argument(
        "-p",
        "--pagesize",
        type=int,
        help="Page size in bytes (default: host page size)",
    )
    c.add_argument(
        "-b",
        "--bad-page",
        dest="bad_pages",
        type=int,
        action="append",
        metavar="PAGE",
        help="Mark PAGE as unusable (repeatable)",
    )
    c.set_defaults(func=_create_cmd)

    i = sub.add_parser("inspect", help="Print the fields of a swap header")
    i.add_argument("path", type=Path)
    i.add_argument(
        "-p",
        "--pagesize",
        type=int,
        help="Page size in bytes (default: detect from the signature)",
    )
    i.set_defaults(func=_inspect_cmd)

    return p


def _select_reporter(requested: str) -> None:
    if requested == "json":
        set_reporter(JsonLinesReporter())
    elif requested == "silent":
        set_reporter(SilentReporter())
    elif requested == "rich" and sys.stderr.isatty():
        set_reporter(RichReporter())
    else:
        # rich without a TTY falls back to plain
        set_reporter(PlainReporter())


def main(argv: list[str] | None = None) -> int:
    argv = argv if argv is not None else sys.argv[1:]
    parser = build_parser()
    args = parser.parse_args(argv)
    _select_reporter(args.reporter)
    set_verbosity(args.verbose)
    configure_logging(args.verbose)
    try:
        return args.func(args)
    except SwapError as exc:
        get_reporter().error(str(exc), code=exc.code, context=exc.context or {})
        return 1


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
