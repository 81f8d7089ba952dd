"""Command-line interface for htmlq."""

from __future__ import annotations

import argparse
import io
from typing import Iterable, Optional

from bs4 import FeatureNotFound
from soupsieve import SelectorSyntaxError

from .config import QueryConfig, build_config
from .document import parse_document
from .io_utils import open_output, read_input
from .render import run_query

VERSION = "0.4.0"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="htmlq",
        description="Runs CSS selectors on HTML and prints the matches.",
    )
    parser.add_argument(
        "selector",
        nargs="*",
        help="CSS selector; multiple arguments are joined with spaces (default: html).",
    )
    parser.add_argument(
        "-f",
        "--filename",
        dest="input_path",
        default=None,
        help="The input file. Defaults to stdin.",
    )
    parser.add_argument(
        "-o",
        "--output",
        dest="output_path",
        default=None,
        help="The output file. Defaults to stdout.",
    )
    parser.add_argument(
        "-t",
        "--text",
        dest="text_only",
        action="store_true",
        default=None,
        help="Output only the contents of text nodes inside selected elements.",
    )
    parser.add_argument(
        "-w",
        "--ignore-whitespace",
        dest="ignore_whitespace",
        action="store_true",
        default=None,
        help="When printing text nodes, ignore those that consist entirely of whitespace.",
    )
    parser.add_argument(
        "-p",
        "--pretty",
        dest="pretty_print",
        action="store_true",
        default=None,
        help="Pretty-print the serialised output.",
    )
    parser.add_argument(
        "-a",
        "--attribute",
        dest="attributes",
        action="append",
        default=None,
        help="Only return this attribute (if present) from selected elements (repeatable).",
    )
    parser.add_argument(
        "-b",
        "--base",
        dest="base",
        default=None,
        help="Use this URL as the base for links.",
    )
    parser.add_argument(
        "-B",
        "--detect-base",
        dest="detect_base",
        action="store_true",
        default=None,
        help="Try to detect the base URL from the <base> tag in the document. "
        "If not found, default to the value of --base, if supplied.",
    )
    parser.add_argument(
        "-r",
        "--remove-nodes",
        dest="remove_nodes",
        action="append",
        default=None,
        metavar="SELECTOR",
        help="Remove nodes matching this expression before output (repeatable).",
    )
    parser.add_argument(
        "--parser",
        dest="parser",
        default=None,
        help="BeautifulSoup tree builder: html5lib (default), html.parser or lxml.",
    )
    parser.add_argument(
        "-c",
        "--config",
        dest="config",
        default=None,
        help="YAML file with default values for any of the options above.",
    )
    parser.add_argument("-V", "--version", action="version", version=f"%(prog)s {VERSION}")
    return parser


def run(config: QueryConfig) -> int:
    try:
        markup = read_input(config.input_path)
    except OSError as exc:
        raise SystemExit(f"Could not read {config.input_path}: {exc}") from exc

    try:
        document = parse_document(markup, config.parser)
    except FeatureNotFound as exc:
        raise SystemExit(f"Parser {config.parser!r} is not installed: {exc}") from exc

    buffer = io.StringIO()
    try:
        count = run_query(document, config, buffer)
    except SelectorSyntaxError as exc:
        raise SystemExit(f"Invalid CSS selector: {exc}") from exc

    with open_output(config.output_path) as out:
        out.write(buffer.getvalue())
    return count


def main(argv: Optional[Iterable[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)
    run(build_config(args))


__all__ = ["VERSION", "build_parser", "main", "run"]


if __name__ == "__main__":
    main()
