#!/usr/bin/env python3
"""Command-line interface for soupview."""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .config import ConfigBuilder
from .dom import MatchCriteria
from .error_handler import ErrorType, InvalidArgumentShape, SoupError
from .fetch import Fetcher
from .monitoring import LogManager
from .parser import HTMLParser

logger = logging.getLogger(__name__)


def _key_value(text: str):
    name, sep, value = text.partition('=')
    if not sep or not name:
        raise argparse.ArgumentTypeError(f"expected NAME=VALUE, got {text!r}")
    return name, value


def _parse_args(argv: List[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="soupview",
        description="Find elements in an HTML document by tag and attribute and print their text.",
        epilog=(
            "Examples:\n"
            "  soupview page.html title\n"
            "  soupview https://example.com div class content --full-text\n"
            "  curl -s https://example.com | soupview - a --all\n"
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("source", help="URL, HTML file, or '-' to read from stdin")
    parser.add_argument(
        "criteria",
        nargs="+",
        metavar="TAG [ATTR VALUE]",
        help="Tag name, optionally followed by attribute name and value",
    )
    parser.add_argument("--strict", action="store_true",
                        help="Attribute value must match exactly instead of word by word")
    parser.add_argument("--all", action="store_true", help="Print every match, not just the first")
    parser.add_argument("--full-text", action="store_true",
                        help="Print the text of nested elements too")
    parser.add_argument("--header", action="append", type=_key_value, default=[],
                        metavar="NAME=VALUE", help="HTTP header to send (repeatable)")
    parser.add_argument("--cookie", action="append", type=_key_value, default=[],
                        metavar="NAME=VALUE", help="HTTP cookie to send (repeatable)")
    parser.add_argument("--debug", action="store_true", help="Fail immediately on the first error")
    parser.add_argument("--log-level", default="WARNING", type=str.upper,
                        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
                        help="Logging level (default: WARNING)")
    return parser.parse_args(argv)


def _load(source: str, builder: ConfigBuilder):
    config = builder.build()
    if source.startswith(('http://', 'https://')):
        return Fetcher(config).get_document(source)
    if source == '-':
        html_content = sys.stdin.read()
    else:
        html_content = Path(source).read_text()
    return HTMLParser(config).parse(html_content)


def _render(view, full_text: bool) -> str:
    if full_text:
        return view.full_text()
    return view.text().unwrap_or('')


def main(argv: Optional[List[str]] = None) -> int:
    args = _parse_args(sys.argv[1:] if argv is None else argv)
    LogManager(log_level=args.log_level)

    builder = ConfigBuilder().debug(args.debug)
    for name, value in args.header:
        builder.header(name, value)
    for name, value in args.cookie:
        builder.cookie(name, value)

    try:
        criteria = MatchCriteria.from_args(args.criteria, strict=args.strict)
    except InvalidArgumentShape as e:
        print(str(e), file=sys.stderr)
        return 2

    try:
        document = _load(args.source, builder)
    except (OSError, UnicodeDecodeError) as e:
        print(f"unable to read {args.source}: {e}", file=sys.stderr)
        return 2
    except SoupError as e:
        print(e.message, file=sys.stderr)
        return 2

    try:
        if not document.ok:
            print(document.error.message, file=sys.stderr)
            return 2
        root = document.value

        if args.all:
            matches = root.find_all(criteria)
        else:
            first = root.find(criteria)
            matches = [first.value] if first.ok else []

        if not matches:
            logger.info(f"No {criteria.describe()} in {args.source}")
            return 1

        for match in matches:
            print(_render(match, args.full_text))
    except SoupError as e:
        print(e.message, file=sys.stderr)
        return 1 if e.error_type == ErrorType.NOT_FOUND else 2

    return 0


if __name__ == "__main__":
    sys.exit(main())
