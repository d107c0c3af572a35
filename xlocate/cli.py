#!/usr/bin/env python3
"""
Command line for building and trying locators.

    python -m xlocate query tag-and-attributes input name=email
    python -m xlocate find --html page.html tag-with-text a "log in"
    python -m xlocate examples
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import Callable, Dict, List, Optional, Tuple

from xlocate import factories
from xlocate.adapters.lxml_node import from_html
from xlocate.builder.xpath_builder import build_query
from xlocate.config import config
from xlocate.errors import LocatorError
from xlocate.examples import EXAMPLE_LOCATORS
from xlocate.types.locator import Locator

logger = logging.getLogger(__name__)

# kind name -> (factory, argument names)
LOCATOR_KINDS: Dict[str, Tuple[Callable[..., Locator], Tuple[str, ...]]] = {
    "id-and-text": (factories.by_id_and_text, ("id", "text")),
    "id-and-case-sensitive-text": (factories.by_id_and_case_sensitive_text, ("id", "text")),
    "id-containing-text": (factories.by_id_containing_text, ("id", "text")),
    "tag-and-attributes": (factories.by_tag_and_attributes, ("tag", "attributes")),
    "tag-and-attributes-nth": (factories.by_tag_and_attributes_nth, ("tag", "attributes", "n")),
    "tag-with-text": (factories.by_tag_with_text, ("tag", "text")),
    "tag-containing-text": (factories.by_tag_containing_text, ("tag", "text")),
    "tag-starting-with-text": (factories.by_tag_starting_with_text, ("tag", "text")),
    "query-containing-text": (factories.by_query_containing_text, ("query", "text")),
}


def build_locator(kind: str, values: List[str]) -> Locator:
    """Build a locator from a kind name and its positional string arguments"""
    if kind not in LOCATOR_KINDS:
        raise LocatorError(f"Unknown locator kind '{kind}'")
    factory, names = LOCATOR_KINDS[kind]
    if len(values) != len(names):
        raise LocatorError(f"{kind} expects {len(names)} arguments: {' '.join(names)}")
    args = list(values)
    if "n" in names:
        index = names.index("n")
        try:
            args[index] = int(args[index])
        except ValueError:
            raise LocatorError(f"n must be an integer, got '{values[index]}'") from None
    return factory(*args)


def cmd_query(args: argparse.Namespace) -> int:
    locator = build_locator(args.kind, args.values)
    print(build_query(locator))
    return 0


def cmd_find(args: argparse.Namespace) -> int:
    locator = build_locator(args.kind, args.values)
    markup = Path(args.html).read_text(encoding="utf-8")
    matches = locator.find(from_html(markup))
    if not matches:
        print(f"No match for {locator}", file=sys.stderr)
        return 1
    for node in matches:
        print(f"<{node.tag}> {node.rendered_text()}")
    return 0


def cmd_examples(args: argparse.Namespace) -> int:
    for name, locator in EXAMPLE_LOCATORS.items():
        print(f"\n=== {name} ===")
        print(locator)
        print(build_query(locator))
    return 0


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="xlocate", description="Build and try XPath locators")
    parser.add_argument("--log-level", default=config.log_level, help="Logging level (XLOCATE_LOG_LEVEL)")
    sub = parser.add_subparsers(dest="command", required=True)

    kinds = ", ".join(LOCATOR_KINDS)

    p_query = sub.add_parser("query", help="Print the XPath a locator builds")
    p_query.add_argument("kind", help=f"One of: {kinds}")
    p_query.add_argument("values", nargs="*", help="Locator arguments")
    p_query.set_defaults(func=cmd_query)

    p_find = sub.add_parser("find", help="Run a locator against an HTML file")
    p_find.add_argument("--html", required=True, help="Path to an HTML file")
    p_find.add_argument("kind", help=f"One of: {kinds}")
    p_find.add_argument("values", nargs="*", help="Locator arguments")
    p_find.set_defaults(func=cmd_find)

    p_examples = sub.add_parser("examples", help="Print the example locators and their queries")
    p_examples.set_defaults(func=cmd_examples)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = create_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, str(args.log_level).upper(), logging.INFO),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    )

    try:
        return args.func(args)
    except LocatorError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2
    except (OSError, UnicodeDecodeError) as e:
        print(f"Error: cannot read HTML file: {e}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    sys.exit(main())
