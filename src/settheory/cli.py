"""
SetTheory Command-Line Interface.

Reads set literals and shows how they render and compare.

Usage:
    settheory show "{2, 1, 1}"          # Canonical rendering
    settheory compare "{1, 2}" "{1}"    # Canonical order
    settheory sort "{1}" 2 "{}"         # Sort objects canonically
    settheory ops "{1, 2}" "{2, 3}"     # Union, intersection, ...
    settheory power "{1, 2}"            # Power set
    settheory info                      # Show syntax and version
"""

import argparse
import json
import logging
import os
import sys
from typing import Optional

from settheory import __version__
from settheory.core import (
    Object,
    compare,
    equivalent,
    height,
    is_set,
    make_set,
    to_string,
)
from settheory.runtime import set_ops
from settheory.syntax import parse_object
from settheory.utils.errors import SetTheoryError

logger = logging.getLogger("settheory")


# =============================================================================
# ANSI Color Codes for Terminal Output
# =============================================================================


class Colors:
    """ANSI escape codes for colored terminal output."""

    RED = "\033[91m"
    GREEN = "\033[92m"
    YELLOW = "\033[93m"
    CYAN = "\033[96m"
    GRAY = "\033[90m"

    BOLD = "\033[1m"

    RESET = "\033[0m"

    @classmethod
    def disable(cls) -> None:
        """Disable all colors (for non-TTY output)."""
        cls.RED = ""
        cls.GREEN = ""
        cls.YELLOW = ""
        cls.CYAN = ""
        cls.GRAY = ""
        cls.BOLD = ""
        cls.RESET = ""


def _init_colors() -> None:
    """Initialize colors based on terminal capabilities."""
    if not sys.stdout.isatty() or os.environ.get("NO_COLOR"):
        Colors.disable()


_init_colors()


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


def _read_expr(text: str) -> Object:
    """Parse a literal argument; "-" reads the literal from stdin."""
    if text == "-":
        return parse_object(sys.stdin.read(), "<stdin>")
    return parse_object(text, "<arg>")


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="settheory",
        description="SetTheory - finite sets as immutable values",
    )

    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log debug output to stderr",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Show command
    show_parser = subparsers.add_parser(
        "show",
        aliases=["s"],
        help="Show the canonical rendering of an object",
    )
    show_parser.add_argument("expr", help='Set literal, e.g. "{1, {2}}" ("-" for stdin)')
    show_parser.add_argument(
        "--json",
        action="store_true",
        help="Output as JSON",
    )

    # Compare command
    compare_parser = subparsers.add_parser(
        "compare",
        aliases=["cmp"],
        help="Compare two objects in canonical order",
    )
    compare_parser.add_argument("left", help="First set literal")
    compare_parser.add_argument("right", help="Second set literal")
    compare_parser.add_argument(
        "--json",
        action="store_true",
        help="Output as JSON",
    )

    # Sort command
    sort_parser = subparsers.add_parser(
        "sort",
        help="Sort objects in canonical order",
    )
    sort_parser.add_argument("exprs", nargs="+", help="Set literals to sort")
    sort_parser.add_argument(
        "--keep-duplicates",
        action="store_true",
        help="Keep objects that are the same as an earlier one",
    )

    # Ops command
    ops_parser = subparsers.add_parser(
        "ops",
        help="Show union, intersection, differences and subset facts",
    )
    ops_parser.add_argument("left", help="First set literal")
    ops_parser.add_argument("right", help="Second set literal")

    # Power set command
    power_parser = subparsers.add_parser(
        "power",
        help="Show the power set of a set",
    )
    power_parser.add_argument("expr", help="Set literal")

    # Info command
    subparsers.add_parser(
        "info",
        help="Show version and literal syntax",
    )

    return parser


def cmd_show(args: argparse.Namespace) -> int:
    """Handle the show command."""
    obj = _read_expr(args.expr)
    text = to_string(obj)
    size = set_ops.cardinality(obj) if is_set(obj) else None

    if args.json:
        print(
            json.dumps(
                {
                    "text": text,
                    "kind": "set" if is_set(obj) else "atom",
                    "cardinality": size,
                    "height": height(obj),
                }
            )
        )
        return 0

    print(text)
    if size is not None:
        print(f"{Colors.GRAY}set of {size} element(s), height {height(obj)}{Colors.RESET}")
    else:
        print(f"{Colors.GRAY}atom{Colors.RESET}")
    return 0


def cmd_compare(args: argparse.Namespace) -> int:
    """Handle the compare command."""
    left = _read_expr(args.left)
    right = _read_expr(args.right)
    result = compare(left, right)

    if args.json:
        print(json.dumps({"left": to_string(left), "right": to_string(right), "result": result}))
        return 0

    symbol = {-1: "<", 0: "~", 1: ">"}[result]
    print(f"{to_string(left)} {Colors.CYAN}{symbol}{Colors.RESET} {to_string(right)}")
    return 0


def cmd_sort(args: argparse.Namespace) -> int:
    """Handle the sort command."""
    objects = sorted(_read_expr(expr) for expr in args.exprs)

    if not args.keep_duplicates:
        unique: list[Object] = []
        for obj in objects:
            if not unique or not equivalent(unique[-1], obj):
                unique.append(obj)
        objects = unique

    for obj in objects:
        print(to_string(obj))
    return 0


def cmd_ops(args: argparse.Namespace) -> int:
    """Handle the ops command."""
    a = _read_expr(args.left)
    b = _read_expr(args.right)

    rows = [
        ("A ∪ B", to_string(set_ops.union(a, b))),
        ("A ∩ B", to_string(set_ops.intersection(a, b))),
        ("A ∖ B", to_string(set_ops.difference(a, b))),
        ("B ∖ A", to_string(set_ops.difference(b, a))),
        ("A △ B", to_string(set_ops.symmetric_difference(a, b))),
        ("A ⊆ B", str(set_ops.is_subset(a, b))),
        ("B ⊆ A", str(set_ops.is_subset(b, a))),
        ("A ∈ B", str(set_ops.is_element_of(a, b))),
        ("B ∈ A", str(set_ops.is_element_of(b, a))),
    ]
    for label, value in rows:
        print(f"{Colors.CYAN}{label}{Colors.RESET}  {value}")
    return 0


def cmd_power(args: argparse.Namespace) -> int:
    """Handle the power command."""
    print(to_string(set_ops.power_set(_read_expr(args.expr))))
    return 0


def cmd_info(args: argparse.Namespace) -> int:
    """Handle the info command - show version and syntax."""
    print(f"""
{Colors.BOLD}SetTheory{Colors.RESET}
=========

{Colors.CYAN}Version:{Colors.RESET} {__version__}

{Colors.CYAN}Literal syntax:{Colors.RESET}
  1, x, "two words"     Atoms
  {{1, 2}}                A set
  {{}} or ∅               The empty set
  # comment             Ignored to end of line

{Colors.CYAN}Ordering:{Colors.RESET}
  Atoms come before sets; atoms compare by name;
  smaller sets come first, then elements are compared in order.
  Example: {to_string(make_set())} is the least set.

{Colors.CYAN}Commands:{Colors.RESET}
  settheory show <expr>          Canonical rendering
  settheory compare <a> <b>      Canonical order
  settheory sort <expr>...       Sort objects
  settheory ops <a> <b>          Set operations
  settheory power <expr>         Power set
""")
    return 0


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.verbose)

    if args.command is None:
        parser.print_help()
        return 0

    command_handlers = {
        "show": cmd_show,
        "s": cmd_show,
        "compare": cmd_compare,
        "cmp": cmd_compare,
        "sort": cmd_sort,
        "ops": cmd_ops,
        "power": cmd_power,
        "info": cmd_info,
    }

    handler = command_handlers.get(args.command)
    if handler is None:
        parser.print_help()
        return 1

    logger.debug("running command %s", args.command)
    try:
        return handler(args)
    except SetTheoryError as e:
        print(f"{Colors.RED}Error:{Colors.RESET} {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
