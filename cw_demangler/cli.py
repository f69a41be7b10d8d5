"""
CLI for the demangler.
"""

import argparse
import logging
import sys
from typing import Iterator, Optional

from cw_demangler.demangler import DEFAULT_MAX_DEPTH, CWDemangler, DemangleError
from cw_demangler.display import display_name

parser = argparse.ArgumentParser(
    "cw-demangler", description="Demangler for Metrowerks CodeWarrior C++ symbols."
)
parser.add_argument(
    "symbols",
    help="Symbols to demangle. If none are given, symbols are read from stdin, one per line.",
    nargs="*",
    type=str,
)
parser.add_argument(
    "--error-on-failure",
    "-e",
    help="Fail if a symbol cannot be fully demangled",
    action="store_true",
)
parser.add_argument(
    "--display",
    "-d",
    help="Print the raw symbol when nothing useful can be demangled, and strip control characters",
    action="store_true",
)
parser.add_argument(
    "--width", "-w", help="Truncate display names to this many characters", type=int, default=None
)
parser.add_argument(
    "--max-depth",
    help=f"Maximum type nesting depth (default: {DEFAULT_MAX_DEPTH})",
    type=int,
    default=DEFAULT_MAX_DEPTH,
)
parser.add_argument("--verbose", "-v", help="Log every decoding fallback", action="store_true")


def _read_symbols(args: argparse.Namespace) -> Iterator[str]:
    if args.symbols:
        yield from args.symbols
    else:
        for line in sys.stdin:
            line = line.strip()
            if line:
                yield line


def main(argv: Optional[list[str]] = None) -> int:
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s: %(name)s: %(message)s",
    )

    demangler = CWDemangler(max_depth=args.max_depth)
    status = 0

    for symbol in _read_symbols(args):
        if args.error_on_failure:
            try:
                print(str(demangler.parse(symbol)))
            except DemangleError as e:
                print(f"error: {e}", file=sys.stderr)
                status = 1
        elif args.display or args.width is not None:
            print(display_name(symbol, width=args.width, demangler=demangler))
        else:
            print(demangler.demangle(symbol))

    return status


if __name__ == "__main__":
    sys.exit(main())
