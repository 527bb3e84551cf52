"""Command line entry point: run source files or start the REPL."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Sequence

from lispy import __version__
from lispy.config import get_log_level
from lispy.errors import LispyError
from lispy.interpreter import Interpreter
from lispy.printer import to_string
from lispy.repl import run_repl
from lispy.types.error import Error

_logger = logging.getLogger("CLI")


def create_arg_parser() -> argparse.ArgumentParser:
    """Create command line argument parser"""
    parser = argparse.ArgumentParser(
        prog="lispy",
        description="Lispy - a small Lisp with Q-Expressions",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s                     # Start the interactive REPL
  %(prog)s hello.lspy          # Load and run a file
  %(prog)s a.lspy b.lspy       # Load several files in order
  %(prog)s --no-prelude        # REPL with builtins only
        """
    )

    parser.add_argument(
        'files',
        nargs='*',
        help='Source files to load; the REPL starts when none are given'
    )

    parser.add_argument(
        '--no-prelude',
        action='store_true',
        help='Do not load the standard prelude'
    )

    parser.add_argument(
        '--log-level',
        default=get_log_level(),
        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'],
        type=str.upper,
        help='Logging level (default: LISPY_LOG_LEVEL or WARNING)'
    )

    parser.add_argument(
        '--version',
        action='version',
        version=f'%(prog)s {__version__}'
    )

    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = create_arg_parser().parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    try:
        interp = Interpreter(prelude=None if args.no_prelude else 'auto')
    except LispyError as exc:
        print(f"lispy: {exc}", file=sys.stderr)
        return 1

    if not args.files:
        run_repl(interp)
        return 0

    status = 0
    for name in args.files:
        _logger.info("Running %s", name)
        try:
            result = interp.load(name)
        except RecursionError:
            _logger.error("Recursion limit exceeded loading %s", name)
            print("Error: Maximum recursion depth exceeded!")
            status = 1
            continue
        if isinstance(result, Error):
            print(to_string(result))
            status = 1

    return status


if __name__ == "__main__":
    sys.exit(main())
