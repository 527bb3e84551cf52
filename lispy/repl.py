"""Interactive read-eval-print loop."""

from __future__ import annotations

import logging
from typing import Callable

try:
    import readline  # noqa: F401  line editing and history for input()
except ImportError:
    readline = None

from lispy import __version__
from lispy.errors import LispySyntaxError
from lispy.interpreter import Interpreter
from lispy.printer import to_string

_logger = logging.getLogger("REPL")

PROMPT = "lispy> "
BANNER = (
    f"Lispy Version {__version__}\n"
    "Press Ctrl+c to Exit\n"
)


def run_repl(interp: Interpreter, input_fn: Callable[[str], str] = input) -> None:
    """Read a line, evaluate it, print the result. Stops on EOF or Ctrl+C."""
    print(BANNER)
    while True:
        try:
            line = input_fn(PROMPT)
        except (EOFError, KeyboardInterrupt):
            print()
            break

        if not line.strip():
            continue

        try:
            result = interp.eval(line)
        except LispySyntaxError as exc:
            print(exc)
            continue
        except RecursionError:
            _logger.error("Recursion limit exceeded evaluating %r", line)
            print("Error: Maximum recursion depth exceeded!")
            continue

        print(to_string(result))
