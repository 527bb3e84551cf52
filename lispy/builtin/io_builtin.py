"""I/O and meta builtins: load print read error env exit"""

from __future__ import annotations

import logging
import math
import sys

from lispy import LispValue
from lispy.builtin.assertions import check_count, check_type
from lispy.errors import LispySyntaxError
from lispy.evaluation.evaluator import evaluate
from lispy.modules.loader import resolve_source
from lispy.printer import to_string
from lispy.reader.reader import Reader
from lispy.types.environment import Environment
from lispy.types.error import Error, ParseFailure, UserError, WrongArgumentCount
from lispy.types.expr import QExpr, SExpr
from lispy.types.symbol import Symbol

_logger = logging.getLogger("Builtins")

OK = Symbol("ok")


def load(env: Environment, args: list[LispValue], reader: Reader) -> LispValue:
    """(load "file.lspy"): evaluate each top-level form of a source file.

    Forms are evaluated in order in the calling environment; any form that
    evaluates to an error has that error printed and loading continues.
    Other results are not printed, the same as a file run from the command
    line; only failures are reported.
    A file that cannot be read or parsed yields a single ParseFailure.
    """
    if (err := check_count("load", args, 1)) is not None:
        return err
    if (err := check_type("load", args, 0, "String")) is not None:
        return err

    name = args[0]
    path = resolve_source(name)
    if path is None:
        return ParseFailure(f"'{name}': no such file")

    _logger.debug("Loading %s", path)
    try:
        forms = reader.read_file(path)
    except (OSError, LispySyntaxError) as exc:
        return ParseFailure(str(exc))

    for form in forms:
        result = evaluate(form, env)
        if isinstance(result, Error):
            print(to_string(result))

    return SExpr()


def print_builtin(env: Environment, args: list[LispValue]) -> LispValue:
    """Print space-separated representations of args followed by newline; returns ok."""
    print(" ".join(to_string(a) for a in args))
    return OK


def read(env: Environment, args: list[LispValue]) -> LispValue:
    """(read "text") -> {"text"}, unevaluated."""
    if (err := check_count("read", args, 1)) is not None:
        return err
    if (err := check_type("read", args, 0, "String")) is not None:
        return err
    return QExpr(args)


def error(env: Environment, args: list[LispValue]) -> LispValue:
    if (err := check_count("error", args, 1)) is not None:
        return err
    if (err := check_type("error", args, 0, "String")) is not None:
        return err
    return UserError(args[0])


def env_builtin(env: Environment, args: list[LispValue]) -> LispValue:
    """Print the bindings of the current frame, one per line.

    Arguments are ignored. A lone `(env)` reduces to the builtin itself, so
    the dump is requested as `(env ())`.
    """
    for name, value in env.vars.items():
        print(f"{name} = {to_string(value)}")
    return SExpr()


def exit_builtin(env: Environment, args: list[LispValue]) -> LispValue:
    """(exit status) terminates the process.

    A status that is not a finite number (nan, inf) exits with status 1.
    """
    if len(args) > 1:
        return WrongArgumentCount("exit", len(args), 1)
    if args and (err := check_type("exit", args, 0, "Number")) is not None:
        return err
    status = args[0] if args else 0
    sys.exit(int(status) if math.isfinite(status) else 1)
