"""Convert parse trees into Lispy values.

Leaves are classified by substring of their tag (number, symbol, string, in
that order); every other node becomes a list whose children are read
recursively, skipping grammar punctuation, start/end markers and comments.
"""

from __future__ import annotations

import math
import re
from os import PathLike
from pathlib import Path

from lispy import LispValue
from lispy.errors import LispySyntaxError
from lispy.reader.ast import AstNode
from lispy.reader.parser import KEYWORDS, TOKEN_RE, Parser, position
from lispy.types.error import Error
from lispy.types.expr import Expr, QExpr, SExpr
from lispy.types.symbol import Symbol

PUNCTUATION = frozenset({"(", ")", "{", "}"})

UNESCAPES: dict[str, str] = {
    "a": "\a",
    "b": "\b",
    "f": "\f",
    "n": "\n",
    "r": "\r",
    "t": "\t",
    "v": "\v",
    "\\": "\\",
    "'": "'",
    '"': '"',
    "0": "\0",
}

_ESCAPE_RE = re.compile(r"\\(.)", re.DOTALL)


def unescape(text: str) -> str:
    """Decode backslash escapes; unknown escapes are kept verbatim."""
    return _ESCAPE_RE.sub(lambda m: UNESCAPES.get(m.group(1), m.group(0)), text)


def read_number(text: str) -> LispValue:
    try:
        x = float(text)
    except ValueError:
        return Error("invalid number")
    return x if math.isfinite(x) else Error("invalid number")


def read_string(text: str) -> str:
    # Strip the surrounding quotes
    return unescape(text[1:-1])


def _skip(node: AstNode) -> bool:
    return node.contents in PUNCTUATION or node.tag == "regex" or "comment" in node.tag


def read_node(node: AstNode) -> LispValue:
    if "number" in node.tag:
        return read_number(node.contents)
    if "symbol" in node.tag:
        return Symbol(node.contents)
    if "string" in node.tag:
        return read_string(node.contents)

    x: Expr = QExpr() if "qexpr" in node.tag else SExpr()
    for child in node.children:
        if _skip(child):
            continue
        x.append(read_node(child))
    return x


class Reader:
    """Parser context shared by every call site that turns text into values.

    One Reader is built per interpreter and handed to the REPL and to the
    `load` builtin, rather than keeping grammar objects in module globals.
    """

    def __init__(self, token_re: re.Pattern = TOKEN_RE, keywords: frozenset[str] = KEYWORDS):
        self.token_re = token_re
        self.keywords = keywords

    def parse(self, source: str, filename: str = "<stdin>") -> AstNode:
        """Parse a whole program; raises LispySyntaxError."""
        return Parser(source, filename, self.token_re, self.keywords).parse_program()

    def read(self, source: str, filename: str = "<stdin>") -> SExpr:
        """The whole program as one S-Expression, as the REPL evaluates it."""
        return read_node(self.parse(source, filename))

    def read_forms(self, source: str, filename: str = "<stdin>") -> list[LispValue]:
        """Top-level forms, as `load` evaluates them one by one."""
        return self.read(source, filename).cells

    def read_file(self, path: str | PathLike) -> list[LispValue]:
        """Read the forms of a source file; raises OSError or LispySyntaxError."""
        p = Path(path)
        data = p.read_bytes()
        try:
            source = data.decode("utf-8")
        except UnicodeDecodeError as exc:
            prefix = data[:exc.start].decode("utf-8")
            line, column = position(prefix, len(prefix))
            raise LispySyntaxError(f"invalid UTF-8: {exc.reason}", str(p), line, column) from exc
        return self.read_forms(source, str(p))
