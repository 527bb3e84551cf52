"""
  Lispy Lexer and Parser

- Regex lexer yielding (token_type, token_value, offset) tuples
- Recursive parser producing an AstNode tree:

    - program -> ">" node wrapped in "regex" start/end markers
    - (...)   -> "expr|sexpr|>" with "char" punctuation leaves
    - {...}   -> "expr|qexpr|>" with "char" punctuation leaves
    - numbers, symbols, strings, comments -> "expr|<rule>|regex" leaves
    - builtin keywords -> "expr|symbol|string" leaves

  At each position a number is tried before a symbol, so "-5" is a number
  while "-" and "-x" are symbols.
"""

from __future__ import annotations

import re
from typing import Iterator, Optional

from lispy.errors import LispySyntaxError
from lispy.reader.ast import AstNode


TOKEN_RE = re.compile(
    r"(?P<whitespace>\s+)"
    r"|(?P<comment>;[^\r\n]*)"  # single-line comment
    r"|(?P<lparen>\()"  # (
    r"|(?P<rparen>\))"  # )
    r"|(?P<lbrace>\{)"  # {
    r"|(?P<rbrace>\})"  # }
    r'|(?P<string>"(?:\\.|[^\\"])*")'  # double-quoted strings
    r"|(?P<number>-?[0-9]+(?:\.[0-9]+)?)"
    r"|(?P<symbol>[a-zA-Z0-9_+\-*/\\=<>!&%^|]+)",
    re.DOTALL,
)

KEYWORDS = frozenset({"list", "head", "tail", "join", "eval", "len", "init", "cons"})

CLOSERS: dict[str, str] = {"lparen": ")", "lbrace": "}"}

Token = tuple[str, str, int]


def position(source: str, offset: int) -> tuple[int, int]:
    """1-based (line, column) of a character offset."""
    line = source.count("\n", 0, offset) + 1
    column = offset - (source.rfind("\n", 0, offset) + 1) + 1
    return line, column


def lex(source: str, filename: str = "<stdin>", token_re: re.Pattern = TOKEN_RE) -> Iterator[Token]:
    """Token generator: yields (token_type, token_value, offset) tuples."""
    pos = 0
    n = len(source)
    while pos < n:
        m = token_re.match(source, pos)
        if not m:
            line, column = position(source, pos)
            if source[pos] == '"':
                raise LispySyntaxError("unterminated string literal", filename, line, column)
            raise LispySyntaxError(f"unexpected character {source[pos]!r}", filename, line, column)
        kind = m.lastgroup
        if kind != "whitespace":
            yield kind, m.group(kind), pos
        pos = m.end()


class Parser:
    def __init__(
        self,
        source: str,
        filename: str = "<stdin>",
        token_re: re.Pattern = TOKEN_RE,
        keywords: frozenset[str] = KEYWORDS,
    ):
        self.source = source
        self.filename = filename
        self.keywords = keywords
        self.tokens = lex(source, filename, token_re)
        self.buffer: list[Token] = []

    def peek(self) -> Optional[Token]:
        if not self.buffer:
            try:
                self.buffer.append(next(self.tokens))
            except StopIteration:
                return None
        return self.buffer[0]

    def advance(self) -> Optional[Token]:
        if self.buffer:
            return self.buffer.pop(0)
        return next(self.tokens, None)

    def error(self, message: str, offset: int) -> LispySyntaxError:
        line, column = position(self.source, offset)
        return LispySyntaxError(message, self.filename, line, column)

    def node(self, tag: str, contents: str, offset: int) -> AstNode:
        line, column = position(self.source, offset)
        return AstNode(tag, contents, [], line, column)

    def parse_program(self) -> AstNode:
        root = AstNode(">")
        root.children.append(AstNode("regex"))
        while self.peek() is not None:
            root.children.append(self.parse_expr())
        root.children.append(AstNode("regex"))
        return root

    def parse_expr(self) -> AstNode:
        tok = self.advance()
        if tok is None:
            raise self.error("unexpected end of input", len(self.source))
        kind, value, offset = tok

        if kind == "number":
            return self.node("expr|number|regex", value, offset)
        if kind == "symbol":
            tag = "expr|symbol|string" if value in self.keywords else "expr|symbol|regex"
            return self.node(tag, value, offset)
        if kind == "string":
            return self.node("expr|string|regex", value, offset)
        if kind == "comment":
            return self.node("expr|comment|regex", value, offset)
        if kind in CLOSERS:
            return self.parse_list(kind, value, offset)

        raise self.error(f"unexpected '{value}'", offset)

    def parse_list(self, kind: str, opener: str, offset: int) -> AstNode:
        tag = "expr|sexpr|>" if kind == "lparen" else "expr|qexpr|>"
        closer = CLOSERS[kind]
        node = self.node(tag, "", offset)
        node.children.append(self.node("char", opener, offset))
        while True:
            tok = self.peek()
            if tok is None:
                raise self.error(f"expected '{closer}' but reached end of input", len(self.source))
            close_kind, value, close_offset = tok
            if close_kind in ("rparen", "rbrace"):
                self.advance()
                if value != closer:
                    raise self.error(f"expected '{closer}' but found '{value}'", close_offset)
                node.children.append(self.node("char", value, close_offset))
                return node
            node.children.append(self.parse_expr())
