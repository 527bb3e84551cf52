"""Runtime environment for Lispy.

The Environment stores bindings of names to values and supports nested scopes
via an `outer` link. Values are deep copied on the way in and on the way out,
so a frame never shares mutable storage with the expression being evaluated.
"""

from __future__ import annotations

from io import StringIO
from typing import Optional

from lispy import LispValue
from lispy.types.error import UnboundSymbol
from lispy.types.symbol import Symbol
from lispy.types.value import copy_value


def _key(name: Symbol | str) -> str:
    return name.id if isinstance(name, Symbol) else name


class Environment:
    """Hierarchical mapping from names to Lisp values."""

    __slots__ = ("vars", "outer")

    def __init__(self, outer: Optional[Environment] = None):
        # Insertion ordered; names are unique within one frame
        self.vars: dict[str, LispValue] = {}
        self.outer: Environment | None = outer

    def define(self, name: Symbol | str, value: LispValue) -> None:
        """Bind `name` to a copy of `value` in this frame only.

        An existing binding in this frame is overwritten in place; otherwise
        a new binding is appended.
        """
        self.vars[_key(name)] = copy_value(value)

    def define_global(self, name: Symbol | str, value: LispValue) -> None:
        """Bind `name` in the root frame of the chain."""
        self.root().define(name, value)

    def find(self, name: Symbol | str) -> Optional[Environment]:
        """Find the nearest environment in the chain that contains `name`."""
        key = _key(name)
        env: Optional[Environment] = self
        while env is not None:
            if key in env.vars:
                return env
            env = env.outer
        return None

    def lookup(self, name: Symbol | str) -> LispValue:
        """Return a copy of the value bound to `name`.

        Local bindings win over the parent chain. An unbound name yields an
        UnboundSymbol error value rather than raising.
        """
        key = _key(name)
        env = self.find(key)
        if env is None:
            return UnboundSymbol(key)
        return copy_value(env.vars[key])

    def root(self) -> Environment:
        env = self
        while env.outer is not None:
            env = env.outer
        return env

    def copy(self) -> Environment:
        """New frame with the same parent and a deep copy of every binding."""
        env = Environment(self.outer)
        env.vars = {k: copy_value(v) for k, v in self.vars.items()}
        return env

    def with_outer(self, outer: Optional[Environment]) -> Environment:
        """A view of this frame's bindings chained onto a different parent.

        The view shares `vars` with this frame, so `define` through either is
        visible to both, while this frame's own `outer` is left untouched.
        """
        env = Environment(outer)
        env.vars = self.vars
        return env

    def update(self, mapping: dict[str, LispValue]) -> None:
        """Bulk-define a mapping of name -> value in the current frame."""
        for k, v in mapping.items():
            self.define(k, v)

    def __contains__(self, name: Symbol | str) -> bool:
        return self.find(name) is not None

    def _write_vars(self, buffer: StringIO) -> None:
        """Write this frame's variables into the buffer in a compact form."""
        buffer.write("{")
        first = True
        for k, v in self.vars.items():
            if not first:
                buffer.write(", ")
            buffer.write(f"{k}: {v!r}")
            first = False
        buffer.write("}")

    def __str__(self) -> str:
        """Human-readable single-frame view with an indicator for parent."""
        with StringIO() as buffer:
            self._write_vars(buffer)
            if self.outer is not None:
                buffer.write(" -> ...")  # indicate parent exists
            return buffer.getvalue()

    def __repr__(self) -> str:
        """Detailed chain representation for debugging purposes."""
        with StringIO() as buffer:
            buffer.write("<Environment chain: ")
            env = self
            chain = []
            while env is not None:
                env_buf: StringIO = StringIO()
                env._write_vars(env_buf)
                chain.append(env_buf.getvalue())
                env = env.outer
            buffer.write(" -> ".join(chain))
            buffer.write(">")
            return buffer.getvalue()
