"""Runtime environment for Tulip.

The Environment stores bindings of Symbols to Lisp values and supports nested
scopes via an `outer` link. Lookups fall through the chain of outer scopes;
writes always land in the local frame.

Parents are plain Python references, so a child scope keeps its parent alive
for as long as the child itself is reachable.
"""

from __future__ import annotations

from io import StringIO
from typing import Iterator, Optional, Union

from tulip import LispValue
from tulip.errors import TulipTypeError, TulipUnboundSymbol
from tulip.types.symbol import Symbol

Name = Union[Symbol, str]


def _as_symbol(name: Name) -> Symbol:
    if isinstance(name, Symbol):
        return name
    if isinstance(name, str):
        return Symbol(name)
    raise TulipTypeError(f"Cannot bind {name!r}: binding names must be atoms")


class Environment:
    """Hierarchical mapping from Symbols to Lisp values."""

    __slots__ = ("vars", "outer")

    def __init__(self, outer: Optional[Environment] = None):
        self.vars: dict[Symbol, LispValue] = {}
        self.outer: Environment | None = outer

    def find(self, name: Name) -> Optional[Environment]:
        """Find the nearest environment in the chain that binds `name`."""
        symbol = _as_symbol(name)
        env: Optional[Environment] = self
        while env is not None:
            if symbol in env.vars:
                return env
            env = env.outer
        return None

    def get(self, name: Name) -> Optional[LispValue]:
        """Return the value bound to `name`, or None when the chain is exhausted."""
        symbol = _as_symbol(name)
        env = self.find(symbol)
        if env is None:
            return None
        return env.vars[symbol]

    def lookup(self, name: Name) -> LispValue:
        """Like `get`, but raise TulipUnboundSymbol when `name` is not bound."""
        symbol = _as_symbol(name)
        env = self.find(symbol)
        if env is None:
            raise TulipUnboundSymbol(f"Unbound symbol {symbol}")
        return env.vars[symbol]

    def set(self, name: Name, value: LispValue) -> None:
        """Bind `name` in this frame. Outer frames are never written."""
        self.vars[_as_symbol(name)] = value

    def combine(self, other: Environment) -> None:
        """Copy the local bindings of `other` into this frame, overwriting on conflict."""
        self.vars.update(other.vars)

    def set_parent(self, parent: Optional[Environment]) -> None:
        self.outer = parent

    def update(self, mapping: dict[Name, LispValue]) -> None:
        """Bulk-define a mapping of names to values in the current frame."""
        for k, v in mapping.items():
            self.set(k, v)

    def __contains__(self, name: Name) -> bool:
        return self.find(name) is not None

    def __iter__(self) -> Iterator[Symbol]:
        return iter(self.vars)

    def __len__(self) -> int:
        return len(self.vars)

    def _write_vars(self, buffer: StringIO) -> None:
        """Write this frame's variables into the buffer in a compact form."""
        buffer.write("{")
        buffer.write(", ".join(f"{k}: {v!r}" for k, v in self.vars.items()))
        buffer.write("}")

    def __str__(self) -> str:
        """Single-frame view with an indicator for parent."""
        with StringIO() as buffer:
            self._write_vars(buffer)
            if self.outer is not None:
                buffer.write(" -> ...")
            return buffer.getvalue()

    def __repr__(self) -> str:
        """Full chain representation for debugging purposes."""
        chain = []
        env: Optional[Environment] = self
        while env is not None:
            with StringIO() as env_buf:
                env._write_vars(env_buf)
                chain.append(env_buf.getvalue())
            env = env.outer
        return "<Environment chain: " + " -> ".join(chain) + ">"
