"""Lexical scopes for Twik.

An Environment is one binding table plus an optional `outer` link. New names
are only ever created in the table they are declared in, while lookup and
assignment search outward through the chain and act on the nearest table that
already binds the name.
"""

from __future__ import annotations

from io import StringIO
from typing import Mapping, Optional

from twik import LispValue
from twik.errors import TwikDuplicateBinding, TwikUnboundSymbol
from twik.types.symbol import Symbol


def _key(name: Symbol | str) -> str:
    return name.id if isinstance(name, Symbol) else name


class Environment:
    """Hierarchical mapping from names to Twik values."""

    __slots__ = ("vars", "outer")

    def __init__(self, outer: Optional[Environment] = None):
        self.vars: dict[str, LispValue] = {}
        self.outer: Environment | None = outer

    def create(self, name: Symbol | str, value: LispValue) -> None:
        """Bind `name` to `value` in this table only.

        Raises TwikDuplicateBinding if this table already binds `name`. Bindings
        in outer tables do not count and are shadowed by the new one.
        """
        key = _key(name)
        if key in self.vars:
            raise TwikDuplicateBinding(f"Symbol {key!r} is already defined in this scope")
        self.vars[key] = value

    def defines(self, name: Symbol | str) -> bool:
        """Whether this table itself binds `name`."""
        return _key(name) in self.vars

    def find(self, name: Symbol | str) -> Optional[Environment]:
        """Find the nearest environment in the chain that binds `name`."""
        key = _key(name)
        env: Optional[Environment] = self
        while env is not None:
            if key in env.vars:
                return env
            env = env.outer
        return None

    def set(self, name: Symbol | str, value: LispValue) -> None:
        """Update the nearest existing binding for `name`.

        Raises TwikUnboundSymbol if no table in the chain binds `name`.
        """
        env = self.find(name)
        if env is None:
            raise TwikUnboundSymbol(f"Cannot set undefined symbol {_key(name)!r}")
        env.vars[_key(name)] = value

    def lookup(self, name: Symbol | str) -> LispValue:
        """Return the value bound to `name` in the nearest table that binds it."""
        env = self.find(name)
        if env is None:
            raise TwikUnboundSymbol(f"Undefined symbol {_key(name)!r}")
        return env.vars[_key(name)]

    def branch(self) -> Environment:
        """Return a new empty table whose outer table is this one."""
        return Environment(outer=self)

    def root(self) -> Environment:
        env = self
        while env.outer is not None:
            env = env.outer
        return env

    def update(self, mapping: Mapping[Symbol | str, LispValue]) -> None:
        """Bulk-create a mapping of names in the current table."""
        for k, v in mapping.items():
            self.create(k, v)

    def _write_vars(self, buffer: StringIO) -> None:
        buffer.write("{")
        buffer.write(", ".join(f"{k}: {v!r}" for k, v in self.vars.items()))
        buffer.write("}")

    def __str__(self) -> str:
        with StringIO() as buffer:
            self._write_vars(buffer)
            if self.outer is not None:
                buffer.write(" -> ...")
            return buffer.getvalue()

    def __repr__(self) -> str:
        """Chain representation, innermost table first."""
        with StringIO() as buffer:
            buffer.write("<Environment chain: ")
            env: Optional[Environment] = self
            first = True
            while env is not None:
                if not first:
                    buffer.write(" -> ")
                env._write_vars(buffer)
                first = False
                env = env.outer
            buffer.write(">")
            return buffer.getvalue()
