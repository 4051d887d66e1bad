"""Closure representation for Twik."""

from __future__ import annotations

from io import StringIO

from twik import SExpression
from twik.errors import TwikArityError
from twik.types.environment import Environment
from twik.types.symbol import Symbol


class Function:
    """A closure built by `func`: formal parameters, body and defining scope."""

    __slots__ = ("name", "formals", "body", "env")

    def __init__(
        self,
        formals: list[Symbol],
        body: list[SExpression],
        env: Environment,
        name: str | None = None,
    ):
        self.name: str | None = name
        self.formals: tuple[Symbol, ...] = tuple(formals)
        self.body: tuple[SExpression, ...] = tuple(body)
        self.env: Environment = env

    @property
    def display_name(self) -> str:
        return f"function {self.name!r}" if self.name else "anonymous function"

    def check_arity(self, args: list) -> None:
        """Raise TwikArityError unless exactly one argument per formal was given."""
        arity = len(self.formals)
        if len(args) == arity:
            return
        if arity == 0:
            expected = "no arguments"
        elif arity == 1:
            expected = "one argument"
        else:
            expected = f"{arity} arguments"
        raise TwikArityError(f"{self.display_name} takes {expected}, got {len(args)}")

    def extend_env(self, args: list) -> Environment:
        """Branch the captured scope and bind each formal to its argument."""
        self.check_arity(args)
        new_env = self.env.branch()
        for formal, arg in zip(self.formals, args):
            new_env.create(formal, arg)
        return new_env

    def __str__(self) -> str:
        with StringIO() as buffer:
            buffer.write("(func ")
            if self.name:
                buffer.write(self.name)
                buffer.write(" ")
            buffer.write("(")
            buffer.write(" ".join(str(f) for f in self.formals))
            buffer.write(") ...)")
            return buffer.getvalue()

    def __repr__(self) -> str:
        return f"<{self.display_name}>"
