"""Built-in functions for the Twik runtime environment.

This module defines the equality operators, exact rational arithmetic and the
`error` function, plus the registration helper that seeds a root scope.
Builtins are called as `fn(env, args)` with already-evaluated arguments.
"""
from __future__ import annotations

from fractions import Fraction

from twik import LispValue
from twik.errors import TwikArityError, TwikDivisionByZero, TwikTypeError, TwikUserError
from twik.types.environment import Environment
from twik.types.nil import Nil
from twik.types.values import is_rational, to_source, values_equal


def _rational(verb: str, value: LispValue) -> Fraction:
    if not is_rational(value):
        raise TwikTypeError(f"cannot {verb} {to_source(value)}")
    return Fraction(value)


# -------------------------------
# Equality
# -------------------------------
def equals(env: Environment, args: list[LispValue]) -> bool:
    """(== a b): true if both values are of the same kind and equal."""
    if len(args) != 2:
        raise TwikArityError("== expects two values")
    return values_equal(args[0], args[1])


def not_equals(env: Environment, args: list[LispValue]) -> bool:
    """(!= a b): logical negation of ==."""
    if len(args) != 2:
        raise TwikArityError("!= expects two values")
    return not values_equal(args[0], args[1])


# -------------------------------
# Arithmetic
# -------------------------------
def add(env: Environment, args: list[LispValue]) -> Fraction:
    """Sum of all arguments; (+) is 0."""
    result = Fraction(0)
    for x in args:
        result += _rational("sum", x)
    return result


def sub(env: Environment, args: list[LispValue]) -> Fraction:
    """Subtract the rest from the first argument; one argument negates it."""
    if not args:
        raise TwikArityError('function "-" takes one or more arguments')
    if len(args) == 1:
        return -_rational("subtract", args[0])
    result = _rational("subtract", args[0])
    for x in args[1:]:
        result -= _rational("subtract", x)
    return result


def mul(env: Environment, args: list[LispValue]) -> Fraction:
    """Product of all arguments; (*) is 1."""
    result = Fraction(1)
    for x in args:
        result *= _rational("multiply", x)
    return result


def div(env: Environment, args: list[LispValue]) -> Fraction:
    """Divide the first argument by each of the rest, left to right."""
    if len(args) < 2:
        raise TwikArityError('function "/" takes two or more arguments')
    result = _rational("divide with", args[0])
    for x in args[1:]:
        divisor = _rational("divide with", x)
        if divisor == 0:
            raise TwikDivisionByZero(f"division by zero: {to_source(result)} / 0")
        result /= divisor
    return result


# -------------------------------
# Errors
# -------------------------------
def error(env: Environment, args: list[LispValue]) -> LispValue:
    """(error "message"): always fails with the given message."""
    if len(args) != 1:
        raise TwikArityError("error function takes a single string argument")
    if not isinstance(args[0], str):
        raise TwikTypeError(f"error function takes a string, got {to_source(args[0])}")
    raise TwikUserError(args[0])


def register(env: Environment) -> None:
    """Register all builtin functions and constants into the given environment."""
    env.update(
        {
            "true": True,
            "false": False,
            "nil": Nil,
            "error": error,
            "==": equals,
            "!=": not_equals,
            "+": add,
            "-": sub,
            "*": mul,
            "/": div,
        }
    )


def default_environment() -> Environment:
    """A fresh root scope seeded with the default builtins."""
    env = Environment()
    register(env)
    return env
