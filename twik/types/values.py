"""Value-kind helpers shared by the evaluator and the builtins."""

from __future__ import annotations

from fractions import Fraction
from numbers import Rational

from twik import LispValue
from twik.types.function import Function
from twik.types.nil import Nil


def is_rational(value: LispValue) -> bool:
    """True for exact rationals; bools are not numbers here."""
    return isinstance(value, Rational) and not isinstance(value, bool)


def is_false(value: LispValue) -> bool:
    """Only the Bool false is falsy; nil, 0 and "" are all truthy."""
    return value is False


def is_callable(value: LispValue) -> bool:
    return isinstance(value, Function) or callable(value)


def kind_of(value: LispValue) -> str:
    if isinstance(value, bool):
        return "bool"
    if is_rational(value):
        return "rational"
    if isinstance(value, str):
        return "string"
    if value is Nil:
        return "nil"
    if is_callable(value):
        return "function"
    return type(value).__name__


def values_equal(a: LispValue, b: LispValue) -> bool:
    """Equality used by == and !=.

    Values of different kinds are never equal. Rationals compare by reduced
    numeric value, functions by identity.
    """
    kind = kind_of(a)
    if kind != kind_of(b):
        return False
    if kind == "function":
        return a is b
    if kind == "rational":
        return Fraction(a) == Fraction(b)
    return a == b


_ESCAPES = {'"': '\\"', "\\": "\\\\", "\n": "\\n", "\t": "\\t"}


def to_source(value: LispValue) -> str:
    """Render a value the way it would be written in source."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is Nil:
        return "nil"
    if is_rational(value):
        f = Fraction(value)
        if f.denominator == 1:
            return str(f.numerator)
        return f"{f.numerator}/{f.denominator}"
    if isinstance(value, str):
        return '"' + "".join(_ESCAPES.get(c, c) for c in value) + '"'
    if isinstance(value, Function):
        return repr(value)
    if callable(value):
        return f"<builtin {getattr(value, '__name__', 'function')}>"
    return repr(value)
