import math
from fractions import Fraction

import pytest
from hypothesis import given, strategies as st

from twik.builtin.env_builtin import add, sub, mul, div
from twik.errors import TwikArityError, TwikDivisionByZero, TwikTypeError


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(+ 1 2 3)", 6),
        ("(- 10 3 2)", 5),
        ("(* 2 3 4)", 24),
        ("(/ 12 3)", 4),
        ("(/ 1 3)", Fraction(1, 3)),
        ("(/ 1 2 2)", Fraction(1, 4)),
        ("(+ (/ 1 3) (/ 2 3))", 1),
        ("(+ 1 2.5 3)", Fraction(13, 2)),
        ("(* 0.1 3)", Fraction(3, 10)),
        ("(+ 0.1 0.2)", Fraction(3, 10)),
        ("(- 5)", -5),
        ("(- -10 -5)", -5),
        ("(* -2 3)", -6),
        ("(/ -12 3)", -4),
        ("(+)", 0),
        ("(*)", 1),
        ("(+ 1 (* 2 (+ 3 4) (- 10 6)))", 57),
        ("(/ (* (+ 8 2) 5) (- 20 10))", 5),
        ("(+ 1/3 1/6)", Fraction(1, 2)),
    ]
)
def test_arithmetic(run, source, expected):
    result = run(source)
    assert isinstance(result, Fraction)
    assert result == expected


def test_results_are_reduced(run):
    result = run("(/ 4 6)")
    assert (result.numerator, result.denominator) == (2, 3)


def test_division_by_zero(run):
    with pytest.raises(TwikDivisionByZero):
        run("(/ 1 0)")
    with pytest.raises(TwikDivisionByZero):
        run("(/ 1 2 (- 3 3))")


@pytest.mark.parametrize(
    "source",
    ["(-)", "(/)", "(/ 1)"],
)
def test_arity(run, source):
    with pytest.raises(TwikArityError):
        run(source)


@pytest.mark.parametrize(
    "source,message",
    [
        ('(+ 1 "a")', 'cannot sum "a"'),
        ("(- true)", "cannot subtract true"),
        ("(* 2 nil)", "cannot multiply nil"),
        ('(/ "x" 2)', 'cannot divide with "x"'),
    ]
)
def test_non_rationals_are_rejected(run, source, message):
    with pytest.raises(TwikTypeError, match=message):
        run(source)


def test_host_ints_are_rationals():
    assert add(None, [1, Fraction(1, 2)]) == Fraction(3, 2)
    assert mul(None, [3, 4]) == 12


def test_bools_are_not_numbers():
    with pytest.raises(TwikTypeError):
        add(None, [True, 1])


# -------------------------------
# Hypothesis tests
# -------------------------------
nonzero_fractions = st.fractions().filter(lambda f: f != 0)


@given(st.fractions(), nonzero_fractions)
def test_divide_then_multiply_is_identity(a, b):
    assert mul(None, [div(None, [a, b]), b]) == a


@given(st.lists(st.fractions()))
def test_addition_commutes(xs):
    assert add(None, list(reversed(xs))) == add(None, xs)


@given(st.lists(st.fractions()), st.lists(st.fractions()))
def test_addition_associates(xs, ys):
    assert add(None, [add(None, xs), add(None, ys)]) == add(None, xs + ys)


@given(st.lists(st.fractions()))
def test_results_stay_reduced(xs):
    total = mul(None, [add(None, xs), Fraction(2, 4)])
    assert math.gcd(total.numerator, total.denominator) == 1


def test_sub_does_not_mutate_arguments():
    a = Fraction(10)
    sub(None, [a, 3])
    assert a == 10
