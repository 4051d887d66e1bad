from twik import EvaluatorFn
from twik import SExpression, LispValue
from twik.errors import TwikArityError, TwikMalformedForm
from twik.types.environment import Environment
from twik.types.nil import Nil
from twik.types.symbol import Symbol


def set_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    if len(tail) != 2:
        raise TwikArityError("set takes exactly two arguments: (set name value)")
    var_sym, val_expr = tail
    if not isinstance(var_sym, Symbol):
        raise TwikMalformedForm(f"set takes a symbol as first argument, got {var_sym!r}")
    value = evaluate_fn(val_expr, env)
    env.set(var_sym, value)

    return Nil
