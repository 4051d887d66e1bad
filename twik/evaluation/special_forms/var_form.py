from twik import EvaluatorFn
from twik import SExpression, LispValue
from twik.errors import TwikArityError, TwikMalformedForm
from twik.types.environment import Environment
from twik.types.nil import Nil
from twik.types.symbol import Symbol


def var_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (var name [value])
    Declares `name` in the current scope, initialised to `value` or nil.
    """
    if len(tail) not in (1, 2):
        raise TwikArityError("var takes one or two arguments: (var name [value])")

    name = tail[0]
    if not isinstance(name, Symbol):
        raise TwikMalformedForm(f"var takes a symbol as first argument, got {name!r}")

    value = evaluate_fn(tail[1], env) if len(tail) == 2 else Nil
    env.create(name, value)
    return Nil
