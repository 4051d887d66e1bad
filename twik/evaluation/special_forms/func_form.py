from twik import EvaluatorFn
from twik import SExpression, LispValue
from twik.errors import TwikArityError, TwikMalformedForm
from twik.types.environment import Environment
from twik.types.function import Function
from twik.types.symbol import Symbol


def func_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (func [name] (params...) body...)

    Builds a closure over the defining scope. A named function is also
    created in that scope, so the body can call itself by name.
    """
    if len(tail) < 2:
        raise TwikArityError("func takes an optional name, a parameter list and a body")

    name: str | None = None
    rest = tail
    if isinstance(rest[0], Symbol):
        name = rest[0].id
        rest = rest[1:]

    params = rest[0]
    if not isinstance(params, list):
        raise TwikMalformedForm("func takes a list of parameters")

    seen: set[Symbol] = set()
    for param in params:
        if not isinstance(param, Symbol):
            raise TwikMalformedForm(f"func's parameters must be symbols, got {param!r}")
        if param in seen:
            raise TwikMalformedForm(f"func has duplicate parameter {param.id!r}")
        seen.add(param)

    body = rest[1:]
    if not body:
        raise TwikMalformedForm("func takes a body sequence")

    fn = Function(params, body, env, name)
    if name is not None:
        env.create(name, fn)
    return fn
