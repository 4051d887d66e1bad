from twik import EvaluatorFn
from twik import SExpression, LispValue
from twik.errors import TwikArityError
from twik.types.environment import Environment
from twik.types.values import is_false


def if_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    if len(tail) not in (2, 3):
        raise TwikArityError("if takes two or three arguments: (if cond then [else])")

    cond = evaluate_fn(tail[0], env)
    # Only the boolean false is falsy
    if not is_false(cond):
        return evaluate_fn(tail[1], env)
    elif len(tail) == 3:
        return evaluate_fn(tail[2], env)
    else:
        return False
