from twik import EvaluatorFn
from twik import SExpression, LispValue
from twik.types.environment import Environment
from twik.types.nil import Nil


def do_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (do expr...)
    Evaluates each expression in a new child scope and returns the last value,
    or nil when there are none.
    """
    block_env = env.branch()
    result: LispValue = Nil
    for e in tail:
        result = evaluate_fn(e, block_env)
    return result
