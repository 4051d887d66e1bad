from twik import SExpression, LispValue
from twik.types.environment import Environment
from twik.types.values import is_false


def and_form(tail: list[SExpression], env: Environment, evaluate_fn) -> LispValue:
    """Short-circuiting logical AND special form.

    (and a b c ...) evaluates each operand left-to-right and returns false as
    soon as one evaluates to false; later operands are never evaluated. Otherwise
    returns the value of the last operand. With zero operands, returns true.
    """
    result: LispValue = True
    for expr in tail:
        result = evaluate_fn(expr, env)
        if is_false(result):
            return False
    return result


def or_form(tail: list[SExpression], env: Environment, evaluate_fn) -> LispValue:
    """Short-circuiting logical OR special form.

    (or a b c ...) evaluates each operand left-to-right and returns the first
    value that is not false. If every operand is false, returns false. With zero
    operands, returns false.
    """
    result: LispValue = False
    for expr in tail:
        result = evaluate_fn(expr, env)
        if not is_false(result):
            return result
    return result
