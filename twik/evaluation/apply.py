"""Application engine for Twik.

Both closures built by `func` and host builtins are applied here, so the
evaluator and any builtin that calls back into the language share one set of
call semantics.
"""

from __future__ import annotations

from twik import LispValue, EvaluatorFn
from twik.errors import TwikNotCallable
from twik.types.environment import Environment
from twik.types.function import Function
from twik.types.nil import Nil
from twik.types.values import to_source


def apply_function(fn: Function, args: list[LispValue], evaluate_fn: EvaluatorFn) -> LispValue:
    """Run a closure body in a fresh branch of its captured scope.

    The arguments are already evaluated. Returns the value of the last body node.
    """
    new_env = fn.extend_env(args)
    result: LispValue = Nil
    for node in fn.body:
        result = evaluate_fn(node, new_env)
    return result


def apply(
    head: LispValue,
    args: list[LispValue],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """Apply either a Function closure or a host builtin.

    Builtins are called as `builtin(env, args)` with the caller's scope.
    """
    if isinstance(head, Function):
        return apply_function(head, args, evaluate_fn)
    elif callable(head):
        return head(env, args)
    else:
        raise TwikNotCallable(f"Cannot call non-function {to_source(head)}")
