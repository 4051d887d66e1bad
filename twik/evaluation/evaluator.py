"""Core evaluator for the Twik interpreter.

Dispatches a node on its kind: literals evaluate to themselves, symbols are
looked up in the current scope, and lists are either special forms (handed
their operands unevaluated) or ordinary calls (operator and arguments
evaluated left-to-right, then applied).
"""

from __future__ import annotations

import logging

from twik import SExpression, LispValue
from twik.errors import TwikError, TwikMalformedForm, TwikNotCallable, TwikRecursionError
from twik.types.environment import Environment
from twik.types.symbol import Symbol
from twik.types.values import is_callable, to_source
from twik.evaluation.apply import apply
from twik.evaluation.special_forms import SPECIAL_FORMS


_logger = logging.getLogger("TwikEvaluator")


def evaluate(expr: SExpression, env: Environment) -> LispValue:
    """
    Top-level entry point: evaluate `expr` in `env` and return its value.

    Any TwikError raised while evaluating propagates unchanged. Runaway
    recursion is reported as TwikRecursionError.
    """
    try:
        return evaluate0(expr, env)
    except RecursionError as e:
        _logger.debug("Recursion limit reached while evaluating %r", expr)
        raise TwikRecursionError("Maximum recursion depth exceeded") from e
    except TwikError as e:
        _logger.debug("Evaluation failed: %s", e)
        raise


def evaluate0(expr: SExpression, env: Environment) -> LispValue:
    """
    Core evaluator: one recursive evaluation step.
    """
    match expr:
        case []:
            raise TwikMalformedForm("Cannot evaluate an empty call form ()")

        case [head, *tail_args]:
            # --- Special forms handling ---
            if isinstance(head, Symbol) and head in SPECIAL_FORMS:
                return SPECIAL_FORMS[head](tail_args, env, evaluate0)

            fn = evaluate0(head, env)
            if not is_callable(fn):
                raise TwikNotCallable(f"Cannot call non-function {to_source(fn)}")

            args = [evaluate0(arg, env) for arg in tail_args]
            return apply(fn, args, env, evaluate0)

        case Symbol():
            return env.lookup(expr)

    # --- Literals return as-is ---
    return expr
