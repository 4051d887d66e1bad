import logging
import sys

from twik import LispValue, SExpression
from twik.config import get_recursion_limit
from twik.reader.parser import read
from twik.evaluation.evaluator import evaluate
from twik.types.nil import Nil
from twik.types.environment import Environment
from twik.builtin.env_builtin import register


class Interpreter:
    """
    Host-facing facade: owns one root scope seeded with the builtins and
    evaluates source text or parsed nodes against it.
    """
    def __init__(self):
        self._logger = logging.getLogger("TwikInterpreter")

        self.env = Environment()
        register(self.env)

        limit = get_recursion_limit()
        if limit is not None and limit > sys.getrecursionlimit():
            self._logger.debug("Raising recursion limit to %d", limit)
            sys.setrecursionlimit(limit)

    def define(self, name: str, value: LispValue) -> None:
        """Add a host value or builtin `fn(env, args)` to the root scope."""
        self.env.create(name, value)

    def eval_node(self, node: SExpression) -> LispValue:
        """Evaluate an already-parsed node in the root scope."""
        return evaluate(node, self.env)

    def eval(self, code: str) -> LispValue:
        """Evaluate every top-level form in `code`, returning the last value."""
        result: LispValue = Nil
        for expr in read(code):
            result = evaluate(expr, self.env)
        self._logger.debug("Evaluated %r", code)
        return result

#  Example use-age:
if __name__ == "__main__":
    from twik.types.values import to_source

    interp = Interpreter()

    tests = [
        "(+ 1 2 3)                               ;; -> 6",
        "(/ 1 3)                                 ;; -> 1/3",
        "(var x 5) (set x 6) x                   ;; -> 6",
        "(func fact (n) (if (== n 0) 1 (* n (fact (- n 1))))) (fact 10)",
        '(if 0 "a" "b")                          ;; -> "a"',
        "(or false nil)                          ;; -> nil",
    ]

    for code in tests:
        result = interp.eval(code)
        print(code, "=>", to_source(result))
