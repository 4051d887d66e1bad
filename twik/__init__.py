# Core type aliases for Twik's data model.
# Code and runtime values are plain Python objects:
# - Symbol nodes are twik.types.symbol.Symbol
# - List nodes are Python lists
# - anything else is a literal and evaluates to itself
#
# Runtime values are bool, fractions.Fraction (exact rationals), str, Nil and
# callables (Function closures or host built-ins taking (scope, args)).

from typing import Any, Callable

# Runtime value alias
LispValue = Any
# Parsed source node alias
SExpression = LispValue

# Evaluator function type: Python evaluator used inside special forms
EvaluatorFn = Callable[..., LispValue]

__version__ = "0.1.0"
