from twik.types.symbol import Symbol
from twik.types.nil import Nil
from twik.types.environment import Environment
from twik.types.function import Function

__all__ = ["Symbol", "Nil", "Environment", "Function"]
