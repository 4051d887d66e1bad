class TwikError(Exception):
    """ Base class for all Twik errors"""
    pass

class TwikDuplicateBinding(TwikError):
    """ Raised when a name is created twice in the same scope"""
    pass

class TwikUnboundSymbol(TwikError):
    """ Raised when a symbol is used or set before it is bound"""
    pass

class TwikTypeError(TwikError):
    """ Raised when an operator receives a value of the wrong kind"""

class TwikArityError(TwikError):
    """ Raised when the number of arguments passed to a form or function is incorrect"""

class TwikNotCallable(TwikError):
    """ Raised when the head of a call form is not a function"""

class TwikDivisionByZero(TwikError):
    """ Raised when dividing by a zero rational"""

class TwikMalformedForm(TwikError):
    """ Raised when a special form does not have its required shape"""

class TwikSyntaxError(TwikError):
    """ Raised when the reader cannot parse source text"""

    def __init__(self, message: str, position: int | None = None):
        self.position = position
        if position is not None:
            message = f"{message} at position {position}"
        super().__init__(message)

class TwikRecursionError(TwikError):
    """ Raised when evaluation recurses deeper than the interpreter allows"""

class TwikUserError(TwikError):
    """ Raised by the `error` builtin, carrying the user's message verbatim"""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)
