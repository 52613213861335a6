class LispleError(Exception):
    """ Base class for all Lisple errors"""
    pass


class UnboundSymbolError(LispleError):
    """ Raised when a symbol is looked up or assigned before it is bound"""

    def __init__(self, name: str):
        super().__init__(f"Unbound symbol '{name}'")
        self.name = name


class MalformedFormError(LispleError):
    """ Raised when a special form has the wrong arity or shape"""

    def __init__(self, form, reason: str):
        super().__init__(f"Malformed {form}: {reason}")
        self.form = form
        self.reason = reason


class NotAProcedureError(LispleError):
    """ Raised when the head of an application is not a procedure"""

    def __init__(self, value):
        super().__init__(f"Not a procedure: {value}")
        self.value = value


class ArityMismatchError(LispleError):
    """ Raised when a procedure receives the wrong number of arguments"""

    def __init__(self, expected, got: int, name: str | None = None):
        prefix = f"{name}: " if name else ""
        super().__init__(f"{prefix}expected {expected} argument(s), got {got}")
        self.expected = expected
        self.got = got
        self.name = name


class ParseError(LispleError):
    """ Raised when the reader meets malformed input"""

    def __init__(self, reason: str):
        super().__init__(f"Parse error: {reason}")
        self.reason = reason


class LispTypeError(LispleError):
    """ Raised when a primitive receives a value of the wrong kind"""

    def __init__(self, expected: str, got):
        super().__init__(f"Expected {expected}, got {got}")
        self.expected = expected
        self.got = got


class DivisionByZeroError(LispleError):
    """ Raised on integer division by zero"""


class LoadError(LispleError):
    """ Raised when a source file cannot be found or read"""

    def __init__(self, path: str, reason: str):
        super().__init__(f"Cannot load '{path}': {reason}")
        self.path = path
        self.reason = reason
