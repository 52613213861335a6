from lisple.errors import MalformedFormError
from lisple.types import Symbol

QUOTE = Symbol("quote")
IF = Symbol("if")
SET = Symbol("set!")
DEFINE = Symbol("define")
LAMBDA = Symbol("lambda")
BEGIN = Symbol("begin")
LOAD = Symbol("load")

SPECIAL_FORM_NAMES = frozenset({QUOTE, IF, SET, DEFINE, LAMBDA, BEGIN, LOAD})


def binding_target(form: str, target) -> Symbol:
    """Validate the name operand of a binding form."""
    if not isinstance(target, Symbol):
        raise MalformedFormError(form, f"expected a symbol to bind, got {target}")
    if target in SPECIAL_FORM_NAMES:
        raise MalformedFormError(form, f"cannot rebind special form {target}")
    return target
