"""Built-in procedures for the Lisple runtime environment.

This module defines integer arithmetic, comparison, logic, type predicates,
list processing and console/exit procedures, plus the registration hook that
installs them into a root Environment. Numbers carry their literal text, so
every arithmetic procedure parses its operands and formats its result.
"""
from __future__ import annotations

import logging
import sys
from typing import Sequence

from lisple.errors import ArityMismatchError, DivisionByZeroError, LispTypeError
from lisple.printer import show
from lisple.types import (
    FALSE,
    NEWLINE,
    NIL,
    SPACE,
    TRUE,
    LispList,
    NativeProcedure,
    Number,
    PrimitiveFn,
    Symbol,
    Value,
    is_truthy,
    to_bool,
)
from lisple.types.environment import Environment

logger = logging.getLogger(__name__)


def _arity(name: str, args: Sequence[Value], expected: int) -> None:
    if len(args) != expected:
        raise ArityMismatchError(expected, len(args), name)


def _at_least(name: str, args: Sequence[Value], minimum: int) -> None:
    if len(args) < minimum:
        raise ArityMismatchError(f"at least {minimum}", len(args), name)


def _integer(value: Value) -> int:
    if not isinstance(value, Number):
        raise LispTypeError("a number", show(value))
    return value.to_int()


def _integers(args: Sequence[Value]) -> list[int]:
    return [_integer(a) for a in args]


def _list(name: str, value: Value) -> LispList:
    if not isinstance(value, LispList):
        raise LispTypeError(f"a list for {name}", show(value))
    return value


# -------------------------------
# Arithmetic
# -------------------------------
def add(args: Sequence[Value]) -> Value:
    """Return the sum of all arguments (0 with none)."""
    return Number(sum(_integers(args)))


def sub(args: Sequence[Value]) -> Value:
    """Subtract all subsequent numbers from the first; unary negation for one arg."""
    _at_least("-", args, 1)
    first, *rest = _integers(args)
    if not rest:
        return Number(-first)
    for x in rest:
        first -= x
    return Number(first)


def mul(args: Sequence[Value]) -> Value:
    result = 1
    for x in _integers(args):
        result *= x
    return Number(result)


def _truncating_div(n: int, d: int) -> int:
    q = abs(n) // abs(d)
    return q if (n < 0) == (d < 0) else -q


def div(args: Sequence[Value]) -> Value:
    """Divide left-to-right, truncating toward zero."""
    _at_least("/", args, 1)
    result, *rest = _integers(args)
    for x in rest:
        if x == 0:
            raise DivisionByZeroError("Division by zero")
        result = _truncating_div(result, x)
    return Number(result)


# -------------------------------
# Comparison
# -------------------------------
def _chain(args: Sequence[Value], holds) -> Symbol:
    values = _integers(args)
    return to_bool(all(holds(a, b) for a, b in zip(values, values[1:])))


def lt(args: Sequence[Value]) -> Symbol:
    return _chain(args, lambda a, b: a < b)


def gt(args: Sequence[Value]) -> Symbol:
    return _chain(args, lambda a, b: a > b)


def lte(args: Sequence[Value]) -> Symbol:
    return _chain(args, lambda a, b: a <= b)


def gte(args: Sequence[Value]) -> Symbol:
    return _chain(args, lambda a, b: a >= b)


def is_equal(a: Value, b: Value) -> bool:
    """Structural equality; numbers compare by integer value when both parse."""
    if isinstance(a, Number) and isinstance(b, Number):
        if a.is_integer() and b.is_integer():
            return a.to_int() == b.to_int()
        return a == b
    if isinstance(a, LispList) and isinstance(b, LispList):
        return len(a) == len(b) and all(is_equal(x, y) for x, y in zip(a, b))
    if isinstance(a, (Symbol, Number, LispList)):
        return a == b
    return a is b


def equals(args: Sequence[Value]) -> Symbol:
    """True if all adjacent arguments are equal (or zero/one arg)."""
    return to_bool(all(is_equal(a, b) for a, b in zip(args, args[1:])))


# -------------------------------
# Logic
# -------------------------------
def logical_and(args: Sequence[Value]) -> Symbol:
    return to_bool(all(is_truthy(a) for a in args))


def logical_or(args: Sequence[Value]) -> Symbol:
    return to_bool(any(is_truthy(a) for a in args))


def logical_not(args: Sequence[Value]) -> Symbol:
    _arity("not", args, 1)
    return to_bool(not is_truthy(args[0]))


# -------------------------------
# Type predicates
# -------------------------------
def _predicate(name: str, kind: type) -> PrimitiveFn:
    def check(args: Sequence[Value]) -> Symbol:
        _arity(name, args, 1)
        return to_bool(isinstance(args[0], kind))

    check.__name__ = name
    return check


is_symbol = _predicate("symbol?", Symbol)
is_number = _predicate("number?", Number)
is_list = _predicate("list?", LispList)


# -------------------------------
# List operations
# -------------------------------
def car(args: Sequence[Value]) -> Value:
    _arity("car", args, 1)
    xs = _list("car", args[0])
    if not xs:
        raise LispTypeError("a non-empty list for car", show(xs))
    return xs[0]


def cdr(args: Sequence[Value]) -> Value:
    """Return the list without its head; NIL when nothing remains."""
    _arity("cdr", args, 1)
    xs = _list("cdr", args[0])
    if not xs:
        raise LispTypeError("a non-empty list for cdr", show(xs))
    if len(xs) < 2:
        return NIL
    return xs.rest()


def cons(args: Sequence[Value]) -> Value:
    """Prepend head to a list tail; NIL tails give (head), atoms a two-element list."""
    _arity("cons", args, 2)
    head, tail = args
    if tail == NIL:
        return LispList((head,))
    if isinstance(tail, LispList):
        return LispList((head, *tail))
    return LispList((head, tail))


def list_builtin(args: Sequence[Value]) -> Value:
    return LispList(args)


def append(args: Sequence[Value]) -> Value:
    items: list[Value] = []
    for xs in args:
        items.extend(_list("append", xs))
    return LispList(items)


def length(args: Sequence[Value]) -> Value:
    _arity("length", args, 1)
    return Number(len(_list("length", args[0])))


def is_null(args: Sequence[Value]) -> Symbol:
    """True for the empty list and for NIL."""
    _arity("null?", args, 1)
    x = args[0]
    return to_bool(x == NIL or (isinstance(x, LispList) and not x))


# -------------------------------
# Console and process
# -------------------------------
def display(args: Sequence[Value]) -> Value:
    """Write the argument to stdout without a trailing newline; returns NIL."""
    _arity("display", args, 1)
    x = args[0]
    if x == NEWLINE:
        text = "\n"
    elif x == SPACE:
        text = " "
    else:
        text = show(x)
    sys.stdout.write(text)
    sys.stdout.flush()
    return NIL


def exit_builtin(args: Sequence[Value]) -> Value:
    """(exit [status]) terminates the program."""
    if len(args) > 1:
        raise ArityMismatchError("0 or 1", len(args), "exit")
    status = _integer(args[0]) if args else 0
    raise SystemExit(status)


PRIMITIVES: dict[str, PrimitiveFn] = {
    "+": add,
    "-": sub,
    "*": mul,
    "/": div,
    "<": lt,
    ">": gt,
    "<=": lte,
    ">=": gte,
    "=": equals,
    "and": logical_and,
    "or": logical_or,
    "not": logical_not,
    "symbol?": is_symbol,
    "number?": is_number,
    "list?": is_list,
    "car": car,
    "cdr": cdr,
    "cons": cons,
    "list": list_builtin,
    "append": append,
    "length": length,
    "null?": is_null,
    "display": display,
    "exit": exit_builtin,
}

CONSTANTS: dict[str, Value] = {
    "nil": NIL,
    "False": FALSE,
    "True": TRUE,
    "\\s": SPACE,
    "\\n": NEWLINE,
}


def install_primitive(env: Environment, name: str, fn: PrimitiveFn) -> NativeProcedure:
    """Bind `name` to a NativeProcedure wrapping `fn` in `env`'s local frame."""
    proc = fn if isinstance(fn, NativeProcedure) else NativeProcedure(name, fn)
    env.define_local(name, proc)
    return proc


def register(env: Environment) -> None:
    """Register all builtin procedures and constants into the given environment."""
    env.update(CONSTANTS)
    for name, fn in PRIMITIVES.items():
        install_primitive(env, name, fn)
    logger.debug("Registered %d primitives", len(PRIMITIVES))
