from __future__ import annotations

from typing import TYPE_CHECKING

from lisple.types.symbol import Symbol

if TYPE_CHECKING:
    from lisple.types import Value

TRUE = Symbol("True")
# The only falsy value; anything that isn't FALSE is true.
FALSE = Symbol("False")
NIL = Symbol("NIL")
SPACE = Symbol("\\s")
NEWLINE = Symbol("\\n")


def is_truthy(value: Value) -> bool:
    return value != FALSE


def to_bool(flag: bool) -> Symbol:
    return TRUE if flag else FALSE
