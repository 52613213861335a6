"""Runtime value model.

Every datum is one of five variants: Symbol, Number, LispList,
NativeProcedure or Closure. Code and data share the same representation.
"""

from typing import Union

from lisple.types.symbol import Symbol
from lisple.types.number import Number
from lisple.types.lisp_list import LispList
from lisple.types.native_procedure import NativeProcedure, PrimitiveFn
from lisple.types.environment import Environment
from lisple.types.closure import Closure
from lisple.types.constants import TRUE, FALSE, NIL, SPACE, NEWLINE, is_truthy, to_bool

Value = Union[Symbol, Number, LispList, NativeProcedure, Closure]

__all__ = [
    "Symbol",
    "Number",
    "LispList",
    "NativeProcedure",
    "PrimitiveFn",
    "Environment",
    "Closure",
    "Value",
    "TRUE",
    "FALSE",
    "NIL",
    "SPACE",
    "NEWLINE",
    "is_truthy",
    "to_bool",
]
