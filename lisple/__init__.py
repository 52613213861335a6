# Lisple: a small tree-walking evaluator for a Lisp-like expression language.
#
# Values are the five classes in lisple.types; code and data share them.
# The reader turns text into values, `evaluate` runs them against an
# Environment, and `show` renders them back to text.

from lisple.reader.parser import read, read_all
from lisple.printer import show
from lisple.evaluation.evaluator import evaluate
from lisple.interpreter import Interpreter
from lisple.builtin.primitives import install_primitive
from lisple.types import (
    Symbol,
    Number,
    LispList,
    NativeProcedure,
    Closure,
    Environment,
    Value,
    TRUE,
    FALSE,
    NIL,
)

__all__ = [
    "read",
    "read_all",
    "show",
    "evaluate",
    "Interpreter",
    "install_primitive",
    "Symbol",
    "Number",
    "LispList",
    "NativeProcedure",
    "Closure",
    "Environment",
    "Value",
    "TRUE",
    "FALSE",
    "NIL",
]
