"""Core evaluator for the Lisple interpreter.

Special forms are recognised by their head symbol before the head would be
evaluated as a procedure reference; everything else is procedure application
with left-to-right argument evaluation.
"""

from __future__ import annotations

from typing import Callable

from lisple.evaluation.apply import apply_procedure
from lisple.evaluation.special_forms import SPECIAL_FORMS
from lisple.modules.loader import load_source
from lisple.types import NIL, Closure, LispList, NativeProcedure, Number, Symbol, Value
from lisple.types.environment import Environment


def evaluate(
    expr: Value, env: Environment, loader: Callable[[str], str] | None = None
) -> Value:
    """Evaluate `expr` against `env`.

    `loader` maps a file designator to source text for the `load` form and
    defaults to reading from disk.
    """
    if loader is None:
        loader = load_source

    match expr:
        case Symbol():
            return env.lookup(expr)
        case Number():
            return expr
        case LispList(items=()):
            return NIL
        case LispList(items=(Symbol() as head, *tail)) if head in SPECIAL_FORMS:
            return SPECIAL_FORMS[head](tail, env, loader, evaluate)
        case LispList(items=(head, *tail)):
            proc = evaluate(head, env, loader)
            args = [evaluate(arg, env, loader) for arg in tail]
            return apply_procedure(proc, args, loader, evaluate)
        case Closure() | NativeProcedure():
            # Procedure values only reach here when spliced into code by hand
            return expr
    raise TypeError(f"Cannot evaluate non-Lisple value {expr!r}")
