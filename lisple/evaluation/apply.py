"""Application engine for Lisple.

Closures run their body in a fresh frame parented to the environment they
captured; native procedures are called with the evaluated argument list.
Closure calls recurse on the Python stack (no tail-call elimination), so the
depth of user recursion is bounded by the interpreter's recursion limit.
"""

from __future__ import annotations

from typing import Callable, Sequence

from lisple.errors import NotAProcedureError
from lisple.types import Closure, NativeProcedure, Value
from lisple.types.environment import Environment

EvaluatorFn = Callable[[Value, Environment, Callable[[str], str]], Value]


def apply_procedure(
    proc: Value,
    args: Sequence[Value],
    loader: Callable[[str], str],
    evaluate_fn: EvaluatorFn,
) -> Value:
    """Apply either a Closure or a NativeProcedure.

    Raises NotAProcedureError for any other value.
    """
    if isinstance(proc, Closure):
        frame = proc.extend_env(args)
        return evaluate_fn(proc.body, frame, loader)
    if isinstance(proc, NativeProcedure):
        return proc(list(args))
    raise NotAProcedureError(proc)
