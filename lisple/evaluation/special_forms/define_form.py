from __future__ import annotations

from typing import Callable

from lisple.errors import MalformedFormError
from lisple.evaluation.apply import EvaluatorFn
from lisple.evaluation.special_forms.names import binding_target
from lisple.types import Value
from lisple.types.environment import Environment


def define_form(
    tail: list[Value],
    env: Environment,
    loader: Callable[[str], str],
    evaluate_fn: EvaluatorFn,
) -> Value:
    """
    (define name value)
    Always binds in the current frame, shadowing any outer binding.
    """
    if len(tail) != 2:
        raise MalformedFormError("define", "requires exactly 2 operands: (define name value)")
    name = binding_target("define", tail[0])
    value = evaluate_fn(tail[1], env, loader)
    env.define_local(name, value)
    return value
