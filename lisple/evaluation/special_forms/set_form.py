from __future__ import annotations

from typing import Callable

from lisple.errors import MalformedFormError
from lisple.evaluation.apply import EvaluatorFn
from lisple.evaluation.special_forms.names import binding_target
from lisple.types import Value
from lisple.types.environment import Environment


def set_form(
    tail: list[Value],
    env: Environment,
    loader: Callable[[str], str],
    evaluate_fn: EvaluatorFn,
) -> Value:
    if len(tail) != 2:
        raise MalformedFormError("set!", "requires exactly 2 operands: (set! name value)")
    name = binding_target("set!", tail[0])
    value = evaluate_fn(tail[1], env, loader)
    env.assign_existing(name, value)
    return value
