from __future__ import annotations

from typing import Callable

from lisple.errors import MalformedFormError
from lisple.evaluation.apply import EvaluatorFn
from lisple.types import NIL, Value, is_truthy
from lisple.types.environment import Environment


def if_form(
    tail: list[Value],
    env: Environment,
    loader: Callable[[str], str],
    evaluate_fn: EvaluatorFn,
) -> Value:
    """(if test consequent [alternative])"""
    if len(tail) not in (2, 3):
        raise MalformedFormError("if", "requires a test, a consequent and an optional alternative")

    test = evaluate_fn(tail[0], env, loader)
    if is_truthy(test):
        return evaluate_fn(tail[1], env, loader)
    if len(tail) == 3:
        return evaluate_fn(tail[2], env, loader)
    return NIL
