from __future__ import annotations

from typing import Callable

from lisple.errors import MalformedFormError
from lisple.evaluation.apply import EvaluatorFn
from lisple.types import Value
from lisple.types.environment import Environment


def begin_form(
    tail: list[Value],
    env: Environment,
    loader: Callable[[str], str],
    evaluate_fn: EvaluatorFn,
) -> Value:
    if not tail:
        raise MalformedFormError("begin", "requires at least one expression")
    for e in tail[:-1]:
        evaluate_fn(e, env, loader)
    return evaluate_fn(tail[-1], env, loader)
