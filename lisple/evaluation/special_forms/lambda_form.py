from __future__ import annotations

from typing import Callable

from lisple.errors import MalformedFormError
from lisple.evaluation.apply import EvaluatorFn
from lisple.evaluation.special_forms.names import BEGIN, binding_target
from lisple.types import Closure, LispList, Value
from lisple.types.environment import Environment


def lambda_form(
    tail: list[Value],
    env: Environment,
    loader: Callable[[str], str],
    evaluate_fn: EvaluatorFn,
) -> Value:
    # Several body forms are an implicit begin.
    if len(tail) < 2:
        raise MalformedFormError("lambda", "requires a parameter list and a body")

    params, *body_forms = tail
    if not isinstance(params, LispList):
        raise MalformedFormError("lambda", f"parameter list must be a list, got {params}")
    for param in params:
        binding_target("lambda", param)

    if len(body_forms) == 1:
        body = body_forms[0]
    else:
        body = LispList((BEGIN, *body_forms))

    return Closure(params.items, body, env)
