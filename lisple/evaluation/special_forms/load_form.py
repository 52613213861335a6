from __future__ import annotations

import logging
from typing import Callable

from lisple.errors import LispTypeError, MalformedFormError
from lisple.evaluation.apply import EvaluatorFn
from lisple.reader.parser import read_all
from lisple.types import FALSE, NIL, TRUE, Number, Symbol, Value
from lisple.types.environment import Environment

logger = logging.getLogger(__name__)

NO_FILE = (NIL, Symbol("nil"))


def load_form(
    tail: list[Value],
    env: Environment,
    loader: Callable[[str], str],
    evaluate_fn: EvaluatorFn,
) -> Value:
    """
    (load designator)
    Evaluates every expression of the designated source in the current
    environment and returns True; a nil designator loads nothing and
    returns False.
    """
    if len(tail) != 1:
        raise MalformedFormError("load", "expects exactly 1 operand")
    designator = evaluate_fn(tail[0], env, loader)
    if designator in NO_FILE:
        return FALSE
    if not isinstance(designator, (Symbol, Number)):
        raise LispTypeError("a file name", designator)

    path = str(designator)
    source = loader(path)
    count = 0
    for expr in read_all(source):
        evaluate_fn(expr, env, loader)
        count += 1
    logger.debug("Loaded %d expression(s) from %s", count, path)
    return TRUE
