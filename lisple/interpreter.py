from __future__ import annotations

import logging
from typing import Callable

from lisple.builtin.primitives import install_primitive, register
from lisple.evaluation.evaluator import evaluate
from lisple.modules.loader import load_source
from lisple.printer import show
from lisple.reader.parser import read, read_all
from lisple.types import FALSE, NativeProcedure, PrimitiveFn, Value
from lisple.types.environment import Environment

logger = logging.getLogger(__name__)


class Interpreter:
    """
    Owns a root Environment seeded with the primitive library, and the file
    loader used by `load`. Instances are independent of one another.
    """

    def __init__(self, loader: Callable[[str], str] = load_source):
        self.loader = loader
        self.env: Environment = Environment()
        register(self.env)

    def install_primitive(self, name: str, fn: PrimitiveFn) -> NativeProcedure:
        return install_primitive(self.env, name, fn)

    def read(self, code: str) -> Value:
        return read(code)

    def show(self, value: Value) -> str:
        return show(value)

    def evaluate(self, expr: Value) -> Value:
        return evaluate(expr, self.env, self.loader)

    def eval_all(self, code: str) -> list[Value]:
        """Evaluate every expression in `code`, in order."""
        return [self.evaluate(expr) for expr in read_all(code)]

    def eval(self, code: str) -> Value:
        """Evaluate every expression in `code` and return the last value (False if none)."""
        results = self.eval_all(code)
        if not results:
            return FALSE
        return results[-1]

    def load(self, path: str) -> None:
        logger.debug("Loading %s", path)
        self.eval_all(self.loader(path))
