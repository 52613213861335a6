"""User-defined procedure values."""

from __future__ import annotations

from typing import TYPE_CHECKING, Sequence

from lisple.types.environment import Environment
from lisple.types.symbol import Symbol

if TYPE_CHECKING:
    from lisple.types import Value


class Closure:
    """A first-class lambda with formal parameters, body, and closure env."""

    __slots__ = ("parameters", "body", "env")

    def __init__(self, parameters: Sequence[Symbol], body: Value, env: Environment):
        self.parameters: tuple[Symbol, ...] = tuple(parameters)
        self.body: Value = body
        # Captured at definition time, shared with every other holder
        self.env: Environment = env

    def extend_env(self, args: Sequence[Value]) -> Environment:
        """Bind argument values to the parameters in a frame under the captured env."""
        return Environment.bind_parameters(self.parameters, args, self.env)

    def __repr__(self) -> str:
        params = " ".join(str(p) for p in self.parameters)
        return f"<Closure ({params})>"
