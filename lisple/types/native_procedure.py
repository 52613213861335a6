from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Sequence

if TYPE_CHECKING:
    from lisple.types import Value

PrimitiveFn = Callable[[Sequence["Value"]], "Value"]


class NativeProcedure:
    """A procedure implemented in Python, called with the evaluated arguments."""

    __slots__ = ("name", "fn")

    def __init__(self, name: str, fn: PrimitiveFn):
        self.name = name
        self.fn = fn

    def __call__(self, args: Sequence[Value]) -> Value:
        return self.fn(args)

    def __repr__(self):
        return f"<NativeProcedure {self.name}>"
