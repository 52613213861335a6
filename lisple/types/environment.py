"""Runtime environment for Lisple.

An Environment is one frame of the lexical scope chain: it owns a mapping from
names to evaluated values and links to an optional `outer` frame. Frames are
ordinary Python objects, so a frame captured by a Closure stays alive for as
long as the closure (or an in-flight call) still references it.
"""

from __future__ import annotations

import logging
from io import StringIO
from typing import TYPE_CHECKING, Optional, Sequence

from lisple.errors import ArityMismatchError, UnboundSymbolError
from lisple.types.symbol import Symbol

if TYPE_CHECKING:
    from lisple.types import Value

logger = logging.getLogger(__name__)


def _key(name: Symbol | str) -> str:
    return name.name if isinstance(name, Symbol) else name


class Environment:
    """Hierarchical mapping from names to Lisp values."""

    __slots__ = ("vars", "outer")

    def __init__(self, outer: Optional[Environment] = None):
        self.vars: dict[str, Value] = {}
        self.outer: Environment | None = outer

    @classmethod
    def bind_parameters(
        cls,
        parameters: Sequence[Symbol],
        arguments: Sequence[Value],
        parent: Environment,
    ) -> Environment:
        """Create a call frame under `parent` binding parameters positionally.

        Fewer arguments than parameters raises ArityMismatchError; surplus
        arguments are ignored.
        """
        if len(arguments) < len(parameters):
            raise ArityMismatchError(len(parameters), len(arguments))
        if len(arguments) > len(parameters):
            logger.debug(
                "Ignoring %d surplus argument(s)", len(arguments) - len(parameters)
            )
        frame = cls(outer=parent)
        for param, arg in zip(parameters, arguments):
            frame.vars[_key(param)] = arg
        return frame

    def define_local(self, name: Symbol | str, value: Value) -> None:
        """Bind `name` in this frame only, overwriting any local binding."""
        self.vars[_key(name)] = value

    def find(self, name: Symbol | str) -> Optional[Environment]:
        """Find the nearest environment in the chain that contains `name`."""
        key = _key(name)
        env: Optional[Environment] = self
        while env is not None:
            if key in env.vars:
                return env
            env = env.outer
        return None

    def lookup(self, name: Symbol | str) -> Value:
        """Look up the value bound to `name`.

        Raises UnboundSymbolError if no frame in the chain binds it.
        """
        env = self.find(name)
        if env is None:
            raise UnboundSymbolError(_key(name))
        return env.vars[_key(name)]

    def assign_existing(self, name: Symbol | str, value: Value) -> None:
        """Overwrite the innermost existing binding of `name`.

        Raises UnboundSymbolError if the symbol is not found.
        """
        env = self.find(name)
        if env is None:
            raise UnboundSymbolError(_key(name))
        env.vars[_key(name)] = value

    def root(self) -> Environment:
        env = self
        while env.outer is not None:
            env = env.outer
        return env

    def update(self, mapping: dict[str, Value]) -> None:
        """Bulk-define a mapping of name -> value in the current frame."""
        for k, v in mapping.items():
            self.define_local(k, v)

    def _write_vars(self, buffer: StringIO) -> None:
        buffer.write("{")
        buffer.write(", ".join(f"{k}: {v!r}" for k, v in self.vars.items()))
        buffer.write("}")

    def __contains__(self, name: Symbol | str) -> bool:
        return self.find(name) is not None

    def __str__(self) -> str:
        with StringIO() as buffer:
            self._write_vars(buffer)
            if self.outer is not None:
                buffer.write(" -> ...")  # indicate parent exists
            return buffer.getvalue()

    def __repr__(self) -> str:
        chain = []
        env: Optional[Environment] = self
        while env is not None:
            with StringIO() as env_buf:
                env._write_vars(env_buf)
                chain.append(env_buf.getvalue())
            env = env.outer
        return f"<Environment chain: {' -> '.join(chain)}>"
