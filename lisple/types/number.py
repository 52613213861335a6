"""Integer literal value.

Numbers keep the literal text they were read from; arithmetic parses the text
on demand and formats its result back into a new Number.
"""

from __future__ import annotations

import re

from lisple.errors import LispTypeError

_INTEGER_RE = re.compile(r"-?[0-9]+")


class Number:
    __slots__ = ("text",)
    __match_args__ = ("text",)

    def __init__(self, value: int | str):
        try:
            self.text: str = str(value)
        except ValueError as e:
            # int -> str beyond sys.get_int_max_str_digits()
            raise LispTypeError("an integer within the conversion limit", "a larger integer") from e

    def is_integer(self) -> bool:
        return _INTEGER_RE.fullmatch(self.text) is not None

    def to_int(self) -> int:
        """Parse the literal text; raises LispTypeError if it is not an integer."""
        if not self.is_integer():
            raise LispTypeError("an integer", self.text)
        try:
            return int(self.text)
        except ValueError as e:
            raise LispTypeError(
                "an integer within the conversion limit", f"{len(self.text)} digits"
            ) from e

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Number) and self.text == other.text

    def __hash__(self) -> int:
        return hash(self.text)

    def __repr__(self):
        return f"Number({self.text!r})"

    def __str__(self):
        return self.text
