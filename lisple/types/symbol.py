from __future__ import annotations
import sys


class Symbol:
    __slots__ = ("name",)
    __match_args__ = ("name",)

    def __init__(self, name: str):
        # Intern to ensure fast equality/hash
        self.name = sys.intern(name)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Symbol) and self.name == other.name

    def __hash__(self) -> int:
        return hash(self.name)

    def __repr__(self):
        return f"Symbol({self.name!r})"

    def __str__(self):
        return self.name
