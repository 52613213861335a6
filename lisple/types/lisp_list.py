from __future__ import annotations

from typing import TYPE_CHECKING, Iterable, Iterator

if TYPE_CHECKING:
    from lisple.types import Value


class LispList:
    """Immutable ordered sequence of values, used for both data and code."""

    __slots__ = ("items",)
    __match_args__ = ("items",)

    def __init__(self, items: Iterable[Value] = ()):
        self.items: tuple[Value, ...] = tuple(items)

    def rest(self) -> LispList:
        """A new list without the head; the receiver is left untouched."""
        return LispList(self.items[1:])

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[Value]:
        return iter(self.items)

    def __getitem__(self, index):
        if isinstance(index, slice):
            return LispList(self.items[index])
        return self.items[index]

    def __eq__(self, other: object) -> bool:
        return isinstance(other, LispList) and self.items == other.items

    def __hash__(self) -> int:
        return hash(self.items)

    def __str__(self):
        return "(" + " ".join(str(item) for item in self.items) + ")"

    def __repr__(self):
        return f"LispList({list(self.items)!r})"
