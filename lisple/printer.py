"""Render runtime values back to their textual form."""

from __future__ import annotations

from lisple.types import Closure, LispList, NativeProcedure, Number, Symbol, Value

CLOSURE_PLACEHOLDER = "<Lambda>"
NATIVE_PLACEHOLDER = "<Proc>"


def show(value: Value) -> str:
    match value:
        case Symbol(name):
            return name
        case Number(text):
            return text
        case LispList(items):
            return "(" + " ".join(show(item) for item in items) + ")"
        case Closure():
            return CLOSURE_PLACEHOLDER
        case NativeProcedure():
            return NATIVE_PLACEHOLDER
    raise TypeError(f"Not a Lisple value: {value!r}")
