"""Opaque procedure constants supplied by the host."""

from __future__ import annotations

from sublisp import LispValue, PrimitiveFn


class Primitive:
    """A native procedure. Self-evaluating; only the host knows how to call it."""

    __slots__ = ("name", "fn")

    def __init__(self, name: str, fn: PrimitiveFn):
        self.name = name
        self.fn = fn

    def __call__(self, args: list[LispValue]) -> LispValue:
        return self.fn(args)

    def __repr__(self) -> str:
        return f"#<primitive {self.name}>"

    def __str__(self) -> str:
        return repr(self)
