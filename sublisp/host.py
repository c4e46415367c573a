"""Host capabilities consumed by the evaluator.

The evaluator never looks names up itself: free symbols go to
`Host.resolve_global` and primitives are run by `Host.invoke_native`.
"""

from __future__ import annotations

from typing import Mapping, Protocol

from sublisp import LispValue
from sublisp.builtins import standard_bindings
from sublisp.errors import (
    HostInvocationFailure,
    HostLookupFailure,
    NotAProcedure,
    SublispError,
)
from sublisp.types.primitive import Primitive
from sublisp.types.symbol import Symbol


class Host(Protocol):
    def resolve_global(self, symbol: Symbol) -> LispValue: ...

    def invoke_native(self, proc: Primitive, args: list[LispValue]) -> LispValue: ...


class TableHost:
    """Host backed by a flat table of global bindings."""

    __slots__ = ("globals",)

    def __init__(self, bindings: Mapping[Symbol, LispValue] | None = None):
        if bindings is None:
            bindings = standard_bindings()
        self.globals: dict[Symbol, LispValue] = dict(bindings)

    def define(self, name: Symbol | str, value: LispValue) -> None:
        if isinstance(name, str):
            name = Symbol(name)
        if not isinstance(name, Symbol):
            raise SublispError(f"Cannot define {name!r} as a global")
        self.globals[name] = value

    def resolve_global(self, symbol: Symbol) -> LispValue:
        try:
            return self.globals[symbol]
        except KeyError:
            raise HostLookupFailure(f"Unbound symbol: {symbol}") from None

    def invoke_native(self, proc: Primitive, args: list[LispValue]) -> LispValue:
        if not isinstance(proc, Primitive):
            raise NotAProcedure(f"Not a native procedure: {proc!r}")
        try:
            return proc(list(args))
        except SublispError:
            raise
        except Exception as exc:
            raise HostInvocationFailure(f"{proc.name}: {exc}") from exc
