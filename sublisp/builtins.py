"""Built-in primitives for the default sublisp host.

Each primitive receives the list of already-evaluated arguments. Lists are
Python lists; booleans are Python bools.
"""
from __future__ import annotations

import operator
from functools import reduce
from typing import Callable

from sublisp import LispValue
from sublisp.errors import ArityError, SublispTypeError
from sublisp.types.primitive import Primitive
from sublisp.types.symbol import Symbol


def _expect(name: str, args: list[LispValue], count: int) -> None:
    if len(args) != count:
        raise ArityError(f"{name} expects {count} argument(s), got {len(args)}")


def _expect_list(name: str, value: LispValue) -> list:
    if not isinstance(value, list):
        raise SublispTypeError(f"{name} expects a list, got {value!r}")
    return value


def _is_number(value: LispValue) -> bool:
    return isinstance(value, (int, float, complex)) and not isinstance(value, bool)


def _numbers(name: str, args: list[LispValue]) -> list:
    for value in args:
        if not _is_number(value):
            raise SublispTypeError(f"All arguments to {name} must be numbers, got {value!r}")
    return args


def is_equal(a: LispValue, b: LispValue) -> bool:
    """Deep equality, element-wise for lists."""
    if a is b:
        return True
    if isinstance(a, list) and isinstance(b, list):
        if len(a) != len(b):
            return False
        return all(is_equal(x, y) for x, y in zip(a, b))
    if type(a) != type(b):
        return False
    return a == b


# -------------------------------
# List processing
# -------------------------------
def car(args: list[LispValue]) -> LispValue:
    _expect("car", args, 1)
    lst = _expect_list("car", args[0])
    if not lst:
        raise SublispTypeError("car of empty list")
    return lst[0]


def cdr(args: list[LispValue]) -> list:
    _expect("cdr", args, 1)
    lst = _expect_list("cdr", args[0])
    if not lst:
        raise SublispTypeError("cdr of empty list")
    return lst[1:]


def first(args: list[LispValue]) -> LispValue:
    """Like car, but also takes the first character of a symbol or string."""
    _expect("first", args, 1)
    value = args[0]
    if isinstance(value, Symbol):
        if not value.name:
            raise SublispTypeError("first of empty symbol")
        return Symbol(value.name[0])
    if isinstance(value, str):
        if not value:
            raise SublispTypeError("first of empty string")
        return value[0]
    return car(args)


def cons(args: list[LispValue]) -> list:
    _expect("cons", args, 2)
    head, tail = args
    return [head, *_expect_list("cons", tail)]


def make_list(args: list[LispValue]) -> list:
    return list(args)


# -------------------------------
# Predicates
# -------------------------------
def is_null(args: list[LispValue]) -> bool:
    _expect("null?", args, 1)
    return args[0] == [] and isinstance(args[0], list)


def is_atom(args: list[LispValue]) -> bool:
    _expect("atom?", args, 1)
    return not isinstance(args[0], list)


def is_symbol(args: list[LispValue]) -> bool:
    _expect("symbol?", args, 1)
    return isinstance(args[0], Symbol)


def is_number(args: list[LispValue]) -> bool:
    _expect("number?", args, 1)
    return _is_number(args[0])


def eq(args: list[LispValue]) -> bool:
    _expect("eq?", args, 2)
    a, b = args
    if isinstance(a, list) or isinstance(b, list):
        return a is b
    return type(a) == type(b) and a == b


def equal(args: list[LispValue]) -> bool:
    _expect("equal?", args, 2)
    return is_equal(*args)


def not_(args: list[LispValue]) -> bool:
    _expect("not", args, 1)
    return args[0] is False


# -------------------------------
# Arithmetic
# -------------------------------
def add(args: list[LispValue]) -> LispValue:
    return sum(_numbers("+", args))


def sub(args: list[LispValue]) -> LispValue:
    if not args:
        raise ArityError("- requires at least 1 argument")
    _numbers("-", args)
    if len(args) == 1:
        return -args[0]
    return reduce(operator.sub, args)


def mul(args: list[LispValue]) -> LispValue:
    return reduce(operator.mul, _numbers("*", args), 1)


def div(args: list[LispValue]) -> LispValue:
    if not args:
        raise ArityError("/ requires at least 1 argument")
    _numbers("/", args)
    if len(args) == 1:
        return 1 / args[0]
    return reduce(operator.truediv, args)


def _comparison(name: str, op: Callable[[LispValue, LispValue], bool]) -> Callable:
    def compare(args: list[LispValue]) -> bool:
        if len(args) < 2:
            raise ArityError(f"{name} requires at least 2 arguments")
        _numbers(name, args)
        return all(op(a, b) for a, b in zip(args, args[1:]))

    return compare


_TABLE: dict[str, Callable[[list[LispValue]], LispValue]] = {
    "car": car,
    "first": first,
    "cdr": cdr,
    "rest": cdr,
    "cons": cons,
    "list": make_list,
    "null?": is_null,
    "atom?": is_atom,
    "symbol?": is_symbol,
    "number?": is_number,
    "eq?": eq,
    "equal?": equal,
    "not": not_,
    "+": add,
    "-": sub,
    "*": mul,
    "/": div,
    "=": _comparison("=", operator.eq),
    "<": _comparison("<", operator.lt),
    ">": _comparison(">", operator.gt),
    "<=": _comparison("<=", operator.le),
    ">=": _comparison(">=", operator.ge),
}


def standard_bindings() -> dict[Symbol, Primitive]:
    """Fresh symbol table holding every built-in primitive."""
    return {Symbol(name): Primitive(name, fn) for name, fn in _TABLE.items()}
