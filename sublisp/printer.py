"""Render values and expressions back to Lisp text.

The output reads back to the same value for lists, symbols, strings, booleans
and finite real numbers. Complex numbers and infinite or NaN floats have no
reader syntax: they print as `2j`, `inf` or `nan`, which read back as symbols.
"""

from __future__ import annotations

import json

from sublisp import LispValue
from sublisp.types.primitive import Primitive
from sublisp.types.symbol import Symbol

QUOTE = Symbol("quote")


def to_string(value: LispValue) -> str:
    if value is True:
        return "#t"
    if value is False:
        return "#f"
    if isinstance(value, Symbol):
        return value.name
    if isinstance(value, str):
        # JSON escaping matches the reader's string syntax
        return json.dumps(value, ensure_ascii=False)
    if isinstance(value, Primitive):
        return repr(value)
    if isinstance(value, list):
        if len(value) == 2 and value[0] == QUOTE:
            return "'" + to_string(value[1])
        return "(" + " ".join(to_string(item) for item in value) + ")"
    return repr(value)
