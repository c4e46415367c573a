# Core type aliases for the sublisp data model.
# Plain Python values (int, float, str, bool, list) represent both code (forms)
# and runtime values. There is no Cons type and no environment object.
#
# Naming guidance:
# - SExpression: syntactic forms, as read by the parser or rebuilt by substitution.
# - LispValue:  evaluated values.
# Both resolve to `Any`; a lambda-form is code and value at the same time.

from typing import Any, Callable

LispValue = Any
SExpression = LispValue

# Native procedure body: receives the already-evaluated argument list
PrimitiveFn = Callable[[list], LispValue]
