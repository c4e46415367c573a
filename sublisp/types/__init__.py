from sublisp.types.symbol import Symbol
from sublisp.types.primitive import Primitive

__all__ = ["Symbol", "Primitive"]
