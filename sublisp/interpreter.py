from __future__ import annotations

from sublisp import LispValue, SExpression
from sublisp.config import Settings, load_settings
from sublisp.evaluation.evaluator import evaluate
from sublisp.host import Host, TableHost
from sublisp.reader.parser import lex, TokenStream


class Interpreter:
    """
    Reads source text and evaluates each expression against one host.
    The host's global table is the only state kept between calls.
    """

    def __init__(self, host: Host | None = None, settings: Settings | None = None):
        self.host: Host = host if host is not None else TableHost()
        self.settings: Settings = settings if settings is not None else load_settings()

    def evaluate(self, expr: SExpression) -> LispValue:
        return evaluate(expr, self.host, self.settings)

    def eval(self, code: str) -> LispValue:
        stream = TokenStream(lex(code))
        results: list[LispValue] = [self.evaluate(expr) for expr in stream.parse_all()]
        if not results:
            return None
        if len(results) == 1:
            return results[0]
        return results
