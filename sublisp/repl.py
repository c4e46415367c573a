"""Interactive read/print loop.

Each complete input is evaluated on its own. A failure is reported and the
loop moves on to the next input.
"""

from __future__ import annotations

import logging
from typing import TextIO

from sublisp.errors import IncompleteInput, SublispError
from sublisp.interpreter import Interpreter
from sublisp.printer import to_string
from sublisp.reader.parser import read

logger = logging.getLogger(__name__)

PROMPT = "sublisp> "
CONTINUATION = "... "


def report(error: SublispError, out: TextIO) -> None:
    logger.debug("evaluation failed", exc_info=error)
    out.write(f"error: {error}\n")


def run_source(interp: Interpreter, source: str, out: TextIO) -> bool:
    """Evaluate every expression in `source`, printing each result.

    Returns False if an expression failed; the remaining ones are skipped.
    """
    try:
        exprs = read(source)
    except SublispError as exc:
        report(exc, out)
        return False
    for expr in exprs:
        try:
            value = interp.evaluate(expr)
        except SublispError as exc:
            report(exc, out)
            return False
        out.write(to_string(value) + "\n")
    return True


def repl(
    interp: Interpreter,
    stdin: TextIO,
    stdout: TextIO,
    prompt: str = PROMPT,
) -> None:
    buffer = ""
    while True:
        stdout.write(CONTINUATION if buffer else prompt)
        stdout.flush()
        line = stdin.readline()
        if not line:
            if buffer.strip():
                report(IncompleteInput("Unexpected end of input"), stdout)
            stdout.write("\n")
            return
        buffer += line
        try:
            exprs = read(buffer)
        except IncompleteInput:
            continue
        except SublispError as exc:
            report(exc, stdout)
            buffer = ""
            continue
        buffer = ""
        for expr in exprs:
            try:
                value = interp.evaluate(expr)
            except SublispError as exc:
                report(exc, stdout)
                break
            stdout.write(to_string(value) + "\n")
