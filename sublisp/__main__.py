"""Command-line entry point: run a file, or start the interactive loop."""

import argparse
import logging
import sys

from sublisp.config import LOG_LEVELS, get_log_level, load_settings
from sublisp.interpreter import Interpreter
from sublisp.repl import repl, run_source


def main(argv=None):
    parser = argparse.ArgumentParser(prog="sublisp")
    parser.add_argument("file", help="file to evaluate (if empty, starts the interactive loop)", nargs="?")
    parser.add_argument("--max-depth", type=int, default=None, help="maximum evaluation nesting depth")
    parser.add_argument("--strict-arity", action="store_true", default=None,
                        help="reject calls whose argument count does not match the parameters")
    parser.add_argument("--log-level", default=None, type=str.upper, choices=LOG_LEVELS,
                        help="logging level (default from SUBLISP_LOG_LEVEL)")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=args.log_level or get_log_level(),
        format="%(levelname)s %(name)s: %(message)s",
    )

    settings = load_settings().with_overrides(max_depth=args.max_depth, strict_arity=args.strict_arity)
    interp = Interpreter(settings=settings)

    if args.file is not None:
        with open(args.file, encoding="utf-8") as fh:
            source = fh.read()
        return 0 if run_source(interp, source, sys.stdout) else 1

    repl(interp, sys.stdin, sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())
