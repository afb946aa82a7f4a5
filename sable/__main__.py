from __future__ import annotations

import argparse
import logging
import sys

from sable import __version__
from sable.config import get_log_level
from sable.errors import SableError
from sable.interpreter import Interpreter
from sable.modules.source_loader import load_file
from sable.evaluation.evaluator import evaluate
from sable.printer import to_source
from sable.types.nil import UnspecifiedType

PROMPT = "sable> "


def repl(interp: Interpreter) -> None:
    while True:
        try:
            line = input(PROMPT)
        except EOFError:
            print()
            return
        if not line.strip():
            continue
        try:
            result = interp.eval(line)
        except SableError as exc:
            print(f"{type(exc).__name__}: {exc}")
            continue
        if not isinstance(result, UnspecifiedType):
            print(to_source(result))


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="sable", description="Sable Scheme interpreter")
    parser.add_argument("files", nargs="*", help="source files to load, in order")
    parser.add_argument("-i", "--interactive", action="store_true",
                        help="start a REPL after loading files")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    args = parser.parse_args(argv)

    logging.basicConfig(level=get_log_level(), format="%(levelname)s %(name)s: %(message)s")

    interp = Interpreter()
    status = 0
    for name in args.files:
        try:
            load_file(name, interp.env, evaluate)
        except SableError as exc:
            print(f"{type(exc).__name__}: {exc}", file=sys.stderr)
            status = 1
    if args.interactive or not args.files:
        repl(interp)
    return status


if __name__ == "__main__":
    sys.exit(main())
