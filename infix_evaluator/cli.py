"""Command-line front-end.

Shows the postfix form and the value of each expression, or the error
message if it is malformed. Without expressions on the command line an
interactive loop reads one expression per line until EOF.
"""

import argparse
import logging
import sys
import typing as t

from infix_evaluator.api import evaluate, parse_to_postfix
from infix_evaluator.config import CLEAR_COMMANDS, LOG_FORMAT, POSTFIX_SEPARATOR, PROMPT
from infix_evaluator.errors import CalcError
from infix_evaluator.operators import OperatorRegistry, default_registry
from infix_evaluator.tokenizer import split_postfix

logger = logging.getLogger(__name__)

# Clears the terminal and moves the cursor home.
_CLEAR_SCREEN: t.Final = "\x1b[2J\x1b[H"


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="infix-eval",
        description="Convert arithmetic expressions to postfix and evaluate them.",
    )
    parser.add_argument(
        "expressions",
        nargs="*",
        metavar="EXPRESSION",
        help="expressions to evaluate; starts an interactive loop if omitted",
    )
    parser.add_argument(
        "--postfix",
        action="store_true",
        help="read the input as space separated postfix instead of infix",
    )
    parser.add_argument(
        "--builtin-only",
        action="store_true",
        help="only recognise the + - * / operators",
    )
    parser.add_argument(
        "--list-operators",
        action="store_true",
        help="print the available operators and exit",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="log tokens and postfix conversion",
    )
    return parser


def _list_operators(registry: OperatorRegistry, /) -> None:
    for spec in sorted(registry, key=lambda spec: (spec.precedence, spec.symbol)):
        print(
            f"{spec.symbol:<3} {spec.name:<15} rank {spec.precedence:>2}  "
            f"{spec.associativity.value:<5}  "
            f"{'integer' if spec.integer_only else 'float'}",
        )


def _show(expression: str, registry: OperatorRegistry, postfix_mode: bool, /) -> bool:
    """Print the postfix form and value of ``expression``.

    Returns:
        bool: True, if the expression was valid.

    """
    try:
        if postfix_mode:
            postfix = split_postfix(expression, registry)
        else:
            postfix = parse_to_postfix(expression, registry)
        result = evaluate(postfix, registry)
    except CalcError as ex:
        print(f"error: {ex}", file=sys.stderr)
        return False

    print(f"postfix: {POSTFIX_SEPARATOR.join(postfix)}")
    print(f"result: {result!r}")
    return True


def _interactive(registry: OperatorRegistry, postfix_mode: bool, /) -> int:
    try:
        while True:
            line = input(PROMPT).strip()
            if not line:
                continue
            if line.lower() in CLEAR_COMMANDS:
                if sys.stdout.isatty():
                    print(_CLEAR_SCREEN, end="")
                continue
            _show(line, registry, postfix_mode)
    except EOFError:
        print(file=sys.stderr)
    except KeyboardInterrupt:
        print("\ninterrupted", file=sys.stderr)
        return 1
    return 0


def main(argv: t.Sequence[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format=LOG_FORMAT,
    )

    registry = OperatorRegistry() if args.builtin_only else default_registry()
    logger.debug("Using operators %s", registry.symbols())

    if args.list_operators:
        _list_operators(registry)
        return 0

    if not args.expressions:
        return _interactive(registry, args.postfix)

    results = [_show(expression, registry, args.postfix) for expression in args.expressions]
    return 0 if all(results) else 1


if __name__ == "__main__":
    sys.exit(main())
