import argparse
import sys
from typing import List, Optional

from arith import config
from arith.lexer import scan
from arith.parser import parse
from arith.interpreter import evaluate
from arith.astdot import ASTVisualizer
from arith.exceptions import ArithError
from arith.logging_config import setup_logging, get_logger


logger = get_logger("repl")


def build_argparser() -> argparse.ArgumentParser:
    argparser = argparse.ArgumentParser(
        prog="arith", description="Evaluate an integer arithmetic expression."
    )
    argparser.add_argument(
        "expression",
        nargs="*",
        help="expression words, joined with spaces: 5 + 3 '*' 2. "
        "Starts an interactive session when omitted",
    )
    mode = argparser.add_mutually_exclusive_group()
    mode.add_argument("--tokens", action="store_true", help="print the tokens")
    mode.add_argument("--dot", action="store_true", help="print the AST as a DOT graph")
    argparser.add_argument(
        "--strict",
        action="store_true",
        default=config.STRICT_PARSE,
        help="reject input left over after the expression",
    )
    argparser.add_argument("--log-level", default=None, help="e.g. DEBUG, INFO")
    argparser.add_argument("--version", action="version", version=config.VERSION)
    return argparser


def run(text: str, args: argparse.Namespace) -> str:
    if args.tokens:
        return " ".join(str(token) for token in scan(text))
    node = parse(text, strict=args.strict)
    if args.dot:
        return ASTVisualizer(node).gendot()
    return str(evaluate(node))


def interactive(args: argparse.Namespace) -> int:
    while True:
        try:
            text = input(config.REPL_PROMPT)
        except EOFError:
            print()
            return 0
        if not text.strip():
            continue
        try:
            print(run(text, args))
        except ArithError as e:
            logger.info("failed to evaluate %r: %s", text, e)
            print(f"error: {e.message}", file=sys.stderr)


def main(argv: Optional[List[str]] = None) -> int:
    args = build_argparser().parse_args(argv)
    setup_logging(args.log_level)

    if not args.expression:
        return interactive(args)

    text = " ".join(args.expression)
    try:
        print(run(text, args))
    except ArithError as e:
        print(f"error: {e.message}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
