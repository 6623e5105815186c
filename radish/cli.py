"""
Command line entry point for the Radish front-end.

Reads an expression from a file or from ``-c``, reports diagnostics, and
prints the token stream, the AST and the evaluated value on request. This
is the only module that writes to the terminal.

Author: Radish developers
"""

import argparse
import sys
from typing import List, Optional, TextIO

from .config import Config
from .lexer import Scanner, Source, TokenType
from .lexer.errors import Diagnostic
from .parser import Parser, ParseError
from .runtime import Evaluator, RadishRuntimeError

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_USAGE = 2


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="radish",
        description="Scan, parse and evaluate a Radish expression",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  radish -c "1 + 2 * 3"         # Evaluate an expression
  radish -c "-(1 + 2)" --ast    # Show the parsed tree too
  radish expr.rd --tokens       # Show the token stream of a file
        """
    )

    parser.add_argument('path', nargs='?',
                        help='File containing the expression')
    parser.add_argument('-c', dest='expression', metavar='EXPR',
                        help='Expression to run instead of a file')
    parser.add_argument('--tokens', action='store_true',
                        help='Print the token stream')
    parser.add_argument('--ast', action='store_true',
                        help='Print the parsed AST')
    parser.add_argument('--no-eval', action='store_true',
                        help='Stop after parsing')
    parser.add_argument('--allow-trailing', action='store_true',
                        help='Ignore input after the first complete expression')
    return parser


def report(diagnostic: Diagnostic, stream: TextIO):
    stream.write(str(diagnostic))
    stream.write(diagnostic.render_source_line())


def load_source(config: Config) -> Source:
    if config.expression is not None:
        return Source(config.expression, config.source_name)
    return Source.from_file(config.path)


def run(config: Config, out: Optional[TextIO] = None, err: Optional[TextIO] = None) -> int:
    """Run the configured stages and return the process exit code."""
    out = sys.stdout if out is None else out
    err = sys.stderr if err is None else err
    try:
        source = load_source(config)
    except OSError as e:
        err.write(f"ERROR: cannot read {config.path}: {e.strerror}\n")
        return EXIT_ERROR

    if config.show_tokens:
        for token in Scanner(source).tokens():
            if token.type != TokenType.ERROR:
                out.write(f"{token.span.start:>4}..{token.span.end:<4} {token}\n")

    parser = Parser(source, require_eof=config.require_eof)
    try:
        ast = parser.parse()
    except ParseError as e:
        for diagnostic in parser.diagnostics:
            report(diagnostic, err)
        report(e.diagnostic, err)
        return EXIT_ERROR

    for diagnostic in parser.diagnostics:
        report(diagnostic, err)
    if parser.has_lexical_errors():
        return EXIT_ERROR

    if config.show_ast:
        for item in ast.items:
            out.write(f"{item.sexpr()}\n")

    if not config.evaluate:
        return EXIT_OK

    try:
        value = Evaluator().evaluate(ast)
    except RadishRuntimeError as e:
        if e.diagnostic is not None:
            report(e.diagnostic, err)
        else:
            err.write(str(e))
        return EXIT_ERROR

    out.write(f"{value}\n")
    return EXIT_OK


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the ``radish`` command."""
    arg_parser = build_arg_parser()
    args = arg_parser.parse_args(argv)

    if (args.path is None) == (args.expression is None):
        arg_parser.print_usage(sys.stderr)
        sys.stderr.write("radish: error: give exactly one of PATH or -c EXPR\n")
        return EXIT_USAGE

    return run(Config.from_args(args))


if __name__ == "__main__":
    sys.exit(main())
