"""
rb2js CLI Entrypoint.

This module provides the command-line interface for translating rb2js source
into JavaScript.

Features:
    - Read source from `.rb` files or inline strings.
    - Lex, parse, and generate JavaScript.
    - Optionally pretty-print the result with an external formatter.
    - Dump the parsed AST as JSON instead of code.
    - Output to console or file.

Example usage:
    rb2js hello.rb
    rb2js -s "x = 1"
    rb2js hello.rb -o hello.js --format
    rb2js hello.rb --ast

Functions:
    run_rb2js(source: str, is_string: bool = False, out: Optional[str] = None,
              format_output: bool = False, dump_ast: bool = False, pretty: bool = False) -> None:
        Executes the full pipeline (lex → parse → generate → output).

    main() -> None:
        Parses CLI arguments, configures logging and invokes `run_rb2js`.
"""

import argparse
import json
import logging
import os
import sys

from rb2js.rb2js_errors import TranslationError
from rb2js.rb2js_format import format_js
from rb2js.rb2js_lexer import tokenize
from rb2js.rb2js_parser import Parser
from rb2js.rb2js_transpile import Transpiler

logger = logging.getLogger(__name__)


def run_rb2js(
    source: str,
    is_string: bool = False,
    out: str | None = None,
    format_output: bool = False,
    dump_ast: bool = False,
    pretty: bool = False,
) -> None:
    """
    Run the rb2js toolchain: lex, parse, generate, and print or write the output.

    Args:
        source (str): The source code or path to a `.rb` file.
        is_string (bool): If True, treats `source` as raw code instead of a file path.
        out (str | None): Optional path to write the output. If None, prints to stdout.
        format_output (bool): If True, runs the generated code through the formatter.
        dump_ast (bool): If True, outputs the parsed AST as JSON instead of code.
        pretty (bool): If True, prints banners around the output.

    Raises:
        ValueError: If `is_string` is False and the source does not end with '.rb'.
        TranslationError: If tokenizing, parsing or formatting fails.
    """
    if not is_string and not source.endswith(".rb"):
        raise ValueError("Only .rb files are supported.")
    # 1. Read source
    if not is_string:
        logger.debug("reading %s", source)
        with open(source, encoding="utf-8") as f:
            source = f.read()

    # 2. Lexing and parsing
    tokens = tokenize(source)
    ast = Parser(tokens).parse()

    # 3. Generating
    if dump_ast:
        code = json.dumps([node.to_dict() for node in ast], indent=2)
        title = "Parsed AST"
    else:
        code = Transpiler("js").transpile(ast)
        title = "Generated JavaScript"
        if format_output:
            code = format_js(code, os.environ.get("RB2JS_FORMATTER"))

    # 4. Output result
    if pretty:
        banner = "=" * 20
        print(f"{banner}\n{title}\n{banner}\n{code}\n{banner}\n")
    elif not out:
        print(code, end="" if code.endswith("\n") else "\n")

    # 5. Optional write to file
    if out:
        with open(out, "w", encoding="utf-8") as f:
            f.write(code)
        if pretty:
            print(f"(wrote to {out})")


def main() -> None:
    """
    Entry point for the rb2js CLI.

    Supported flags:
        - `-s`, `--string`: Interpret source as a raw string instead of a file path.
        - `-o`, `--out`: Write output to a file.
        - `-f`, `--format`: Pretty-print the generated code with the external formatter.
        - `--ast`: Print the parsed AST as JSON instead of code.
        - `-p`, `--pretty`: Show banners around the output.
        - `-v`, `--verbose`: Log pipeline details to stderr.

    Exits with status 1 and an `error:` line on stderr if translation fails.
    """
    parser = argparse.ArgumentParser(prog="rb2js")
    parser.add_argument("source", help="Filename or raw source (with -s)")
    parser.add_argument(
        "-s", "--string", action="store_true", help="Interpret source as literal string"
    )
    parser.add_argument("-o", "--out", metavar="OUTFILE", help="Output to file")
    parser.add_argument(
        "-f",
        "--format",
        dest="format_output",
        action="store_true",
        help="Format output with an external tool (default: npx prettier)",
    )
    parser.add_argument(
        "--ast", dest="dump_ast", action="store_true", help="Print the AST as JSON"
    )
    parser.add_argument(
        "-p", "--pretty", action="store_true", help="Show output with banners"
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Log pipeline details"
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        run_rb2js(
            source=args.source,
            is_string=args.string,
            out=args.out,
            format_output=args.format_output,
            dump_ast=args.dump_ast,
            pretty=args.pretty,
        )
    except (TranslationError, ValueError, OSError) as e:
        print(f"error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__" and not any("pytest" in arg for arg in sys.argv):
    main()
