"""
Provides the `Transpiler` class and the `translate` pipeline entry point.

Classes and Features:
    - Emitter (Protocol): Interface for all backend emitters. Requires `__init__` and `get_output`.
    - JavaScriptEmitter: The emitter that renders rb2js ASTs as JavaScript.
    - Transpiler: Selects the emitter for a target name and dispatches each
      top-level node to the emitter's matching `emit_*` method.

Functions:
    - generate(program): Renders a parsed program as JavaScript.
    - translate(source): Tokenizes, parses and generates in one call.

Example:
    >>> translate("x = 1\\n")
    'x = 1;\\n'

Raises:
    ValueError: If the target language is not supported.
    TypeError: If the program contains something other than top-level nodes.
    NotImplementedError: If the emitter lacks an `emit_*` method for a node kind.
    TokenizeError, ParseError: Propagated unchanged from the lexer and parser.
"""

import logging
from typing import Protocol

from rb2js.emitters.js_emitter import JavaScriptEmitter
from rb2js.rb2js_ast import ExprList, FunctionDef, Program, TopLevelNode
from rb2js.rb2js_lexer import tokenize
from rb2js.rb2js_parser import parse

logger = logging.getLogger(__name__)


class Emitter(Protocol):  # pragma: no cover
    """Protocol for rb2js emitters.

    Methods:
        __init__(): Initializes the emitter.
        get_output(): Returns the complete emitted code as a string.
    """

    def __init__(self) -> None: ...  # pragma: no cover

    def get_output(self) -> str: ...  # pragma: no cover


EmitterType = type[Emitter]
"""Alias for a concrete Emitter class type."""


class Transpiler:
    """Dispatches top-level rb2js nodes to a target language emitter.

    Attributes:
        emitter (Emitter): The selected emitter instance for the output target.
    """

    def __init__(self, target: str = "js") -> None:
        """Initializes the transpiler with the desired output target.

        Args:
            target: The desired output language ("js" or "javascript").

        Raises:
            ValueError: If the target language is not supported.
        """
        emitters: dict[str, EmitterType] = {
            "js": JavaScriptEmitter,
            "javascript": JavaScriptEmitter,
        }
        target = target.lower()
        if target not in emitters:
            raise ValueError(f"Unknown transpilation target: {target!r}")
        self.emitter: Emitter = emitters[target]()

    def transpile(self, program: Program) -> str:
        """Emits every top-level node in order and returns the output text.

        Raises:
            TypeError: If an element is neither a FunctionDef nor an ExprList.
        """
        if not all(isinstance(node, (FunctionDef, ExprList)) for node in program):
            raise TypeError("All items in a program must be FunctionDef or ExprList.")
        for node in program:
            self._visit(node)
        return self.emitter.get_output()

    def _visit(self, node: TopLevelNode) -> None:
        method_name = f"emit_{node.kind}"
        if hasattr(self.emitter, method_name):
            getattr(self.emitter, method_name)(node)
        else:
            raise NotImplementedError(
                f"No emitter method for node kind '{node.kind}'"
            )


def generate(program: Program) -> str:
    """Renders a parsed program as JavaScript source text."""
    return Transpiler("js").transpile(program)


def translate(source: str) -> str:
    """Translates rb2js source text into JavaScript.

    Args:
        source: The source program.

    Returns:
        The generated JavaScript text.

    Raises:
        TokenizeError: If the source contains text no lexical rule matches.
        ParseError: If the tokens do not form a valid program.
    """
    code = generate(parse(tokenize(source)))
    logger.debug("translated %d characters into %d", len(source), len(code))
    return code


__all__ = ["Emitter", "Transpiler", "generate", "translate"]
