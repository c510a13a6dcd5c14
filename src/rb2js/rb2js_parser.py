"""
rb2js Parser

Parses a list of lexer tokens into the rb2js abstract syntax tree.

The grammar is small and newline-sensitive:

    program    := (function | expr_list)*
    function   := DEF IDENT params? NEWLINE* expr_list END NEWLINE*
    params     := LPAREN (IDENT (ASSIGN term+)? COMMA?)* RPAREN
    expr_list  := (term+ NEWLINE+)* term*
    term       := NIL | STRING | INTEGER | call | IDENT
                | PLUS | MINUS | STAR | SLASH | ASSIGN
    call       := IDENT LPAREN (term* COMMA?)* RPAREN

Operators are terms in their own right. An expression is the flat run of
terms between two newlines, kept in source order, so no precedence or
associativity is ever decided here.

Parser Behavior
---------------
- Fails fast: the first grammar violation aborts the parse.
- Works on a private copy of the token list; the caller's list is never
  modified.
- Uses at most two tokens of lookahead (to tell a call from a variable).

Raises
------
UnexpectedLookaheadError
    When the token at an expression position starts no known term.
UnexpectedTokenError
    When a required token is missing or the input ends too early.
"""

from __future__ import annotations

import logging
import re

from rb2js.rb2js_ast import (
    AssignOp,
    Call,
    Expr,
    ExprList,
    FunctionDef,
    IntegerLiteral,
    Minus,
    NilLiteral,
    Plus,
    Program,
    Slash,
    Star,
    StringLiteral,
    Term,
    TopLevelNode,
    VarRef,
)
from rb2js.rb2js_constants import (
    ASSIGN,
    COMMA,
    DEF,
    END,
    IDENT,
    INTEGER,
    LPAREN,
    MINUS,
    NEWLINE,
    NIL,
    PLUS,
    RPAREN,
    SLASH,
    STAR,
    STRING,
)
from rb2js.rb2js_errors import UnexpectedLookaheadError, UnexpectedTokenError
from rb2js.rb2js_lexer import Token

logger = logging.getLogger(__name__)

QUOTES = re.compile("['\"]")

OPERATOR_NODES: dict[str, type[Term]] = {
    PLUS: Plus,
    MINUS: Minus,
    STAR: Star,
    SLASH: Slash,
    ASSIGN: AssignOp,
}


class Parser:
    """
    rb2js Parser Class

    Turns a list of tokens into a list of top-level nodes (``FunctionDef`` or
    ``ExprList``) using recursive descent.

    Attributes
    ----------
    tokens : list[Token]
        Private copy of the input tokens.
    position : int
        Index of the next unconsumed token.

    Methods
    -------
    parse() -> Program
        Parse the whole token list.
    parse_function_def() -> FunctionDef
        Parse ``def name(params) ... end``.
    parse_expr_list() -> ExprList
        Parse newline-separated statements up to ``def``, ``end`` or EOF.
    parse_expr() -> Term
        Parse a single term.
    parse_call() -> Call
        Parse ``name(args...)``.
    """

    def __init__(self, tokens: list[Token]) -> None:
        self.tokens: list[Token] = list(tokens)
        self.position: int = 0

    def at_end(self) -> bool:
        return self.position >= len(self.tokens)

    def current(self) -> Token | None:
        return self.tokens[self.position] if not self.at_end() else None

    def peek(self, type_: str, offset: int = 0) -> bool:
        """Returns True if the token ``offset`` places ahead has type ``type_``."""
        index = self.position + offset
        return index < len(self.tokens) and self.tokens[index].type == type_

    def match(self, type_: str) -> Token:
        """Consumes the current token, which must be of type ``type_``.

        Raises:
            UnexpectedTokenError: If the token has another type or input is exhausted.
        """
        tok = self.current()
        if tok is None or tok.type != type_:
            raise UnexpectedTokenError(type_, tok)
        self.position += 1
        return tok

    def skip_newlines(self) -> None:
        while self.peek(NEWLINE):
            self.position += 1

    def parse(self) -> Program:
        """Parse a full program and return its top-level nodes."""
        program: Program = []
        while not self.at_end():
            if self.peek(DEF):
                program.append(self.parse_function_def())
                continue
            pos_before = self.position
            node = self.parse_expr_list()
            if self.position == pos_before:
                # Only a stray `end` stops an expression list without consuming.
                tok = self.current()
                assert tok is not None  # for mypy
                raise UnexpectedLookaheadError(tok)
            program.append(node)
        logger.debug(
            "parsed %d tokens into %d top-level nodes", len(self.tokens), len(program)
        )
        return program

    def parse_function_def(self) -> FunctionDef:
        """Parse a ``def`` block, including its trailing newlines."""
        self.match(DEF)
        name = self.match(IDENT).value
        params = self.parse_params()
        self.skip_newlines()
        body = self.parse_expr_list()
        self.match(END)
        self.skip_newlines()
        return FunctionDef(name=name, params=params, body=body)

    def parse_params(self) -> tuple[Expr, ...]:
        """Parse an optional parenthesized parameter list.

        A parameter is a name, optionally followed by ``=`` and the terms of
        its default value, which run up to the next comma or closing paren.
        """
        if not self.peek(LPAREN):
            return ()

        params: list[Expr] = []
        self.match(LPAREN)
        while self.peek(IDENT):
            terms: list[Term] = [VarRef(self.match(IDENT).value)]
            if self.peek(ASSIGN):
                self.match(ASSIGN)
                terms.append(AssignOp())
                while not self.peek(COMMA) and not self.peek(RPAREN):
                    terms.append(self.parse_expr())
            if self.peek(COMMA):
                self.match(COMMA)
            params.append(Expr(tuple(terms)))
        self.match(RPAREN)
        return tuple(params)

    def parse_expr_list(self) -> ExprList:
        """Parse statements until ``def``, ``end`` or the end of input.

        Each newline closes the current statement; runs of newlines collapse.
        A final statement without a trailing newline is still kept.
        """
        statements: list[Expr] = []
        terms: list[Term] = []

        while not self.peek(DEF) and not self.peek(END) and not self.at_end():
            terms.append(self.parse_expr())
            if self.peek(NEWLINE):
                statements.append(Expr(tuple(terms)))
                terms = []
                self.skip_newlines()

        if terms:
            statements.append(Expr(tuple(terms)))

        return ExprList(tuple(statements))

    def parse_expr(self) -> Term:
        """Parse one term, choosing the rule from the lookahead token.

        Raises:
            UnexpectedLookaheadError: If the token starts no term.
            UnexpectedTokenError: If the input ends where a term is required.
        """
        tok = self.current()
        if tok is None:
            raise UnexpectedTokenError("expression", None)

        if tok.type == NIL:
            self.match(NIL)
            return NilLiteral()
        if tok.type == STRING:
            return self.parse_string()
        if tok.type == INTEGER:
            return IntegerLiteral(self.match(INTEGER).value.lstrip("0") or "0")
        if tok.type == IDENT and self.peek(LPAREN, 1):
            return self.parse_call()
        if tok.type == IDENT:
            return VarRef(self.match(IDENT).value)
        if tok.type in OPERATOR_NODES:
            self.match(tok.type)
            return OPERATOR_NODES[tok.type]()

        raise UnexpectedLookaheadError(tok)

    def parse_string(self) -> StringLiteral:
        """Parse a string literal, dropping every quote character in it."""
        text = self.match(STRING).value
        return StringLiteral(QUOTES.sub("", text))

    def parse_call(self) -> Call:
        """Parse ``name(arg, ...)``; each argument is a flat run of terms."""
        name = self.match(IDENT).value
        args: list[Expr] = []

        self.match(LPAREN)
        while not self.peek(RPAREN):
            terms: list[Term] = []
            while not self.peek(COMMA) and not self.peek(RPAREN):
                terms.append(self.parse_expr())
            args.append(Expr(tuple(terms)))
            if self.peek(COMMA):
                self.match(COMMA)
        self.match(RPAREN)

        return Call(name=name, args=tuple(args))


def parse(tokens: list[Token]) -> Program:
    """Parse ``tokens`` into a program without touching the caller's list."""
    return Parser(tokens).parse()


__all__ = ["Parser", "parse"]
