"""
Lexical analyzer for the rb2js source language.

This module turns raw source text into a flat list of tokens:

Classes:
    Token: A single immutable token with type, value, and source location.
    Lexer: Walks the source with a cursor and produces one Token at a time.

Functions:
    tokenize(source): Runs a Lexer to completion and returns every token.

Features:
    - Skips spaces and tabs, but keeps newlines as ``NEWLINE`` tokens
    - Tries the rules in ``TOKEN_RULES`` in a fixed order; the first match wins
    - Strings keep their quotes and are not unescaped
    - Tracks line and column for error messages

Raises:
    TokenizeError: If no rule matches at the current position.

Example:
    >>> tokenize("x = 1")
    [Token(IDENT, 'x'), Token(ASSIGN, '='), Token(INTEGER, '1')]
"""

import logging
from dataclasses import dataclass, field

from rb2js.rb2js_constants import EOF, HORIZONTAL_WHITESPACE, TOKEN_RULES
from rb2js.rb2js_errors import TokenizeError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Token:
    """Represents a single lexical token.

    Two tokens are equal when their type and value match; the source location
    is carried for diagnostics only.

    Attributes:
        type (str): The token kind (e.g. 'IDENT', 'INTEGER', 'NEWLINE').
        value (str): The exact source text matched by the rule.
        line (int): The 1-based line number where the token starts.
        col (int): The 1-based column number where the token starts.
    """

    type: str
    value: str
    line: int = field(default=0, compare=False)
    col: int = field(default=0, compare=False)

    def __repr__(self) -> str:
        return f"Token({self.type}, {self.value!r})"


class Lexer:
    """Cursor-based tokenizer for rb2js source text.

    Attributes:
        source (str): The full input text.
        position (int): Index of the next unconsumed character.
        line (int): Current line number (1-indexed).
        column (int): Current column number (1-indexed).
    """

    def __init__(self, source: str) -> None:
        self.source = source
        self.position = 0
        self.line = 1
        self.column = 1

    def end_of_file(self) -> bool:
        return self.position >= len(self.source)

    def remainder(self) -> str:
        """Returns the text that has not been consumed yet."""
        return self.source[self.position :]

    def advance(self, text: str) -> None:
        """Moves the cursor past ``text``, updating line and column."""
        self.position += len(text)
        newlines = text.count("\n")
        if newlines:
            self.line += newlines
            self.column = len(text) - text.rfind("\n")
        else:
            self.column += len(text)

    def skip_whitespace(self) -> None:
        """Skips spaces and tabs. Newlines are significant and never skipped."""
        match = HORIZONTAL_WHITESPACE.match(self.remainder())
        if match:
            self.advance(match.group(0))

    def next_token(self) -> Token:
        """Consumes and returns the next Token from the source.

        Returns:
            Token: The next token, or an ``EOF`` token once the input is exhausted.

        Raises:
            TokenizeError: If no rule in ``TOKEN_RULES`` matches at the cursor.
        """
        self.skip_whitespace()
        if self.end_of_file():
            return Token(EOF, "", self.line, self.column)

        remainder = self.remainder()
        for pattern, kind in TOKEN_RULES:
            match = pattern.match(remainder)
            if match:
                text = match.group(0)
                token = Token(kind, text, self.line, self.column)
                self.advance(text)
                return token

        raise TokenizeError(remainder, self.line, self.column)


def tokenize(source: str) -> list[Token]:
    """Tokenizes ``source`` completely.

    Args:
        source (str): Source text to tokenize.

    Returns:
        list[Token]: Every token in source order. No ``EOF`` token is included.

    Raises:
        TokenizeError: If part of the input matches no lexical rule.
    """
    lexer = Lexer(source)
    tokens: list[Token] = []
    while True:
        tok = lexer.next_token()
        if tok.type == EOF:
            break
        tokens.append(tok)
    logger.debug("tokenized %d characters into %d tokens", len(source), len(tokens))
    return tokens


__all__ = ["Lexer", "Token", "tokenize"]
