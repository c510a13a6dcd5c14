"""
Exception hierarchy for the rb2js translator.

Every failure aborts the current translation; nothing is recovered or retried
inside the pipeline. Callers that want a single ``except`` clause can catch
``TranslationError``.

Classes:
    TranslationError: Base class for all rb2js errors.
    TokenizeError: No lexical rule matches the remaining input.
    ParseError: Base class for grammar violations.
    UnexpectedLookaheadError: No expression rule matches the current token.
    UnexpectedTokenError: A required token kind was not found.
    FormatError: The external formatting tool exited unsuccessfully.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:  # pragma: no cover
    from rb2js.rb2js_lexer import Token


class TranslationError(Exception):
    """Base class for every error raised by rb2js."""


class TokenizeError(TranslationError):
    """Raised when no lexical rule matches at the lexer's cursor.

    Attributes:
        remainder (str): The unconsumed input, starting at the failing character.
        line (int): 1-based line of the failing character.
        col (int): 1-based column of the failing character.
    """

    def __init__(self, remainder: str, line: int = 0, col: int = 0) -> None:
        self.remainder = remainder
        self.line = line
        self.col = col
        super().__init__(
            f"Couldn't match token at line {line}, col {col} on {remainder!r}"
        )


class ParseError(TranslationError):
    """Base class for errors raised by the parser."""


class UnexpectedLookaheadError(ParseError):
    """Raised when the token at an expression position starts no known term."""

    def __init__(self, token: Token) -> None:
        self.token = token
        super().__init__(
            f"Unable to parse expression at {token!r} "
            f"(line {token.line}, col {token.col})"
        )


class UnexpectedTokenError(ParseError):
    """Raised when a mandatory token is missing.

    Attributes:
        expected (str): The token kind the parser required.
        token (Token | None): The token found instead, or None at end of input.
    """

    def __init__(self, expected: str, token: Token | None) -> None:
        self.expected = expected
        self.token = token
        found = "end of input" if token is None else repr(token)
        super().__init__(f"Expected token type {expected} but got {found}")


class FormatError(TranslationError):
    """Raised when the external formatter fails.

    Attributes:
        stderr (str): Diagnostic output captured from the formatting tool.
    """

    def __init__(self, stderr: str) -> None:
        self.stderr = stderr
        super().__init__(f"Formatter error: {stderr.strip()}")


__all__ = [
    "FormatError",
    "ParseError",
    "TokenizeError",
    "TranslationError",
    "UnexpectedLookaheadError",
    "UnexpectedTokenError",
]
