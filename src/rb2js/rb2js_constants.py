"""
Token kinds and lexical rules shared by the rb2js lexer and parser.

The lexer tries ``TOKEN_RULES`` strictly in order and the first pattern that
matches at the cursor wins. Keywords come before ``IDENT`` so that ``def``,
``end`` and ``nil`` are never read as plain identifiers; word boundaries keep
names such as ``define`` or ``ending`` intact.

Exports:
    - token kind names (``DEF`` ... ``NEWLINE``)
    - TOKEN_RULES: ordered ``(pattern, kind)`` pairs
"""

import re

DEF = "DEF"
END = "END"
NIL = "NIL"
IDENT = "IDENT"
STRING = "STRING"
INTEGER = "INTEGER"
PLUS = "PLUS"
MINUS = "MINUS"
STAR = "STAR"
SLASH = "SLASH"
ASSIGN = "ASSIGN"
LPAREN = "LPAREN"
RPAREN = "RPAREN"
COMMA = "COMMA"
NEWLINE = "NEWLINE"
EOF = "EOF"

TOKEN_RULES: list[tuple[re.Pattern[str], str]] = [
    (re.compile(r"\bdef\b", re.ASCII), DEF),
    (re.compile(r"\bend\b", re.ASCII), END),
    (re.compile(r"\bnil\b", re.ASCII), NIL),
    (re.compile(r"\b[a-zA-Z_][a-zA-Z0-9_]*\b", re.ASCII), IDENT),
    (re.compile(r"\"[^\"\n]*\"|'[^'\n]*'", re.ASCII), STRING),
    (re.compile(r"\b\d+\b", re.ASCII), INTEGER),
    (re.compile(r"\+", re.ASCII), PLUS),
    (re.compile(r"-", re.ASCII), MINUS),
    (re.compile(r"\*", re.ASCII), STAR),
    (re.compile(r"/", re.ASCII), SLASH),
    (re.compile(r"=", re.ASCII), ASSIGN),
    (re.compile(r"\(", re.ASCII), LPAREN),
    (re.compile(r"\)", re.ASCII), RPAREN),
    (re.compile(r",", re.ASCII), COMMA),
    (re.compile(r"\n", re.ASCII), NEWLINE),
]

# Any whitespace except the newline, which separates statements.
HORIZONTAL_WHITESPACE = re.compile(r"[^\S\n]+", re.ASCII)

__all__ = [
    "ASSIGN",
    "COMMA",
    "DEF",
    "END",
    "EOF",
    "HORIZONTAL_WHITESPACE",
    "IDENT",
    "INTEGER",
    "LPAREN",
    "MINUS",
    "NEWLINE",
    "NIL",
    "PLUS",
    "RPAREN",
    "SLASH",
    "STAR",
    "STRING",
    "TOKEN_RULES",
]
