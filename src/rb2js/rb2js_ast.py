"""
Defines the abstract syntax tree (AST) produced by the rb2js parser.

The node set is closed: every node the parser can build is one of the classes
below, and every class carries a ``kind`` tag that the emitter dispatches on.

Top-level nodes:
    FunctionDef: ``def name(params) ... end``
    ExprList: a run of newline-separated statements

Terms (the items inside an ``Expr``):
    NilLiteral, StringLiteral, IntegerLiteral, Call, VarRef
    Plus, Minus, Star, Slash, AssignOp (zero-payload operator markers)

Expressions are flat. ``Expr.terms`` keeps operands and operator markers in
the order they appeared in the source; no precedence or grouping is applied,
so ``a + b * c`` is the five-term sequence ``[a, +, b, *, c]``.

A parameter with a default value is a single ``Expr`` of the form
``[VarRef, AssignOp, <default terms...>]``.

All nodes are frozen dataclasses and are never modified after parsing.

Example:
    Expr(terms=(VarRef("x"), AssignOp(), IntegerLiteral("1")))
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, ClassVar, Union


@dataclass(frozen=True)
class ASTNode:
    """Base class for every AST node.

    Attributes:
        kind (str): Tag naming the node variant; the emitter calls ``emit_<kind>``.
    """

    kind: ClassVar[str] = "node"

    def to_dict(self) -> dict[str, Any]:
        """Converts the node and its descendants into plain dictionaries.

        Returns:
            dict[str, Any]: ``{"kind": ..., <field>: ...}`` with nested nodes and
            node sequences converted recursively.
        """
        result: dict[str, Any] = {"kind": self.kind}
        for f in fields(self):
            result[f.name] = _to_plain(getattr(self, f.name))
        return result


def _to_plain(value: Any) -> Any:
    if isinstance(value, ASTNode):
        return value.to_dict()
    if isinstance(value, tuple):
        return [_to_plain(v) for v in value]
    return value


@dataclass(frozen=True)
class NilLiteral(ASTNode):
    kind: ClassVar[str] = "nil"


@dataclass(frozen=True)
class StringLiteral(ASTNode):
    """A string literal with its quotes removed; no unescaping is applied."""

    value: str
    kind: ClassVar[str] = "string"


@dataclass(frozen=True)
class IntegerLiteral(ASTNode):
    """An integer literal kept as its base-10 digits, leading zeros removed.

    The digits are never converted back from an ``int``, so literals of any
    length render unchanged.
    """

    digits: str
    kind: ClassVar[str] = "integer"


@dataclass(frozen=True)
class Call(ASTNode):
    """A call ``name(arg, ...)``; each argument is its own flat ``Expr``."""

    name: str
    args: tuple[Expr, ...] = ()
    kind: ClassVar[str] = "call"


@dataclass(frozen=True)
class VarRef(ASTNode):
    name: str
    kind: ClassVar[str] = "var_ref"


@dataclass(frozen=True)
class Plus(ASTNode):
    kind: ClassVar[str] = "plus"


@dataclass(frozen=True)
class Minus(ASTNode):
    kind: ClassVar[str] = "minus"


@dataclass(frozen=True)
class Star(ASTNode):
    kind: ClassVar[str] = "star"


@dataclass(frozen=True)
class Slash(ASTNode):
    kind: ClassVar[str] = "slash"


@dataclass(frozen=True)
class AssignOp(ASTNode):
    kind: ClassVar[str] = "assign"


Term = Union[
    NilLiteral,
    StringLiteral,
    IntegerLiteral,
    Call,
    VarRef,
    Plus,
    Minus,
    Star,
    Slash,
    AssignOp,
]
"""Any node that may appear inside ``Expr.terms``."""


@dataclass(frozen=True)
class Expr(ASTNode):
    """A flat, ordered sequence of terms."""

    terms: tuple[Term, ...] = ()
    kind: ClassVar[str] = "expr"


@dataclass(frozen=True)
class ExprList(ASTNode):
    """Newline-separated statements, each one an ``Expr``."""

    statements: tuple[Expr, ...] = ()
    kind: ClassVar[str] = "expr_list"


@dataclass(frozen=True)
class FunctionDef(ASTNode):
    name: str
    params: tuple[Expr, ...] = ()
    body: ExprList = ExprList()
    kind: ClassVar[str] = "function_def"


TopLevelNode = Union[FunctionDef, ExprList]
"""A node that may appear directly in a parsed program."""

Program = list[TopLevelNode]

__all__ = [
    "ASTNode",
    "AssignOp",
    "Call",
    "Expr",
    "ExprList",
    "FunctionDef",
    "IntegerLiteral",
    "Minus",
    "NilLiteral",
    "Plus",
    "Program",
    "Slash",
    "Star",
    "StringLiteral",
    "Term",
    "TopLevelNode",
    "VarRef",
]
