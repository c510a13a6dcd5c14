import dataclasses

import hypothesis.strategies as st
import pytest
from hypothesis import given

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
    Slash,
    Star,
    StringLiteral,
    VarRef,
)


def test_node_kinds_are_distinct() -> None:
    classes = [
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
        Expr,
        ExprList,
        FunctionDef,
    ]
    kinds = [cls.kind for cls in classes]
    assert len(set(kinds)) == len(kinds)


def test_markers_compare_by_type() -> None:
    assert Plus() == Plus()
    assert Plus() != Minus()
    assert Star() != Slash()
    assert AssignOp() == AssignOp()


def test_nodes_are_frozen() -> None:
    node = VarRef("x")
    with pytest.raises(dataclasses.FrozenInstanceError):
        node.name = "y"  # type: ignore[misc]


def test_nodes_are_hashable() -> None:
    expr = Expr((VarRef("a"), Plus(), IntegerLiteral("1")))
    assert hash(expr) == hash(Expr((VarRef("a"), Plus(), IntegerLiteral("1"))))


def test_function_def_defaults() -> None:
    node = FunctionDef("f")
    assert node.params == ()
    assert node.body == ExprList(())


def test_to_dict_leaf() -> None:
    assert NilLiteral().to_dict() == {"kind": "nil"}
    assert IntegerLiteral("3").to_dict() == {"kind": "integer", "digits": "3"}


def test_to_dict_nested() -> None:
    node = FunctionDef(
        "f",
        (Expr((VarRef("a"), AssignOp(), StringLiteral("x"))),),
        ExprList((Expr((Call("g", (Expr((VarRef("a"),)),)),)),)),
    )
    assert node.to_dict() == {
        "kind": "function_def",
        "name": "f",
        "params": [
            {
                "kind": "expr",
                "terms": [
                    {"kind": "var_ref", "name": "a"},
                    {"kind": "assign"},
                    {"kind": "string", "value": "x"},
                ],
            }
        ],
        "body": {
            "kind": "expr_list",
            "statements": [
                {
                    "kind": "expr",
                    "terms": [
                        {
                            "kind": "call",
                            "name": "g",
                            "args": [
                                {
                                    "kind": "expr",
                                    "terms": [{"kind": "var_ref", "name": "a"}],
                                }
                            ],
                        }
                    ],
                }
            ],
        },
    }


@given(st.text(), st.text())  # type: ignore[misc]
def test_var_ref_eq(a: str, b: str) -> None:
    assert (VarRef(a) == VarRef(b)) == (a == b)


@given(st.text())  # type: ignore[misc]
def test_string_and_var_ref_never_equal(value: str) -> None:
    assert StringLiteral(value) != VarRef(value)
