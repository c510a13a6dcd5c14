"""
Translates rb2js AST nodes into JavaScript source text.

This module defines the `JavaScriptEmitter` class, the code generation backend
used by the `Transpiler`. It renders every node of the closed rb2js node set:

Supported Features:
    - Functions: ``function name(params) {\\n...}\\n`` with default parameters
    - Implicit return: the last body statement gets a ``return`` prefix
    - Statements: each statement terminated with ``;`` and a newline
    - Terms: ``null``, single-quoted strings, integers, calls, names, operators

Behavior:
    - Expressions are rendered term by term, joined by single spaces, in the
      order the parser produced them.
    - String values are wrapped in single quotes as-is. Embedded quotes and
      backslashes are not escaped.
    - The implicit-return rule is textual: a last statement whose rendered
      text already contains ``return`` anywhere is left untouched.

Raises:
    - `NotImplementedError`: If a term has no matching ``emit_<kind>`` method.
"""

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
    Term,
    VarRef,
)


class JavaScriptEmitter:
    """Emits JavaScript code from rb2js AST nodes.

    Top-level nodes are appended to an output buffer through
    ``emit_function_def`` and ``emit_expr_list``. Terms are rendered to strings
    by ``emit_<kind>`` methods and joined by ``emit_expr``.

    Attributes:
        chunks (list[str]): Rendered top-level nodes, in program order.

    Methods:
        get_output(): Returns the full emitted JavaScript as a string.
        emit_expr(expr): Renders one flat expression.
    """

    def __init__(self) -> None:
        self.chunks: list[str] = []

    def get_output(self) -> str:
        return "".join(self.chunks)

    # Top-level nodes

    def emit_function_def(self, node: FunctionDef) -> None:
        params = ", ".join(self.emit_expr(p) for p in node.params)
        body = self.render_function_body(node.body)
        self.chunks.append(f"function {node.name}({params}) {{\n{body}}}\n")

    def emit_expr_list(self, node: ExprList) -> None:
        self.chunks.append("".join(self.render_statements(node)))

    def render_statements(self, node: ExprList) -> list[str]:
        """Renders each statement followed by ``;`` and a newline."""
        return [f"{self.emit_expr(stmt)};\n" for stmt in node.statements]

    def render_function_body(self, body: ExprList) -> str:
        """Renders a function body, prefixing ``return`` to the last statement.

        The prefix is skipped when the last rendered statement contains the
        substring ``return`` anywhere, including inside string literals or
        longer names such as ``returnValue``.
        """
        statements = self.render_statements(body)
        if statements and "return" not in statements[-1]:
            statements[-1] = "return " + statements[-1]
        return "".join(statements)

    # Expressions and terms

    def emit_expr(self, expr: Expr) -> str:
        return " ".join(self.emit_term(term) for term in expr.terms)

    def emit_term(self, term: Term) -> str:
        method = getattr(self, f"emit_{term.kind}", None)
        if method is None:
            raise NotImplementedError(
                f"No emitter method for node kind '{term.kind}'"
            )
        result: str = method(term)
        return result

    def emit_nil(self, node: NilLiteral) -> str:
        return "null"

    def emit_string(self, node: StringLiteral) -> str:
        return f"'{node.value}'"

    def emit_integer(self, node: IntegerLiteral) -> str:
        return node.digits

    def emit_call(self, node: Call) -> str:
        args = ", ".join(self.emit_expr(arg) for arg in node.args)
        return f"{node.name}({args})"

    def emit_var_ref(self, node: VarRef) -> str:
        return node.name

    def emit_plus(self, node: Plus) -> str:
        return "+"

    def emit_minus(self, node: Minus) -> str:
        return "-"

    def emit_star(self, node: Star) -> str:
        return "*"

    def emit_slash(self, node: Slash) -> str:
        return "/"

    def emit_assign(self, node: AssignOp) -> str:
        return "="
