"""
Pretty-printer for loxi expression trees.

Renders a tree in a fully parenthesized prefix form, e.g. ``1 + 2 * 3``
becomes ``(+ 1 (* 2 3))``.
"""

from __future__ import annotations

from loxi.core.expressions import Binary, Expr, Grouped, Literal, Unary
from loxi.core.tokens import format_value


def print_expr(expr: Expr) -> str:
    """Render an expression tree in its canonical parenthesized form."""
    # explicit stack: deep trees must not hit the recursion limit
    parts: list[str] = []
    pending: list[tuple[Expr, bool]] = [(expr, False)]

    while pending:
        node, children_ready = pending.pop()
        match node:
            case Literal():
                parts.append(format_value(node.value))
            case Grouped():
                if children_ready:
                    parts.append(f"(group {parts.pop()})")
                else:
                    pending.append((node, True))
                    pending.append((node.expression, False))
            case Unary():
                if children_ready:
                    parts.append(f"({node.operator.lexeme} {parts.pop()})")
                else:
                    pending.append((node, True))
                    pending.append((node.right, False))
            case Binary():
                if children_ready:
                    right = parts.pop()
                    left = parts.pop()
                    parts.append(f"({node.operator.lexeme} {left} {right})")
                else:
                    pending.append((node, True))
                    pending.append((node.right, False))
                    pending.append((node.left, False))
            case _:
                raise TypeError(f"Unknown expression type: {type(node).__name__}")

    return parts.pop()
