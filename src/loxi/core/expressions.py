"""
Expression tree types for loxi.

A closed set of four node types. Every traversal (evaluation, pretty
printing) is a single function that matches over ``Expr``:

- Literal: number, string, true, false, nil
- Grouped: ( expression )
- Unary: -x, !x
- Binary: x + y, x == y, ...
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from loxi.core.tokens import Token


class Literal(BaseModel):
    """A literal value: float, str, bool, or None (nil)."""

    value: float | str | bool | None = Field(description="The literal value")

    model_config = ConfigDict(frozen=True)


class Grouped(BaseModel):
    """Parenthesized sub-expression."""

    expression: Expr

    model_config = ConfigDict(frozen=True)


class Unary(BaseModel):
    """Unary operation: op right."""

    operator: Token = Field(description="The '-' or '!' token")
    right: Expr

    model_config = ConfigDict(frozen=True)


class Binary(BaseModel):
    """Binary operation: left op right."""

    left: Expr
    operator: Token = Field(description="The infix operator token")
    right: Expr

    model_config = ConfigDict(frozen=True)


Expr = Literal | Grouped | Unary | Binary

# Rebuild models for recursive forward references
Grouped.model_rebuild()
Unary.model_rebuild()
Binary.model_rebuild()
