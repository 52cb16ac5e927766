"""
Expression evaluator for loxi.

Evaluates expression trees to a runtime value. Pure evaluation: no I/O, no
side effects, no Python eval(). Operand types are checked strictly; there is
no truthiness or implicit conversion, so a mismatch raises RuntimeTypeError
instead of producing a value.
"""

from __future__ import annotations

import logging
import math

from loxi.core.errors import RuntimeTypeError
from loxi.core.expressions import Binary, Expr, Grouped, Literal, Unary
from loxi.core.tokens import Token, TokenType, Value, is_number, type_name

logger = logging.getLogger(__name__)

_ARITHMETIC = {
    TokenType.MINUS: lambda a, b: a - b,
    TokenType.STAR: lambda a, b: a * b,
}

_ORDERING = {
    TokenType.LESS: lambda a, b: a < b,
    TokenType.LESS_EQUAL: lambda a, b: a <= b,
    TokenType.GREATER: lambda a, b: a > b,
    TokenType.GREATER_EQUAL: lambda a, b: a >= b,
}


def evaluate(expr: Expr) -> Value:
    """Evaluate an expression tree.

    Args:
        expr: Parsed expression tree.

    Returns:
        The computed value (float, str, bool or None).

    Raises:
        RuntimeTypeError: If an operator is applied to unsupported operands.
    """
    value = _interpret(expr)
    logger.debug("Evaluated %s to %r", type(expr).__name__, value)
    return value


def _interpret(expr: Expr) -> Value:
    """Dispatch evaluation to the appropriate handler.

    Walks the tree post-order with an explicit work stack, so tree depth is
    not bounded by the interpreter's recursion limit. Operands are still
    evaluated left before right.
    """
    values: list[Value] = []
    pending: list[tuple[Expr, bool]] = [(expr, False)]

    while pending:
        node, operands_ready = pending.pop()
        match node:
            case Literal():
                values.append(node.value)
            case Grouped():
                pending.append((node.expression, False))
            case Unary():
                if operands_ready:
                    values.append(_interpret_unary(node.operator, values.pop()))
                else:
                    pending.append((node, True))
                    pending.append((node.right, False))
            case Binary():
                if operands_ready:
                    right = values.pop()
                    left = values.pop()
                    values.append(_interpret_binary(node.operator, left, right))
                else:
                    pending.append((node, True))
                    pending.append((node.right, False))
                    pending.append((node.left, False))
            case _:
                raise TypeError(f"Unknown expression type: {type(node).__name__}")

    return values.pop()


def _interpret_unary(op: Token, right: Value) -> Value:
    if op.type == TokenType.BANG:
        if not isinstance(right, bool):
            raise _operand_error(op, "Operand must be a boolean.", right)
        return not right

    if op.type == TokenType.MINUS:
        if not is_number(right):
            raise _operand_error(op, "Operand must be a number.", right)
        return -float(right)

    raise _operand_error(op, f"Unknown unary operator '{op.lexeme}'.", right)


def _interpret_binary(op: Token, left: Value, right: Value) -> Value:
    if op.type == TokenType.PLUS:
        if is_number(left) and is_number(right):
            return float(left) + float(right)
        if isinstance(left, str) and isinstance(right, str):
            return left + right
        raise _operand_error(op, "Operands must be two numbers or two strings.", left, right)

    if op.type in (TokenType.EQUAL_EQUAL, TokenType.BANG_EQUAL):
        if type_name(left) != type_name(right):
            raise _operand_error(op, "Operands must be of the same type.", left, right)
        equal = left == right
        return equal if op.type == TokenType.EQUAL_EQUAL else not equal

    if op.type == TokenType.SLASH:
        _check_numbers(op, left, right)
        return _divide(float(left), float(right))

    if op.type in _ARITHMETIC:
        _check_numbers(op, left, right)
        return float(_ARITHMETIC[op.type](float(left), float(right)))

    if op.type in _ORDERING:
        _check_numbers(op, left, right)
        return _ORDERING[op.type](float(left), float(right))

    raise _operand_error(op, f"Unknown binary operator '{op.lexeme}'.", left, right)


def _divide(left: float, right: float) -> float:
    """IEEE 754 division: x/0 is +-inf, 0/0 and nan/0 are nan."""
    if right != 0.0:
        return left / right
    if left == 0.0 or math.isnan(left):
        return math.nan
    # sign of zero matters: 1 / -0.0 is -inf
    negative = (left < 0) != (math.copysign(1.0, right) < 0)
    return -math.inf if negative else math.inf


def _check_numbers(op: Token, left: Value, right: Value) -> None:
    if not (is_number(left) and is_number(right)):
        raise _operand_error(op, "Operands must be numbers.", left, right)


def _operand_error(op: Token, message: str, *operands: Value) -> RuntimeTypeError:
    operand_types = tuple(type_name(v) for v in operands)
    return RuntimeTypeError(
        f"{message} Got {', '.join(operand_types)} for '{op.lexeme}'.",
        operator=op,
        operand_types=operand_types,
    )
