"""Infix to postfix conversion and postfix evaluation of one-digit expressions."""

from __future__ import annotations

import string

from dsalgo.stack import Stack

_OPERATORS = "+-*/"
_OPERANDS = string.digits + string.ascii_letters


def precedence(op: str) -> int:
    """Return the precedence of an operator; anything else, '(' included, is -1."""
    if op in ("/", "*"):
        return 2
    if op in ("+", "-"):
        return 1
    return -1


def infix_to_postfix(expression: str) -> str:
    """Convert an infix expression of one-character operands to postfix.

    Whitespace is ignored. Raises ValueError on unbalanced parentheses or
    unknown characters.
    """
    pending: Stack[str] = Stack()
    output: list[str] = []
    for char in expression:
        if char.isspace():
            continue
        if char in _OPERANDS:
            output.append(char)
        elif char == "(":
            pending.push(char)
        elif char == ")":
            while not pending.is_empty() and pending.top() != "(":
                output.append(pending.pop())
            if pending.is_empty():
                raise ValueError("unbalanced ')'")
            pending.pop()
        elif char in _OPERATORS:
            while not pending.is_empty() and precedence(pending.top()) >= precedence(char):
                output.append(pending.pop())
            pending.push(char)
        else:
            raise ValueError(f"unexpected character {char!r}")
    while not pending.is_empty():
        op = pending.pop()
        if op == "(":
            raise ValueError("unbalanced '('")
        output.append(op)
    return "".join(output)


def _apply(op: str, left: int, right: int) -> int:
    if op == "+":
        return left + right
    if op == "-":
        return left - right
    if op == "*":
        return left * right
    # Integer division truncating toward zero.
    quotient = abs(left) // abs(right)
    return quotient if (left < 0) == (right < 0) else -quotient


def eval_postfix(postfix: str) -> int:
    """Evaluate a postfix expression of one-digit operands.

    Division truncates toward zero. Raises ValueError on a malformed
    expression and ZeroDivisionError on division by zero.
    """
    values: Stack[int] = Stack()
    for char in postfix:
        if char.isspace():
            continue
        if char in string.digits:
            values.push(int(char))
        elif char in _OPERATORS:
            if len(values) < 2:
                raise ValueError(f"operator {char!r} lacks operands")
            right = values.pop()
            left = values.pop()
            values.push(_apply(char, left, right))
        else:
            raise ValueError(f"wrong operator {char!r}")
    if len(values) != 1:
        raise ValueError("malformed postfix expression")
    return values.top()


def evaluate(expression: str) -> int:
    """Evaluate an infix expression of one-digit operands."""
    return eval_postfix(infix_to_postfix(expression))