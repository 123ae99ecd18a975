"""Evaluate flat Roman numeral expressions such as ``MCMLXXXVIII - MLXVI + X``.

Grammar (left-associative, no parentheses):
    Expr := Numeral | Expr '+' Numeral | Expr '-' Numeral

The evaluator splits on the rightmost operator and recurses on both sides,
which matches left-to-right evaluation for + and -. All arithmetic is
delegated to RomanNumeral.

Two modes:
    strict     whitespace is ignored, anything else malformed raises
    forgiving  junk is stripped first and the rest is evaluated
"""

from __future__ import annotations

import logging

from romanturing.errors import InvalidCharacter, MalformedExpression
from romanturing.numeral import ALPHABET, RomanNumeral

logger = logging.getLogger(__name__)

OPERATORS = "+-"
_ALLOWED = frozenset(ALPHABET + OPERATORS)


def verify_expression(expression: str) -> str:
    """Check an expression strictly and return it without whitespace.

    Raises:
        MalformedExpression: empty, or an operator at either end or doubled.
        InvalidCharacter: a character outside the alphabet and operators,
            reported at its position in ``expression``.
    """
    if expression is None or not expression.strip():
        raise MalformedExpression("Expression cannot be empty")
    kept: list[str] = []
    for position, char in enumerate(expression):
        if char.isspace():
            continue
        if char not in _ALLOWED:
            raise InvalidCharacter(position, char)
        kept.append(char)
    compact = "".join(kept)
    if compact[0] in OPERATORS:
        raise MalformedExpression("Expression cannot begin with an operator")
    if compact[-1] in OPERATORS:
        raise MalformedExpression("Expression cannot end with an operator")
    for left, right in zip(compact, compact[1:]):
        if left in OPERATORS and right in OPERATORS:
            raise MalformedExpression(f"Expression has consecutive operators {left + right!r}")
    return compact


def sanitize_expression(expression: str) -> str:
    """Keep only numeral symbols and operators, trimming dangling operators.

    ``"uh, IV - III?"`` → ``"IV-III"``. Never raises; may return "".
    """
    kept = "".join(char for char in expression or "" if char in _ALLOWED)
    return kept.strip(OPERATORS)


def _reduce(expression: str) -> RomanNumeral:
    """Evaluate an already-checked expression."""
    operator_at = max(expression.rfind(op) for op in OPERATORS)
    if operator_at < 0:
        return RomanNumeral(expression)

    operator = expression[operator_at]
    left = _reduce(expression[:operator_at])
    right = _reduce(expression[operator_at + 1:])
    if operator == "+":
        result = left + right
    else:
        result = left - right
    logger.debug("%s %s %s = %s", left, operator, right, result)
    return result


def evaluate(expression: str, forgiving: bool = False) -> RomanNumeral:
    """Evaluate an expression to a numeral in canonical subtractive form.

    Args:
        expression: Text like ``"X - V - I"``.
        forgiving: Strip disallowed characters instead of raising. Empty
            operands left behind (``"X--I"``) count as zero.

    Raises:
        MalformedExpression, InvalidCharacter: strict mode only.
        InsufficientMagnitude: in either mode, if a result would go negative.
    """
    if forgiving:
        cleaned = sanitize_expression(expression)
        if cleaned != expression:
            logger.debug("sanitized %r -> %r", expression, cleaned)
    else:
        cleaned = verify_expression(expression)
    return _reduce(cleaned).to_subtractive()
