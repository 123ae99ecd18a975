"""Exceptions raised by the numeral engine and expression evaluator.

Every failure derives from NumeralError so the chat layer can catch one type
and end the conversation. Each also derives from the closest builtin so plain
callers can catch ValueError / ArithmeticError / LookupError.
"""

from __future__ import annotations


class NumeralError(Exception):
    """Base class for all numeral failures."""


class InvalidCharacter(NumeralError, ValueError):
    """A literal or expression holds a character outside the alphabet."""

    def __init__(self, position: int, char: str) -> None:
        self.position = position
        self.char = char
        super().__init__(
            f"Position {position} in the string is an illegal character {char!r}"
        )


class MalformedExpression(NumeralError, ValueError):
    """An expression is empty or has a misplaced operator."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(reason)


class InsufficientMagnitude(NumeralError, ArithmeticError):
    """Subtrahend is larger than the minuend; Romans had no negatives."""

    def __init__(self, message: str = "Cannot subtract a larger Roman numeral from a smaller one") -> None:
        super().__init__(message)


class UnknownSymbol(NumeralError, LookupError):
    """A symbol outside the equivalence table reached the tier logic."""

    def __init__(self, symbol: str) -> None:
        self.symbol = symbol
        super().__init__(f"Unknown Roman symbol: {symbol!r}")
