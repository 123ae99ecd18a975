"""romanturing — Roman numeral arithmetic the way the Romans did it, and a
Turing test that leans on it.

The numeral engine adds and subtracts by moving symbols around, with no
integer arithmetic anywhere. The judge asks a contender (human or the bundled
bot) for a name and one Roman numeral subtraction.

Usage:
    python -m romanturing eval "MCMLXXXVIII - MLXVI + X"   # CMXXXII
    python -m romanturing forms XLIX                        # Show all forms
    python -m romanturing judge                             # Take the test
    python -m romanturing judge --autorespond --fast        # Watch the bot
    python -m romanturing results                           # Saved trials
"""

from romanturing.errors import (
    InsufficientMagnitude,
    InvalidCharacter,
    MalformedExpression,
    NumeralError,
    UnknownSymbol,
)
from romanturing.expression import evaluate, sanitize_expression, verify_expression
from romanturing.numeral import ALPHABET, EQUIVALENTS, Comparison, RomanNumeral

__version__ = "0.1.0"

__all__ = [
    "ALPHABET",
    "EQUIVALENTS",
    "Comparison",
    "InsufficientMagnitude",
    "InvalidCharacter",
    "MalformedExpression",
    "NumeralError",
    "RomanNumeral",
    "UnknownSymbol",
    "evaluate",
    "sanitize_expression",
    "verify_expression",
]
