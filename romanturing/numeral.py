"""Roman numerals with arithmetic done the way the Romans did it.

No decimal or integer arithmetic happens here. Numerals are added by pooling
their symbols and subtracted by striking symbols out, breaking a larger symbol
into smaller ones ("borrowing") whenever a tier runs short. The only thing the
engine ever counts is how many of one symbol each operand holds.

Usage:
    >>> RomanNumeral("MCMLXXXVIII") - RomanNumeral("MLXVI")
    RomanNumeral('CMXXII')
    >>> RomanNumeral("IV") + RomanNumeral("I")
    RomanNumeral('V')

Two representations of the same quantity exist:
    additive     IIII, VIIII, XXXXVIIII   (no subtractive pairs)
    subtractive  IV, IX, XLIX             (canonical, minimal length)
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Optional, Union

from romanturing.errors import InsufficientMagnitude, InvalidCharacter, UnknownSymbol

logger = logging.getLogger(__name__)

# Ascending tiers.
ALPHABET = "IVXLCDM"

# Each symbol spelled with the tier immediately below it.
EQUIVALENTS: dict[str, str] = {
    "V": "IIIII",
    "X": "VV",
    "L": "XXXXX",
    "C": "LL",
    "D": "CCCCC",
    "M": "DD",
}


class Comparison(str, Enum):
    """Three-way result of comparing one tier of two numerals."""

    LESS = "less"
    EQUAL = "equal"
    GREATER = "greater"


# ---------------------------------------------------------------------------
# Tier table lookups
# ---------------------------------------------------------------------------

def _tier(symbol: str) -> int:
    """Rank of a symbol in the alphabet; UnknownSymbol if it has none."""
    if len(symbol) != 1 or symbol not in ALPHABET:
        raise UnknownSymbol(symbol)
    return ALPHABET.index(symbol)


def lower_symbols(symbol: str) -> str:
    """Symbols ranked below the given one, ascending. 'X' → 'IV'."""
    return ALPHABET[:_tier(symbol)]


def higher_symbols(symbol: str) -> str:
    """Symbols ranked above the given one, ascending. 'X' → 'LCDM'."""
    return ALPHABET[_tier(symbol) + 1:]


def expand(symbol: str) -> str:
    """Spell a symbol with the next lower tier, e.g. 'X' → 'VV'."""
    _tier(symbol)
    if symbol not in EQUIVALENTS:
        raise UnknownSymbol(symbol)
    return EQUIVALENTS[symbol]


def tier_comparison(symbol: str, left: str, right: str) -> Comparison:
    """Compare how many of ``symbol`` two symbol strings hold."""
    _tier(symbol)
    held, wanted = left.count(symbol), right.count(symbol)
    if held < wanted:
        return Comparison.LESS
    if held > wanted:
        return Comparison.GREATER
    return Comparison.EQUAL


def _build_rewrites() -> list[tuple[str, str]]:
    """Additive → subtractive substitutions, highest tier first.

    Per tier, the second-order rewrite (VIIII → IX) comes before the
    first-order one (IIII → IV). Both are derived from EQUIVALENTS: a tier
    worth two of the one below gets a second-order rewrite, a tier worth five
    of the one below gets a first-order rewrite.
    """
    rewrites: list[tuple[str, str]] = []
    for symbol in reversed(ALPHABET[1:]):
        below = lower_symbols(symbol)
        one_down = below[-1]
        if EQUIVALENTS[symbol] == one_down * 2 and len(below) >= 2:
            two_down = below[-2]
            if EQUIVALENTS[one_down] == two_down * 5:
                rewrites.append((one_down + two_down * 4, two_down + symbol))
        if EQUIVALENTS[symbol] == one_down * 5:
            rewrites.append((one_down * 4, one_down + symbol))
    return rewrites


_REWRITES = _build_rewrites()


# ---------------------------------------------------------------------------
# Symbol-string arithmetic
#
# These work on plain validated strings so intermediate working copies can be
# rebuilt freely; RomanNumeral wraps the results.
# ---------------------------------------------------------------------------

def _to_additive(text: str) -> str:
    """Rewrite every subtractive pair as the symbols it stands for.

    A prefix run worth as much as the symbol after it (``IIIIIV``) is not a
    subtractive pair. It is left as written and reads additively.
    """
    for symbol in ALPHABET:
        subtrahends = lower_symbols(symbol)[-2:]
        if not subtrahends:
            continue
        start = 0
        while True:
            run_start = _find_pair(text, symbol, subtrahends, start)
            if run_start is None:
                break
            run_end = text.index(symbol, run_start)
            run = text[run_start:run_end]
            if symbol in _denumerate(_to_additive(run)):
                start = run_end + 1
                continue
            expanded = _minus(symbol, run)
            text = text[:run_start] + expanded + text[run_end + 1:]
            start = run_start + len(expanded)
    return text


def _find_pair(text: str, symbol: str, subtrahends: str, start: int) -> Optional[int]:
    """Start of the first run of ``subtrahends`` directly before ``symbol``."""
    run_start: Optional[int] = None
    for position in range(start, len(text)):
        char = text[position]
        if char in subtrahends:
            if run_start is None:
                run_start = position
        elif char == symbol and run_start is not None:
            return run_start
        else:
            run_start = None
    return None


def _ordered(text: str) -> str:
    """Symbols regrouped highest tier first. Only valid on additive text."""
    return "".join(char for symbol in reversed(ALPHABET) for char in text if char == symbol)


def _denumerate(text: str) -> str:
    """Collapse every run that spells a higher symbol into that symbol."""
    consolidated = _ordered(text)
    for symbol, expansion in EQUIVALENTS.items():
        consolidated = consolidated.replace(expansion, symbol)
    return consolidated


def _to_subtractive(text: str) -> str:
    numeral = _denumerate(_to_additive(text))
    for additive, subtractive in _REWRITES:
        numeral = numeral.replace(additive, subtractive)
    return numeral


def _plus(augend: str, addend: str) -> str:
    augend = _to_additive(augend)
    addend = _to_additive(addend)
    summand: list[str] = []
    for symbol in ALPHABET:
        summand.extend(char for char in augend if char == symbol)
        summand.extend(char for char in addend if char == symbol)
    # Collected lowest tier first; numerals read highest first.
    return "".join(reversed(summand))


def _borrow_for(numeral: str, symbol: str) -> str:
    """Break higher symbols down until ``numeral`` holds one more ``symbol``.

    The rightmost higher-tier symbol is always the one broken. In an ordered
    additive numeral that is the smallest symbol able to lend.
    """
    higher = higher_symbols(symbol)
    borrowed = numeral
    while tier_comparison(symbol, borrowed, numeral) is not Comparison.GREATER:
        position = _rightmost_of(borrowed, higher)
        if position is None:
            raise InsufficientMagnitude()
        lender = borrowed[position]
        borrowed = borrowed[:position] + expand(lender) + borrowed[position + 1:]
        logger.debug("borrow for %s: %s -> %s", symbol, lender, expand(lender))
    return borrowed


def _rightmost_of(text: str, symbols: str) -> Optional[int]:
    for position in reversed(range(len(text))):
        if text[position] in symbols:
            return position
    return None


def _minus(minuend: str, subtrahend: str) -> str:
    # Runs such as IIIII must be collapsed first or borrowing cannot see them.
    minuend = _denumerate(_to_additive(minuend))
    subtrahend = _to_additive(subtrahend)
    for symbol in ALPHABET:
        while tier_comparison(symbol, minuend, subtrahend) is Comparison.LESS:
            minuend = _borrow_for(minuend, symbol)
    difference = minuend
    for char in subtrahend:
        difference = difference.replace(char, "", 1)
    return difference


# ---------------------------------------------------------------------------
# Value type
# ---------------------------------------------------------------------------

Operand = Union["RomanNumeral", str]


class RomanNumeral:
    """An immutable, validated sequence of Roman symbols.

    The empty numeral stands for zero (there is no symbol for it). Equality
    compares quantities, so ``RomanNumeral("IIII") == RomanNumeral("IV")``;
    use ``.symbols`` to compare spellings.
    """

    __slots__ = ("_symbols",)

    def __init__(self, symbols: Operand = "") -> None:
        if isinstance(symbols, RomanNumeral):
            symbols = symbols.symbols
        for position, char in enumerate(symbols):
            if char not in ALPHABET:
                raise InvalidCharacter(position, char)
        self._symbols = symbols

    @property
    def symbols(self) -> str:
        return self._symbols

    def __str__(self) -> str:
        return self._symbols

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._symbols!r})"

    def __len__(self) -> int:
        return len(self._symbols)

    def __bool__(self) -> bool:
        return bool(self._symbols)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RomanNumeral):
            return NotImplemented
        return _to_subtractive(self._symbols) == _to_subtractive(other._symbols)

    def __hash__(self) -> int:
        return hash(_to_subtractive(self._symbols))

    def count(self, symbol: str) -> int:
        """How many of ``symbol`` this spelling holds."""
        _tier(symbol)
        return self._symbols.count(symbol)

    # -- normalization ----------------------------------------------------

    def to_additive(self) -> RomanNumeral:
        """Spell out every subtractive pair: IV → IIII, XLIX → XXXXVIIII."""
        return RomanNumeral(_to_additive(self._symbols))

    def denumerate(self) -> RomanNumeral:
        """Consolidate an additive numeral: IIIIIII → VII, VV → X.

        Symbols are regrouped highest tier first before runs are collapsed,
        so the result never holds a run matching an expansion.
        """
        return RomanNumeral(_denumerate(self._symbols))

    def to_subtractive(self) -> RomanNumeral:
        """Canonical form: IIII → IV, DCCCCXXII → CMXXII."""
        return RomanNumeral(_to_subtractive(self._symbols))

    # -- comparison -------------------------------------------------------

    def compare_tier(self, other: Operand, symbol: str) -> Comparison:
        """Compare the count of one symbol in both operands' additive forms."""
        other = _coerce(other)
        return tier_comparison(symbol, _to_additive(self._symbols), _to_additive(other.symbols))

    def tier_profile(self, other: Operand) -> dict[str, Comparison]:
        """Per-tier comparison vector against ``other``, lowest tier first."""
        other = _coerce(other)
        mine, theirs = _to_additive(self._symbols), _to_additive(other.symbols)
        return {symbol: tier_comparison(symbol, mine, theirs) for symbol in ALPHABET}

    # -- arithmetic -------------------------------------------------------

    def borrow_for(self, symbol: str) -> RomanNumeral:
        """Additive copy holding at least one more ``symbol`` than this one."""
        return RomanNumeral(_borrow_for(_to_additive(self._symbols), symbol))

    def plus(self, addend: Operand) -> RomanNumeral:
        """Sum in additive form."""
        return RomanNumeral(_plus(self._symbols, _coerce(addend).symbols))

    def minus(self, subtrahend: Operand) -> RomanNumeral:
        """Difference in additive form; InsufficientMagnitude if negative."""
        return RomanNumeral(_minus(self._symbols, _coerce(subtrahend).symbols))

    def __add__(self, addend: Operand) -> RomanNumeral:
        if not isinstance(addend, (RomanNumeral, str)):
            return NotImplemented
        return self.plus(addend).to_subtractive()

    def __sub__(self, subtrahend: Operand) -> RomanNumeral:
        if not isinstance(subtrahend, (RomanNumeral, str)):
            return NotImplemented
        return self.minus(subtrahend).to_subtractive()


def _coerce(value: Operand) -> RomanNumeral:
    if isinstance(value, RomanNumeral):
        return value
    return RomanNumeral(value)
