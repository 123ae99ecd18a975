"""Tests for the symbolic numeral engine."""

import re

import pytest

from romanturing.errors import InsufficientMagnitude, InvalidCharacter, UnknownSymbol
from romanturing.numeral import (
    ALPHABET,
    EQUIVALENTS,
    Comparison,
    RomanNumeral,
    expand,
    higher_symbols,
    lower_symbols,
)

CANONICAL = [
    "I", "III", "IV", "IX", "XIV", "XIX", "XL", "XLIX", "LXXXVIII", "XC",
    "XCIX", "CXC", "CCCXC", "CD", "CDXLIV", "CM", "MCMXLIV", "MCMXCIX",
    "MMVI", "MDCCLXXVI", "MMMCMXCIX",
]


# --- Construction and validation ---

def test_invalid_character_reports_position():
    with pytest.raises(InvalidCharacter) as excinfo:
        RomanNumeral("IIA")
    assert excinfo.value.position == 2
    assert excinfo.value.char == "A"


def test_lowercase_is_not_roman():
    with pytest.raises(InvalidCharacter) as excinfo:
        RomanNumeral("iv")
    assert excinfo.value.position == 0


def test_invalid_character_is_a_value_error():
    with pytest.raises(ValueError):
        RomanNumeral("X V")


def test_empty_numeral_is_zero():
    zero = RomanNumeral()
    assert str(zero) == ""
    assert not zero
    assert len(zero) == 0


def test_repr_and_str():
    n = RomanNumeral("XLIX")
    assert str(n) == "XLIX"
    assert repr(n) == "RomanNumeral('XLIX')"


def test_equality_compares_quantities():
    assert RomanNumeral("IIII") == RomanNumeral("IV")
    assert RomanNumeral("VV") == RomanNumeral("X")
    assert RomanNumeral("IV") != RomanNumeral("V")
    assert hash(RomanNumeral("IIII")) == hash(RomanNumeral("IV"))


def test_equality_with_prefix_run_too_long_to_subtract():
    # IIIIII before V cannot be a subtractive pair, so it reads additively.
    assert RomanNumeral("IIIIIIV") != RomanNumeral("V")
    assert RomanNumeral("IIIIIIV") == RomanNumeral("XI")
    assert hash(RomanNumeral("IIIIIIV")) == hash(RomanNumeral("XI"))


def test_count_rejects_unknown_symbol():
    assert RomanNumeral("XXI").count("X") == 2
    with pytest.raises(UnknownSymbol):
        RomanNumeral("XXI").count("Z")


# --- Tier table ---

def test_tier_neighbours():
    assert lower_symbols("X") == "IV"
    assert lower_symbols("I") == ""
    assert higher_symbols("X") == "LCDM"
    assert higher_symbols("M") == ""


def test_expand_uses_equivalence_table():
    assert expand("X") == "VV"
    assert expand("D") == "CCCCC"


@pytest.mark.parametrize("symbol", ["I", "Q", "", "XV"])
def test_expand_unknown_symbol(symbol):
    with pytest.raises(UnknownSymbol):
        expand(symbol)


# --- Normalization ---

@pytest.mark.parametrize(
    "numeral, additive",
    [
        ("IV", "IIII"),
        ("IX", "VIIII"),
        ("XLIX", "XXXXVIIII"),
        ("CM", "DCCCC"),
        ("CDXLIV", "CCCCXXXXIIII"),
        ("MCMXCIX", "MDCCCCLXXXXVIIII"),
        ("MMVI", "MMVI"),
        ("IIIIIIV", "IIIIIIV"),
        ("VVX", "VVX"),
    ],
)
def test_to_additive(numeral, additive):
    assert RomanNumeral(numeral).to_additive().symbols == additive


def test_denumerate_collapses_runs():
    assert RomanNumeral("IIIIIIIIII").denumerate().symbols == "X"
    assert RomanNumeral("VIIIIIII").denumerate().symbols == "XII"


def test_denumerate_regroups_scattered_symbols():
    assert RomanNumeral("IIIIIV").denumerate().symbols == "X"


@pytest.mark.parametrize(
    "additive, subtractive",
    [
        ("IIII", "IV"),
        ("VIIII", "IX"),
        ("XXXXVIIII", "XLIX"),
        ("DCCCCXXII", "CMXXII"),
        ("IIIIIIIIIIIIIIIIIIII", "XX"),
        ("CCCCLXXXX", "CDXC"),
        ("MMMM", "MMMM"),
    ],
)
def test_to_subtractive(additive, subtractive):
    assert RomanNumeral(additive).to_subtractive().symbols == subtractive


@pytest.mark.parametrize("numeral", CANONICAL)
def test_round_trip(numeral):
    assert RomanNumeral(numeral).to_additive().to_subtractive().symbols == numeral


@pytest.mark.parametrize("numeral", CANONICAL)
def test_additive_consolidation(numeral):
    consolidated = RomanNumeral(numeral).to_additive().denumerate().symbols
    assert not re.search(r"(.)\1{4}", consolidated)
    for expansion in EQUIVALENTS.values():
        assert expansion not in consolidated


@pytest.mark.parametrize("numeral", CANONICAL)
def test_additive_form_has_no_subtractive_pairs(numeral):
    additive = RomanNumeral(numeral).to_additive().symbols
    for left, right in zip(additive, additive[1:]):
        assert ALPHABET.index(left) >= ALPHABET.index(right)


def test_empty_normalizes_to_empty():
    assert RomanNumeral("").to_subtractive().symbols == ""


# --- Comparison ---

def test_compare_tier():
    assert RomanNumeral("XIII").compare_tier("XII", "I") is Comparison.GREATER
    assert RomanNumeral("IV").compare_tier("IIII", "I") is Comparison.EQUAL


def test_compare_tier_uses_additive_forms():
    # MCM is MDCCCC once spelled out: one D against two.
    assert RomanNumeral("MCM").compare_tier("DDVII", "D") is Comparison.LESS


def test_compare_tier_unknown_symbol():
    with pytest.raises(UnknownSymbol):
        RomanNumeral("X").compare_tier("V", "Z")


def test_tier_profile():
    profile = RomanNumeral("X").tier_profile("V")
    assert list(profile) == list(ALPHABET)
    assert profile["I"] is Comparison.EQUAL
    assert profile["V"] is Comparison.LESS
    assert profile["X"] is Comparison.GREATER
    assert profile["M"] is Comparison.EQUAL


# --- Addition ---

def test_addition():
    assert (RomanNumeral("X") + RomanNumeral("V")).symbols == "XV"


def test_addition_carries():
    assert (RomanNumeral("IV") + RomanNumeral("I")).symbols == "V"
    assert (RomanNumeral("XCIX") + RomanNumeral("I")).symbols == "C"


def test_plus_stays_additive():
    assert RomanNumeral("IV").plus("I").symbols == "IIIII"


@pytest.mark.parametrize("numeral", ["I", "XLIX", "MCMXCIX"])
def test_addition_identity(numeral):
    assert (RomanNumeral(numeral) + RomanNumeral("")).symbols == numeral


def test_addition_accepts_literal_strings():
    assert (RomanNumeral("CMXXII") + "X").symbols == "CMXXXII"


def test_addition_rejects_other_types():
    with pytest.raises(TypeError):
        RomanNumeral("X") + 5


# --- Subtraction and borrowing ---

def test_subtraction():
    result = RomanNumeral("MCMLXXXVIII") - RomanNumeral("MLXVI")
    assert result.symbols == "CMXXII"


def test_minus_stays_additive():
    assert RomanNumeral("MCMLXXXVIII").minus("MLXVI").symbols == "DCCCCXXII"


def test_subtraction_borrows():
    assert (RomanNumeral("X") - RomanNumeral("I")).symbols == "IX"
    assert RomanNumeral("X").minus("I").symbols == "VIIII"


def test_subtraction_borrows_across_tiers():
    assert (RomanNumeral("M") - RomanNumeral("I")).symbols == "CMXCIX"


def test_subtracting_larger_fails():
    with pytest.raises(InsufficientMagnitude):
        RomanNumeral("V") - RomanNumeral("X")


def test_subtracting_self_gives_empty():
    result = RomanNumeral("MCMXCIX") - RomanNumeral("MCMXCIX")
    assert result.symbols == ""
    assert not result


@pytest.mark.parametrize(
    "minuend, subtrahend, difference",
    [
        ("IIIII", "V", ""),
        ("IIIIII", "V", "I"),
        ("VV", "X", ""),
        ("VVV", "X", "V"),
    ],
)
def test_subtraction_from_uncollapsed_runs(minuend, subtrahend, difference):
    assert (RomanNumeral(minuend) - subtrahend).symbols == difference


def test_minus_after_plus():
    assert RomanNumeral("III").plus("III").minus("V").symbols == "I"


def test_chained_subtraction_is_left_to_right():
    assert ((RomanNumeral("X") - "V") - "I").symbols == "IV"


def test_borrow_breaks_rightmost_higher_symbol():
    # V is the rightmost symbol above I, so X is left alone.
    assert RomanNumeral("XV").borrow_for("I").symbols == "XIIIII"


def test_borrow_cascades_down_tiers():
    assert RomanNumeral("X").borrow_for("I").symbols == "VIIIII"


@pytest.mark.parametrize("numeral, symbol", [("I", "V"), ("M", "M"), ("", "I")])
def test_borrow_with_nothing_to_break(numeral, symbol):
    with pytest.raises(InsufficientMagnitude):
        RomanNumeral(numeral).borrow_for(symbol)


def test_insufficient_magnitude_is_arithmetic_error():
    with pytest.raises(ArithmeticError):
        RomanNumeral("") - RomanNumeral("I")
