"""The one arithmetic question the judge asks.

The answer is worked out by the numeral engine, never written down in
advance, so the judge is only as right as the Romans were.
"""

from __future__ import annotations

import random
import re
from dataclasses import dataclass

from romanturing.numeral import RomanNumeral

MINUENDS = ("VII", "VIII", "IX", "X", "XI", "XII")
SUBTRAHENDS = ("I", "II", "III", "IV", "V", "VI")

# Standalone runs of numeral symbols in a reply.
_NUMERAL_TOKEN_RE = re.compile(r"\b[IVXLCDM]+\b")


@dataclass(frozen=True)
class Challenge:
    """A subtraction question and its canonical answer."""

    minuend: RomanNumeral
    subtrahend: RomanNumeral

    @classmethod
    def generate(cls, rng: random.Random) -> Challenge:
        return cls(
            minuend=RomanNumeral(rng.choice(MINUENDS)),
            subtrahend=RomanNumeral(rng.choice(SUBTRAHENDS)),
        )

    @property
    def prompt(self) -> str:
        return f"{self.minuend} - {self.subtrahend}"

    @property
    def answer(self) -> str:
        return str(self.minuend - self.subtrahend)

    def is_answered_by(self, response: str) -> bool:
        """True if the last numeral in ``response`` is the answer.

        "um, I think that's IV" answers IV; a stray "I" earlier in the
        sentence does not count.
        """
        tokens = _NUMERAL_TOKEN_RE.findall(response or "")
        return bool(tokens) and tokens[-1] == self.answer
