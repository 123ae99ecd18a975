"""Name lists for telling people from numbers.

Each list is a plain text file with one name per line. Matching is by whole
word: the text is stripped of punctuation, upper-cased and split on
whitespace, and any word that is a known name counts as a match.
"""

from __future__ import annotations

import random
import re
from dataclasses import dataclass
from pathlib import Path

FEMALE_FIRST_NAMES = "female_firstnames.txt"
MALE_FIRST_NAMES = "male_firstnames.txt"
LAST_NAMES = "lastnames.txt"

_NON_WORD_RE = re.compile(r"[^\w\s]")


def normalize_words(text: str) -> list[str]:
    """Split free text into upper-cased words. "Hi, I'm Bob!" → ['HI', 'IM', 'BOB']."""
    return _NON_WORD_RE.sub("", text).upper().split()


class NameList:
    """An ordered list of known names with whole-word membership tests."""

    def __init__(self, names: list[str]) -> None:
        self._names = [n.strip().upper() for n in names if n.strip()]
        self._lookup = frozenset(self._names)

    @classmethod
    def from_file(cls, path: Path) -> NameList:
        """Load one name per line. Raises FileNotFoundError if missing."""
        return cls(path.read_text(encoding="utf-8").splitlines())

    def __len__(self) -> int:
        return len(self._names)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and name.strip().upper() in self._lookup

    def __getitem__(self, index: int) -> str:
        return self._names[index]

    def matches(self, text: str) -> bool:
        """True if any word of ``text`` is a name on this list."""
        return not self._lookup.isdisjoint(normalize_words(text))

    def pick(self, rng: random.Random) -> str:
        """A random name, in the capitalization people type it."""
        return rng.choice(self._names).capitalize()


@dataclass
class NameLists:
    """The three lists the judge and contender work from."""

    female: NameList
    male: NameList
    last: NameList

    def pick_first_name(self, rng: random.Random) -> str:
        source = self.female if rng.random() < 0.5 else self.male
        return source.pick(rng)


def load_name_lists(data_dir: Path) -> NameLists:
    """Load the female, male and last name files from ``data_dir``."""
    return NameLists(
        female=NameList.from_file(data_dir / FEMALE_FIRST_NAMES),
        male=NameList.from_file(data_dir / MALE_FIRST_NAMES),
        last=NameList.from_file(data_dir / LAST_NAMES),
    )
