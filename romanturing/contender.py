"""Contender — a bot that tries to pass the Roman Turing test.

Reads the judge's lines from stdin and answers on stdout, one line each.
It gives a first name, nods along, and answers the arithmetic question by
evaluating it in forgiving mode, so filler words around the numerals do not
matter.
"""

from __future__ import annotations

import logging
import random
import sys
from typing import Callable, Optional

import typer

from romanturing.errors import NumeralError
from romanturing.expression import evaluate
from romanturing.names import NameLists

logger = logging.getLogger(__name__)


def _read_stdin() -> str:
    return sys.stdin.readline()


class Contender:
    """Four steps, mirroring the judge's."""

    def __init__(
        self,
        names: NameLists,
        rng: random.Random,
        read_line: Optional[Callable[[], str]] = None,
        write_line: Optional[Callable[[str], None]] = None,
    ) -> None:
        self.names = names
        self.rng = rng
        self._read_line = read_line or _read_stdin
        self._write_line = write_line or typer.echo

    def run(self) -> bool:
        """Play one conversation. False if the arithmetic beat us."""
        self._step_one()
        self._step_two()
        if not self._step_three():
            return False
        self._step_four()
        return True

    def listen(self) -> str:
        return self._read_line()

    def say(self, text: str) -> None:
        self._write_line(text)

    def answer(self, problem: str) -> str:
        """Work out the problem the judge posed, ignoring the chatter."""
        result = evaluate(problem, forgiving=True)
        return (
            f"{self.rng.choice(('um', 'okay', 'err'))}, it's been a while, "
            f"but I think that's {result}"
        )

    def _step_one(self) -> None:
        self.listen()
        self.say(f"{self.names.pick_first_name(self.rng)}, how's it going? (^_^)")

    def _step_two(self) -> None:
        self.listen()
        self.listen()
        self.say(self.rng.choice(("yup", "yeah", "shoot")))

    def _step_three(self) -> bool:
        problem = self.listen()
        try:
            self.say(self.answer(problem))
        except NumeralError as e:
            logger.debug("could not answer %r: %s", problem, e)
            self.say(f"uh, the Romans never taught me that one ({e})")
            return False
        return True

    def _step_four(self) -> None:
        self.listen()
        self.say(self.rng.choice(("bye.", "later!", "dork!")))
