"""Judge — runs one Roman Turing test trial.

Data flow per trial:
1. Load the name lists and pick the arithmetic challenge
2. Open a channel: a human at the terminal, or the bundled contender in a
   subprocess talking over line pipes
3. Step one: ask for a name and classify the reply
4. Step two: announce the question
5. Step three: ask the challenge and check the answer
6. Step four: listen for the goodbye
7. Assemble TrialResult, optionally save it as transcript.json

A failed step says why, declares the failure and ends the trial.
"""

from __future__ import annotations

import logging
import random
import re
import subprocess
import time
from datetime import datetime, timezone
from pathlib import Path
from typing import Callable, Optional

from rich.console import Console

from romanturing.challenge import Challenge
from romanturing.environment import build_contender_env, contender_command, data_dir, results_root
from romanturing.errors import NumeralError
from romanturing.models import Speaker, TrialResult, Verdict
from romanturing.names import NameLists, load_name_lists

logger = logging.getLogger(__name__)

PASSED_BANNER = "CONGRATULATIONS! YOU PASSED THE TURING TEST."
FAILED_BANNER = "YOU FAILED THE TURING TEST."

# Someone answering "what's your name?" with a number.
_NUMBER_REPLY_RE = re.compile(r"\b(f|four)\b", re.IGNORECASE)

_QUESTION_INTRO = (
    "--anyway, hate to cut this short, but my watch is giving me trouble, "
    "so I just have one question for you -- what's the answer to the "
    "following Roman Numeral arithmetic:"
)


# ---------------------------------------------------------------------------
# Channels
# ---------------------------------------------------------------------------

class Channel:
    """One side of the conversation, as seen by the judge."""

    def say(self, text: str) -> None:
        raise NotImplementedError

    def listen(self) -> str:
        raise NotImplementedError

    def close(self) -> None:
        pass


def _type_out(console: Console, text: str, fast: bool, rng: random.Random) -> None:
    """Print text one character at a time, like someone typing."""
    for char in text:
        if not fast:
            time.sleep(rng.random() / 3)
        console.print(char, end="", markup=False, highlight=False, soft_wrap=True)
    console.print()


class ConsoleChannel(Channel):
    """A human contender at the terminal."""

    def __init__(
        self,
        console: Console,
        fast: bool = False,
        rng: Optional[random.Random] = None,
        read_line: Optional[Callable[[str], str]] = None,
    ) -> None:
        self.console = console
        self.fast = fast
        self.rng = rng or random.Random()
        self._read_line = read_line or console.input

    def say(self, text: str) -> None:
        _type_out(self.console, text, self.fast, self.rng)

    def listen(self) -> str:
        try:
            return self._read_line("> ")
        except EOFError:
            return ""


class ContenderChannel(Channel):
    """The bundled contender, running as a subprocess over line pipes."""

    def __init__(
        self,
        console: Console,
        process: subprocess.Popen,
        fast: bool = False,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.console = console
        self.process = process
        self.fast = fast
        self.rng = rng or random.Random()

    @classmethod
    def spawn(
        cls,
        console: Console,
        names_dir: Optional[Path] = None,
        seed: Optional[int] = None,
        fast: bool = False,
        rng: Optional[random.Random] = None,
    ) -> ContenderChannel:
        process = subprocess.Popen(
            contender_command(seed),
            stdin=subprocess.PIPE,
            stdout=subprocess.PIPE,
            env=build_contender_env(names_dir),
            text=True,
            bufsize=1,
        )
        logger.debug("contender started, pid %s", process.pid)
        return cls(console, process, fast=fast, rng=rng)

    def say(self, text: str) -> None:
        _type_out(self.console, text, self.fast, self.rng)
        try:
            self.process.stdin.write(text + "\n")
            self.process.stdin.flush()
        except (BrokenPipeError, OSError):
            logger.debug("contender stopped listening")

    def listen(self) -> str:
        answer = self.process.stdout.readline()
        self.console.print(f"> {answer.rstrip()}", markup=False, highlight=False, soft_wrap=True)
        return answer

    def close(self) -> None:
        if self.process.stdin and not self.process.stdin.closed:
            try:
                self.process.stdin.close()
            except (BrokenPipeError, OSError):
                pass
        try:
            self.process.wait(timeout=5)
        except subprocess.TimeoutExpired:
            self.process.kill()
            self.process.wait()
        logger.debug("contender exited with %s", self.process.returncode)


class ScriptedChannel(Channel):
    """Fixed replies, in order. Records what the judge says."""

    def __init__(self, replies: list[str]) -> None:
        self.replies = list(replies)
        self.said: list[str] = []

    def say(self, text: str) -> None:
        self.said.append(text)

    def listen(self) -> str:
        return self.replies.pop(0) if self.replies else ""


# ---------------------------------------------------------------------------
# Trial
# ---------------------------------------------------------------------------

class _TrialOver(Exception):
    """Raised by a failed step to stop the trial."""


class Trial:
    """The four-step conversation between the judge and one contender."""

    def __init__(
        self,
        channel: Channel,
        names: NameLists,
        rng: random.Random,
        challenge: Optional[Challenge] = None,
        timestamp: str = "",
    ) -> None:
        self.channel = channel
        self.names = names
        self.rng = rng
        self.challenge = challenge or Challenge.generate(rng)
        self.result = TrialResult(timestamp=timestamp, challenge=self.challenge.prompt)

    def run(self) -> TrialResult:
        start = time.monotonic()
        try:
            self.result.expected_answer = self.challenge.answer
            self._step_one()
            self._step_two()
            self._step_three()
            self._step_four()
        except _TrialOver:
            pass
        except NumeralError as e:
            # The abacus itself gave out; nothing sensible left to ask.
            self.result.verdict = Verdict.FAIL
            self.result.reason = str(e)
            self._say(f"hmm, my abacus broke -- {e}")
            self._say(FAILED_BANNER)
        self.result.wall_clock_s = round(time.monotonic() - start, 1)
        return self.result

    def _say(self, text: str) -> None:
        self.result.record(Speaker.JUDGE, text)
        self.channel.say(text)

    def _listen(self) -> str:
        text = self.channel.listen().strip()
        self.result.record(Speaker.CONTENDER, text)
        return text

    def _pass(self, text: str) -> None:
        self.result.verdict = Verdict.PASS
        self.result.reason = text
        self._say(text)
        self._say(PASSED_BANNER)

    def _fail(self, text: str) -> None:
        self.result.verdict = Verdict.FAIL
        self.result.reason = text
        self._say(text)
        self._say(FAILED_BANNER)
        raise _TrialOver()

    def _step_one(self) -> None:
        self._say("what's your name?")
        reply = self._listen()
        self.result.contender_name = reply
        if _NUMBER_REPLY_RE.search(reply):
            self._fail("nice try -- that's a number, not a name.")
        # Male names first: the female list is too inclusive.
        elif self.names.male.matches(reply):
            self._say("yo.")
        elif self.names.female.matches(reply):
            self._say("f? ...")
        elif self.names.last.matches(reply):
            self._say("i meant your first name ...")
        else:
            self._fail("that doesn't sound like a name to me.")

    def _step_two(self) -> None:
        self._say(_QUESTION_INTRO)
        self._listen()

    def _step_three(self) -> None:
        self._say(self.challenge.prompt)
        reply = self._listen()
        if self.challenge.is_answered_by(reply):
            self._pass(
                f"{self.rng.choice(('shoot', 'shucks', 'ack'))} -- that means I'm late -- "
                f"gotta run -- {self.rng.choice(('later!', 'peace.', 'sucker!'))}"
            )
        else:
            self._fail("wrong! what did you miss that class in fifth grade?")

    def _step_four(self) -> None:
        self._listen()


def run_trial(
    console: Console,
    autorespond: bool = False,
    fast: bool = False,
    seed: Optional[int] = None,
    save: bool = False,
    names_dir: Optional[Path] = None,
) -> TrialResult:
    """Run one full trial against a human or the bundled contender.

    Args:
        console: Rich Console the conversation is typed onto.
        autorespond: Let the bundled contender answer instead of a human.
        fast: Skip the simulated typing delay.
        seed: Seed for the challenge, the judge's wording and the contender.
        save: Write transcript.json under the results root.
        names_dir: Override the directory holding the name lists.

    Returns:
        TrialResult with verdict and transcript.
    """
    rng = random.Random(seed)
    names = load_name_lists(names_dir or data_dir())
    timestamp = datetime.now(timezone.utc).strftime("%Y%m%dT%H%M%SZ")

    if autorespond:
        channel: Channel = ContenderChannel.spawn(console, names_dir=names_dir, seed=seed, fast=fast, rng=rng)
    else:
        channel = ConsoleChannel(console, fast=fast, rng=rng)

    try:
        result = Trial(channel, names, rng, timestamp=timestamp).run()
    finally:
        channel.close()
    result.autorespond = autorespond

    if save:
        path = result.save(results_root() / timestamp)
        console.print(f"[dim]Transcript saved to {path}[/dim]")
    return result
