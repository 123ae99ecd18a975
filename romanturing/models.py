"""Data models for Roman Turing test trials.

Verdict, Speaker, Exchange, TrialResult: the typed structures that flow
through judge → transcripts → CLI.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Optional


class Verdict(str, Enum):
    """How a trial ended."""

    PASS = "pass"
    FAIL = "fail"
    INCOMPLETE = "incomplete"


class Speaker(str, Enum):
    JUDGE = "judge"
    CONTENDER = "contender"


@dataclass
class Exchange:
    """One line of the conversation."""

    speaker: Speaker
    text: str

    def to_dict(self) -> dict:
        return {"speaker": self.speaker.value, "text": self.text}


@dataclass
class TrialResult:
    """Complete record of a single trial."""

    timestamp: str
    verdict: Verdict = Verdict.INCOMPLETE
    reason: str = ""
    challenge: str = ""
    expected_answer: str = ""
    contender_name: str = ""
    autorespond: bool = False
    wall_clock_s: float = 0.0
    transcript: list[Exchange] = field(default_factory=list)

    @property
    def passed(self) -> bool:
        return self.verdict == Verdict.PASS

    def record(self, speaker: Speaker, text: str) -> None:
        self.transcript.append(Exchange(speaker=speaker, text=text))

    def to_dict(self) -> dict:
        """Serialize to a JSON-compatible dict."""
        return {
            "timestamp": self.timestamp,
            "verdict": self.verdict.value,
            "reason": self.reason,
            "challenge": self.challenge,
            "expected_answer": self.expected_answer,
            "contender_name": self.contender_name,
            "autorespond": self.autorespond,
            "wall_clock_s": self.wall_clock_s,
            "transcript": [e.to_dict() for e in self.transcript],
        }

    @classmethod
    def from_dict(cls, d: dict) -> TrialResult:
        """Deserialize from a JSON dict (transcript.json)."""
        return cls(
            timestamp=d.get("timestamp", ""),
            verdict=Verdict(d.get("verdict", Verdict.INCOMPLETE.value)),
            reason=d.get("reason", ""),
            challenge=d.get("challenge", ""),
            expected_answer=d.get("expected_answer", ""),
            contender_name=d.get("contender_name", ""),
            autorespond=d.get("autorespond", False),
            wall_clock_s=d.get("wall_clock_s", 0.0),
            transcript=[
                Exchange(speaker=Speaker(e["speaker"]), text=e.get("text", ""))
                for e in d.get("transcript", [])
            ],
        )

    def save(self, result_dir: Path) -> Path:
        """Write transcript.json to the result directory."""
        result_dir.mkdir(parents=True, exist_ok=True)
        path = result_dir / "transcript.json"
        path.write_text(json.dumps(self.to_dict(), indent=2), encoding="utf-8")
        return path

    @classmethod
    def load(cls, result_dir: Path) -> Optional[TrialResult]:
        """Load transcript.json from a result directory."""
        p = result_dir / "transcript.json"
        if not p.exists():
            return None
        try:
            return cls.from_dict(json.loads(p.read_text(encoding="utf-8")))
        except (json.JSONDecodeError, KeyError, ValueError, OSError):
            return None
