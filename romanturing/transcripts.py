"""Transcripts — loads saved trials and renders them as Rich tables.

Trials are stored as <results root>/<timestamp>/transcript.json. Timestamps
are ISO8601 basic format, so lexicographic order is chronological.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from rich.console import Console
from rich.table import Table
from rich.text import Text

from romanturing.environment import results_root
from romanturing.models import Speaker, TrialResult

_VERDICT_COLORS = {"pass": "green", "fail": "red", "incomplete": "yellow"}


def _fmt_verdict(result: TrialResult) -> str:
    v = result.verdict.value
    color = _VERDICT_COLORS.get(v, "white")
    return f"[{color}]{v}[/{color}]"


def load_trials(root: Optional[Path] = None) -> list[TrialResult]:
    """Every saved trial, oldest first. Unreadable entries are skipped."""
    root = root or results_root()
    if not root.is_dir():
        return []
    trials = []
    for run_dir in sorted(root.iterdir()):
        if not run_dir.is_dir():
            continue
        result = TrialResult.load(run_dir)
        if result:
            trials.append(result)
    return trials


def render_trial(result: TrialResult, console: Console) -> None:
    """Render the conversation and verdict of one trial."""
    table = Table(
        title=f"Trial {result.timestamp or '(unsaved)'}",
        show_header=True,
        header_style="bold",
    )
    table.add_column("Who", style="dim", min_width=9)
    table.add_column("Said", min_width=30)

    for exchange in result.transcript:
        style = "cyan" if exchange.speaker == Speaker.JUDGE else "white"
        table.add_row(exchange.speaker.value, Text(exchange.text, style=style))

    console.print()
    console.print(table)
    console.print(
        f"Verdict: {_fmt_verdict(result)}  "
        f"Challenge: {result.challenge or '--'} = {result.expected_answer or '--'}  "
        f"({result.wall_clock_s}s)"
    )
    console.print()


def list_trials(console: Console, root: Optional[Path] = None) -> None:
    """List all saved trials in one summary table."""
    trials = load_trials(root)
    if not trials:
        console.print("[yellow]No saved trials yet. Run `romanturing judge --save` first.[/yellow]")
        return

    table = Table(title="Saved Trials", show_header=True, header_style="bold")
    table.add_column("Timestamp", style="dim")
    table.add_column("Contender")
    table.add_column("Name given")
    table.add_column("Challenge")
    table.add_column("Verdict", justify="right")
    table.add_column("Wall clock", justify="right")

    for r in trials:
        table.add_row(
            r.timestamp,
            "bot" if r.autorespond else "human",
            Text(r.contender_name or "--"),
            f"{r.challenge} = {r.expected_answer}" if r.challenge else "--",
            _fmt_verdict(r),
            f"{r.wall_clock_s}s",
        )

    console.print()
    console.print(table)
    console.print()
