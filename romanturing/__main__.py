"""CLI for romanturing.

Usage:
    python -m romanturing eval "X - V - I"              # Evaluate strictly
    python -m romanturing eval "uh, IV - III?" -F       # Forgiving mode
    python -m romanturing forms MCMXCIX                 # Additive/subtractive forms
    python -m romanturing judge                         # Take the Turing test
    python -m romanturing judge -r -f --save            # Bot contender, no typing delay
    python -m romanturing contend                       # Run the bot on stdin/stdout
    python -m romanturing results                       # List saved trials
    python -m romanturing selftest                      # A short history lesson
"""

from __future__ import annotations

import logging
import random
from datetime import datetime
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from romanturing import __version__
from romanturing.contender import Contender
from romanturing.environment import data_dir
from romanturing.errors import NumeralError
from romanturing.expression import evaluate
from romanturing.judge import run_trial
from romanturing.names import load_name_lists
from romanturing.numeral import RomanNumeral
from romanturing.transcripts import list_trials, render_trial

app = typer.Typer(
    name="romanturing",
    help="Roman numeral arithmetic without integers, and a Turing test that uses it",
    no_args_is_help=True,
)
console = Console(stderr=True)


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"romanturing version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    verbose: bool = typer.Option(False, "--verbose", "-V", help="Debug logging and trial timings"),
    version: Optional[bool] = typer.Option(
        None, "--version", "-v", callback=_version_callback, is_eager=True, help="Show version and exit",
    ),
) -> None:
    """Roman numeral arithmetic without integers."""
    _setup_logging(verbose)
    ctx.obj = {"verbose": verbose}


@app.command("eval")
def cmd_eval(
    expression: str = typer.Argument(help="Expression such as 'MCMLXXXVIII - MLXVI + X'"),
    forgiving: bool = typer.Option(False, "--forgiving", "-F", help="Strip junk instead of failing"),
) -> None:
    """Evaluate a + / - expression of Roman numerals."""
    try:
        result = evaluate(expression, forgiving=forgiving)
    except NumeralError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)
    # Zero has no symbol; print an empty line for it.
    typer.echo(str(result))


@app.command("forms")
def cmd_forms(
    numeral: str = typer.Argument(help="Roman numeral, e.g. 'XLIX'"),
) -> None:
    """Show a numeral in additive, denumerated and subtractive form."""
    try:
        value = RomanNumeral(numeral.strip())
        additive = value.to_additive()
        rows = [
            ("Literal", value),
            ("Additive", additive),
            ("Denumerated", additive.denumerate()),
            ("Subtractive", value.to_subtractive()),
        ]
    except NumeralError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    table = Table(title=f"Forms of {numeral}", show_header=True, header_style="bold")
    table.add_column("Form", style="dim", min_width=12)
    table.add_column("Symbols", style="green")
    table.add_column("Length", justify="right")
    for label, form in rows:
        table.add_row(label, str(form) or "[dim](empty)[/dim]", str(len(form)))

    console.print()
    console.print(table)
    console.print()


@app.command("judge")
def cmd_judge(
    ctx: typer.Context,
    autorespond: bool = typer.Option(False, "--autorespond", "-r", help="Let the bundled contender answer"),
    fast: bool = typer.Option(False, "--fast", "-f", help="Puts a fire under the typing fingers"),
    seed: Optional[int] = typer.Option(None, "--seed", help="Seed for a reproducible trial"),
    save: bool = typer.Option(False, "--save", help="Save the transcript under the results directory"),
    show: bool = typer.Option(False, "--show", help="Print the transcript table afterwards"),
) -> None:
    """Take (or watch) the Roman Turing test."""
    verbose = bool(ctx.obj and ctx.obj.get("verbose"))
    if verbose:
        console.print(f"Start at {datetime.now().isoformat(timespec='seconds')}\n")
        console.print("Options:")
        for name, val in (("autorespond", autorespond), ("fast", fast), ("seed", seed), ("save", save)):
            console.print(f"  {name} = {val}")

    try:
        result = run_trial(console, autorespond=autorespond, fast=fast, seed=seed, save=save)
    except FileNotFoundError as e:
        console.print(f"[red]Error:[/red] name list not found: {e.filename}")
        raise typer.Exit(1)

    if show:
        render_trial(result, console)
    if verbose:
        console.print(f"\nFinished at {datetime.now().isoformat(timespec='seconds')} ({result.wall_clock_s}s)")
    if not result.passed:
        raise typer.Exit(1)


@app.command("contend")
def cmd_contend(
    seed: Optional[int] = typer.Option(None, "--seed", help="Seed for the contender's choices"),
) -> None:
    """Run the bundled contender, talking on stdin/stdout."""
    names = load_name_lists(data_dir())
    if not Contender(names, random.Random(seed)).run():
        raise typer.Exit(1)


@app.command("results")
def cmd_results() -> None:
    """List all saved trials."""
    list_trials(console)


def history_lesson() -> str:
    """A few dates from Roman history, subtracted the Roman way."""
    trajan = RomanNumeral("CXVII")
    fall = RomanNumeral("CDLXXVI")
    now = RomanNumeral("MMVI")
    turks = RomanNumeral("MCDLII")
    usday = RomanNumeral("MDCCLXXVI")
    ww2 = RomanNumeral("MCMXLV")
    return (
        f"The Roman empire was at its greatest extent under Trajan in the year {trajan}. "
        f"The empire fell in {fall}, meaning it had {fall - trajan} years of decline. "
        f"The year this was first written was {now}, so the peak was {now - trajan} years earlier, "
        f"and the fall {now - fall} years earlier. Roman culture continued in the Byzantine "
        f"Empire until {turks}, an additional {turks - fall} years, which was {now - turks} "
        f"years before. So overall, Roman culture was in decline for "
        f"{fall - trajan + turks - fall} years. The U.S., born in {usday}, had only existed "
        f"{now - usday} years, and since it probably maxed out during WWII, in {ww2}, "
        f"it had only had {now - ww2} years of cultural decline."
    )


@app.command("selftest")
def cmd_selftest() -> None:
    """Print a short history lesson computed entirely in Roman numerals."""
    typer.echo(history_lesson())


if __name__ == "__main__":
    app()
