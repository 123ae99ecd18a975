"""Environment settings and the contender subprocess environment.

Settings come from environment variables with package defaults:
    ROMANTURING_DATA_DIR     directory holding the name list files
    ROMANTURING_RESULTS_DIR  where saved trial transcripts go
"""

from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Optional

DATA_DIR_VAR = "ROMANTURING_DATA_DIR"
RESULTS_DIR_VAR = "ROMANTURING_RESULTS_DIR"

# Vars that only make sense to the judge and would confuse a contender.
_JUDGE_ONLY_VARS = (RESULTS_DIR_VAR,)


def data_dir() -> Path:
    """Directory of name lists: $ROMANTURING_DATA_DIR or the bundled data/."""
    override = os.environ.get(DATA_DIR_VAR)
    if override:
        return Path(override)
    return Path(__file__).parent / "data"


def results_root() -> Path:
    """Directory of saved trials: $ROMANTURING_RESULTS_DIR or ./results."""
    return Path(os.environ.get(RESULTS_DIR_VAR, "results"))


def contender_command(seed: Optional[int] = None) -> list[str]:
    """Command line that starts the bundled contender on stdin/stdout."""
    cmd = [sys.executable, "-m", "romanturing", "contend"]
    if seed is not None:
        cmd.extend(["--seed", str(seed)])
    return cmd


def build_contender_env(names_dir: Optional[Path] = None) -> dict[str, str]:
    """Build env for the contender subprocess.

    Output is unbuffered so each line reaches the judge as soon as it is
    said, and the contender reads the same name lists as the judge.
    """
    env = os.environ.copy()
    for key in _JUDGE_ONLY_VARS:
        env.pop(key, None)
    env.update({
        "PYTHONUNBUFFERED": "1",
        "PYTHONIOENCODING": "utf-8",
        DATA_DIR_VAR: str(names_dir or data_dir()),
    })
    return env
