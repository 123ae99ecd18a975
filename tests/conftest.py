"""Shared fixtures for the romanturing test suite."""

import io
import random

import pytest
from rich.console import Console

from romanturing.environment import data_dir
from romanturing.names import load_name_lists


@pytest.fixture
def names():
    """The bundled name lists."""
    return load_name_lists(data_dir())


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def console():
    """A Console writing into a buffer; read it back with console.file.getvalue()."""
    return Console(file=io.StringIO(), width=120, force_terminal=False)
