"""Shared fixtures for the planetgen test suite."""
import os
from typing import Iterable

import pytest

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")


class ScriptedRNG:
    """Random source replaying fixed values, cycling when exhausted."""

    def __init__(self, values: Iterable[float]) -> None:
        self._values = list(values)
        self.draws = 0

    def __call__(self) -> float:
        value = self._values[self.draws % len(self._values)]
        self.draws += 1
        return value


@pytest.fixture
def scripted_rng():
    """Factory for :class:`ScriptedRNG` instances."""
    return ScriptedRNG


@pytest.fixture
def run_root(tmp_path):
    root = tmp_path / "runs"
    root.mkdir()
    return root
