"""Shared fixtures for the random walker tests."""

from typing import Any, List, Sequence

import pytest


class ScriptedRng:
    """Random source that replays fixed floats and choice indices."""

    def __init__(self, values: List[float], picks: List[int]):
        self.values = list(values)
        self.picks = list(picks)

    def random(self) -> float:
        return self.values.pop(0)

    def choice(self, seq: Sequence[Any]) -> Any:
        return seq[self.picks.pop(0)]


@pytest.fixture
def scripted_rng():
    return ScriptedRng
