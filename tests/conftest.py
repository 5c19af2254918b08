from __future__ import annotations

from typing import Iterable

import pytest


class ScriptedSource:
    """Random source that replays a fixed sequence of values."""

    def __init__(self, values: Iterable[int]) -> None:
        self._values = list(values)
        self.calls: list[int] = []

    def randbelow(self, upper: int) -> int:
        if not self._values:
            raise AssertionError(f"script exhausted (randbelow({upper}))")
        value = self._values.pop(0)
        assert 0 <= value < upper, f"scripted {value} out of range for {upper}"
        self.calls.append(upper)
        return value

    @property
    def remaining(self) -> int:
        return len(self._values)


@pytest.fixture
def scripted():
    return ScriptedSource
