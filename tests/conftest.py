from __future__ import annotations

import random

import pytest

from game.crossing.session import GameSession


class ScriptedRandom:
    """Random source that replays fixed draws, then falls back to a seeded one."""

    def __init__(self, floats=(), ints=(), seed: int = 0):
        self.floats = list(floats)
        self.ints = list(ints)
        self._fallback = random.Random(seed)

    def random(self) -> float:
        if self.floats:
            return self.floats.pop(0)
        return self._fallback.random()

    def randint(self, a: int, b: int) -> int:
        if self.ints:
            return self.ints.pop(0)
        return self._fallback.randint(a, b)

    def randrange(self, n: int) -> int:
        if self.ints:
            return self.ints.pop(0)
        return self._fallback.randrange(n)


@pytest.fixture()
def scripted():
    return ScriptedRandom


@pytest.fixture()
def session() -> GameSession:
    return GameSession(seed=1234)


class DrawRecorder:
    def __init__(self):
        self.calls: list[tuple[str, float, float]] = []

    def __call__(self, sprite: str, x: float, y: float) -> None:
        self.calls.append((sprite, x, y))

    def sprites(self) -> list[str]:
        return [c[0] for c in self.calls]


@pytest.fixture()
def draw() -> DrawRecorder:
    return DrawRecorder()
