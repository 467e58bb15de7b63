"""Deterministic RandomSource implementations for use in tests."""

from collections.abc import MutableSequence
from typing import Any


class IdentityRandom:
    """Satisfies RandomSource. Leaves every sequence in its original order."""

    def shuffle(self, x: MutableSequence[Any]) -> None:
        return None


class ReversingRandom:
    """Satisfies RandomSource. Reverses every sequence it is asked to shuffle."""

    def __init__(self) -> None:
        self.calls = 0

    def shuffle(self, x: MutableSequence[Any]) -> None:
        self.calls += 1
        x.reverse()
