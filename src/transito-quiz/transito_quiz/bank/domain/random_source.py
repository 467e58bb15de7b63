"""RandomSource Protocol: injectable randomness for shuffling and sampling."""

from collections.abc import MutableSequence
from typing import Any, Protocol


class RandomSource(Protocol):
    """Structural interface satisfied by random.Random.

    Tests pass a seeded random.Random or a deterministic fake.
    """

    def shuffle(self, x: MutableSequence[Any]) -> None: ...
