"""Random number source used for ticket numbers and draws."""

from __future__ import annotations

import random
from typing import Protocol


class RandomSource(Protocol):
    """Anything that can pick an integer in ``[a, b]`` inclusive.

    ``random.Random`` satisfies this, so does any scripted stand-in.
    """

    def randint(self, a: int, b: int) -> int: ...


def default_random_source(seed: int | None = None) -> RandomSource:
    """Private ``random.Random`` instance, seeded when ``seed`` is given."""

    return random.Random(seed)
