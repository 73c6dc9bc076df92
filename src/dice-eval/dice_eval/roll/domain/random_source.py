"""RandomSource Protocol — the capability every die draw is taken from."""

from typing import Protocol


class RandomSource(Protocol):
    """Produces uniformly distributed integers in an inclusive range.

    `random.Random` satisfies this protocol structurally, so a seeded
    `random.Random(42)` can be injected wherever determinism is needed.
    """

    def randint(self, a: int, b: int) -> int: ...
