"""Lock-protected pseudo-random source used when no other source is injected."""

import random
import threading
import time


class LockedRandomSource:
    """Wraps a private `random.Random` and serialises every draw behind a lock.

    Seeded from the clock unless an explicit seed is given. Not suitable for
    adversarial use. Satisfies the RandomSource protocol structurally.
    """

    def __init__(self, seed: int | None = None) -> None:
        self._seed = time.time_ns() if seed is None else seed
        self._random = random.Random(self._seed)
        self._lock = threading.Lock()

    @property
    def seed(self) -> int:
        return self._seed

    def randint(self, a: int, b: int) -> int:
        with self._lock:
            return self._random.randint(a, b)
