"""RollObserver port — domain events emitted while evaluating dice expressions."""

from typing import Protocol


class RollObserver(Protocol):
    """Observer port for roll domain events.

    Implementations may log to structlog or record for tests.
    """

    def roll_evaluated(
        self, source_text: str, value: int, minimum: int, maximum: int
    ) -> None: ...

    def evaluation_completed(
        self, num_outcomes: int, minimum: int, maximum: int, average: float
    ) -> None: ...

    def evaluation_failed(self, text: str, reason: str) -> None: ...
