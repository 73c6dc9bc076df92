"""FakeRollObserver — records roll domain events for assertion in tests."""

from dataclasses import dataclass


@dataclass(frozen=True)
class RollEvaluatedEvent:
    source_text: str
    value: int
    minimum: int
    maximum: int


@dataclass(frozen=True)
class EvaluationCompletedEvent:
    num_outcomes: int
    minimum: int
    maximum: int
    average: float


@dataclass(frozen=True)
class EvaluationFailedEvent:
    text: str
    reason: str


class FakeRollObserver:
    """Records all emitted roll events as typed frozen dataclasses.

    Use in tests to assert which events were emitted and with what data,
    without mocking or patching.
    """

    def __init__(self) -> None:
        self.evaluated: list[RollEvaluatedEvent] = []
        self.completed: list[EvaluationCompletedEvent] = []
        self.failed: list[EvaluationFailedEvent] = []

    def roll_evaluated(
        self, source_text: str, value: int, minimum: int, maximum: int
    ) -> None:
        self.evaluated.append(
            RollEvaluatedEvent(
                source_text=source_text, value=value, minimum=minimum, maximum=maximum
            )
        )

    def evaluation_completed(
        self, num_outcomes: int, minimum: int, maximum: int, average: float
    ) -> None:
        self.completed.append(
            EvaluationCompletedEvent(
                num_outcomes=num_outcomes,
                minimum=minimum,
                maximum=maximum,
                average=average,
            )
        )

    def evaluation_failed(self, text: str, reason: str) -> None:
        self.failed.append(EvaluationFailedEvent(text=text, reason=reason))
