"""NullRollObserver — discards every roll domain event."""


class NullRollObserver:
    """Satisfies the RollObserver protocol structurally and emits nothing.

    The default for the module-level API, so library callers see no output
    until they opt in to StructlogRollObserver through `api.configure`.
    """

    def roll_evaluated(
        self, source_text: str, value: int, minimum: int, maximum: int
    ) -> None:
        pass

    def evaluation_completed(
        self, num_outcomes: int, minimum: int, maximum: int, average: float
    ) -> None:
        pass

    def evaluation_failed(self, text: str, reason: str) -> None:
        pass
