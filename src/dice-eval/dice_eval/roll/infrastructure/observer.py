"""Structlog implementation of the RollObserver port."""

import structlog

# Longest slice of the caller's input written to a log entry.
_TEXT_LIMIT = 64


class StructlogRollObserver:
    """Delegates roll domain events to structlog.

    Satisfies the RollObserver protocol structurally.
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def roll_evaluated(
        self, source_text: str, value: int, minimum: int, maximum: int
    ) -> None:
        self._log.debug(
            "roll.evaluated",
            source_text=source_text,
            value=value,
            minimum=minimum,
            maximum=maximum,
        )

    def evaluation_completed(
        self, num_outcomes: int, minimum: int, maximum: int, average: float
    ) -> None:
        self._log.info(
            "roll.evaluation_completed",
            num_outcomes=num_outcomes,
            minimum=minimum,
            maximum=maximum,
            average=average,
        )

    def evaluation_failed(self, text: str, reason: str) -> None:
        self._log.warning(
            "roll.evaluation_failed",
            text=text[:_TEXT_LIMIT],
            text_length=len(text),
            reason=reason,
        )
