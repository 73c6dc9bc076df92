"""ResultSet — the aggregate of every RollOutcome from one evaluation call."""

from pydantic import BaseModel, ConfigDict, Field, computed_field

from dice_eval.roll.domain.outcome import RollOutcome


class ResultSet(BaseModel, frozen=True):
    """Immutable aggregate of one or more outcomes, in left-to-right input order.

    The overall statistics are derived from the outcomes and cannot be set.
    `average` is the plain mean of the per-outcome averages; it is not
    weighted by how many dice each expression rolls.
    """

    model_config = ConfigDict(frozen=True)

    outcomes: list[RollOutcome] = Field(min_length=1)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def minimum(self) -> int:
        return min(outcome.minimum for outcome in self.outcomes)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def maximum(self) -> int:
        return max(outcome.maximum for outcome in self.outcomes)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def average(self) -> float:
        return sum(outcome.average for outcome in self.outcomes) / len(self.outcomes)
