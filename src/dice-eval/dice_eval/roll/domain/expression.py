"""DiceExpression value object — one parsed `[count]d size [±modifier]` match."""

from pydantic import BaseModel, ConfigDict, Field

from dice_eval.roll.domain.outcome import RollOutcome
from dice_eval.roll.domain.random_source import RandomSource


class DiceExpression(BaseModel, frozen=True):
    """A validated dice expression, ready to be rolled.

    A count of zero is a pure-modifier roll: no dice are drawn and every
    statistic collapses to the modifier.
    """

    model_config = ConfigDict(frozen=True)

    count: int = Field(ge=0)
    size: int = Field(ge=2)
    modifier: int = 0
    source_text: str

    @property
    def minimum(self) -> int:
        if self.count == 0:
            return self.modifier
        return self.count + self.modifier

    @property
    def maximum(self) -> int:
        if self.count == 0:
            return self.modifier
        return self.count * self.size + self.modifier

    @property
    def average(self) -> float:
        if self.count == 0:
            return float(self.modifier)
        # Exact integer numerator, so the division rounds once.
        return (self.count * (self.size + 1) + 2 * self.modifier) / 2

    def roll(self, random_source: RandomSource) -> RollOutcome:
        """Draw `count` faces from random_source and return the outcome."""
        value = self.modifier
        for _ in range(self.count):
            value += random_source.randint(1, self.size)

        return RollOutcome(
            value=value,
            minimum=self.minimum,
            maximum=self.maximum,
            average=self.average,
            source_text=self.source_text,
        )
