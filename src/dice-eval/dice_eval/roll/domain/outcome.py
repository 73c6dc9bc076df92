"""RollOutcome value object — the evaluated result of one dice expression."""

from typing import Self

from pydantic import BaseModel, ConfigDict, model_validator


class RollOutcome(BaseModel, frozen=True):
    """Immutable value object capturing a realized roll and its statistics."""

    model_config = ConfigDict(frozen=True)

    value: int
    minimum: int
    maximum: int
    average: float
    source_text: str

    @model_validator(mode="after")
    def _check_bounds(self) -> Self:
        if not self.minimum <= self.value <= self.maximum:
            raise ValueError(
                f"value {self.value} outside [{self.minimum}, {self.maximum}]"
            )
        if not float(self.minimum) <= self.average <= float(self.maximum):
            raise ValueError(
                f"average {self.average} outside [{self.minimum}, {self.maximum}]"
            )
        return self
