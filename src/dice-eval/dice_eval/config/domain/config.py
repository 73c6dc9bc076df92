"""EvaluatorConfig — integer range and seeding for dice evaluation."""

from pydantic import BaseModel, Field

# Largest value of a signed 64-bit integer.
DEFAULT_MAX_INTEGER = 2**63 - 1


class EvaluatorConfig(BaseModel, frozen=True):
    """Root configuration for a DiceEvaluator."""

    max_integer: int = Field(default=DEFAULT_MAX_INTEGER, gt=0)
    seed: int | None = None
