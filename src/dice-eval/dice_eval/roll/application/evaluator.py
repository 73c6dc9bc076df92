"""DiceEvaluator — turns free-form text into rolled, annotated results."""

from dice_eval.config.domain.config import EvaluatorConfig
from dice_eval.core.errors import DiceEvalError
from dice_eval.roll.domain.expression import DiceExpression
from dice_eval.roll.domain.observer import RollObserver
from dice_eval.roll.domain.outcome import RollOutcome
from dice_eval.roll.domain.random_source import RandomSource
from dice_eval.roll.domain.result_set import ResultSet
from dice_eval.roll.infrastructure.errors import ParseError
from dice_eval.roll.infrastructure.pattern import find_expressions


class DiceEvaluator:
    """Evaluates dice notation against an injected random source.

    Holds no state between calls other than the random source it was given,
    so one evaluator per thread (each with its own source) needs no locking.
    Every failure aborts the whole call; partial results are never returned.
    """

    def __init__(
        self,
        random_source: RandomSource,
        observer: RollObserver,
        config: EvaluatorConfig | None = None,
    ) -> None:
        self._random_source = random_source
        self._observer = observer
        self._config = config or EvaluatorConfig()

    def evaluate_single(self, text: str) -> int:
        """Roll the first dice expression in text and return its value.

        Raises:
            ParseError: if text contains no dice expression.
            DieSizeError: if the first expression has fewer than 2 sides.
            NumericOverflowError: if a number is out of range.
        """
        return self.evaluate_one(text).value

    def evaluate_one(self, text: str) -> RollOutcome:
        """Roll the first dice expression in text and return the full outcome."""
        return self._evaluate(text=text, limit=1).outcomes[0]

    def evaluate_all(self, text: str) -> ResultSet:
        """Roll every non-overlapping dice expression in text, left to right.

        Raises:
            ParseError: if text contains no dice expression.
            DieSizeError: if any expression has fewer than 2 sides.
            NumericOverflowError: if any number is out of range.
        """
        return self._evaluate(text=text, limit=None)

    def _evaluate(self, text: str, limit: int | None) -> ResultSet:
        expressions = self._parse(text=text, limit=limit)

        outcomes: list[RollOutcome] = []
        for expression in expressions:
            outcome = expression.roll(self._random_source)
            self._observer.roll_evaluated(
                source_text=outcome.source_text,
                value=outcome.value,
                minimum=outcome.minimum,
                maximum=outcome.maximum,
            )
            outcomes.append(outcome)

        result = ResultSet(outcomes=outcomes)
        self._observer.evaluation_completed(
            num_outcomes=len(result.outcomes),
            minimum=result.minimum,
            maximum=result.maximum,
            average=result.average,
        )
        return result

    def _parse(self, text: str, limit: int | None) -> list[DiceExpression]:
        # Everything is validated before the first draw.
        try:
            expressions = find_expressions(text=text, config=self._config, limit=limit)
            if not expressions:
                raise ParseError(text)
        except DiceEvalError as exc:
            self._observer.evaluation_failed(text=text, reason=str(exc))
            raise
        return expressions
