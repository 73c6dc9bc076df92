"""Module-level entrypoints backed by a process-wide default DiceEvaluator.

The default evaluator reports to a NullRollObserver, so evaluating dice writes
nothing anywhere. Pass a StructlogRollObserver to `configure` to log rolls.

Example:

    from dice_eval.api import configure, evaluate_all, evaluate_single
    from dice_eval.config.domain.config import EvaluatorConfig
    from dice_eval.roll.infrastructure.observer import StructlogRollObserver

    value = evaluate_single("1d6 +2")
    results = evaluate_all("1d6 +2, D12 -4, 18d100")
    results.minimum, results.maximum  # (-3, 1800)

    configure(EvaluatorConfig(), observer=StructlogRollObserver())
"""

import threading

from dice_eval.config.domain.config import EvaluatorConfig
from dice_eval.roll.application.evaluator import DiceEvaluator
from dice_eval.roll.domain.observer import RollObserver
from dice_eval.roll.domain.outcome import RollOutcome
from dice_eval.roll.domain.result_set import ResultSet
from dice_eval.roll.infrastructure.null_observer import NullRollObserver
from dice_eval.roll.infrastructure.random_source import LockedRandomSource


def _build_evaluator(
    config: EvaluatorConfig, observer: RollObserver | None = None
) -> DiceEvaluator:
    return DiceEvaluator(
        random_source=LockedRandomSource(seed=config.seed),
        observer=observer or NullRollObserver(),
        config=config,
    )


_default_lock = threading.Lock()
_default_evaluator = _build_evaluator(EvaluatorConfig())


def configure(config: EvaluatorConfig, observer: RollObserver | None = None) -> None:
    """Replace the process-wide evaluator with one built from config.

    Events go to observer when one is given, and are discarded otherwise.
    """
    global _default_evaluator
    evaluator = _build_evaluator(config, observer=observer)
    with _default_lock:
        _default_evaluator = evaluator


def default_evaluator() -> DiceEvaluator:
    with _default_lock:
        return _default_evaluator


def evaluate_single(text: str) -> int:
    """Roll the first dice expression in text, e.g. "4d7 -18", and return its value."""
    return default_evaluator().evaluate_single(text)


def evaluate_one(text: str) -> RollOutcome:
    """Roll the first dice expression in text and return it with its statistics."""
    return default_evaluator().evaluate_one(text)


def evaluate_all(text: str) -> ResultSet:
    """Roll every dice expression in text, e.g. "1d6 +3, 2d2", and aggregate them."""
    return default_evaluator().evaluate_all(text)
