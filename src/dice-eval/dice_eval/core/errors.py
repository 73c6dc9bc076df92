"""Base exception class for all dice-eval-specific errors."""


class DiceEvalError(Exception):
    """Base class for all dice-eval errors."""

    def __init__(self, message: str, retriable: bool = False) -> None:
        super().__init__(message)
        self.retriable = retriable
