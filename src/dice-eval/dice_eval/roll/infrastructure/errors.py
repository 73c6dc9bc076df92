"""Error types raised while parsing and evaluating dice expressions."""

from dice_eval.core.errors import DiceEvalError

# Longest slice of the input quoted in an error message.
_QUOTE_LIMIT = 64


def _quote(text: str) -> str:
    if len(text) <= _QUOTE_LIMIT:
        return repr(text)
    return f"{text[:_QUOTE_LIMIT]!r}... ({len(text)} characters)"


class ParseError(DiceEvalError):
    """Raised when the input contains no recognizable dice expression."""

    def __init__(self, text: str) -> None:
        self.text = text
        super().__init__(
            f"Failed to parse roll: no dice expression found in {_quote(text)}"
        )


class DieSizeError(DiceEvalError):
    """Raised when a matched expression specifies a die with fewer than 2 sides."""

    def __init__(self, size: int, source_text: str) -> None:
        self.size = size
        self.source_text = source_text
        super().__init__(
            f"Failed to evaluate roll {_quote(source_text)}: die size {size} is"
            f" invalid, a die must have at least 2 sides"
        )


class NumericOverflowError(DiceEvalError):
    """Raised when a number in, or derived from, an expression is out of range."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"Failed to evaluate roll: {reason}")
