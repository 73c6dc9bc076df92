"""Compiled pattern-matcher for `[count]d size [±modifier]` dice notation."""

import re
from collections.abc import Iterator

from dice_eval.config.domain.config import EvaluatorConfig
from dice_eval.roll.domain.expression import DiceExpression
from dice_eval.roll.infrastructure.errors import DieSizeError, NumericOverflowError

# A count only starts at the beginning of a digit run, which keeps scanning
# linear. At most one of space, tab, newline, form feed or carriage return may
# precede the modifier; vertical tab is not whitespace here.
_DICE_PATTERN = re.compile(
    r"(?P<count>(?<!\d)\d+)?[dD](?P<size>\d+)"
    r"[ \t\n\f\r]?"
    r"(?P<modifier>[+-]\d+)?",
    re.ASCII,
)


def find_expressions(
    text: str, config: EvaluatorConfig, limit: int | None = None
) -> list[DiceExpression]:
    """
    Scan text left to right and return every non-overlapping dice expression.

    At most `limit` matches are parsed when a limit is given. Every match is
    validated before returning, so a bad expression anywhere aborts the scan.

    Raises:
        DieSizeError: if any matched expression has fewer than 2 sides.
        NumericOverflowError: if any number is outside the configured range.
    """
    expressions: list[DiceExpression] = []
    for match in _iter_matches(text=text, limit=limit):
        expressions.append(_to_expression(match=match, config=config))
    return expressions


def _iter_matches(text: str, limit: int | None) -> Iterator[re.Match[str]]:
    for index, match in enumerate(_DICE_PATTERN.finditer(text)):
        if limit is not None and index >= limit:
            return
        yield match


def _to_expression(match: re.Match[str], config: EvaluatorConfig) -> DiceExpression:
    source_text = match.group(0)

    count_digits = match.group("count")
    count = 1
    if count_digits:
        count = _parse_int(count_digits, config=config, what="dice count")

    size = _parse_int(match.group("size"), config=config, what="die size")
    if size < 2:
        raise DieSizeError(size=size, source_text=source_text)

    modifier = 0
    if match.group("modifier"):
        modifier = _parse_int(match.group("modifier"), config=config, what="modifier")

    expression = DiceExpression(
        count=count, size=size, modifier=modifier, source_text=source_text
    )
    _check_in_range(expression.minimum, config=config, what="minimum")
    _check_in_range(expression.maximum, config=config, what="maximum")
    return expression


def _parse_int(digits: str, config: EvaluatorConfig, what: str) -> int:
    sign = -1 if digits.startswith("-") else 1
    magnitude = digits.lstrip("+-").lstrip("0")
    # Bound the digit count before converting so huge inputs stay linear.
    if len(magnitude) > len(str(config.max_integer)):
        raise NumericOverflowError(f"{what} {digits[:24]}... is out of range")
    value = sign * int(magnitude or "0")
    _check_in_range(value, config=config, what=what)
    return value


def _check_in_range(value: int, config: EvaluatorConfig, what: str) -> None:
    if not -config.max_integer - 1 <= value <= config.max_integer:
        raise NumericOverflowError(f"{what} {value} is out of range")
