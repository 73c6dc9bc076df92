"""Tests verifying the DiceEvalError type hierarchy."""

import pytest

from dice_eval.core.errors import DiceEvalError
from dice_eval.roll.infrastructure.errors import (
    DieSizeError,
    NumericOverflowError,
    ParseError,
)

_ALL_ERRORS = [
    ParseError(text="no dice here"),
    DieSizeError(size=1, source_text="d1"),
    NumericOverflowError(reason="modifier 99999999999999999999 is out of range"),
]


class TestDiceEvalErrorHierarchy:
    """All dice-eval-specific exceptions inherit from DiceEvalError."""

    @pytest.mark.parametrize("error", _ALL_ERRORS, ids=lambda e: type(e).__name__)
    def test_is_dice_eval_error(self, error: DiceEvalError) -> None:
        assert isinstance(error, DiceEvalError)

    @pytest.mark.parametrize("error", _ALL_ERRORS, ids=lambda e: type(e).__name__)
    def test_is_not_retriable(self, error: DiceEvalError) -> None:
        assert error.retriable is False

    @pytest.mark.parametrize("error", _ALL_ERRORS, ids=lambda e: type(e).__name__)
    def test_message_starts_with_failed(self, error: DiceEvalError) -> None:
        assert str(error).startswith("Failed to ")

    def test_dice_eval_error_is_exception(self) -> None:
        error = DiceEvalError("test")
        assert isinstance(error, Exception)

    def test_evaluation_errors_are_distinct(self) -> None:
        assert not issubclass(ParseError, DieSizeError)
        assert not issubclass(DieSizeError, NumericOverflowError)
        assert not issubclass(NumericOverflowError, ParseError)


class TestErrorDetails:
    """Errors carry the data needed to explain the rejection."""

    def test_parse_error_includes_text(self) -> None:
        error = ParseError(text="no dice here")
        assert "no dice here" in str(error)
        assert error.text == "no dice here"

    def test_die_size_error_includes_size_and_source(self) -> None:
        error = DieSizeError(size=1, source_text="3d1")
        assert error.size == 1
        assert error.source_text == "3d1"
        assert "3d1" in str(error)
        assert "at least 2 sides" in str(error)

    def test_parse_error_truncates_long_text(self) -> None:
        text = "no dice " * 10_000

        error = ParseError(text=text)

        assert len(str(error)) < 200
        assert "80000 characters" in str(error)
        assert error.text == text

    def test_die_size_error_truncates_long_source(self) -> None:
        source_text = "0" * 1_000 + "d1"

        error = DieSizeError(size=1, source_text=source_text)

        assert len(str(error)) < 250
        assert error.source_text == source_text
