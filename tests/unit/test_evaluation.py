"""Unit tests for the evaluation entry point."""

from __future__ import annotations

from dataclasses import FrozenInstanceError

import pytest

from grossup.backend.services.calculators import (
    CalcMode,
    CalculationResult,
    ErrorKind,
    FeeEntry,
    evaluate,
)


def _fees(*percents: str) -> list[FeeEntry]:
    return [FeeEntry(name=f"Fee {index}", percent_text=text) for index, text in enumerate(percents)]


def test_zero_amount_is_pending_not_an_error() -> None:
    result = evaluate(0, CalcMode.GROSS, [])

    assert result == CalculationResult(
        value=None, total_deductions=0, is_valid=False, error_reason=None
    )


def test_negative_amount_ignores_invalid_fees() -> None:
    result = evaluate(-10, CalcMode.NET, _fees("abc"))

    assert not result.is_valid
    assert result.error_reason is None
    assert result.total_deductions == 0


def test_gross_mode_grosses_up_input() -> None:
    result = evaluate(1000, CalcMode.GROSS, _fees("10", "15"))

    assert result.is_valid
    assert result.error_reason is None
    assert result.total_deductions == pytest.approx(25)
    assert result.value == pytest.approx(1333.3333, abs=0.01)


def test_net_mode_applies_deductions() -> None:
    result = evaluate(1000, CalcMode.NET, _fees("10", "15"))

    assert result.is_valid
    assert result.value == pytest.approx(750.0)


def test_no_fees_returns_input_unchanged() -> None:
    assert evaluate(42.5, CalcMode.GROSS, []).value == pytest.approx(42.5)
    assert evaluate(42.5, CalcMode.NET, []).value == pytest.approx(42.5)


def test_one_hundred_percent_is_too_high_in_net_mode() -> None:
    result = evaluate(1000, CalcMode.NET, _fees("100"))

    assert not result.is_valid
    assert result.value is None
    assert result.error_reason is ErrorKind.DEDUCTIONS_TOO_HIGH
    assert result.total_deductions == pytest.approx(100)


@pytest.mark.parametrize(
    ("fees", "reason", "total"),
    [
        ([FeeEntry(name="Tax")], ErrorKind.MISSING_PERCENT, 0),
        ([FeeEntry(name="Tithe", percent_text="10"), FeeEntry(name="Tax")], ErrorKind.MISSING_PERCENT, 0),
        (_fees("10", "ten"), ErrorKind.INVALID_PERCENT, 0),
        (_fees("20", "101"), ErrorKind.OUT_OF_RANGE, 0),
        (_fees("50", "60"), ErrorKind.DEDUCTIONS_TOO_HIGH, 110),
    ],
)
def test_aggregation_failures_propagate(
    fees: list[FeeEntry], reason: ErrorKind, total: float
) -> None:
    result = evaluate(500, CalcMode.GROSS, fees)

    assert not result.is_valid
    assert result.value is None
    assert result.error_reason is reason
    assert result.total_deductions == pytest.approx(total)


def test_mode_accepts_plain_strings() -> None:
    result = evaluate(100, "net", _fees("25"))  # type: ignore[arg-type]

    assert result.value == pytest.approx(75.0)


def test_evaluation_is_idempotent() -> None:
    fees = _fees("3", "7.5")

    first = evaluate(99.99, CalcMode.GROSS, fees)
    second = evaluate(99.99, CalcMode.GROSS, fees)

    assert first == second


def test_results_are_immutable() -> None:
    result = evaluate(100, CalcMode.NET, [])

    with pytest.raises(FrozenInstanceError):
        result.value = 1.0  # type: ignore[misc]


def test_error_kinds_expose_default_messages() -> None:
    assert ErrorKind.MISSING_PERCENT.message == "Enter a percentage for each fee"
    assert ErrorKind.INVALID_PERCENT.message == "Invalid percentage"
    assert ErrorKind.OUT_OF_RANGE.message == "Percentages must be 0–100"
    assert ErrorKind.DEDUCTIONS_TOO_HIGH.message == "Total fees must be under 100%"
