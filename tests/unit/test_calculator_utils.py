"""Unit tests for calculator formatting helpers."""

from __future__ import annotations

import pytest

from grossup.backend.services.calculators import format_percentage, round_currency, round_rate


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (0, "0%"),
        (25, "25%"),
        (25.0, "25%"),
        (3.5, "3.5%"),
        (33.3333, "33.3%"),
        (99.99, "100.0%"),
        (110, "110%"),
    ],
)
def test_format_percentage_uses_one_decimal_for_fractions(value: float, expected: str) -> None:
    assert format_percentage(value) == expected


def test_round_currency_keeps_cents() -> None:
    assert round_currency(1333.3333) == 1333.33


def test_round_rate_keeps_four_decimals() -> None:
    assert round_rate(33.333333) == 33.3333
