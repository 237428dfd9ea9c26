"""Utility helpers for calculator modules."""

from __future__ import annotations


def format_percentage(value: float) -> str:
    """Return a label such as ``25%`` or ``3.5%`` for a 0-100 percentage."""

    if float(int(value)) == value:
        return f"{int(value)}%"
    return f"{value:.1f}%"


def round_currency(value: float) -> float:
    """Round monetary amounts to two decimals."""

    return round(value, 2)


def round_rate(value: float) -> float:
    """Round percentage values to four decimals."""

    return round(value, 4)
