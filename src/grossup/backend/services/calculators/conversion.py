"""Gross/net conversion for a total deduction percentage."""

from __future__ import annotations

from .deductions import MAX_PERCENT


def _is_valid_total(total_deductions: float) -> bool:
    # Strictly below 100: at 100 the gross-up divisor is zero.
    return 0 <= total_deductions < MAX_PERCENT


def compute_gross(net: float, total_deductions: float) -> float | None:
    """Return the gross amount that leaves ``net`` after deductions."""

    if not net > 0 or not _is_valid_total(total_deductions):
        return None
    return net / (1 - total_deductions / 100)


def compute_net(gross: float, total_deductions: float) -> float | None:
    """Return what remains of ``gross`` after deductions."""

    if not gross > 0 or not _is_valid_total(total_deductions):
        return None
    return gross * (1 - total_deductions / 100)


__all__ = ["compute_gross", "compute_net"]
