"""Combine aggregation and conversion into one evaluation step."""

from __future__ import annotations

from collections.abc import Iterable

from .conversion import compute_gross, compute_net
from .deductions import aggregate
from .types import CalcMode, CalculationResult, FeeEntry


def evaluate(
    input_amount: float, mode: CalcMode, entries: Iterable[FeeEntry]
) -> CalculationResult:
    """Evaluate ``input_amount`` against ``entries`` for the requested ``mode``.

    In ``GROSS`` mode the input is the amount the user wants to end up with
    and the result is the gross amount required. In ``NET`` mode the input is
    the gross amount and the result is what remains. Every combination of
    inputs produces a result; nothing is raised.
    """

    if not input_amount > 0:
        return CalculationResult.pending()

    total, error = aggregate(entries)
    if error is not None:
        return CalculationResult.failure(total, error)

    if CalcMode(mode) is CalcMode.GROSS:
        value = compute_gross(input_amount, total)
    else:
        value = compute_net(input_amount, total)

    if value is None:
        return CalculationResult.pending(total)

    return CalculationResult.success(value, total)


__all__ = ["evaluate"]
