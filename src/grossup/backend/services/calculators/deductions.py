"""Aggregate fee entries into a single deduction percentage."""

from __future__ import annotations

import math
import re
from collections.abc import Iterable

from .types import AggregationResult, ErrorKind, FeeEntry

MAX_PERCENT = 100.0

_DECIMAL_PATTERN = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")


def parse_percent(text: str) -> float | None:
    """Return ``text`` as a float, or ``None`` when it is not a plain decimal."""

    candidate = text.strip()
    if not _DECIMAL_PATTERN.fullmatch(candidate):
        return None

    value = float(candidate)
    if not math.isfinite(value):
        return None
    return value


def normalise_entries(entries: Iterable[FeeEntry]) -> list[FeeEntry]:
    """Trim every entry and drop the ones left completely blank."""

    return [
        FeeEntry(name=entry.name.strip(), percent_text=entry.percent_text.strip())
        for entry in entries
        if not entry.is_blank()
    ]


def aggregate(entries: Iterable[FeeEntry]) -> AggregationResult:
    """Sum fee percentages, stopping at the first invalid entry.

    Entries are checked in the order given. A failing entry reports a total of
    zero; a total of ``MAX_PERCENT`` or more is reported alongside its failure
    so callers can still display it.
    """

    total = 0.0

    for entry in normalise_entries(entries):
        if not entry.percent_text:
            return AggregationResult(0.0, ErrorKind.MISSING_PERCENT)

        percent = parse_percent(entry.percent_text)
        if percent is None:
            return AggregationResult(0.0, ErrorKind.INVALID_PERCENT)

        if percent < 0 or percent > MAX_PERCENT:
            return AggregationResult(0.0, ErrorKind.OUT_OF_RANGE)

        total += percent

    if total >= MAX_PERCENT:
        return AggregationResult(total, ErrorKind.DEDUCTIONS_TOO_HIGH)

    return AggregationResult(total)


__all__ = ["MAX_PERCENT", "aggregate", "normalise_entries", "parse_percent"]
