"""Deduction aggregation and gross/net conversion."""

from .conversion import compute_gross, compute_net
from .deductions import MAX_PERCENT, aggregate, normalise_entries, parse_percent
from .evaluation import evaluate
from .types import AggregationResult, CalcMode, CalculationResult, ErrorKind, FeeEntry
from .utils import format_percentage, round_currency, round_rate

__all__ = [
    "AggregationResult",
    "CalcMode",
    "CalculationResult",
    "ErrorKind",
    "FeeEntry",
    "MAX_PERCENT",
    "aggregate",
    "compute_gross",
    "compute_net",
    "evaluate",
    "format_percentage",
    "normalise_entries",
    "parse_percent",
    "round_currency",
    "round_rate",
]
