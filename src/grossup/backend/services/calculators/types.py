"""Value types shared by the deduction and conversion calculators."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import NamedTuple


class CalcMode(str, Enum):
    """Which quantity the caller knows and which one should be solved for."""

    GROSS = "gross"
    NET = "net"


class ErrorKind(str, Enum):
    """Validation failures reported while aggregating fee entries."""

    MISSING_PERCENT = "missing_percent"
    INVALID_PERCENT = "invalid_percent"
    OUT_OF_RANGE = "out_of_range"
    DEDUCTIONS_TOO_HIGH = "deductions_too_high"

    @property
    def message(self) -> str:
        """Return the default English message for this failure."""

        return _ERROR_MESSAGES[self]

    @property
    def message_key(self) -> str:
        """Return the translation catalogue key for this failure."""

        return f"errors.{self.value}"


_ERROR_MESSAGES = {
    ErrorKind.MISSING_PERCENT: "Enter a percentage for each fee",
    ErrorKind.INVALID_PERCENT: "Invalid percentage",
    ErrorKind.OUT_OF_RANGE: "Percentages must be 0–100",
    ErrorKind.DEDUCTIONS_TOO_HIGH: "Total fees must be under 100%",
}


@dataclass(frozen=True)
class FeeEntry:
    """A named deduction as typed by the user.

    ``percent_text`` is kept raw; parsing happens during aggregation so that
    the first offending entry can be reported.
    """

    name: str = ""
    percent_text: str = ""

    def is_blank(self) -> bool:
        """Return ``True`` when both fields are empty after trimming."""

        return not self.name.strip() and not self.percent_text.strip()


class AggregationResult(NamedTuple):
    """Total deduction percentage and the first validation failure, if any."""

    total: float
    error: ErrorKind | None = None

    @property
    def is_valid(self) -> bool:
        """Return ``True`` when no entry or total check failed."""

        return self.error is None


@dataclass(frozen=True)
class CalculationResult:
    """Outcome of a single evaluation.

    ``is_valid`` is ``False`` with no ``error_reason`` when the input amount is
    not yet usable; that state is not reported to the user as an error.
    """

    value: float | None
    total_deductions: float
    is_valid: bool
    error_reason: ErrorKind | None = None

    @classmethod
    def pending(cls, total_deductions: float = 0.0) -> "CalculationResult":
        return cls(value=None, total_deductions=total_deductions, is_valid=False)

    @classmethod
    def failure(cls, total_deductions: float, reason: ErrorKind) -> "CalculationResult":
        return cls(
            value=None,
            total_deductions=total_deductions,
            is_valid=False,
            error_reason=reason,
        )

    @classmethod
    def success(cls, value: float, total_deductions: float) -> "CalculationResult":
        return cls(value=value, total_deductions=total_deductions, is_valid=True)


__all__ = [
    "AggregationResult",
    "CalcMode",
    "CalculationResult",
    "ErrorKind",
    "FeeEntry",
]
