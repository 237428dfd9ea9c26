"""Typed request/response models shared across the calculation services.

Requests are validated with Pydantic before they reach the calculators, and
responses are validated again on the way out so that routes and any future
integrations serialise the same shape.
"""

from __future__ import annotations

from .api import (
    CalculationRequest,
    CalculationResponse,
    CalculationResult,
    DeductionsRequest,
    DeductionsResponse,
    DeductionsResult,
    ErrorDetail,
    FeeInput,
    PresetEntry,
    PresetsResponse,
    ResponseMeta,
    ResultLabels,
    format_validation_error,
)

__all__ = [
    "CalculationRequest",
    "CalculationResponse",
    "CalculationResult",
    "DeductionsRequest",
    "DeductionsResponse",
    "DeductionsResult",
    "ErrorDetail",
    "FeeInput",
    "PresetEntry",
    "PresetsResponse",
    "ResponseMeta",
    "ResultLabels",
    "format_validation_error",
]
