"""Service-layer helpers for the GrossUp backend."""

from .calculation_service import aggregate_fees, calculate_gross_up
from .request_parser import parse_calculation_payload
from .response_builder import build_calculation_response

__all__ = [
    "aggregate_fees",
    "calculate_gross_up",
    "parse_calculation_payload",
    "build_calculation_response",
]
