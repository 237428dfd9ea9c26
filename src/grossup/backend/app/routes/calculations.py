"""REST endpoints for gross/net calculations."""

from __future__ import annotations

from typing import Any

from flask import Blueprint, request

from grossup.backend.services import (
    aggregate_fees,
    build_calculation_response,
    calculate_gross_up,
    parse_calculation_payload,
)

blueprint = Blueprint("calculations", __name__, url_prefix="/api/v1")


@blueprint.post("/calculations")
def create_calculation() -> tuple[Any, int]:
    """Solve for the gross or net amount using the submitted JSON payload.

    Fee validation failures are part of a successful response; only malformed
    payloads produce an error status.
    """

    payload = parse_calculation_payload(request)
    result = calculate_gross_up(payload)

    return build_calculation_response(result)


@blueprint.post("/deductions")
def create_deductions_total() -> tuple[Any, int]:
    """Return the aggregated deduction percentage for the submitted fees."""

    payload = parse_calculation_payload(request, with_mode=False)
    result = aggregate_fees(payload)

    return build_calculation_response(result)
