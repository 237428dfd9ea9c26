"""Orchestrate request validation, evaluation, and response shaping.

The calculators work on plain values and never raise for bad user input. This
service sits between them and the HTTP layer: it validates the JSON payload
with the shared Pydantic models, runs the evaluation, and turns the result into
a serialisable response with rounded amounts and translated messages.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from contextlib import contextmanager
from time import perf_counter
from typing import Any

from pydantic import BaseModel, ValidationError

from grossup.backend.app.localization import Translator, get_translator
from grossup.backend.app.models import (
    CalculationRequest,
    CalculationResponse,
    DeductionsRequest,
    DeductionsResponse,
    FeeInput,
    format_validation_error,
)

from .calculators import (
    MAX_PERCENT,
    CalcMode,
    CalculationResult,
    ErrorKind,
    FeeEntry,
    aggregate,
    evaluate,
    format_percentage,
    round_currency,
    round_rate,
)

_LOGGER = logging.getLogger(__name__)

_PROFILE_ENV = "GROSSUP_PROFILE_CALCULATIONS"


def _profiling_enabled() -> bool:
    """Return ``True`` when calculation timings should be logged."""

    flag = os.getenv(_PROFILE_ENV, "")
    return flag.strip().lower() in {"1", "true", "yes", "on"}


@contextmanager
def _profile_section(name: str):
    """Log the duration of a named section when profiling is enabled."""

    if not _profiling_enabled():
        yield
        return

    start = perf_counter()
    try:
        yield
    finally:
        elapsed = (perf_counter() - start) * 1000
        _LOGGER.debug("%s took %.3f ms", name, elapsed)


def _validate_request(model: type[BaseModel], payload: Mapping[str, Any]) -> Any:
    try:
        return model.model_validate(payload)
    except ValidationError as exc:
        message = format_validation_error(exc)
        _LOGGER.info("Rejected calculation payload: %s", message)
        raise ValueError(message) from exc


def _to_entries(fees: list[FeeInput]) -> list[FeeEntry]:
    return [FeeEntry(name=fee.name, percent_text=fee.percent) for fee in fees]


def _error_payload(
    reason: ErrorKind | None, translator: Translator
) -> dict[str, str] | None:
    if reason is None:
        return None
    return {
        "code": reason.value,
        "message": translator.get(reason.message_key, reason.message),
    }


def _status(result: CalculationResult) -> str:
    if result.is_valid:
        return "ok"
    return "invalid" if result.error_reason is not None else "pending"


def calculate_gross_up(payload: Mapping[str, Any]) -> dict[str, Any]:
    """Validate ``payload`` and return the serialised gross/net calculation."""

    request = _validate_request(CalculationRequest, payload)
    translator = get_translator(request.locale)
    mode = CalcMode(request.mode)

    with _profile_section("evaluate"):
        result = evaluate(request.amount, mode, _to_entries(request.fees))

    _LOGGER.debug(
        "Evaluated %s mode for %d fee(s): valid=%s total=%s reason=%s",
        mode.value,
        len(request.fees),
        result.is_valid,
        result.total_deductions,
        result.error_reason.value if result.error_reason else None,
    )

    value = result.value
    kept = round_rate(MAX_PERCENT - result.total_deductions) if result.is_valid else None
    response_model = CalculationResponse.model_validate(
        {
            "result": {
                "value": value,
                "value_rounded": round_currency(value) if value is not None else None,
                "total_deductions": round_rate(result.total_deductions),
                "total_deductions_label": format_percentage(
                    round_rate(result.total_deductions)
                ),
                "kept_percentage": kept,
                "kept_percentage_label": format_percentage(kept) if kept is not None else None,
                "is_valid": result.is_valid,
                "status": _status(result),
                "error": _error_payload(result.error_reason, translator),
            },
            "labels": {
                "mode": translator(f"modes.{mode.value}.title"),
                "input": translator(f"modes.{mode.value}.input"),
                "result": translator(f"modes.{mode.value}.result"),
            },
            "meta": {"locale": translator.locale, "mode": mode.value},
        }
    )

    return response_model.model_dump(mode="json")


def aggregate_fees(payload: Mapping[str, Any]) -> dict[str, Any]:
    """Validate ``payload`` and return only the aggregated deduction total."""

    request = _validate_request(DeductionsRequest, payload)
    translator = get_translator(request.locale)

    total, error = aggregate(_to_entries(request.fees))

    response_model = DeductionsResponse.model_validate(
        {
            "result": {
                "total_deductions": round_rate(total),
                "total_deductions_label": format_percentage(round_rate(total)),
                "is_valid": error is None,
                "error": _error_payload(error, translator),
            },
            "meta": {"locale": translator.locale},
        }
    )

    return response_model.model_dump(mode="json", exclude_none=True)


__all__ = ["aggregate_fees", "calculate_gross_up"]
