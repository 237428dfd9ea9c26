"""Pydantic models describing the public API surface."""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

__all__ = [
    "FeeInput",
    "DeductionsRequest",
    "CalculationRequest",
    "ErrorDetail",
    "DeductionsResult",
    "CalculationResult",
    "ResultLabels",
    "ResponseMeta",
    "DeductionsResponse",
    "CalculationResponse",
    "PresetEntry",
    "PresetsResponse",
    "format_validation_error",
]


class FeeInput(BaseModel):
    """A single fee row as submitted by the client."""

    model_config = ConfigDict(extra="forbid")

    name: str = ""
    percent: str = ""

    @field_validator("name", mode="before")
    @classmethod
    def _normalise_name(cls, value: Any) -> Any:
        return "" if value is None else value

    @field_validator("percent", mode="before")
    @classmethod
    def _coerce_percent(cls, value: Any) -> Any:
        # Numbers are accepted for convenience but validated as text later on.
        if value is None:
            return ""
        if isinstance(value, bool):
            raise ValueError("percent must be a string or a number")
        if isinstance(value, (int, float)):
            return str(value)
        return value


class DeductionsRequest(BaseModel):
    """Payload accepted by the deductions endpoint."""

    model_config = ConfigDict(extra="forbid")

    locale: str = Field(default="en")
    fees: list[FeeInput] = Field(default_factory=list)

    @field_validator("locale", mode="before")
    @classmethod
    def _normalise_locale(cls, value: Any) -> str:
        if value is None:
            return "en"
        text = str(value).strip()
        return text or "en"

    @field_validator("fees", mode="before")
    @classmethod
    def _normalise_fees(cls, value: Any) -> Any:
        return [] if value is None else value


class CalculationRequest(DeductionsRequest):
    """Complete payload accepted by the calculation endpoint."""

    amount: float = Field(default=0.0, ge=0, allow_inf_nan=False)
    mode: Literal["gross", "net"] = "gross"

    @field_validator("mode", mode="before")
    @classmethod
    def _normalise_mode(cls, value: Any) -> Any:
        if value is None:
            return "gross"
        if isinstance(value, str):
            return value.strip().lower()
        return value


class ErrorDetail(BaseModel):
    """Validation failure surfaced to the user."""

    model_config = ConfigDict(extra="forbid")

    code: str
    message: str


class DeductionsResult(BaseModel):
    """Aggregated deduction percentage."""

    model_config = ConfigDict(extra="forbid")

    total_deductions: float
    total_deductions_label: str
    is_valid: bool
    error: ErrorDetail | None = None


class CalculationResult(DeductionsResult):
    """Gross/net conversion outcome."""

    value: float | None = None
    value_rounded: float | None = None
    kept_percentage: float | None = None
    kept_percentage_label: str | None = None
    status: Literal["ok", "pending", "invalid"]


class ResultLabels(BaseModel):
    """Translated labels for the selected mode."""

    model_config = ConfigDict(extra="forbid")

    mode: str
    input: str
    result: str


class ResponseMeta(BaseModel):
    """Metadata returned alongside the calculation output."""

    model_config = ConfigDict(extra="forbid")

    locale: str
    mode: Literal["gross", "net"] | None = None


class DeductionsResponse(BaseModel):
    """Response payload produced by the deductions service."""

    model_config = ConfigDict(extra="forbid")

    result: DeductionsResult
    meta: ResponseMeta


class CalculationResponse(BaseModel):
    """Full response payload produced by the calculation service."""

    model_config = ConfigDict(extra="forbid")

    result: CalculationResult
    labels: ResultLabels
    meta: ResponseMeta


class PresetEntry(BaseModel):
    """A quick-add fee exposed to clients."""

    model_config = ConfigDict(extra="forbid")

    name: str
    percent: str


class PresetsResponse(BaseModel):
    """Preset catalogue exposed to clients."""

    model_config = ConfigDict(extra="forbid")

    presets: list[PresetEntry]


def format_validation_error(error: ValidationError) -> str:
    """Return a concise human-readable description of validation issues."""

    messages: list[str] = []
    for issue in error.errors():
        location = ".".join(str(part) for part in issue.get("loc", ()))
        message = issue.get("msg", "Invalid value")
        if "greater than or equal to 0" in message.lower():
            message = "value cannot be negative"
        if location:
            messages.append(f"{location}: {message}")
        else:
            messages.append(message)

    details = "; ".join(messages) if messages else str(error)
    return f"Invalid calculation payload: {details}"
