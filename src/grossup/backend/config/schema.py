"""Pydantic models describing the fee preset configuration schema."""

from __future__ import annotations

from typing import Any, Sequence

from pydantic import BaseModel, ConfigDict, computed_field, field_validator, model_validator
from typing_extensions import Self

from grossup.backend.services.calculators import MAX_PERCENT, FeeEntry, parse_percent


class ConfigurationError(ValueError):
    """Raised when configuration values violate schema expectations."""


class ImmutableModel(BaseModel):
    """Base class that freezes instances and rejects unknown fields."""

    model_config = ConfigDict(frozen=True, extra="forbid", populate_by_name=True)


class FeePreset(ImmutableModel):
    """A named fee offered for quick entry."""

    name: str
    percent: str

    @field_validator("name", mode="before")
    @classmethod
    def _normalise_name(cls, value: Any) -> str:
        if not isinstance(value, str) or not value.strip():
            raise ConfigurationError("Fee presets require a non-empty name")
        return value.strip()

    @field_validator("percent", mode="before")
    @classmethod
    def _coerce_percent(cls, value: Any) -> str:
        if isinstance(value, bool):
            raise ConfigurationError("Preset percentages must be numeric")
        if isinstance(value, (int, float)):
            return str(value)
        if isinstance(value, str):
            return value.strip()
        raise ConfigurationError("Preset percentages must be numeric")

    @model_validator(mode="after")
    def _validate_percent(self) -> Self:
        value = parse_percent(self.percent)
        if value is None:
            raise ConfigurationError(
                f"Preset '{self.name}' has an invalid percentage: {self.percent!r}"
            )
        if value < 0 or value > MAX_PERCENT:
            raise ConfigurationError(
                f"Preset '{self.name}' percentage must be between 0 and 100"
            )
        return self

    @property
    def percent_value(self) -> float:
        """Return the preset percentage as a number."""

        return float(self.percent)

    def to_entry(self) -> FeeEntry:
        """Return a fee entry seeded with this preset."""

        return FeeEntry(name=self.name, percent_text=self.percent)


class PresetCatalogue(ImmutableModel):
    """Ordered collection of fee presets."""

    presets: Sequence[FeePreset]

    @model_validator(mode="after")
    def _validate_names(self) -> Self:
        seen: set[str] = set()
        for preset in self.presets:
            if preset.name in seen:
                raise ConfigurationError(
                    f"Duplicate preset '{preset.name}' declared in the catalogue"
                )
            seen.add(preset.name)
        return self

    def get(self, name: str) -> FeePreset:
        for preset in self.presets:
            if preset.name == name:
                return preset
        raise KeyError(name)

    @computed_field
    @property
    def names(self) -> tuple[str, ...]:
        return tuple(preset.name for preset in self.presets)


__all__ = ["ConfigurationError", "FeePreset", "ImmutableModel", "PresetCatalogue"]
