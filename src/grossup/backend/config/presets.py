"""Configuration loader for the fee preset catalogue."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Any, Sequence

import yaml
from pydantic import ValidationError

from grossup.backend.services.calculators import FeeEntry

from .schema import ConfigurationError, FeePreset, PresetCatalogue

CONFIG_DIRECTORY = Path(__file__).resolve().parent / "data"
PRESETS_FILE = CONFIG_DIRECTORY / "presets.yaml"


def _load_yaml(path: Path) -> dict[str, Any]:
    with path.open("r", encoding="utf-8") as handle:
        data = yaml.safe_load(handle) or {}
    if not isinstance(data, dict):
        raise ConfigurationError("Configuration file must define a mapping at the top level")
    return data


def read_catalogue(path: Path) -> PresetCatalogue:
    """Parse and validate a preset catalogue stored at ``path``."""

    if not path.exists():
        raise FileNotFoundError(f"Preset catalogue not found: {path.name}")

    raw_catalogue = _load_yaml(path)

    try:
        return PresetCatalogue.model_validate(raw_catalogue)
    except ValidationError as error:
        raise ConfigurationError(f"Preset validation failed: {error}") from error


@lru_cache(maxsize=1)
def load_presets() -> PresetCatalogue:
    """Load and cache the bundled preset catalogue."""

    return read_catalogue(PRESETS_FILE)


def available_presets() -> Sequence[FeePreset]:
    """Return the configured presets in display order."""

    return load_presets().presets


def preset_entry(name: str) -> FeeEntry:
    """Return a fee entry seeded from the preset called ``name``."""

    return load_presets().get(name).to_entry()


__all__ = [
    "CONFIG_DIRECTORY",
    "ConfigurationError",
    "FeePreset",
    "PRESETS_FILE",
    "PresetCatalogue",
    "available_presets",
    "load_presets",
    "preset_entry",
    "read_catalogue",
]
