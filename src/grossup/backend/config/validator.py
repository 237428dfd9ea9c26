"""Utilities for validating the preset catalogue and surfacing issues."""

from __future__ import annotations

import argparse
from collections import Counter
from pathlib import Path
from typing import Sequence

from grossup.backend.services.calculators import MAX_PERCENT

from .presets import PRESETS_FILE, read_catalogue
from .schema import ConfigurationError, PresetCatalogue


def _format_scope(scope: str, message: str) -> str:
    return f"{scope}: {message}"


def validate_catalogue(catalogue: PresetCatalogue) -> list[str]:
    """Return issues that the schema accepts but that would confuse users."""

    errors: list[str] = []

    if not catalogue.presets:
        errors.append(_format_scope("presets", "no presets defined"))
        return errors

    folded = Counter(name.casefold() for name in catalogue.names)
    duplicates = sorted(name for name, count in folded.items() if count > 1)
    if duplicates:
        errors.append(
            _format_scope(
                "presets",
                f"names differing only by case detected: {duplicates}",
            )
        )

    for preset in catalogue.presets:
        if preset.percent_value >= MAX_PERCENT:
            errors.append(
                _format_scope(
                    f"presets.{preset.name}",
                    "a preset of 100% can never produce a valid calculation",
                )
            )

    return errors


def _build_argument_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Validate the fee preset catalogue and report issues."
    )
    parser.add_argument(
        "paths",
        nargs="*",
        type=Path,
        help="Catalogue files to validate (defaults to the bundled presets)",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point for running validations from the command line."""

    parser = _build_argument_parser()
    args = parser.parse_args(argv)
    paths = args.paths or [PRESETS_FILE]

    exit_code = 0

    for path in paths:
        try:
            catalogue = read_catalogue(path)
        except (FileNotFoundError, ConfigurationError) as error:
            print(f"[{path.name}] failed to load presets: {error}")
            exit_code = 1
            continue

        issues = validate_catalogue(catalogue)
        if issues:
            exit_code = 1
            print(f"[{path.name}] {len(issues)} issue(s) detected:")
            for issue in issues:
                print(f"  - {issue}")
        else:
            print(f"[{path.name}] OK")

    return exit_code


if __name__ == "__main__":  # pragma: no cover - CLI invocation
    raise SystemExit(main())
