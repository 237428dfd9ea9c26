from pathlib import Path

import yaml

from grossup.backend.config.presets import load_presets
from grossup.backend.config.schema import FeePreset
from grossup.backend.config.validator import main, validate_catalogue


def test_bundled_presets_are_valid() -> None:
    assert validate_catalogue(load_presets()) == []


def test_validator_flags_case_insensitive_duplicates() -> None:
    catalogue = load_presets()
    broken = catalogue.model_copy(
        update={"presets": [*catalogue.presets, FeePreset(name="tithe", percent="5")]}
    )

    errors = validate_catalogue(broken)

    assert any("differing only by case" in error for error in errors)


def test_validator_flags_full_percentage_preset() -> None:
    catalogue = load_presets()
    broken = catalogue.model_copy(
        update={"presets": [FeePreset(name="Everything", percent="100")]}
    )

    errors = validate_catalogue(broken)

    assert errors == ["presets.Everything: a preset of 100% can never produce a valid calculation"]


def test_validator_flags_empty_catalogue() -> None:
    broken = load_presets().model_copy(update={"presets": []})

    assert validate_catalogue(broken) == ["presets: no presets defined"]


def test_main_reports_ok_for_bundled_presets(capsys) -> None:
    assert main([]) == 0
    assert "OK" in capsys.readouterr().out


def test_main_reports_broken_files(tmp_path: Path, capsys) -> None:
    broken = tmp_path / "broken.yaml"
    broken.write_text(
        yaml.safe_dump({"presets": [{"name": "Bad", "percent": "abc"}]}), encoding="utf-8"
    )

    assert main([str(broken), str(tmp_path / "missing.yaml")]) == 1

    output = capsys.readouterr().out
    assert "[broken.yaml] failed to load presets" in output
    assert "[missing.yaml] failed to load presets" in output
