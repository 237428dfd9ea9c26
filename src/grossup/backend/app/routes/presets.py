"""Expose the fee preset catalogue used for quick entry."""

from __future__ import annotations

from typing import Any

from flask import Blueprint, jsonify

from grossup.backend.app.http import problem_response
from grossup.backend.app.models import PresetsResponse
from grossup.backend.config.presets import available_presets, load_presets

blueprint = Blueprint("presets", __name__, url_prefix="/api/v1")


@blueprint.get("/presets")
def list_presets() -> tuple[Any, int]:
    """Return every preset in display order."""

    response_model = PresetsResponse.model_validate(
        {
            "presets": [
                {"name": preset.name, "percent": preset.percent}
                for preset in available_presets()
            ]
        }
    )
    return jsonify(response_model.model_dump(mode="json")), 200


@blueprint.get("/presets/<name>")
def get_preset(name: str) -> tuple[Any, int]:
    """Return a single preset by its display name."""

    try:
        preset = load_presets().get(name)
    except KeyError:
        return problem_response(
            "not_found", status=404, message=f"Unknown preset '{name}'"
        ).to_response()

    return jsonify({"name": preset.name, "percent": preset.percent}), 200
