"""Integration tests for the translations API."""

from __future__ import annotations

from flask.testing import FlaskClient


def test_translations_endpoint_returns_default_catalogue(client: FlaskClient) -> None:
    response = client.get("/api/v1/translations/")
    assert response.status_code == 200
    payload = response.get_json()

    assert payload["locale"] == "en"
    assert "es" in payload["available_locales"]
    assert payload["backend"]["errors.invalid_percent"] == "Invalid percentage"
    assert payload["frontend"]["fees.title"] == "Taxes and fees"
    assert payload["fallback"]["locale"] == "en"


def test_translations_endpoint_respects_query_locale(client: FlaskClient) -> None:
    response = client.get("/api/v1/translations/?locale=es")

    assert response.get_json()["locale"] == "es"


def test_translations_endpoint_respects_locale_path(client: FlaskClient) -> None:
    response = client.get("/api/v1/translations/es")
    assert response.status_code == 200
    payload = response.get_json()

    assert payload["locale"] == "es"
    assert payload["backend"]["modes.gross.result"] == "Cantidad necesaria"
    assert payload["fallback"]["frontend"]["fees.add"] == "Add Fee"
