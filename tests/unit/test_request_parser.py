"""Unit tests for calculation request parsing helpers."""

from __future__ import annotations

import pytest
from flask import Flask, request
from werkzeug.exceptions import BadRequest

from grossup.backend.services.request_parser import parse_calculation_payload


def test_parse_payload_uses_accept_language(app: Flask) -> None:
    """Accept-Language header should supply the locale when absent."""

    with app.test_request_context(
        "/api/v1/calculations",
        method="POST",
        json={"amount": 100},
        headers={"Accept-Language": "es-ES,es;q=0.9,en;q=0.8"},
    ):
        payload = parse_calculation_payload(request)

    assert payload["locale"] == "es"


def test_parse_payload_prefers_highest_weighted_language(app: Flask) -> None:
    with app.test_request_context(
        "/api/v1/calculations",
        method="POST",
        json={"amount": 100},
        headers={"Accept-Language": "en;q=0.3, es;q=0.9"},
    ):
        payload = parse_calculation_payload(request)

    assert payload["locale"] == "es"


def test_parse_payload_preserves_explicit_locale(app: Flask) -> None:
    with app.test_request_context(
        "/api/v1/calculations?locale=en",
        method="POST",
        json={"amount": 100, "locale": "ES"},
    ):
        payload = parse_calculation_payload(request)

    assert payload["locale"] == "es"


def test_parse_payload_falls_back_to_default_locale(app: Flask) -> None:
    with app.test_request_context(
        "/api/v1/calculations?locale=fr",
        method="POST",
        json={"amount": 100},
    ):
        payload = parse_calculation_payload(request)

    assert payload["locale"] == "en"


def test_parse_payload_reads_mode_from_query(app: Flask) -> None:
    with app.test_request_context(
        "/api/v1/calculations?mode=net",
        method="POST",
        json={"amount": 100},
    ):
        payload = parse_calculation_payload(request)

    assert payload["mode"] == "net"


def test_parse_payload_body_mode_wins_over_query(app: Flask) -> None:
    with app.test_request_context(
        "/api/v1/calculations?mode=net",
        method="POST",
        json={"amount": 100, "mode": "gross"},
    ):
        payload = parse_calculation_payload(request)

    assert payload["mode"] == "gross"


def test_parse_payload_can_skip_mode(app: Flask) -> None:
    with app.test_request_context(
        "/api/v1/deductions?mode=net",
        method="POST",
        json={"fees": []},
    ):
        payload = parse_calculation_payload(request, with_mode=False)

    assert "mode" not in payload


def test_parse_payload_rejects_non_object(app: Flask) -> None:
    """Non-object JSON payloads should trigger BadRequest responses."""

    with app.test_request_context(
        "/api/v1/calculations",
        method="POST",
        json=["not", "an", "object"],
    ):
        with pytest.raises(BadRequest):
            parse_calculation_payload(request)


def test_parse_payload_rejects_invalid_json(app: Flask) -> None:
    with app.test_request_context(
        "/api/v1/calculations",
        method="POST",
        data="{not json",
        content_type="application/json",
    ):
        with pytest.raises(BadRequest, match="valid JSON"):
            parse_calculation_payload(request)
