"""Helpers for normalising incoming calculation requests.

Clients may omit ``locale`` and ``mode`` from the JSON body and pass them as
query parameters instead; the locale can also come from ``Accept-Language``.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from flask import Request
from werkzeug.exceptions import BadRequest

from grossup.backend.app.localization import normalise_locale


def _preferred_language(req: Request) -> str | None:
    """Return the highest-weighted language from ``Accept-Language``."""

    languages = req.accept_languages
    if not languages:
        return None
    return languages.best


def _resolve_locale(req: Request, payload: dict[str, Any]) -> None:
    locale = payload.get("locale")
    if isinstance(locale, str) and locale.strip():
        payload["locale"] = normalise_locale(locale)
        return

    hint = req.args.get("locale") or _preferred_language(req)
    if hint:
        payload["locale"] = normalise_locale(hint)


def _resolve_mode(req: Request, payload: dict[str, Any]) -> None:
    if payload.get("mode") is not None:
        return

    mode = req.args.get("mode")
    if mode:
        payload["mode"] = mode


def parse_calculation_payload(req: Request, *, with_mode: bool = True) -> dict[str, Any]:
    """Extract a JSON object from ``req`` and fill in query-string hints."""

    data = req.get_json(silent=True)
    if data is None:
        raise BadRequest("Request body must be valid JSON")
    if not isinstance(data, Mapping):
        raise BadRequest("Request JSON must be an object")

    payload = dict(data)
    _resolve_locale(req, payload)
    if with_mode:
        _resolve_mode(req, payload)

    return payload
