"""Message catalogues for error messages and mode labels.

Catalogues are JSON files shipped in ``grossup.translations``. Each holds a
``backend`` section used by the services and a ``frontend`` section passed
through untouched to API consumers. Missing keys fall back to English.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from functools import cache
from importlib import resources
from typing import Any, Mapping

_BASE_LOCALE = "en"
_TRANSLATIONS_PACKAGE = "grossup.translations"
_EMPTY_PAYLOAD: dict[str, Any] = {"backend": {}, "frontend": {}}


@dataclass(frozen=True)
class Translator:
    """Callable helper for retrieving localized strings."""

    locale: str
    _messages: Mapping[str, str]
    _fallback: Mapping[str, str]

    def __call__(self, key: str) -> str:
        return self._messages.get(key) or self._fallback.get(key, key)

    def get(self, key: str, default: str) -> str:
        """Return the message for ``key`` or ``default`` when no catalogue has it."""

        return self._messages.get(key) or self._fallback.get(key) or default


@dataclass(frozen=True)
class Catalogue:
    """A locale's backend messages and opaque frontend strings."""

    locale: str
    backend: Mapping[str, str]
    frontend: Mapping[str, Any]


@cache
def _available_locales() -> tuple[str, ...]:
    root = resources.files(_TRANSLATIONS_PACKAGE)
    locales = sorted(
        entry.name.rsplit(".", 1)[0]
        for entry in root.iterdir()
        if entry.name.endswith(".json")
    )
    return tuple(locales) or (_BASE_LOCALE,)


@cache
def _load_catalogue(locale: str) -> Catalogue:
    resource = resources.files(_TRANSLATIONS_PACKAGE).joinpath(f"{locale}.json")
    if resource.is_file():
        with resource.open("r", encoding="utf-8") as handle:
            payload = json.load(handle)
    else:
        payload = _EMPTY_PAYLOAD

    backend = payload.get("backend") or {}
    frontend = payload.get("frontend") or {}
    if not isinstance(backend, dict) or not isinstance(frontend, dict):
        raise ValueError(f"Translation catalogue '{locale}' is malformed")

    return Catalogue(
        locale=locale,
        backend={key: str(value) for key, value in backend.items()},
        frontend=frontend,
    )


def normalise_locale(locale: str | None) -> str:
    """Reduce ``locale`` to a supported catalogue key such as ``en``."""

    if not locale:
        return _BASE_LOCALE

    primary = locale.strip().lower().replace("_", "-").split("-")[0]
    return primary if primary in _available_locales() else _BASE_LOCALE


def get_translator(locale: str | None = None) -> Translator:
    """Return a translator instance for the requested locale."""

    catalogue = _load_catalogue(normalise_locale(locale))
    fallback = _load_catalogue(_BASE_LOCALE)

    return Translator(
        locale=catalogue.locale,
        _messages=catalogue.backend,
        _fallback=fallback.backend,
    )


def load_translations(locale: str | None = None) -> dict[str, Any]:
    """Expose combined backend/frontend translations for API consumers."""

    catalogue = _load_catalogue(normalise_locale(locale))
    fallback = _load_catalogue(_BASE_LOCALE)

    return {
        "locale": catalogue.locale,
        "available_locales": list(_available_locales()),
        "backend": dict(catalogue.backend),
        "frontend": dict(catalogue.frontend),
        "fallback": {
            "locale": fallback.locale,
            "backend": dict(fallback.backend),
            "frontend": dict(fallback.frontend),
        },
    }


__all__ = [
    "Catalogue",
    "Translator",
    "get_translator",
    "load_translations",
    "normalise_locale",
]
