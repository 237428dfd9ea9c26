"""Expose the project version for the health endpoint."""

from __future__ import annotations

import re
from functools import lru_cache
from importlib import metadata
from pathlib import Path
from typing import Final

PACKAGE_NAME: Final = "grossup"
PYPROJECT_PATH: Final = Path(__file__).resolve().parents[3] / "pyproject.toml"

_PROJECT_SECTION = re.compile(r"^\[project\]\s*$(?P<body>.*?)(?=^\[|\Z)", re.M | re.S)
_VERSION_LINE = re.compile(r'^version\s*=\s*"(?P<version>[^"]+)"', re.M)


@lru_cache(maxsize=1)
def get_project_version() -> str:
    """Return the installed version, or the one declared in ``pyproject.toml``."""

    try:
        return metadata.version(PACKAGE_NAME)
    except metadata.PackageNotFoundError:
        return read_pyproject_version(PYPROJECT_PATH)


def read_pyproject_version(path: Path) -> str:
    """Return ``[project].version`` from the ``pyproject.toml`` at ``path``."""

    if not path.exists():  # pragma: no cover - repository invariant
        raise RuntimeError(f"Unable to locate project metadata at {path}")

    section = _PROJECT_SECTION.search(path.read_text(encoding="utf-8"))
    match = _VERSION_LINE.search(section.group("body")) if section else None
    if match is None:
        raise RuntimeError("Unable to determine project version from pyproject.toml")
    return match.group("version")


__all__ = ["PYPROJECT_PATH", "get_project_version", "read_pyproject_version"]
