"""Shared test fixtures for graphql-schema-policy."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import pytest

from gqlpolicy.config import RULE_FLAGS

if TYPE_CHECKING:
    from collections.abc import Callable
    from pathlib import Path


@pytest.fixture()
def write_schema(tmp_path: Path) -> Callable[..., Path]:
    """Return a helper that writes SDL text into ``tmp_path`` and returns its path."""

    def _write(sdl: str, name: str = "schema.graphql") -> Path:
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(sdl, encoding="utf-8")
        return path

    return _write


@pytest.fixture()
def write_config(tmp_path: Path) -> Callable[..., Path]:
    """Return a helper that writes a ``{"rules": ...}`` JSON config."""

    def _write(rules: dict[str, object], name: str = "config.json") -> Path:
        path = tmp_path / name
        path.write_text(json.dumps({"rules": rules}), encoding="utf-8")
        return path

    return _write


@pytest.fixture()
def all_rules() -> dict[str, bool]:
    """Every rule flag enabled."""
    return {key: True for key in RULE_FLAGS}
