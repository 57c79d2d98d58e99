"""Shared pytest fixtures for tokensmith tests."""

import json
from pathlib import Path
from typing import Any

import pytest

from tokensmith.core.ir import Token


@pytest.fixture
def fixtures_dir() -> Path:
    """Return path to fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def acme_export_path(fixtures_dir: Path) -> Path:
    """Figma variables export of the 'acme' client."""
    return fixtures_dir / "figma-acme.json"


@pytest.fixture
def acme_export(acme_export_path: Path) -> dict[str, Any]:
    return json.loads(acme_export_path.read_text(encoding="utf-8"))


@pytest.fixture
def make_token():
    """Factory for tokens from a dotted path."""

    def _make(dotted: str, type: str, value: Any, **fields: Any) -> Token:
        return Token(path=tuple(dotted.split(".")), type=type, value=value, **fields)

    return _make
