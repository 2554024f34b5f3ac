"""Shared test fixtures for the wildglob test suite."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Callable

import pytest
import yaml

from wildglob.matcher import GlobMatcher


@pytest.fixture
def matcher() -> GlobMatcher:
    return GlobMatcher()


@pytest.fixture
def write_config(tmp_path: Path) -> Callable[[Any], Path]:
    """Write a mapping (or raw text) to a config file and return its path."""

    def _write(data: Any, name: str = "config.yaml") -> Path:
        path = tmp_path / name
        if isinstance(data, str):
            path.write_text(data, encoding="utf-8")
        else:
            path.write_text(yaml.dump(data), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def entries() -> list[dict[str, Any]]:
    return [
        {"navi": "kaltxì", "pos": "intj."},
        {"navi": "tute", "pos": "n."},
        {"navi": "taron", "pos": "vtr."},
        {"navi": "kä", "pos": "vin."},
        {"navi": "lu", "pos": "vin."},
        {"navi": "ayoe", "pos": "pn."},
        {"navi": "tsmukan", "pos": "n."},
    ]
