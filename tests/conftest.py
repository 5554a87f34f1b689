"""Shared fixtures and helpers for tests."""

import json
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest

_REPO_ROOT = Path(__file__).parent.parent


# ---------------------------------------------------------------------------
# Auto-marker: tag tests as "unit" or "integration" based on directory
# ---------------------------------------------------------------------------


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    for item in items:
        test_path = Path(str(item.fspath))
        rel = test_path.relative_to(_REPO_ROOT / "tests")
        parts = rel.parts
        if parts and parts[0] == "integration":
            item.add_marker(pytest.mark.integration)
        else:
            item.add_marker(pytest.mark.unit)


# ---------------------------------------------------------------------------
# Data directory fixtures
# ---------------------------------------------------------------------------

WriteJson = Callable[[str, Any], Path]


@pytest.fixture
def empty_data_dir(tmp_path: Path) -> Path:
    data_dir = tmp_path / "data"
    data_dir.mkdir()
    return data_dir


@pytest.fixture
def write_json(empty_data_dir: Path) -> WriteJson:
    """Return a helper that writes ``value`` as JSON to ``<data_dir>/<file_name>``."""

    def _write(file_name: str, value: Any) -> Path:
        path = empty_data_dir / file_name
        path.write_text(json.dumps(value), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def data_dir(empty_data_dir: Path, write_json: WriteJson) -> Path:
    """A data directory holding ``articles.json`` (array root) and ``profile.json`` (object root)."""
    write_json("articles.json", [{"id": 1}])
    write_json("profile.json", {"id": 2})
    return empty_data_dir
