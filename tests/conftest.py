"""Shared pytest configuration, marker assignment and project fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest

SOURCE_SUBDIR = Path("src/lib/elm/src")
OUTPUT_SUBDIR = Path("static/elm")


def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Attach suite markers based on test file path."""
    del config
    for item in items:
        path = Path(str(item.fspath))
        parts = set(path.parts)
        if "e2e_tests" in parts:
            item.add_marker(pytest.mark.e2e)
        elif "integration_tests" in parts:
            item.add_marker(pytest.mark.integration)
        elif "unit_tests" in parts:
            item.add_marker(pytest.mark.unit)


@pytest.fixture
def elm_project(tmp_path: Path) -> Path:
    """Create a project root with the default Elm source and output layout."""
    root = tmp_path / "site"
    (root / SOURCE_SUBDIR).mkdir(parents=True)
    (root / OUTPUT_SUBDIR).mkdir(parents=True)
    (root / "src/lib/elm/elm.json").write_text("{}")
    return root


@pytest.fixture
def source_dir(elm_project: Path) -> Path:
    """Directory scanned for ``.elm`` modules in ``elm_project``."""
    return elm_project / SOURCE_SUBDIR


@pytest.fixture
def output_dir(elm_project: Path) -> Path:
    """Directory receiving compiled bundles in ``elm_project``."""
    return elm_project / OUTPUT_SUBDIR
