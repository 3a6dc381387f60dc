"""Pytest configuration and fixtures for test suite."""

import sys
from collections.abc import Callable
from pathlib import Path

import pytest

# Add src directory to path for imports
SRC_PATH = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(SRC_PATH))

from disjointset import DisjointSet  # noqa: E402


@pytest.fixture
def make_forest() -> Callable[..., DisjointSet]:
    """Factory for forests pre-populated with singletons.

    Values are registered in the order given.
    """

    def _factory(*values: object) -> DisjointSet:
        forest = DisjointSet()
        for value in values:
            forest.make_set(value)
        return forest

    return _factory


@pytest.fixture
def deep_forest(make_forest: Callable[..., DisjointSet]) -> DisjointSet:
    """Forest with one partition of height two: 2 -> 1, 4 -> 3 -> 1.

    Built from two rank-1 trees joined on a rank tie, so 1 has rank 2.
    """
    forest = make_forest(1, 2, 3, 4)
    forest.union(1, 2)
    forest.union(3, 4)
    forest.union(1, 3)
    return forest


@pytest.fixture
def write_script(tmp_path: Path) -> Callable[..., Path]:
    """Factory writing operation scripts under tmp_path."""

    def _factory(*lines: str, name: str = "ops.txt") -> Path:
        path = tmp_path / name
        path.write_text("\n".join(lines) + "\n", encoding="utf-8")
        return path

    return _factory
