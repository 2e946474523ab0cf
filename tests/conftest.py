"""
Pytest configuration and shared fixtures for the labyrinth tests.
"""

import pytest

from labyrinth.maze import Maze

CORRIDOR = "2222\n2134\n2222"

# 2x2 open block: every cell is reachable along two routes
LOOP = "2222\n2132\n2332\n2222"


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )


@pytest.fixture
def corridor():
    """Entry, one open cell, exit on the right border."""
    return Maze.build("corridor.labmap", CORRIDOR)


@pytest.fixture
def loop():
    return Maze.build("loop.labmap", LOOP)


@pytest.fixture
def map_dir(tmp_path):
    """A directory with valid, invalid and unrelated files."""
    (tmp_path / "corridor.labmap").write_text(CORRIDOR + "\n", encoding="utf-8")
    (tmp_path / "loop.labmap").write_text(LOOP, encoding="utf-8")
    (tmp_path / "broken.labmap").write_text("222\n213", encoding="utf-8")
    (tmp_path / "notes.txt").write_text(CORRIDOR, encoding="utf-8")
    (tmp_path / "nested.labmap").mkdir()
    return tmp_path
