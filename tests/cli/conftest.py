"""Shared fixtures for CLI tests."""

import pytest


@pytest.fixture
def board_file(tmp_path, sample_markdown):
    """Write the sample board to board.md in a temp dir."""
    path = tmp_path / "board.md"
    path.write_text(sample_markdown, encoding="utf-8")
    return path
