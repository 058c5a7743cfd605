"""Pytest fixtures for github_updater tests."""

from __future__ import annotations

from pathlib import Path
from typing import Any
from unittest.mock import MagicMock, patch

import pytest
from helpers import FakeRepository, FakeSession


@pytest.fixture
def episode_root(tmp_path: Path) -> Path:
    """Create a root directory with a data/ target holding episode files."""
    data = tmp_path / "data"
    data.mkdir()
    (data / "episode-2.csv").write_text("two\n")
    (data / "episode-10.csv").write_text("ten\n")
    (data / "episode-1.csv").write_text("a\nb")
    (data / "notes.txt").write_text("ignored")
    (data / "Episode-3.csv").write_text("ignored")
    return tmp_path


@pytest.fixture
def fake_repo() -> FakeRepository:
    """Create an empty fake repository."""
    return FakeRepository()


@pytest.fixture
def fake_session(fake_repo: FakeRepository) -> FakeSession:
    """Create a fake session that already knows octocat/episodes."""
    return FakeSession(repositories={fake_repo.full_name: fake_repo})


@pytest.fixture
def echo() -> MagicMock:
    """Collect user-facing messages."""
    return MagicMock()


@pytest.fixture
def patch_github_api_class() -> Any:
    """Patch GitHubAPI class for testing."""
    with patch("github_updater.client.GitHubAPI") as mock_class:
        mock_instance = MagicMock()
        mock_class.return_value = mock_instance
        yield mock_instance
