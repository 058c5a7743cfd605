"""Tests for the end-to-end update run."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest
from helpers import FakeRepository, FakeSession

from github_updater import PathError, RunConfig, SyncAction, run


def _config(root: Path | str, target: str = "data") -> RunConfig:
    return RunConfig(
        root_path=str(root),
        target_path=target,
        repository_name="episodes",
        owner_name="octocat",
    )


class TestRun:
    """Tests for the full pipeline against a fake session."""

    def test_uploads_all_new_files(
        self,
        episode_root: Path,
        fake_session: FakeSession,
        fake_repo: FakeRepository,
        echo: MagicMock,
    ) -> None:
        """Test that every episode file is added to an empty repository."""
        outcomes = run(_config(episode_root), session=fake_session, echo=echo)

        assert outcomes is not None
        assert [o.relative_path for o in outcomes] == [
            "data/episode-1.csv",
            "data/episode-10.csv",
            "data/episode-2.csv",
        ]
        assert all(o.action is SyncAction.ADDED for o in outcomes)
        assert fake_repo.created[0] == ("a\nb", "Adding data/episode-1.csv", "data/episode-1.csv")
        echo.assert_any_call("File Count: 3")

    def test_missing_root_makes_no_network_calls(self, tmp_path: Path, echo: MagicMock) -> None:
        """Test that path validation happens before the session is used."""
        session = MagicMock()

        with pytest.raises(PathError, match="File does not exist"):
            run(_config(tmp_path / "missing"), session=session, echo=echo)

        assert session.method_calls == []

    def test_missing_root_does_not_open_client(self, tmp_path: Path, echo: MagicMock) -> None:
        """Test that no GitHubClient is created when the root is missing."""
        with patch("github_updater.updater.GitHubClient") as mock_client_class:
            with pytest.raises(PathError):
                run(_config(tmp_path / "missing"), echo=echo)

        mock_client_class.assert_not_called()

    def test_missing_target_makes_no_network_calls(
        self, episode_root: Path, echo: MagicMock
    ) -> None:
        """Test that a missing target is fatal before any remote call."""
        session = MagicMock()

        with pytest.raises(PathError):
            run(_config(episode_root, "nope"), session=session, echo=echo)

        assert session.method_calls == []

    def test_absolute_target_outside_root_makes_no_network_calls(
        self, tmp_path: Path, echo: MagicMock
    ) -> None:
        """Test that files outside the root are never scanned or uploaded."""
        root = tmp_path / "root"
        root.mkdir()
        outside = tmp_path / "outside"
        outside.mkdir()
        (outside / "episode-1.csv").write_text("x")
        session = MagicMock()

        with pytest.raises(PathError, match="must be relative to the root"):
            run(_config(root, str(outside)), session=session, echo=echo)

        assert session.method_calls == []

    def test_unresolvable_repository_syncs_nothing(
        self, episode_root: Path, echo: MagicMock
    ) -> None:
        """Test that a failed lookup and creation ends the run quietly."""
        session = FakeSession(can_create=False)

        assert run(_config(episode_root), session=session, echo=echo) is None
        assert session.creations == ["episodes"]

    def test_rerun_skips_everything(
        self,
        episode_root: Path,
        fake_session: FakeSession,
        fake_repo: FakeRepository,
        echo: MagicMock,
    ) -> None:
        """Test that a second run adds nothing."""
        run(_config(episode_root), session=fake_session, echo=echo)
        outcomes = run(_config(episode_root), session=fake_session, echo=echo)

        assert outcomes is not None
        assert all(o.action is SyncAction.SKIPPED for o in outcomes)
        assert len(fake_repo.created) == 3

    def test_opens_and_closes_default_client(self, episode_root: Path, echo: MagicMock) -> None:
        """Test that an ambient GitHubClient is used and closed."""
        repo = FakeRepository()
        with patch("github_updater.updater.GitHubClient") as mock_client_class:
            github = mock_client_class.return_value
            github.__enter__.return_value = github
            github.get_repository.return_value = repo

            run(_config(episode_root), echo=echo)

        github.get_repository.assert_called_once_with("octocat/episodes")
        github.__exit__.assert_called_once()
        assert len(repo.created) == 3
