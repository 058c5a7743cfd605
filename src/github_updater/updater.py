"""Top-level update run: validate paths, resolve the repository, sync files."""

from __future__ import annotations

import contextlib
import logging
from typing import Callable

import click

from github_updater.client import GitHubClient
from github_updater.enumerator import list_episode_files, resolve_paths
from github_updater.models import FileOutcome, RunConfig, Session
from github_updater.resolver import resolve_repository
from github_updater.sync import sync_files

logger = logging.getLogger(__name__)


def run(
    config: RunConfig,
    *,
    session: Session | None = None,
    strict_lookup: bool = False,
    echo: Callable[[str], None] = click.echo,
) -> list[FileOutcome] | None:
    """Upload every episode file under root/target that the repository lacks.

    Paths are validated before any network call. When session is None a
    GitHubClient is opened from the ambient credentials and closed afterwards.

    Returns:
        The per-file outcomes, or None if the repository could not be
        resolved or created

    Raises:
        PathError: If root or root/target is missing or not a directory
        UploadError: If adding a file fails
    """
    root_dir, target_dir = resolve_paths(config.root_path, config.target_path)

    with contextlib.ExitStack() as stack:
        if session is None:
            session = stack.enter_context(GitHubClient())

        repo = resolve_repository(
            session, config.owner_name, config.repository_name, echo=echo
        )
        if repo is None:
            logger.info("No repository available; nothing to sync")
            return None

        echo(f"fileTarget: {target_dir}")
        files = list_episode_files(target_dir)
        echo(f"File Count: {len(files)}")

        return sync_files(repo, root_dir, files, strict_lookup=strict_lookup, echo=echo)
