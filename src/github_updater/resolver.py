"""Resolve the target repository, creating it when the lookup fails."""

from __future__ import annotations

import logging
from typing import Callable

import click

from github_updater.exceptions import RepositoryError
from github_updater.models import RepositoryHandle, Session

logger = logging.getLogger(__name__)


def resolve_repository(
    session: Session,
    owner: str,
    name: str,
    *,
    echo: Callable[[str], None] = click.echo,
) -> RepositoryHandle | None:
    """Get a handle to owner/name, or create name if the lookup fails.

    Any lookup failure (not found, permissions, network) triggers creation.
    The repository is created under the authenticated identity, which is not
    necessarily owner.

    Args:
        session: Session used for lookup and creation
        owner: Account that should own the repository
        name: Repository name
        echo: Sink for user-facing progress messages

    Returns:
        The repository handle, or None if creation also failed
    """
    full_name = f"{owner}/{name}"
    try:
        return session.get_repository(full_name)
    except RepositoryError as e:
        logger.debug(f"Lookup of {full_name} failed: {e}")
        echo("Repo not found, creating now")

    try:
        repo = session.create_repository(name)
    except RepositoryError as e:
        logger.warning(str(e))
        echo("Repo creation failed")
        return None

    created_owner = getattr(repo, "owner_login", None)
    if created_owner and created_owner != owner:
        logger.warning(
            f"Created {repo.full_name} under {created_owner}, not the requested owner {owner}"
        )
    return repo
