"""Upload local episode files that are not yet present in the repository."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Callable, Iterable

import click

from github_updater.exceptions import ContentLookupError
from github_updater.models import (
    ContentStatus,
    FileOutcome,
    LocalFile,
    RepositoryHandle,
    SyncAction,
)

logger = logging.getLogger(__name__)


def relative_path(root: str | Path, file_path: str | Path) -> str:
    """Path of file_path relative to root, with "/" separators."""
    return Path(os.path.relpath(file_path, root)).as_posix()


def read_content(file_path: str | Path) -> str:
    """Read a text file and rejoin its lines with "\\n".

    Line endings are normalized and a trailing newline is dropped.
    """
    with open(file_path, encoding="utf-8") as f:
        return "\n".join(line.rstrip("\n") for line in f)


def sync_file(
    repo: RepositoryHandle,
    root: str | Path,
    file: LocalFile,
    *,
    strict_lookup: bool = False,
    echo: Callable[[str], None] = click.echo,
) -> FileOutcome:
    """Add one file to the repository unless it is already there.

    Raises:
        ContentLookupError: If strict_lookup is set and the existence check failed
        UploadError: If creating the remote file fails
    """
    path = relative_path(root, file.path)
    echo(f"File path: {path}")
    content = read_content(file.path)

    lookup = repo.get_file_content(path)
    if lookup.status is ContentStatus.FOUND:
        if lookup.is_file:
            echo(f"Skipping {path} because it is already present")
        else:
            echo(f"Skipping {path} because a non-file entry is present")
        return FileOutcome(file=file, relative_path=path, action=SyncAction.SKIPPED)

    if lookup.status is ContentStatus.ERROR:
        if strict_lookup:
            raise ContentLookupError(f"Could not check {path}: {lookup.error}", path)
        logger.warning(f"Could not check {path} ({lookup.error}); adding it anyway")

    message = f"Adding {path}"
    repo.create_content(content, message, path)
    echo(message)
    return FileOutcome(file=file, relative_path=path, action=SyncAction.ADDED)


def sync_files(
    repo: RepositoryHandle,
    root: str | Path,
    files: Iterable[LocalFile],
    *,
    strict_lookup: bool = False,
    echo: Callable[[str], None] = click.echo,
) -> list[FileOutcome]:
    """Sync files in the given order.

    The first failure aborts the run; files added before it stay in place.

    Args:
        repo: Repository to add files to
        root: Base directory for computing remote paths
        files: Local files, already ordered
        strict_lookup: Abort instead of adding when an existence check errors
        echo: Sink for user-facing progress messages

    Returns:
        One FileOutcome per file
    """
    return [
        sync_file(repo, root, file, strict_lookup=strict_lookup, echo=echo)
        for file in files
    ]
