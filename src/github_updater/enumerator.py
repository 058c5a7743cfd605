"""Locate episode files under the target directory."""

from __future__ import annotations

import logging
import re
from pathlib import Path

from github_updater.exceptions import PathError
from github_updater.models import LocalFile

logger = logging.getLogger(__name__)

EPISODE_PATTERN = re.compile(r"episode-\d+\.csv")


def acquire_directory(path: str | Path) -> Path:
    """Return path if it exists and is a directory, else raise PathError."""
    directory = Path(path)
    if not directory.exists():
        raise PathError(f"File does not exist: {directory.resolve()}")
    if not directory.is_dir():
        raise PathError(f"File is not directory: {directory.resolve()}")
    return directory


def resolve_paths(root: str | Path, target: str | Path) -> tuple[Path, Path]:
    """Validate the root and the target beneath it.

    Returns:
        (root, target) with root made absolute and target joined onto it

    Raises:
        PathError: If either directory is missing, or target is absolute or
            leads outside root
    """
    root_dir = acquire_directory(root).resolve()
    if Path(target).is_absolute():
        raise PathError(f"Target must be relative to the root: {target}")
    target_dir = acquire_directory(root_dir / target)
    if not target_dir.resolve().is_relative_to(root_dir):
        raise PathError(f"Target is outside the root: {target_dir.resolve()}")
    return root_dir, target_dir


def list_episode_files(target_dir: Path) -> list[LocalFile]:
    """List the immediate children of target_dir named episode-<digits>.csv.

    The result is sorted by file name as plain strings, so episode-10.csv
    comes before episode-2.csv.
    """
    files = [
        LocalFile(path=entry, name=entry.name)
        for entry in target_dir.iterdir()
        if EPISODE_PATTERN.fullmatch(entry.name) and entry.is_file()
    ]
    files.sort(key=lambda f: f.name)
    logger.debug(f"Matched {len(files)} episode file(s) in {target_dir}")
    return files


def enumerate_files(root: str | Path, target: str | Path) -> list[LocalFile]:
    """Validate root and root/target, then list the episode files in target."""
    _, target_dir = resolve_paths(root, target)
    return list_episode_files(target_dir)
