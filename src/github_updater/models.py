"""Data models for the github_updater package."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Protocol


@dataclass(frozen=True)
class RunConfig:
    """Parsed command-line input for a single run."""

    root_path: str
    target_path: str
    repository_name: str
    owner_name: str


@dataclass(frozen=True)
class LocalFile:
    """A candidate file found in the target directory."""

    path: Path
    name: str


class ContentStatus(Enum):
    """Outcome of asking the remote repository for a path."""

    FOUND = "found"
    NOT_FOUND = "not_found"
    ERROR = "error"


@dataclass(frozen=True)
class ContentLookup:
    """Result of a remote existence check."""

    status: ContentStatus
    path: str
    is_file: bool = False
    error: str | None = None

    @property
    def exists(self) -> bool:
        return self.status is ContentStatus.FOUND


class SyncAction(Enum):
    """What the sync engine did with a local file."""

    ADDED = "added"
    SKIPPED = "skipped"


@dataclass(frozen=True)
class FileOutcome:
    """Result of syncing one local file."""

    file: LocalFile
    relative_path: str
    action: SyncAction


class RepositoryHandle(Protocol):
    """Remote repository operations the sync engine depends on."""

    @property
    def full_name(self) -> str: ...

    def get_file_content(self, path: str) -> ContentLookup: ...

    def create_content(self, content: str, message: str, path: str) -> None: ...


class Session(Protocol):
    """Repository lookup and creation the resolver depends on."""

    def get_repository(self, full_name: str) -> RepositoryHandle: ...

    def create_repository(self, name: str) -> RepositoryHandle: ...
