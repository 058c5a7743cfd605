"""GitHub Updater - upload new episode CSV files to a GitHub repository.

Example usage:
    from github_updater import GitHubClient, enumerate_files, resolve_repository, sync_files

    with GitHubClient() as github:
        repo = resolve_repository(github, "octocat", "episodes")
        if repo is not None:
            files = enumerate_files("/srv/podcast", "data")
            sync_files(repo, "/srv/podcast", files)
"""

from github_updater.client import GitHubClient, Repository
from github_updater.enumerator import enumerate_files
from github_updater.exceptions import (
    AuthenticationError,
    ContentLookupError,
    GitHubUpdaterError,
    PathError,
    RepositoryError,
    UploadError,
)
from github_updater.models import (
    ContentLookup,
    ContentStatus,
    FileOutcome,
    LocalFile,
    RunConfig,
    SyncAction,
)
from github_updater.resolver import resolve_repository
from github_updater.sync import sync_files
from github_updater.updater import run

__version__ = "0.1.0"

__all__ = [
    # Session and handles
    "GitHubClient",
    "Repository",
    # Workflow
    "enumerate_files",
    "resolve_repository",
    "sync_files",
    "run",
    # Models
    "RunConfig",
    "LocalFile",
    "ContentLookup",
    "ContentStatus",
    "FileOutcome",
    "SyncAction",
    # Exceptions
    "GitHubUpdaterError",
    "PathError",
    "AuthenticationError",
    "RepositoryError",
    "ContentLookupError",
    "UploadError",
]
