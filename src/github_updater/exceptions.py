"""Exception hierarchy for the github_updater package."""

from __future__ import annotations


class GitHubUpdaterError(Exception):
    """Base exception for all github_updater errors."""

    pass


class PathError(GitHubUpdaterError):
    """Raised when the root or target directory is missing or not a directory."""

    pass


class AuthenticationError(GitHubUpdaterError):
    """Raised when the remote service rejects the ambient credentials."""

    pass


class RepositoryError(GitHubUpdaterError):
    """Raised when a repository lookup or creation fails."""

    pass


class ContentLookupError(GitHubUpdaterError):
    """Raised when an existence check fails for a reason other than not-found.

    The path attribute holds the remote path that was being checked.
    """

    def __init__(self, message: str, path: str) -> None:
        super().__init__(message)
        self.path = path


class UploadError(GitHubUpdaterError):
    """Raised when creating a remote file fails."""

    pass
