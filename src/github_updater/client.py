"""GitHubClient session and Repository handle used by the updater."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from github_updater._internal.gh_client import GitHubAPI
from github_updater.config import Credentials, load_credentials
from github_updater.exceptions import AuthenticationError, RepositoryError, UploadError
from github_updater.models import ContentLookup, ContentStatus

logger = logging.getLogger(__name__)


def _describe(exc: Exception) -> str:
    """Render an httpx failure as a short message."""
    if isinstance(exc, httpx.HTTPStatusError):
        message = ""
        try:
            message = exc.response.json().get("message", "")
        except Exception:
            message = exc.response.text[:200]
        return f"HTTP {exc.response.status_code}: {message}".rstrip(": ")
    return str(exc) or exc.__class__.__name__


def _is_status(exc: Exception, status_code: int) -> bool:
    return isinstance(exc, httpx.HTTPStatusError) and exc.response.status_code == status_code


class Repository:
    """Handle to a remote repository.

    Obtained from GitHubClient.get_repository() or create_repository(); used
    for every existence check and file creation within a run.
    """

    def __init__(self, api: GitHubAPI, data: dict[str, Any]) -> None:
        self._api = api
        self._data = data

    @property
    def full_name(self) -> str:
        return str(self._data["full_name"])

    @property
    def owner_login(self) -> str:
        owner = self._data.get("owner") or {}
        return str(owner.get("login") or self.full_name.split("/", 1)[0])

    def __repr__(self) -> str:
        return f"Repository({self.full_name!r})"

    def get_file_content(self, path: str) -> ContentLookup:
        """Check whether content exists at path.

        Args:
            path: Repository-relative path using "/" separators

        Returns:
            ContentLookup with FOUND, NOT_FOUND (HTTP 404) or ERROR status.
            Never raises for remote, transport or decoding faults.
        """
        try:
            entry = self._api.get_contents(self.full_name, path)
        except (httpx.HTTPStatusError, httpx.TransportError, ValueError) as e:
            if _is_status(e, 404):
                return ContentLookup(status=ContentStatus.NOT_FOUND, path=path)
            logger.debug(f"Content lookup for {path} failed: {_describe(e)}")
            return ContentLookup(status=ContentStatus.ERROR, path=path, error=_describe(e))

        is_file = isinstance(entry, dict) and entry.get("type") == "file"
        return ContentLookup(status=ContentStatus.FOUND, path=path, is_file=is_file)

    def create_content(self, content: str, message: str, path: str) -> None:
        """Create a new file at path.

        Raises:
            AuthenticationError: If the credentials are rejected
            UploadError: If the remote refuses the file or the request fails
        """
        try:
            self._api.create_contents(self.full_name, path, content, message)
        except (httpx.HTTPStatusError, httpx.TransportError, ValueError) as e:
            if _is_status(e, 401):
                raise AuthenticationError(f"Failed to add {path}: {_describe(e)}") from e
            raise UploadError(f"Failed to add {path}: {_describe(e)}") from e
        logger.info(f"Created {path} in {self.full_name}")


class GitHubClient:
    """Authenticated session against the GitHub API.

    Credentials are resolved from the environment unless passed explicitly.

    Example:
        with GitHubClient() as github:
            repo = github.get_repository("octocat/episodes")
            repo.create_content("a\\nb", "Adding data/episode-1.csv", "data/episode-1.csv")
    """

    def __init__(self, credentials: Credentials | None = None) -> None:
        self._credentials = credentials
        self._api: GitHubAPI | None = None

    def __enter__(self) -> GitHubClient:
        """Enter context manager."""
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: Any,
    ) -> None:
        """Exit context manager."""
        self.close()

    @property
    def credentials(self) -> Credentials:
        if self._credentials is None:
            self._credentials = load_credentials()
        return self._credentials

    def _get_api(self) -> GitHubAPI:
        """Get the underlying REST client, creating it on first use."""
        if self._api is None:
            creds = self.credentials
            self._api = GitHubAPI(creds.token, base_url=creds.endpoint)
        return self._api

    def get_repository(self, full_name: str) -> Repository:
        """Look up a repository by "owner/name".

        Raises:
            RepositoryError: If the lookup fails for any reason, including
                rejected credentials
        """
        try:
            data = self._get_api().get_repository(full_name)
        except (httpx.HTTPStatusError, httpx.TransportError, ValueError) as e:
            raise RepositoryError(f"Failed to get repository {full_name}: {_describe(e)}") from e
        return Repository(self._get_api(), data)

    def create_repository(self, name: str) -> Repository:
        """Create a repository owned by the authenticated identity.

        Raises:
            RepositoryError: If creation fails for any reason
        """
        try:
            data = self._get_api().create_repository(name)
        except (httpx.HTTPStatusError, httpx.TransportError, ValueError) as e:
            raise RepositoryError(f"Failed to create repository {name}: {_describe(e)}") from e
        logger.info(f"Created repository {data.get('full_name', name)}")
        return Repository(self._get_api(), data)

    def close(self) -> None:
        """Close the session and release the HTTP connection pool."""
        if self._api is not None:
            self._api.close()
        self._api = None
