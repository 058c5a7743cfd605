"""Shared test helpers for github_updater tests."""

from __future__ import annotations

from github_updater.exceptions import RepositoryError
from github_updater.models import ContentLookup, ContentStatus


class FakeRepository:
    """In-memory stand-in for a Repository handle."""

    def __init__(
        self,
        full_name: str = "octocat/episodes",
        files: dict[str, str] | None = None,
        directories: set[str] | None = None,
        errors: dict[str, str] | None = None,
        owner_login: str | None = None,
    ) -> None:
        self.full_name = full_name
        self.owner_login = owner_login or full_name.split("/", 1)[0]
        self.files = dict(files or {})
        self.directories = set(directories or ())
        self.errors = dict(errors or {})
        self.created: list[tuple[str, str, str]] = []

    def get_file_content(self, path: str) -> ContentLookup:
        if path in self.errors:
            return ContentLookup(status=ContentStatus.ERROR, path=path, error=self.errors[path])
        if path in self.files:
            return ContentLookup(status=ContentStatus.FOUND, path=path, is_file=True)
        if path in self.directories:
            return ContentLookup(status=ContentStatus.FOUND, path=path, is_file=False)
        return ContentLookup(status=ContentStatus.NOT_FOUND, path=path)

    def create_content(self, content: str, message: str, path: str) -> None:
        self.created.append((content, message, path))
        self.files[path] = content


class FakeSession:
    """In-memory stand-in for a GitHubClient session."""

    def __init__(
        self,
        repositories: dict[str, FakeRepository] | None = None,
        login: str = "octocat",
        can_create: bool = True,
    ) -> None:
        self.repositories = dict(repositories or {})
        self.login = login
        self.can_create = can_create
        self.lookups: list[str] = []
        self.creations: list[str] = []

    def get_repository(self, full_name: str) -> FakeRepository:
        self.lookups.append(full_name)
        if full_name not in self.repositories:
            raise RepositoryError(f"Failed to get repository {full_name}: HTTP 404: Not Found")
        return self.repositories[full_name]

    def create_repository(self, name: str) -> FakeRepository:
        self.creations.append(name)
        if not self.can_create:
            raise RepositoryError(f"Failed to create repository {name}: HTTP 422")
        repo = FakeRepository(full_name=f"{self.login}/{name}")
        self.repositories[repo.full_name] = repo
        return repo
