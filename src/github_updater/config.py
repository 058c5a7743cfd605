"""
Credential and endpoint resolution for the GitHub session.
Loads environment variables (and a .env file) before falling back to ~/.github.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import dotenv_values, find_dotenv, load_dotenv

from github_updater._internal.gh_client import DEFAULT_API_URL

logger = logging.getLogger(__name__)

# Properties file with oauth/login/endpoint keys
DEFAULT_PROPERTIES_FILE = Path.home() / ".github"


@dataclass(frozen=True)
class Credentials:
    """Resolved credentials for the remote session."""

    token: str | None
    login: str | None
    endpoint: str
    source: str

    @property
    def is_anonymous(self) -> bool:
        return not self.token


def _from_environment() -> Credentials | None:
    token = os.getenv("GITHUB_TOKEN") or os.getenv("GITHUB_OAUTH")
    if not token:
        return None
    return Credentials(
        token=token,
        login=os.getenv("GITHUB_LOGIN"),
        endpoint=os.getenv("GITHUB_ENDPOINT") or DEFAULT_API_URL,
        source="environment",
    )


def _from_properties_file(path: Path) -> Credentials | None:
    if not path.is_file():
        return None
    values = dotenv_values(path)
    token = values.get("oauth")
    if not token:
        logger.debug(f"No oauth key in {path}")
        return None
    return Credentials(
        token=token,
        login=values.get("login"),
        endpoint=values.get("endpoint") or os.getenv("GITHUB_ENDPOINT") or DEFAULT_API_URL,
        source=str(path),
    )


def load_credentials(properties_file: Path | None = None) -> Credentials:
    """
    Resolve credentials from the ambient environment.
    Order: GITHUB_TOKEN/GITHUB_OAUTH (after loading .env), then the properties file.
    Falls back to an anonymous session when nothing is configured.
    """
    load_dotenv(find_dotenv(usecwd=True))

    credentials = _from_environment()
    if credentials is None:
        credentials = _from_properties_file(properties_file or DEFAULT_PROPERTIES_FILE)
    if credentials is None:
        logger.warning("No GitHub credentials found; using an anonymous session")
        return Credentials(
            token=None,
            login=os.getenv("GITHUB_LOGIN"),
            endpoint=os.getenv("GITHUB_ENDPOINT") or DEFAULT_API_URL,
            source="anonymous",
        )

    logger.debug(f"Using GitHub credentials from {credentials.source}")
    return credentials
