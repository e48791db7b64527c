import logging
from typing import Any, List, Optional, Tuple
from urllib.parse import quote

import requests

from .errors import NetworkError, NotFoundError, RateLimitedError, RemoteError
from .models import Profile, Repository

logger = logging.getLogger(__name__)

GITHUB_API = "https://api.github.com"
CORS_RELAY = "https://corsproxy.io/?"
REPOS_PER_PAGE = 10


def parse_username(input_str: str) -> str:
    s = input_str.strip().rstrip("/")
    if "github.com/" in s:
        parts = s.split("github.com/")[-1].split("/")
        return parts[0]
    return s.split("/")[-1]


class GitHubClient:
    """Read-only access to the GitHub REST API through a CORS relay.

    Every call is a single attempt. Non-2xx answers and transport failures
    are turned into :mod:`profile_analytics.errors` exceptions.
    """

    def __init__(self, relay_url: str = CORS_RELAY, api_url: str = GITHUB_API, timeout: float = 30,
                 session: Optional[requests.Session] = None):
        self.relay_url = relay_url or ""
        self.api_url = api_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.headers.update({
            "Accept": "application/vnd.github+json",
            "User-Agent": "github-profile-analytics",
        })

    def _url(self, path: str) -> str:
        return f"{self.relay_url}{self.api_url}{path}"

    def _get(self, path: str) -> Tuple[int, Any]:
        url = self._url(path)
        logger.info("GET %s", url)
        try:
            resp = self.session.get(url, timeout=self.timeout)
        except requests.RequestException as exc:
            logger.warning("Request to %s failed: %s", url, exc)
            raise NetworkError(f"Could not reach the GitHub API: {exc}") from exc
        if not resp.ok:
            return resp.status_code, None
        try:
            payload = resp.json()
        except ValueError:
            payload = None
        return resp.status_code, payload

    def fetch_profile(self, username: str) -> Profile:
        status, data = self._get(f"/users/{quote(username, safe='')}")
        if status == 404:
            raise NotFoundError(username)
        if status == 403:
            raise RateLimitedError()
        if not 200 <= status < 300:
            raise RemoteError(f"API error: {status}", status_code=status)
        if not isinstance(data, dict) or not data.get("login"):
            raise RemoteError(f"API error: unexpected profile payload ({status})", status_code=status)
        try:
            return Profile.from_api(data)
        except (TypeError, ValueError) as exc:
            raise RemoteError(f"API error: malformed profile ({exc})", status_code=status) from exc

    def fetch_repositories(self, username: str) -> List[Repository]:
        """First page of the user's repositories, most recently updated first."""
        status, data = self._get(f"/users/{quote(username, safe='')}/repos?sort=updated&per_page={REPOS_PER_PAGE}")
        if status == 403:
            raise RateLimitedError()
        if not 200 <= status < 300:
            raise RemoteError(f"Failed to fetch repositories: {status}", status_code=status)
        if not isinstance(data, list):
            raise RemoteError(f"Failed to fetch repositories: unexpected payload ({status})", status_code=status)
        try:
            return [Repository.from_api(r) for r in data[:REPOS_PER_PAGE]]
        except (KeyError, TypeError, ValueError) as exc:
            raise RemoteError(f"Failed to fetch repositories: malformed entry ({exc})", status_code=status) from exc

    def close(self) -> None:
        self.session.close()

    def __enter__(self) -> "GitHubClient":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()
