from typing import Any, Optional
from unittest.mock import MagicMock

import pytest

from profile_analytics.github_client import GitHubClient

PROFILE_JSON = {
    "login": "octocat",
    "id": 583231,
    "avatar_url": "https://avatars.githubusercontent.com/u/583231?v=4",
    "name": "The Octocat",
    "bio": None,
    "public_repos": 8,
    "followers": 9000,
    "following": 9,
    "created_at": "2011-01-25T18:44:36Z",
}

REPOS_JSON = [
    {
        "id": 1296269,
        "name": "Hello-World",
        "description": "My first repository on GitHub!",
        "html_url": "https://github.com/octocat/Hello-World",
        "stargazers_count": 2500,
        "forks_count": 2000,
        "language": None,
        "created_at": "2011-01-26T19:01:12Z",
        "fork": False,
    },
    {
        "id": 132935648,
        "name": "boysenberry-repo-1",
        "description": "Testing",
        "html_url": "https://github.com/octocat/boysenberry-repo-1",
        "stargazers_count": 300,
        "forks_count": 20,
        "language": "Python",
        "created_at": "2018-05-10T17:51:29Z",
    },
]


def make_response(status: int, payload: Optional[Any] = None) -> MagicMock:
    resp = MagicMock()
    resp.status_code = status
    resp.ok = 200 <= status < 400
    if payload is None:
        resp.json.side_effect = ValueError("no json")
    else:
        resp.json.return_value = payload
    return resp


@pytest.fixture
def session() -> MagicMock:
    return MagicMock()


@pytest.fixture
def client(session: MagicMock) -> GitHubClient:
    return GitHubClient(session=session)
