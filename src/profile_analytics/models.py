from dataclasses import asdict, dataclass, field
from datetime import date, datetime
from typing import Any, Dict, List, Optional


def _parse_timestamp(value: Any) -> Optional[datetime]:
    if isinstance(value, datetime):
        return value
    if not value:
        return None
    try:
        return datetime.fromisoformat(str(value).replace("Z", "+00:00"))
    except ValueError:
        return None


def _format_timestamp(value: Optional[datetime]) -> Optional[str]:
    if value is None:
        return None
    return value.isoformat().replace("+00:00", "Z")


@dataclass(frozen=True)
class Profile:
    """A GitHub account as returned by ``GET /users/{login}``."""

    login: str
    avatar_url: str
    name: Optional[str] = None
    bio: Optional[str] = None
    public_repos: int = 0
    followers: int = 0
    following: int = 0
    created_at: Optional[datetime] = None

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> "Profile":
        return cls(
            login=data["login"],
            avatar_url=data.get("avatar_url") or "",
            name=data.get("name"),
            bio=data.get("bio"),
            public_repos=int(data.get("public_repos") or 0),
            followers=int(data.get("followers") or 0),
            following=int(data.get("following") or 0),
            created_at=_parse_timestamp(data.get("created_at")),
        )

    def to_dict(self) -> Dict[str, Any]:
        out = asdict(self)
        out["created_at"] = _format_timestamp(self.created_at)
        return out


@dataclass(frozen=True)
class Repository:
    """A single entry of ``GET /users/{login}/repos``."""

    id: int
    name: str
    html_url: str
    description: Optional[str] = None
    stargazers_count: int = 0
    forks_count: int = 0
    language: Optional[str] = None
    created_at: Optional[datetime] = None

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> "Repository":
        return cls(
            id=int(data["id"]),
            name=data["name"],
            html_url=data.get("html_url") or "",
            description=data.get("description"),
            stargazers_count=int(data.get("stargazers_count") or 0),
            forks_count=int(data.get("forks_count") or 0),
            language=data.get("language"),
            created_at=_parse_timestamp(data.get("created_at")),
        )

    def to_dict(self) -> Dict[str, Any]:
        out = asdict(self)
        out["created_at"] = _format_timestamp(self.created_at)
        return out


@dataclass(frozen=True)
class CommitActivityPoint:
    date: date
    count: int

    def to_dict(self) -> Dict[str, Any]:
        return {"date": self.date.isoformat(), "count": self.count}


@dataclass(frozen=True)
class SyntheticDataset:
    """Everything the generator fabricates for one username."""

    profile: Profile
    repositories: List[Repository] = field(default_factory=list)
    activity: List[CommitActivityPoint] = field(default_factory=list)
