from datetime import datetime, timezone
from typing import Any, Dict, Iterable, List, Optional, Sequence

from .models import CommitActivityPoint, Repository


def select_top_repos(repos: Iterable[Repository], strategy: str = "stars", limit: int = 10) -> List[Repository]:
    """Rank repositories by stars, creation date, or stars then forks."""
    repos = list(repos)
    if strategy == "stars":
        repos.sort(key=lambda r: r.stargazers_count, reverse=True)
    elif strategy == "recent":
        oldest = datetime.min.replace(tzinfo=timezone.utc)
        repos.sort(key=lambda r: r.created_at or oldest, reverse=True)
    else:
        repos.sort(key=lambda r: (r.stargazers_count, r.forks_count), reverse=True)
    return repos[:limit]


def language_breakdown(repos: Iterable[Repository]) -> Dict[str, int]:
    languages: Dict[str, int] = {}
    for r in repos:
        if r.language:
            languages[r.language] = languages.get(r.language, 0) + 1
    return dict(sorted(languages.items(), key=lambda kv: (-kv[1], kv[0])))


def total_stars(repos: Iterable[Repository]) -> int:
    return sum(r.stargazers_count for r in repos)


def total_forks(repos: Iterable[Repository]) -> int:
    return sum(r.forks_count for r in repos)


def _plural(n: int, unit: str) -> str:
    return f"{n} {unit}{'' if n == 1 else 's'}"


def account_age(created_at: datetime, now: Optional[datetime] = None) -> str:
    """Coarse human-readable age: whole years, else months, else days (at least one)."""
    now = now or datetime.now(timezone.utc)
    if created_at.tzinfo is None and now.tzinfo is not None:
        created_at = created_at.replace(tzinfo=timezone.utc)
    years = now.year - created_at.year
    months = now.month - created_at.month
    if years > 0:
        return _plural(years, "year")
    if months > 0:
        return _plural(months, "month")
    days = max(1, (now - created_at).days)
    return _plural(days, "day")


def activity_summary(activity: Sequence[CommitActivityPoint]) -> Dict[str, Any]:
    if not activity:
        return {"total": 0, "active_days": 0, "average_per_day": 0.0, "busiest_day": None}
    total = sum(p.count for p in activity)
    # earliest date wins ties
    busiest = max(activity, key=lambda p: (p.count, -p.date.toordinal()))
    return {
        "total": total,
        "active_days": sum(1 for p in activity if p.count > 0),
        "average_per_day": round(total / len(activity), 2),
        "busiest_day": {"date": busiest.date.isoformat(), "count": busiest.count},
    }


def summarize(state, now: Optional[datetime] = None) -> Dict[str, Any]:
    """Headline numbers for a successful :class:`RequestState`; empty dict otherwise."""
    if state.profile is None:
        return {}
    repos = state.repositories
    created = state.profile.created_at
    return {
        "login": state.profile.login,
        "account_age": account_age(created, now) if created else None,
        "repositories_shown": len(repos),
        "total_stars": total_stars(repos),
        "total_forks": total_forks(repos),
        "languages": language_breakdown(repos),
        "top_repositories": [r.name for r in select_top_repos(repos, limit=3)],
        "activity": activity_summary(state.activity),
    }
