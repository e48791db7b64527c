"""Username-seeded demo data.

The generator fabricates a plausible profile, a handful of repositories and a
31-day commit activity series. All of it is drawn from one ``random.Random``
seeded by :func:`derive_seed`, so the same username, ``today`` and ``now``
always produce the same dataset.
"""

import logging
import math
import random
from datetime import date, datetime, timedelta, timezone
from typing import List, Optional

from .errors import ValidationError
from .models import CommitActivityPoint, Profile, Repository, SyntheticDataset

logger = logging.getLogger(__name__)

LANGUAGES = [
    "JavaScript", "TypeScript", "Python", "Java", "Go",
    "Ruby", "C++", "PHP", "HTML", "CSS",
]
DEFAULT_BIO = "Software developer passionate about open source and building great user experiences."
DESCRIPTION_TEMPLATE = "A {language} project with modern architecture and clean design patterns."
AVATAR_TEMPLATE = "/api/placeholder/200/200?text={initial}"

ACTIVITY_DAYS = 31
MAX_DAILY_COMMITS = 11
PROFILE_MAX_AGE = timedelta(days=5 * 365)
REPO_MAX_AGE_DAYS = 3 * 365


def derive_seed(username: str) -> int:
    """Sum of the code points of ``username``, case-sensitive."""
    if not username or not username.strip():
        raise ValidationError("Please enter a username")
    return sum(ord(ch) for ch in username)


def generate_activity(seed: int, today: Optional[date] = None) -> List[CommitActivityPoint]:
    """Commit counts for ``today`` and the 30 days before it, oldest first."""
    today = today or datetime.now(timezone.utc).date()
    points = []
    for offset in range(ACTIVITY_DAYS - 1, -1, -1):
        day = today - timedelta(days=offset)
        # month index is zero-based
        day_value = day.day + (day.month - 1) * 30
        factor = math.sin(seed * day_value * 0.1) * 0.5 + 0.5
        count = min(MAX_DAILY_COMMITS, int(math.floor(factor * 12)))
        points.append(CommitActivityPoint(date=day, count=max(0, count)))
    return points


def _generate_profile(username: str, rng: random.Random, now: datetime) -> Profile:
    initial = username[0].upper()
    bio = DEFAULT_BIO if rng.random() > 0.3 else None
    age = timedelta(seconds=rng.randrange(int(PROFILE_MAX_AGE.total_seconds())))
    return Profile(
        login=username,
        avatar_url=AVATAR_TEMPLATE.format(initial=initial),
        name=initial + username[1:],
        bio=bio,
        public_repos=rng.randint(2, 31),
        followers=rng.randint(10, 1009),
        following=rng.randint(5, 204),
        created_at=now - age,
    )


def _generate_repositories(username: str, limit: int, rng: random.Random, now: datetime) -> List[Repository]:
    count = min(rng.randint(3, 10), limit)
    repos = []
    for i in range(count):
        name = f"{username}-project-{i + 1}"
        created_at = now - timedelta(days=rng.randrange(REPO_MAX_AGE_DAYS))
        description = None
        if rng.random() > 0.2:
            description = DESCRIPTION_TEMPLATE.format(language=rng.choice(LANGUAGES))
        stars = rng.randrange(500)
        forks = rng.randrange(200)
        language = rng.choice(LANGUAGES) if rng.random() > 0.1 else None
        repos.append(Repository(
            id=i + 1,
            name=name,
            html_url=f"https://github.com/{username}/{name}",
            description=description,
            stargazers_count=stars,
            forks_count=forks,
            language=language,
            created_at=created_at,
        ))
    return repos


def generate_dataset(username: str, today: Optional[date] = None, now: Optional[datetime] = None) -> SyntheticDataset:
    """
    Fabricate a full profile/repositories/activity dataset for ``username``.

    ``now`` anchors the timestamps (defaults to the current UTC time) and
    ``today`` anchors the activity series (defaults to ``now``'s date).
    """
    seed = derive_seed(username)
    now = now or datetime.now(timezone.utc)
    today = today or now.date()
    rng = random.Random(seed)

    profile = _generate_profile(username, rng, now)
    repos = _generate_repositories(username, profile.public_repos, rng, now)
    activity = generate_activity(seed, today)
    logger.debug("Generated synthetic dataset for %s: seed=%d repos=%d", username, seed, len(repos))
    return SyntheticDataset(profile=profile, repositories=repos, activity=activity)
