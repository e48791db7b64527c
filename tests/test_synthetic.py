"""Tests for the username-seeded generator."""

import math
from datetime import date, datetime, timedelta, timezone

import pytest

from profile_analytics.errors import ValidationError
from profile_analytics.synthetic import LANGUAGES, derive_seed, generate_activity, generate_dataset

NOW = datetime(2024, 3, 15, 12, 0, tzinfo=timezone.utc)
TODAY = NOW.date()


class TestDeriveSeed:
    def test_sum_of_code_points(self) -> None:
        assert derive_seed("octocat") == 749
        assert derive_seed("a") == 97

    def test_is_case_sensitive(self) -> None:
        assert derive_seed("Octocat") != derive_seed("octocat")

    def test_repeated_calls_agree(self) -> None:
        assert derive_seed("torvalds") == derive_seed("torvalds")

    @pytest.mark.parametrize("value", ["", "   ", "\t"])
    def test_rejects_blank(self, value: str) -> None:
        with pytest.raises(ValidationError):
            derive_seed(value)


class TestGenerateActivity:
    def test_has_31_consecutive_days_ending_today(self) -> None:
        points = generate_activity(749, TODAY)

        assert len(points) == 31
        assert points[0].date == TODAY - timedelta(days=30)
        assert points[-1].date == TODAY
        for prev, cur in zip(points, points[1:]):
            assert cur.date - prev.date == timedelta(days=1)

    def test_counts_in_range(self) -> None:
        for seed in (1, 97, 749, 5000):
            assert all(0 <= p.count <= 11 for p in generate_activity(seed, TODAY))

    def test_follows_sine_formula(self) -> None:
        point = generate_activity(749, TODAY)[-1]
        day_value = 15 + 2 * 30
        expected = math.floor((math.sin(749 * day_value * 0.1) * 0.5 + 0.5) * 12)
        assert point.count == expected

    def test_reproducible(self) -> None:
        assert generate_activity(749, TODAY) == generate_activity(749, TODAY)

    def test_spans_month_boundary(self) -> None:
        points = generate_activity(100, date(2024, 1, 10))
        assert points[0].date == date(2023, 12, 11)


class TestGenerateDataset:
    def test_profile_fields(self) -> None:
        profile = generate_dataset("octocat", now=NOW).profile

        assert profile.login == "octocat"
        assert profile.name == "Octocat"
        assert profile.avatar_url.endswith("text=O")
        assert 2 <= profile.public_repos <= 31
        assert 10 <= profile.followers <= 1009
        assert 5 <= profile.following <= 204
        assert NOW - timedelta(days=5 * 365) <= profile.created_at <= NOW

    @pytest.mark.parametrize("username", ["octocat", "a", "torvalds", "gvanrossum", "x-y-z", "Zed"])
    def test_repositories_respect_profile_cap(self, username: str) -> None:
        data = generate_dataset(username, now=NOW)

        assert len(data.repositories) <= data.profile.public_repos
        assert min(3, data.profile.public_repos) <= len(data.repositories) <= 10

    def test_repository_fields(self) -> None:
        repos = generate_dataset("octocat", now=NOW).repositories

        assert [r.id for r in repos] == list(range(1, len(repos) + 1))
        for i, repo in enumerate(repos, start=1):
            assert repo.name == f"octocat-project-{i}"
            assert repo.html_url == f"https://github.com/octocat/octocat-project-{i}"
            assert 0 <= repo.stargazers_count <= 499
            assert 0 <= repo.forks_count <= 199
            assert repo.language is None or repo.language in LANGUAGES
            assert NOW - timedelta(days=3 * 365) <= repo.created_at <= NOW
            if repo.description is not None:
                assert any(lang in repo.description for lang in LANGUAGES)

    def test_deterministic_for_fixed_inputs(self) -> None:
        assert generate_dataset("octocat", now=NOW) == generate_dataset("octocat", now=NOW)

    def test_activity_anchored_to_today(self) -> None:
        data = generate_dataset("octocat", today=date(2024, 1, 1), now=NOW)
        assert data.activity[-1].date == date(2024, 1, 1)
        assert len(data.activity) == 31

    def test_different_users_differ(self) -> None:
        assert generate_dataset("octocat", now=NOW) != generate_dataset("torvalds", now=NOW)


def test_default_activity_day_matches_dataset_default() -> None:
    assert generate_activity(749)[-1].date == generate_dataset("octocat").activity[-1].date
