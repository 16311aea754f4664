"""Shared fixtures for tests."""

from __future__ import annotations

import pytest

from release_search.models import Release


@pytest.fixture
def releases() -> list[Release]:
    return [
        Release(id="1", title="Attack on Titan", category="Anime", platform="Crunchyroll"),
        Release(id="2", title="The Attack", category="Movie", platform="Netflix"),
        Release(id="3", title="Unrelated Show", category="Series", platform="Apple TV+"),
        Release(
            id="4",
            title="My Hero Academia",
            category="Anime",
            platform="Crunchyroll",
            description="Students train to become heroes.",
        ),
        Release(
            id="5",
            title="Bleach: Thousand-Year Blood War",
            category="Anime",
            platform="Hulu, Disney+",
            timestamp=1728140400000,
            rating=9.0,
            release_date="2024-10-06",
        ),
        Release(
            id="6",
            title="Bleach",
            category="Anime",
            platform="Crunchyroll",
            timestamp=1728136800000,
            rating=8.2,
            release_date="2024-10-05",
        ),
    ]
