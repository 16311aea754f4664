"""Public query API: category pre-filter, ranking and secondary ordering."""

from __future__ import annotations

import time
from typing import Any, Callable, Iterable

from release_search.config import LOG_SEARCHES
from release_search.models import Category, Release, SearchResult
from release_search.normalization import normalize_text
from release_search.ranking import rank_releases
from release_search.telemetry import configure_logging, log_event
from release_search.weights import ScoringWeights

SortKey = Callable[[Release], Any]


def _by_timestamp(release: Release) -> tuple[bool, int]:
    return (release.timestamp is None, release.timestamp or 0)


def _by_release_date(release: Release) -> tuple[bool, str]:
    return (not release.release_date, release.release_date or "")


def _by_rating(release: Release) -> tuple[bool, float]:
    return (release.rating is None, -(release.rating or 0.0))


def _by_title(release: Release) -> str:
    return normalize_text(release.title)


SORT_KEYS: dict[str, SortKey] = {
    "timestamp": _by_timestamp,
    "release_date": _by_release_date,
    "rating": _by_rating,
    "title": _by_title,
}


def resolve_sort_key(name: str | None) -> SortKey | None:
    if name is None:
        return None
    try:
        return SORT_KEYS[name]
    except KeyError:
        raise ValueError(
            f"Unknown sort key: {name} (expected one of {', '.join(SORT_KEYS)})"
        ) from None


def filter_by_category(
    releases: Iterable[Release], category: str | Category = Category.ALL
) -> list[Release]:
    wanted = category.value if isinstance(category, Category) else category
    if wanted == Category.ALL.value:
        return list(releases)
    return [release for release in releases if release.category == wanted]


def search(
    releases: Iterable[Release],
    category: str | Category = Category.ALL,
    query: str = "",
    *,
    sort_key: SortKey | None = None,
    limit: int | None = None,
    weights: ScoringWeights | None = None,
) -> list[Release]:
    """Filter ``releases`` to ``category`` and rank them against ``query``.

    The category filter always runs first. A blank query skips ranking and
    keeps input order, or applies ``sort_key`` when one is given. The returned
    list holds the same Release objects that were passed in.
    """
    if limit is not None and limit < 0:
        raise ValueError("limit must be non-negative")
    candidates = filter_by_category(releases, category)
    if normalize_text(query):
        results = rank_releases(candidates, query, weights=weights)
    elif sort_key is not None:
        results = sorted(candidates, key=sort_key)
    else:
        results = candidates
    if limit is not None:
        results = results[:limit]
    return results


def run_search(
    releases: Iterable[Release],
    category: str | Category = Category.ALL,
    query: str = "",
    *,
    sort_key: SortKey | None = None,
    limit: int | None = None,
    weights: ScoringWeights | None = None,
) -> SearchResult:
    start = time.perf_counter()
    items = list(releases)
    results = search(
        items,
        category,
        query,
        sort_key=sort_key,
        limit=limit,
        weights=weights,
    )
    latency_ms = (time.perf_counter() - start) * 1000
    category_label = category.value if isinstance(category, Category) else category
    if LOG_SEARCHES:
        log_event(
            configure_logging(),
            "search",
            query=query,
            category=category_label,
            candidates=len(items),
            results=len(results),
            latency_ms=latency_ms,
        )
    return SearchResult(
        query=query,
        category=category_label,
        releases=results,
        latency_ms=latency_ms,
    )
