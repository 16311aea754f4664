import logging

import pytest

from release_search.models import Category
from release_search.search import (
    SORT_KEYS,
    filter_by_category,
    resolve_sort_key,
    run_search,
    search,
)


def test_filter_by_category_all_keeps_everything(releases) -> None:
    assert filter_by_category(releases, "All") == releases
    assert filter_by_category(releases, Category.ALL) == releases


def test_filter_by_category_is_exact(releases) -> None:
    anime = filter_by_category(releases, Category.ANIME)
    assert {release.id for release in anime} == {"1", "4", "5", "6"}
    assert filter_by_category(releases, "anime") == []


def test_search_blank_query_keeps_input_order(releases) -> None:
    assert search(releases, "All", "") == releases


def test_search_applies_category_before_ranking(releases) -> None:
    results = search(releases, Category.MOVIE, "attack titan")
    assert [release.title for release in results] == ["The Attack"]


def test_search_end_to_end(releases) -> None:
    results = search(releases[:3], "All", "attack titan")
    assert [release.id for release in results] == ["1", "2"]


def test_search_secondary_sort_only_for_blank_query(releases) -> None:
    sort_key = SORT_KEYS["timestamp"]
    blank = search(releases, Category.ANIME, "", sort_key=sort_key)
    assert [release.id for release in blank] == ["6", "5", "1", "4"]
    ranked = search(releases, Category.ANIME, "bleach", sort_key=sort_key)
    assert [release.id for release in ranked] == ["6", "5"]


def test_rating_sort_puts_missing_last(releases) -> None:
    ordered = search(releases, "All", "", sort_key=SORT_KEYS["rating"])
    assert [release.id for release in ordered[:2]] == ["5", "6"]


def test_search_limit(releases) -> None:
    assert len(search(releases, "All", "", limit=2)) == 2
    with pytest.raises(ValueError):
        search(releases, "All", "", limit=-1)


def test_resolve_sort_key() -> None:
    assert resolve_sort_key(None) is None
    assert resolve_sort_key("title") is SORT_KEYS["title"]
    with pytest.raises(ValueError, match="Unknown sort key"):
        resolve_sort_key("popularity")


def test_run_search_wraps_result_and_logs(releases, caplog) -> None:
    with caplog.at_level(logging.INFO, logger="release_search"):
        result = run_search(releases, Category.ANIME, "MHA")
    assert result.category == "Anime"
    assert result.query == "MHA"
    assert [release.title for release in result.releases] == ["My Hero Academia"]
    assert result.latency_ms >= 0
    events = [record for record in caplog.records if getattr(record, "event", None) == "search"]
    assert events
    assert events[-1].results == 1
