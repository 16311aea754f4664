import json
from pathlib import Path

import pytest

from release_search.loaders import load_releases, release_from_dict


def test_load_feed_envelope_with_camel_case(tmp_path: Path) -> None:
    path = tmp_path / "feed.json"
    path.write_text(
        json.dumps(
            {
                "items": [
                    {
                        "id": "a1",
                        "title": "Frieren",
                        "category": "Anime",
                        "releaseDate": "2024-10-05",
                        "deepLink": "https://example.com/watch",
                        "subGenres": ["Fantasy"],
                        "rating": "9.3",
                    }
                ],
                "groundingLinks": [],
            }
        )
    )
    releases, report = load_releases(path)
    assert report.records_loaded == 1
    assert report.skip_reasons == {}
    release = releases[0]
    assert release.release_date == "2024-10-05"
    assert release.deep_link == "https://example.com/watch"
    assert release.sub_genres == ("Fantasy",)
    assert release.rating == 9.3


def test_load_jsonl_skips_malformed_records(tmp_path: Path) -> None:
    path = tmp_path / "feed.jsonl"
    lines = [
        {"id": "1", "title": "Dune", "category": "Movie"},
        {"id": "2", "title": "  ", "category": "Movie"},
        {"id": "3", "title": "Shogun"},
        ["not", "a", "record"],
    ]
    path.write_text("\n".join(json.dumps(line) for line in lines) + "\n\n")
    releases, report = load_releases(path)
    assert [release.id for release in releases] == ["1"]
    assert report.records_total == 4
    assert report.records_skipped == 3
    assert report.skip_reasons == {
        "missing_title": 1,
        "missing_category": 1,
        "not_an_object": 1,
    }


def test_missing_id_is_derived_and_stable() -> None:
    payload = {"title": "Dune", "category": "Movie", "releaseDate": "2024-03-01"}
    first = release_from_dict(payload)
    second = release_from_dict(dict(payload))
    assert first.id
    assert first.id == second.id


def test_rejects_unsupported_suffix(tmp_path: Path) -> None:
    path = tmp_path / "feed.csv"
    path.write_text("title,category\n")
    with pytest.raises(ValueError, match="Unsupported"):
        load_releases(path)


def test_rejects_oversized_feed(tmp_path: Path) -> None:
    path = tmp_path / "feed.json"
    path.write_text(json.dumps([{"title": "Dune", "category": "Movie"}]))
    with pytest.raises(ValueError, match="too large"):
        load_releases(path, max_feed_bytes=10)


def test_fixture_feed_loads() -> None:
    path = Path(__file__).resolve().parents[1] / "eval" / "fixtures" / "releases.json"
    releases, report = load_releases(path)
    assert report.records_skipped == 0
    assert len(releases) == report.records_total


def test_invalid_sub_genres_skip_only_that_record(tmp_path: Path) -> None:
    path = tmp_path / "feed.json"
    path.write_text(
        json.dumps(
            [
                {"id": "1", "title": "Dune", "category": "Movie", "subGenres": "Sci-Fi"},
                {"id": "2", "title": "Shogun", "category": "Series", "subGenres": 5},
            ]
        )
    )
    releases, report = load_releases(path)
    assert [release.id for release in releases] == ["1"]
    assert releases[0].sub_genres == ("Sci-Fi",)
    assert report.skip_reasons == {"invalid_sub_genres": 1}


def test_derived_ids_differ_per_episode() -> None:
    base = {"title": "One Piece", "category": "Anime", "releaseDate": "2024-10-06"}
    first = release_from_dict({**base, "episode": "Ep 1120"})
    second = release_from_dict({**base, "episode": "Ep 1121"})
    assert first.id != second.id


def test_derived_ids_differ_per_airing_time() -> None:
    base = {"title": "One Piece", "category": "Anime", "releaseDate": "2024-10-06"}
    early = release_from_dict({**base, "timestamp": 1728180000000})
    late = release_from_dict({**base, "timestamp": 1728190000000})
    assert early.id != late.id


def test_json_object_without_items_is_rejected(tmp_path: Path) -> None:
    path = tmp_path / "feed.json"
    path.write_text(json.dumps({"title": "Dune", "category": "Movie"}))
    with pytest.raises(ValueError, match="items"):
        load_releases(path)
