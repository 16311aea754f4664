"""Shared data models for release search."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Category(str, Enum):
    ALL = "All"
    ANIME = "Anime"
    DRAMA = "Drama"
    MOVIE = "Movie"
    SERIES = "Series"
    DOCUMENTARY = "Documentary"


@dataclass(frozen=True)
class Release:
    id: str
    title: str
    category: str
    description: str | None = None
    platform: str | None = None
    episode: str | None = None
    time: str | None = None
    timestamp: int | None = None
    release_date: str | None = None
    image_url: str | None = None
    link: str | None = None
    deep_link: str | None = None
    rating: float | None = None
    sub_genres: tuple[str, ...] = ()


@dataclass(frozen=True)
class ScoredRelease:
    release: Release
    score: int
    signals: tuple[str, ...] = ()


@dataclass
class SearchResult:
    query: str
    category: str
    releases: list[Release]
    latency_ms: float


@dataclass(frozen=True)
class LoadReport:
    source_path: str
    records_total: int
    records_loaded: int
    records_skipped: int
    skip_reasons: dict[str, int]

    def to_dict(self) -> dict[str, object]:
        return {
            "source_path": self.source_path,
            "records_total": self.records_total,
            "records_loaded": self.records_loaded,
            "records_skipped": self.records_skipped,
            "skip_reasons": self.skip_reasons,
        }
