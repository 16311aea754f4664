"""Fuzzy multi-field search and ranking for release feeds."""

from .models import Category, LoadReport, Release, ScoredRelease, SearchResult
from .normalization import normalize_text, tokenize
from .distance import levenshtein
from .ranking import explain_ranking, rank_releases, score_release
from .search import filter_by_category, run_search, search

__all__ = [
    "Category",
    "LoadReport",
    "Release",
    "ScoredRelease",
    "SearchResult",
    "explain_ranking",
    "filter_by_category",
    "levenshtein",
    "normalize_text",
    "rank_releases",
    "run_search",
    "score_release",
    "search",
    "tokenize",
]
