"""Relevance scoring and ranking of releases against a free-text query."""

from __future__ import annotations

from typing import Iterable

from release_search.distance import within_distance
from release_search.models import Release, ScoredRelease
from release_search.normalization import normalize_text, tokenize
from release_search.weights import ScoringWeights, load_weights


def _best_token_weight(
    query_token: str, title_tokens: list[str], weights: ScoringWeights
) -> int:
    best = 0
    for title_token in title_tokens:
        if title_token == query_token:
            return weights.token_exact
        if title_token.startswith(query_token):
            best = max(best, weights.token_prefix)
        elif query_token in title_token:
            best = max(best, weights.token_substring)
        elif within_distance(title_token, query_token, weights.fuzzy_max_distance):
            best = max(best, weights.token_fuzzy)
    return best


def _score(
    release: Release,
    normalized_query: str,
    query_tokens: list[str],
    weights: ScoringWeights,
) -> ScoredRelease:
    score = 0
    signals: list[str] = []
    title = normalize_text(release.title)

    if title == normalized_query:
        score += weights.exact_title
        signals.append("exact_title")
    elif title.startswith(normalized_query):
        score += weights.title_prefix
        signals.append("title_prefix")
    elif normalized_query in title:
        score += weights.title_substring
        signals.append("title_substring")

    title_tokens = title.split(" ") if title else []
    token_score = 0
    token_matches = 0
    for query_token in query_tokens:
        weight = _best_token_weight(query_token, title_tokens, weights)
        if weight > 0:
            token_matches += 1
            token_score += weight
    if token_score:
        score += token_score
        signals.append(f"tokens:{token_matches}/{len(query_tokens)}")
    if query_tokens and token_matches == len(query_tokens):
        score += weights.all_tokens_bonus
        signals.append("all_tokens")

    acronym = "".join(token[0] for token in title_tokens)
    if len(acronym) > 1 and acronym == normalized_query:
        score += weights.acronym
        signals.append("acronym")

    platform = normalize_text(release.platform)
    category = normalize_text(release.category)
    if weights.split_metadata:
        if normalized_query in platform:
            score += weights.platform
            signals.append("platform")
        if category == normalized_query:
            score += weights.category
            signals.append("category")
    elif normalized_query in platform or category == normalized_query:
        score += weights.metadata
        signals.append("metadata")

    if normalized_query in normalize_text(release.description):
        score += weights.description
        signals.append("description")

    return ScoredRelease(release=release, score=score, signals=tuple(signals))


def explain_release(
    release: Release, query: str, *, weights: ScoringWeights | None = None
) -> ScoredRelease:
    """Score one release and report which signals contributed."""
    resolved = weights or load_weights()
    normalized_query = normalize_text(query)
    if not normalized_query:
        return ScoredRelease(release=release, score=0)
    return _score(release, normalized_query, tokenize(normalized_query), resolved)


def score_release(
    release: Release, query: str, *, weights: ScoringWeights | None = None
) -> int:
    return explain_release(release, query, weights=weights).score


def explain_ranking(
    releases: Iterable[Release], query: str, *, weights: ScoringWeights | None = None
) -> list[ScoredRelease]:
    """Score every release, drop non-positive scores and sort by score.

    ``sorted`` is stable, so releases with equal scores keep their input order.
    A query that normalizes to nothing scores nothing and yields every release
    with a zero score in input order.
    """
    items = list(releases)
    normalized_query = normalize_text(query)
    if not normalized_query:
        return [ScoredRelease(release=release, score=0) for release in items]
    resolved = weights or load_weights()
    query_tokens = tokenize(normalized_query)
    scored = [
        _score(release, normalized_query, query_tokens, resolved) for release in items
    ]
    kept = [item for item in scored if item.score > 0]
    return sorted(kept, key=lambda item: item.score, reverse=True)


def rank_releases(
    releases: Iterable[Release], query: str, *, weights: ScoringWeights | None = None
) -> list[Release]:
    items = list(releases)
    if not normalize_text(query):
        return items
    return [item.release for item in explain_ranking(items, query, weights=weights)]
