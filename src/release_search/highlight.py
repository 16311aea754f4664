"""Query term highlighting for titles and descriptions."""

from __future__ import annotations

import html
import re


def _query_terms(query: str) -> list[str]:
    terms = [term for term in re.split(r"\s+", query.strip()) if term]
    return sorted(set(terms), key=len, reverse=True)


def find_term_spans(text: str, query: str) -> list[tuple[int, int]]:
    """Return merged ``(start, end)`` spans where any query term occurs.

    Matching is case-insensitive and works on the raw text, so offsets can be
    used directly for slicing.
    """
    terms = _query_terms(query)
    if not terms or not text:
        return []
    hits: list[tuple[int, int]] = []
    for term in terms:
        pattern = re.compile(re.escape(term), re.IGNORECASE)
        hits.extend(match.span() for match in pattern.finditer(text))
    spans: list[tuple[int, int]] = []
    for start, end in sorted(hits):
        if spans and start <= spans[-1][1]:
            spans[-1] = (spans[-1][0], max(spans[-1][1], end))
        else:
            spans.append((start, end))
    return spans


def highlight_terms(
    text: str,
    query: str,
    *,
    marker: tuple[str, str] = ("<mark>", "</mark>"),
    escape: bool = True,
) -> str:
    spans = find_term_spans(text, query)
    render = html.escape if escape else (lambda value: value)
    if not spans:
        return render(text)
    opening, closing = marker
    parts: list[str] = []
    cursor = 0
    for start, end in spans:
        parts.append(render(text[cursor:start]))
        parts.append(f"{opening}{render(text[start:end])}{closing}")
        cursor = end
    parts.append(render(text[cursor:]))
    return "".join(parts)
