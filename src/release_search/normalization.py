"""Text normalization and tokenization for search matching.

Every comparison in the ranker runs over normalized text, so titles, queries
and metadata fields all go through the same steps.
"""

from __future__ import annotations

import re
import unicodedata


_COMBINING_MARKS_RE = re.compile("[\u0300-\u036f]")
_NON_ALNUM_RE = re.compile(r"[^a-z0-9]")
_WHITESPACE_RE = re.compile(r"\s+")


def normalize_text(text: str | None) -> str:
    """Normalize text for matching.

    Steps:
    - NFD decomposition, then drop combining diacritical marks.
    - Lowercase.
    - Replace anything outside ``[a-z0-9]`` with a space, so "Spider-Man"
      and "Spider Man" compare equal.
    - Collapse whitespace to single spaces and trim.
    """
    normalized = unicodedata.normalize("NFD", text or "")
    normalized = _COMBINING_MARKS_RE.sub("", normalized)
    normalized = normalized.lower()
    normalized = _NON_ALNUM_RE.sub(" ", normalized)
    normalized = _WHITESPACE_RE.sub(" ", normalized).strip()
    return normalized


def tokenize(text: str | None) -> list[str]:
    return [token for token in normalize_text(text).split(" ") if token]
