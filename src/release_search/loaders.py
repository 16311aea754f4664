"""Load release records from the host application's JSON feed files."""

from __future__ import annotations

import hashlib
import json
from pathlib import Path
from typing import Any

from release_search.config import MAX_FEED_BYTES
from release_search.models import LoadReport, Release

SUPPORTED_SUFFIXES = {".json", ".jsonl"}

# Feed payloads use camelCase keys.
_FIELD_ALIASES = {
    "releaseDate": "release_date",
    "imageUrl": "image_url",
    "deepLink": "deep_link",
    "subGenres": "sub_genres",
}


def _optional_str(value: Any) -> str | None:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _optional_int(value: Any) -> int | None:
    try:
        return int(value) if value is not None else None
    except (TypeError, ValueError):
        return None


def _optional_float(value: Any) -> float | None:
    try:
        return float(value) if value is not None else None
    except (TypeError, ValueError):
        return None


def _derive_id(*parts: object) -> str:
    key = "\x1f".join("" if part is None else str(part) for part in parts)
    return hashlib.sha1(key.encode("utf-8")).hexdigest()[:16]


def _sub_genres(value: Any) -> tuple[str, ...]:
    if not value:
        return ()
    if isinstance(value, str):
        return (value,)
    if not isinstance(value, (list, tuple)):
        raise ValueError("invalid_sub_genres")
    return tuple(str(genre) for genre in value)


def release_from_dict(payload: dict[str, Any]) -> Release:
    data = {_FIELD_ALIASES.get(key, key): value for key, value in payload.items()}
    title = _optional_str(data.get("title"))
    category = _optional_str(data.get("category"))
    if title is None:
        raise ValueError("missing_title")
    if category is None:
        raise ValueError("missing_category")
    release_date = _optional_str(data.get("release_date"))
    episode = _optional_str(data.get("episode"))
    air_time = _optional_str(data.get("time"))
    timestamp = _optional_int(data.get("timestamp"))
    sub_genres = _sub_genres(data.get("sub_genres"))
    release_id = _optional_str(data.get("id")) or _derive_id(
        title, category, release_date, episode, air_time, timestamp
    )
    return Release(
        id=release_id,
        title=title,
        category=category,
        description=_optional_str(data.get("description")),
        platform=_optional_str(data.get("platform")),
        episode=episode,
        time=air_time,
        timestamp=timestamp,
        release_date=release_date,
        image_url=_optional_str(data.get("image_url")),
        link=_optional_str(data.get("link")),
        deep_link=_optional_str(data.get("deep_link")),
        rating=_optional_float(data.get("rating")),
        sub_genres=sub_genres,
    )


def _read_payloads(path: Path) -> list[Any]:
    text = path.read_text(encoding="utf-8")
    if path.suffix.lower() == ".jsonl":
        return [json.loads(line) for line in text.splitlines() if line.strip()]
    payload = json.loads(text)
    if isinstance(payload, dict):
        if "items" not in payload:
            raise ValueError(f"Feed object has no 'items' list: {path}")
        payload = payload["items"]
    if not isinstance(payload, list):
        raise ValueError(f"Feed must hold a list of records: {path}")
    return payload


def load_releases(
    path: Path, *, max_feed_bytes: int = MAX_FEED_BYTES
) -> tuple[list[Release], LoadReport]:
    suffix = path.suffix.lower()
    if suffix not in SUPPORTED_SUFFIXES:
        raise ValueError(f"Unsupported feed type: {path.suffix}")
    bytes_total = path.stat().st_size
    if bytes_total > max_feed_bytes:
        raise ValueError(
            f"Feed too large: {bytes_total} bytes exceeds {max_feed_bytes}"
        )

    payloads = _read_payloads(path)
    releases: list[Release] = []
    skip_reasons: dict[str, int] = {}
    for payload in payloads:
        if not isinstance(payload, dict):
            skip_reasons["not_an_object"] = skip_reasons.get("not_an_object", 0) + 1
            continue
        try:
            releases.append(release_from_dict(payload))
        except ValueError as exc:
            reason = str(exc)
            skip_reasons[reason] = skip_reasons.get(reason, 0) + 1
    report = LoadReport(
        source_path=str(path),
        records_total=len(payloads),
        records_loaded=len(releases),
        records_skipped=len(payloads) - len(releases),
        skip_reasons=skip_reasons,
    )
    return releases, report
