"""Scoring weight tables for the release ranker.

Every numeric weight the ranker uses lives here. Two presets are provided:
``canonical`` (tiered phrase bonuses with a single combined metadata bonus)
and ``legacy`` (smaller phrase bonuses, separate platform and category
bonuses). A JSON file can override individual weights on top of a preset.
"""

from __future__ import annotations

import json
from dataclasses import asdict, dataclass, fields, replace
from functools import lru_cache
from pathlib import Path
from typing import Any

from release_search.config import SCORING_WEIGHTS_PATH


@dataclass(frozen=True)
class ScoringWeights:
    exact_title: int = 100
    title_prefix: int = 80
    title_substring: int = 60
    token_exact: int = 10
    token_prefix: int = 5
    token_substring: int = 2
    token_fuzzy: int = 4
    fuzzy_max_distance: int = 2
    all_tokens_bonus: int = 40
    acronym: int = 30
    metadata: int = 20
    platform: int = 15
    category: int = 30
    description: int = 5
    split_metadata: bool = False

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


CANONICAL_WEIGHTS = ScoringWeights()
LEGACY_WEIGHTS = ScoringWeights(
    title_prefix=50,
    title_substring=30,
    split_metadata=True,
)

PRESETS: dict[str, ScoringWeights] = {
    "canonical": CANONICAL_WEIGHTS,
    "legacy": LEGACY_WEIGHTS,
}

_FIELD_NAMES = {item.name for item in fields(ScoringWeights)}


def weights_from_dict(payload: dict[str, Any]) -> ScoringWeights:
    """Build a weight table from a preset name plus per-weight overrides."""
    overrides = dict(payload)
    preset_name = str(overrides.pop("preset", "canonical"))
    if preset_name not in PRESETS:
        raise ValueError(f"Unknown scoring preset: {preset_name}")
    unknown = sorted(set(overrides) - _FIELD_NAMES)
    if unknown:
        raise ValueError(f"Unknown scoring weights: {', '.join(unknown)}")
    coerced: dict[str, Any] = {}
    for key, value in overrides.items():
        if key == "split_metadata":
            if not isinstance(value, bool):
                raise ValueError(f"split_metadata must be true or false, got {value!r}")
            coerced[key] = value
        else:
            coerced[key] = int(value)
    return replace(PRESETS[preset_name], **coerced)


@lru_cache(maxsize=8)
def _load_weights_file(path: Path) -> ScoringWeights:
    payload = json.loads(path.read_text())
    if not isinstance(payload, dict):
        raise ValueError(f"Scoring weights file must hold a JSON object: {path}")
    return weights_from_dict(payload)


def load_weights(path: Path | None = None) -> ScoringWeights:
    resolved = path or SCORING_WEIGHTS_PATH
    if resolved is None:
        return CANONICAL_WEIGHTS
    return _load_weights_file(Path(resolved).expanduser())
