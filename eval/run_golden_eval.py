"""Run golden ranking evaluation for each scoring weight preset."""

from __future__ import annotations

import argparse
import json
import math
import subprocess
from datetime import datetime, timezone
from pathlib import Path

from release_search.loaders import load_releases
from release_search.models import Category, Release
from release_search.search import search
from release_search.weights import PRESETS


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run golden ranking evaluation")
    parser.add_argument(
        "--cases",
        type=Path,
        default=Path("eval/golden_search.jsonl"),
        help="Path to golden search cases (jsonl)",
    )
    parser.add_argument(
        "--feed",
        type=Path,
        default=Path("eval/fixtures/releases.json"),
        help="Release feed the cases are evaluated against",
    )
    parser.add_argument(
        "--top-k",
        type=int,
        default=3,
        help="Top-k cutoff for recall",
    )
    parser.add_argument(
        "--report-path",
        type=Path,
        default=Path("eval/reports/latest.json"),
        help="Path to write eval report artifact",
    )
    parser.add_argument(
        "--history-dir",
        type=Path,
        default=Path("eval/reports/history"),
        help="Directory for timestamped report history",
    )
    return parser.parse_args(argv)


def _load_previous_report(path: Path) -> dict | None:
    if not path.exists():
        return None
    try:
        return json.loads(path.read_text())
    except json.JSONDecodeError:
        return None


def _compute_deltas(current: dict, previous: dict | None) -> dict | None:
    if not previous:
        return None
    current_metrics = current.get("metrics@k")
    previous_metrics = previous.get("metrics@k")
    if not isinstance(current_metrics, dict) or not isinstance(previous_metrics, dict):
        return None
    deltas: dict[str, dict[str, float]] = {}
    for mode, metrics in current_metrics.items():
        if not isinstance(metrics, dict):
            continue
        prev = previous_metrics.get(mode, {})
        deltas[mode] = {}
        for metric, value in metrics.items():
            if not isinstance(value, (int, float)):
                continue
            prev_value = prev.get(metric) if isinstance(prev, dict) else None
            if isinstance(prev_value, (int, float)):
                deltas[mode][metric] = value - prev_value
    return deltas


def load_cases(path: Path) -> list[dict]:
    cases: list[dict] = []
    for line in path.read_text().splitlines():
        if not line.strip():
            continue
        cases.append(json.loads(line))
    return cases


def recall_at_k(releases: list[Release], expected_ids: list[str]) -> float:
    if not expected_ids:
        return 0.0
    return float(any(release.id in expected_ids for release in releases))


def mrr_at_k(releases: list[Release], expected_ids: list[str]) -> float:
    if not expected_ids:
        return 0.0
    for rank, release in enumerate(releases, start=1):
        if release.id in expected_ids:
            return 1.0 / rank
    return 0.0


def ndcg_at_k(releases: list[Release], expected_ids: list[str]) -> float:
    if not expected_ids:
        return 0.0
    for rank, release in enumerate(releases, start=1):
        if release.id in expected_ids:
            return 1.0 / math.log2(rank + 1)
    return 0.0


def _get_git_commit() -> str | None:
    try:
        result = subprocess.run(
            ["git", "rev-parse", "HEAD"],
            check=True,
            capture_output=True,
            text=True,
        )
    except (subprocess.CalledProcessError, FileNotFoundError):
        return None
    return result.stdout.strip() or None


def evaluate(
    releases: list[Release], cases: list[dict], top_k: int
) -> tuple[dict[str, dict[str, float]], list[dict[str, object]]]:
    totals = {
        preset: {"recall": 0.0, "mrr": 0.0, "ndcg": 0.0} for preset in PRESETS
    }
    per_case: list[dict[str, object]] = []
    for case in cases:
        query = case["query"]
        category = case.get("category", Category.ALL.value)
        expected = case.get("expected_ids", [])
        case_top_k = int(case.get("top_k", top_k))
        case_metrics: dict[str, dict[str, object]] = {}
        for preset, weights in PRESETS.items():
            ranked = search(releases, category, query, limit=case_top_k, weights=weights)
            metrics = {
                "recall": recall_at_k(ranked, expected),
                "mrr": mrr_at_k(ranked, expected),
                "ndcg": ndcg_at_k(ranked, expected),
            }
            for metric, value in metrics.items():
                totals[preset][metric] += value
            case_metrics[preset] = {**metrics, "ranked_ids": [r.id for r in ranked]}
        per_case.append(
            {
                "query": query,
                "category": category,
                "top_k": case_top_k,
                "metrics": case_metrics,
            }
        )
    count = max(len(cases), 1)
    summary = {
        preset: {metric: value / count for metric, value in metrics.items()}
        for preset, metrics in totals.items()
    }
    return summary, per_case


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    cases = load_cases(args.cases)
    releases, load_report = load_releases(args.feed)
    summary, per_case = evaluate(releases, cases, args.top_k)
    report = {
        "cases": len(cases),
        "metrics@k": summary,
        "cases_detail": per_case,
        "feed": load_report.to_dict(),
        "presets": {name: weights.to_dict() for name, weights in PRESETS.items()},
        "top_k_default": args.top_k,
        "git_commit": _get_git_commit(),
    }
    previous = _load_previous_report(args.report_path)
    deltas = _compute_deltas(report, previous)
    if deltas:
        report["metrics_delta"] = deltas

    args.report_path.parent.mkdir(parents=True, exist_ok=True)
    args.report_path.write_text(json.dumps(report, indent=2))

    timestamp = datetime.now(timezone.utc).strftime("%Y%m%dT%H%M%SZ")
    args.history_dir.mkdir(parents=True, exist_ok=True)
    history_path = args.history_dir / f"report_{timestamp}.json"
    history_path.write_text(json.dumps(report, indent=2))

    print(json.dumps(report, indent=2))


if __name__ == "__main__":
    main()
