"""Human-readable summary for golden eval reports."""

from __future__ import annotations

import argparse
import json
from pathlib import Path


def _format_value(value: float | int | None) -> str:
    if isinstance(value, (int, float)):
        return f"{value:.3f}"
    return "n/a"


def _format_delta(value: float | int | None) -> str:
    if isinstance(value, (int, float)):
        return f"{value:+.3f}"
    return "n/a"


def render_summary(report: dict) -> str:
    lines: list[str] = []
    lines.append("Evaluation summary")
    lines.append(
        f"cases: {report.get('cases', 'n/a')} | top_k_default: {report.get('top_k_default', 'n/a')}"
    )
    feed = report.get("feed")
    if isinstance(feed, dict):
        lines.append(
            "feed: {path} | loaded: {loaded} | skipped: {skipped}".format(
                path=feed.get("source_path", "n/a"),
                loaded=feed.get("records_loaded", "n/a"),
                skipped=feed.get("records_skipped", "n/a"),
            )
        )
    lines.append(f"commit: {report.get('git_commit') or 'n/a'}")
    lines.append("")
    header = (
        f"{'preset':<10} {'recall':>7} {'mrr':>7} {'ndcg':>7}"
        f" {'Δrecall':>8} {'Δmrr':>7} {'Δndcg':>7}"
    )
    lines.append(header)
    metrics_by_preset = report.get("metrics@k", {})
    deltas_by_preset = report.get("metrics_delta", {})
    if not isinstance(metrics_by_preset, dict):
        metrics_by_preset = {}
    if not isinstance(deltas_by_preset, dict):
        deltas_by_preset = {}
    for preset in sorted(metrics_by_preset):
        metrics = metrics_by_preset.get(preset) or {}
        deltas = deltas_by_preset.get(preset) or {}
        line = (
            f"{preset:<10}"
            f" {_format_value(metrics.get('recall')):>7}"
            f" {_format_value(metrics.get('mrr')):>7}"
            f" {_format_value(metrics.get('ndcg')):>7}"
            f" {_format_delta(deltas.get('recall')):>8}"
            f" {_format_delta(deltas.get('mrr')):>7}"
            f" {_format_delta(deltas.get('ndcg')):>7}"
        )
        lines.append(line)
    return "\n".join(lines)


def _load_report(path: Path) -> dict:
    return json.loads(path.read_text())


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Summarize eval report JSON")
    parser.add_argument(
        "--report-path",
        type=Path,
        default=Path("eval/reports/latest.json"),
        help="Path to eval report JSON",
    )
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    report = _load_report(args.report_path)
    print(render_summary(report))


if __name__ == "__main__":
    main()
