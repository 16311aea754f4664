"""Script to search a release feed file."""

from __future__ import annotations

import argparse
import json
from pathlib import Path
import sys

try:
    from release_search.config import DEFAULT_LIMIT
    from release_search.highlight import highlight_terms
    from release_search.loaders import load_releases
    from release_search.models import Category
    from release_search.ranking import explain_ranking
    from release_search.search import SORT_KEYS, filter_by_category, resolve_sort_key, search
    from release_search.telemetry import configure_logging, timed_event
    from release_search.weights import PRESETS, load_weights
except ModuleNotFoundError:
    repo_root = Path(__file__).resolve().parents[1]
    sys.path.insert(0, str(repo_root / "src"))
    from release_search.config import DEFAULT_LIMIT  # type: ignore[reportMissingImports]
    from release_search.highlight import highlight_terms  # type: ignore[reportMissingImports]
    from release_search.loaders import load_releases  # type: ignore[reportMissingImports]
    from release_search.models import Category  # type: ignore[reportMissingImports]
    from release_search.ranking import explain_ranking  # type: ignore[reportMissingImports]
    from release_search.search import (  # type: ignore[reportMissingImports]
        SORT_KEYS,
        filter_by_category,
        resolve_sort_key,
        search,
    )
    from release_search.telemetry import (  # type: ignore[reportMissingImports]
        configure_logging,
        timed_event,
    )
    from release_search.weights import PRESETS, load_weights  # type: ignore[reportMissingImports]


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Search a release feed")
    parser.add_argument("feed", type=Path, help="Path to a .json or .jsonl feed")
    parser.add_argument("query", type=str, nargs="?", default="", help="Query string")
    parser.add_argument(
        "--category",
        type=str,
        default=Category.ALL.value,
        choices=[category.value for category in Category],
        help="Category pre-filter",
    )
    parser.add_argument(
        "--limit",
        type=int,
        default=DEFAULT_LIMIT or None,
        help="Maximum number of results (default: unbounded)",
    )
    parser.add_argument(
        "--sort",
        type=str,
        default=None,
        choices=sorted(SORT_KEYS),
        help="Secondary order used when the query is blank",
    )
    parser.add_argument(
        "--weights", type=Path, default=None, help="JSON scoring weight overrides"
    )
    parser.add_argument(
        "--preset",
        type=str,
        default=None,
        choices=sorted(PRESETS),
        help="Named scoring weight table (ignored when --weights is set)",
    )
    parser.add_argument(
        "--explain", action="store_true", help="Show score and matched signals"
    )
    parser.add_argument("--json", action="store_true", help="Emit results as JSON")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    logger = configure_logging()

    with timed_event(
        logger,
        "query",
        query=args.query,
        category=args.category,
        feed=str(args.feed),
    ) as event:
        releases, report = load_releases(args.feed)
        if args.weights is not None:
            weights = load_weights(args.weights)
        elif args.preset is not None:
            weights = PRESETS[args.preset]
        else:
            weights = load_weights()

        results = search(
            releases,
            args.category,
            args.query,
            sort_key=resolve_sort_key(args.sort),
            limit=args.limit,
            weights=weights,
        )
        scores: dict[str, tuple[int, tuple[str, ...]]] = {}
        if args.explain and args.query.strip():
            candidates = filter_by_category(releases, args.category)
            for item in explain_ranking(candidates, args.query, weights=weights):
                scores[item.release.id] = (item.score, item.signals)
        event["load_report"] = report.to_dict()
        event["results"] = len(results)

    if args.json:
        payload = []
        for release in results:
            row = {
                "id": release.id,
                "title": release.title,
                "category": release.category,
                "platform": release.platform,
                "release_date": release.release_date,
            }
            if release.id in scores:
                row["score"], row["signals"] = scores[release.id]
            payload.append(row)
        print(json.dumps(payload, indent=2))
        return

    if not results:
        if args.query.strip():
            print(f'No matches for "{args.query}".')
        else:
            print("No releases matched the current filters.")
        return
    for idx, release in enumerate(results, start=1):
        title = highlight_terms(
            release.title, args.query, marker=("[", "]"), escape=False
        )
        line = f"#{idx} {title} ({release.category})"
        if release.platform:
            line += f" on {release.platform}"
        if release.id in scores:
            score, signals = scores[release.id]
            line += f" score={score} [{', '.join(signals)}]"
        print(line)


if __name__ == "__main__":
    main()
