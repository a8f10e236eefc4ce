"""Command-line interface for depgraph."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

from depgraph.algorithms.toposort import SortAlg
from depgraph.config import AnalysisConfig
from depgraph.logging import get_logger, set_global_log_level
from depgraph.pipeline import analyze_file
from depgraph.report import format_report, report_to_dict

logger = get_logger(__name__)


def _results_path(output_dir: Path, dataset: Path) -> Path:
    """Return ``<output_dir>/<dataset stem>.results.json``."""
    return output_dir / f"{dataset.stem}.results.json"


def _run_analyze(
    paths: List[Path],
    sort_alg: SortAlg,
    as_json: bool,
    output_dir: Optional[Path],
    critical_path: bool,
) -> int:
    """Analyze each dataset in order; return the number of failed datasets."""
    config = AnalysisConfig(sort_alg=sort_alg, critical_path=critical_path)
    collected: Dict[str, Any] = {}
    failures = 0

    for path in paths:
        try:
            report = analyze_file(path, config)
        except (OSError, ValueError) as exc:
            logger.error(f"Unable to process {path}: {exc}")
            failures += 1
            continue

        data = report_to_dict(report)
        if output_dir is not None:
            out_file = _results_path(output_dir, path)
            out_file.parent.mkdir(parents=True, exist_ok=True)
            out_file.write_text(json.dumps(data, indent=2), encoding="utf-8")
            logger.info(f"Results written to {out_file}")

        if as_json:
            collected[str(path)] = data
        else:
            print(format_report(report))
            print()

    if as_json:
        print(json.dumps(collected, indent=2))
    return failures


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the ``depgraph`` command.

    Args:
        argv: Optional list of command-line arguments. If ``None``, ``sys.argv``
            is used.
    """
    parser = argparse.ArgumentParser(
        prog="depgraph",
        description="Analyze dependency graphs: cycles, execution order and critical paths.",
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )
    parser.add_argument(
        "--quiet", action="store_true", help="Only log warnings and errors"
    )

    subparsers = parser.add_subparsers(
        dest="command",
        required=True,
        title="Available commands",
        metavar="{analyze}",
        help="Available commands",
    )

    analyze_parser = subparsers.add_parser(
        "analyze", help="Analyze one or more graph documents"
    )
    analyze_parser.add_argument(
        "graphs", type=Path, nargs="+", help="Graph documents (.json, .yaml, .yml)"
    )
    analyze_parser.add_argument(
        "--sort",
        choices=[alg.name.lower() for alg in SortAlg],
        default=SortAlg.KAHN.name.lower(),
        help="Topological sort strategy for the condensation (default: kahn)",
    )
    analyze_parser.add_argument(
        "--json",
        action="store_true",
        help="Print results as JSON instead of text",
    )
    analyze_parser.add_argument(
        "--output",
        "-o",
        type=Path,
        default=None,
        help="Directory for '<dataset>.results.json' files",
    )
    analyze_parser.add_argument(
        "--no-critical-path",
        action="store_true",
        help="Skip the all-pairs critical path computation",
    )

    effective_args = sys.argv[1:] if argv is None else argv
    if not effective_args:
        parser.print_help()
        raise SystemExit(0)

    args = parser.parse_args(effective_args)

    if args.verbose:
        set_global_log_level(logging.DEBUG)
        logger.debug("Debug logging enabled")
    elif args.quiet:
        set_global_log_level(logging.WARNING)
    else:
        set_global_log_level(logging.INFO)

    if args.command == "analyze":
        failures = _run_analyze(
            paths=args.graphs,
            sort_alg=SortAlg[args.sort.upper()],
            as_json=args.json,
            output_dir=args.output,
            critical_path=not args.no_critical_path,
        )
        if failures:
            logger.error(f"{failures} of {len(args.graphs)} datasets failed")
            raise SystemExit(1)


if __name__ == "__main__":
    main()
