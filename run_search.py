#!/usr/bin/env python3
"""Entry point to run a single job scan from the command line."""
from __future__ import annotations

import argparse
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent))

from jobscan.config import load_criteria
from jobscan.log import get_logger
from jobscan.models import JobType, SearchCriteria

log = get_logger(__name__)


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Scan for job listings with an LLM web search.")
    p.add_argument("--location", help="e.g. 'Vienna, Mödling'")
    p.add_argument("--include", help="comma-separated keywords to include")
    p.add_argument("--exclude", help="comma-separated keywords to exclude")
    p.add_argument(
        "--types",
        help="comma-separated job types: " + ", ".join(t.value for t in JobType),
    )
    p.add_argument("--force-fallback", action="store_true", help="skip the API and show fallback data")
    p.add_argument("--no-report", action="store_true", help="do not write the report under reports/")
    return p.parse_args(argv)


def _criteria_from_args(args: argparse.Namespace) -> SearchCriteria:
    saved = load_criteria()
    return SearchCriteria.build(
        location=args.location if args.location is not None else saved.location,
        include_keywords=args.include if args.include is not None else saved.include_keywords,
        exclude_keywords=args.exclude if args.exclude is not None else saved.exclude_keywords,
        job_types=args.types.split(",") if args.types else list(saved.job_types),
    )


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)
    try:
        criteria = _criteria_from_args(args)
    except ValueError as exc:
        log.error("Invalid search criteria: %s", exc)
        return 2

    from jobscan.report import build_scan_report, write_scan_report
    from jobscan.session import ScanSession

    outcome = ScanSession().search(criteria, force_fallback=args.force_fallback)
    content = build_scan_report(outcome)
    print(content)

    if not args.no_report:
        path = write_scan_report(content)
        log.info("  Report: %s", path)
    log.info("  Jobs: %d (%s)", len(outcome.jobs), outcome.source)
    return 0


if __name__ == "__main__":
    sys.exit(main())
