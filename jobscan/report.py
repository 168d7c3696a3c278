"""Render a scan outcome as a Markdown report."""
from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path
from urllib.parse import urlparse

from jobscan.config import REPORTS_DIR
from jobscan.log import get_logger
from jobscan.models import JobListing
from jobscan.scan import ScanOutcome

log = get_logger(__name__)


def _short_url_label(url: str) -> str:
    host = (urlparse(url).hostname or "").replace("www.", "")
    parts = host.split(".")
    return parts[0].capitalize() if parts and parts[0] else "Link"


def _link(job: JobListing) -> str:
    # Only absolute http(s) URLs become links
    if job.actionable:
        return f"[{_short_url_label(job.url)}]({job.url})"
    return "—"


def _insights_lines(outcome: ScanOutcome) -> list[str]:
    lines: list[str] = []
    report = outcome.insights
    if report is not None:
        lines.append("## AI Insights")
        lines.append("")
        if report.analysis:
            lines.append(f"**Analysis:** {report.analysis}")
            lines.append("")
        if report.suggestions:
            lines.append(f"**Suggestions:** {report.suggestions}")
            lines.append("")
        if report.keywords_to_add:
            lines.append(f"**Keywords to add:** {', '.join(report.keywords_to_add)}")
        if report.keywords_to_remove:
            lines.append(f"**Keywords to remove:** {', '.join(report.keywords_to_remove)}")
        lines.append("")
    elif outcome.insights_text:
        lines.append("## AI Insights")
        lines.append("")
        lines.append(outcome.insights_text)
        lines.append("")
    return lines


def build_scan_report(outcome: ScanOutcome) -> str:
    date = datetime.now(timezone.utc).strftime("%Y-%m-%d %H:%M")
    criteria = outcome.criteria
    lines: list[str] = [f"# Job Scan — {date}", ""]

    lines.append(f"- **Location:** {criteria.location or '—'}")
    lines.append(f"- **Keywords:** {', '.join(criteria.include_keywords) or '—'}")
    lines.append(f"- **Exclude:** {', '.join(criteria.exclude_keywords) or '—'}")
    lines.append(f"- **Job types:** {', '.join(t.value for t in criteria.ordered_job_types) or '—'}")
    lines.append("")

    if outcome.diagnostic:
        lines.append(f"> **Search information:** {outcome.diagnostic}")
        lines.append("")

    lines.extend(_insights_lines(outcome))

    origin = "hardcoded fallback list" if outcome.is_fallback else "live Google search"
    lines.append(f"## Found {len(outcome.jobs)} Jobs")
    lines.append("")
    lines.append(f"_Results are generated from a {origin}._")
    lines.append("")

    for job in outcome.jobs:
        lines.append(f"### {job.title} @ {job.company}")
        lines.append(f"- **Location:** {job.location} | **Type:** {job.type}")
        lines.append(f"- **Salary:** {job.salary} | **Posted:** {job.posted}")
        if job.description:
            lines.append(f"- {job.description}")
        lines.append(f"- **View job:** {_link(job)}")
        if job.company_actionable:
            lines.append(f"- **Company:** [{_short_url_label(job.company_url)}]({job.company_url})")
        lines.append("")

    log.info("Built scan report: %d jobs (%s)", len(outcome.jobs), outcome.source)
    return "\n".join(lines)


def write_scan_report(content: str) -> Path:
    REPORTS_DIR.mkdir(parents=True, exist_ok=True)
    stamp = datetime.now(timezone.utc).strftime("%Y-%m-%d_%H%M%S")
    path = REPORTS_DIR / f"scan_{stamp}.md"
    path.write_text(content, encoding="utf-8")
    log.info("Report written → %s", path)
    return path
