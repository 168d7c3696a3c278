"""
Job scan orchestration.

Runs: job search pipeline → (fallback on failure) → insights for live results.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable

from jobscan.config import PipelineConfig
from jobscan.errors import ErrorKind
from jobscan.fallback import FALLBACK_INSIGHT, fallback_jobs
from jobscan.log import get_logger, redact
from jobscan.models import InsightReport, JobListing, SearchCriteria
from jobscan.pipeline import RequestPipeline
from jobscan.result import PipelineResult

log = get_logger(__name__)

LIVE = "live"
FALLBACK = "fallback"

FORCED_FALLBACK_MESSAGE = "Displaying hardcoded fallback data as requested by the testing setting."
NO_RESULTS_MESSAGE = (
    "No Results Found. The AI could not find any job listings matching your criteria. "
    "Try broadening your search terms."
)

ProgressFn = Callable[[str], None]


@dataclass
class ScanOutcome:
    token: int
    criteria: SearchCriteria
    jobs: list[JobListing]
    source: str
    diagnostic: str = ""
    error_kind: ErrorKind | None = None
    error_message: str = ""
    insights: InsightReport | None = None
    insights_text: str = ""
    forced: bool = False
    progress: list[str] = field(default_factory=list)

    @property
    def is_fallback(self) -> bool:
        return self.source == FALLBACK

    @property
    def result(self) -> PipelineResult:
        """Tagged view of the job stage, as seen before the fallback substitution."""
        if self.error_kind is None:
            return PipelineResult.success(self.jobs)
        return PipelineResult(ok=False, kind=self.error_kind, message=self.error_message)


def diagnostic_for(kind: ErrorKind, message: str) -> str:
    if kind is ErrorKind.AUTH:
        return (
            f"Authentication failed: {message} "
            "Check GEMINI_API_KEY in your .env file. Showing fallback listings instead."
        )
    if kind is ErrorKind.NO_RESULTS:
        return NO_RESULTS_MESSAGE
    return (
        f"A critical API error occurred during the search. Error: {message} "
        "Showing fallback listings instead."
    )


def run_scan(
    criteria: SearchCriteria,
    *,
    pipeline: RequestPipeline | None = None,
    config: PipelineConfig | None = None,
    force_fallback: bool = False,
    progress: ProgressFn | None = None,
    token: int = 0,
) -> ScanOutcome:
    steps: list[str] = []

    def _report(step: str) -> None:
        steps.append(step)
        log.info(step)
        if progress:
            progress(step)

    if force_fallback:
        _report("1/1: Loading fallback data for testing...")
        return ScanOutcome(
            token=token,
            criteria=criteria,
            jobs=fallback_jobs(),
            source=FALLBACK,
            diagnostic=FORCED_FALLBACK_MESSAGE,
            insights_text=FALLBACK_INSIGHT,
            forced=True,
            progress=steps,
        )

    if pipeline is None:
        pipeline = RequestPipeline(config or PipelineConfig.from_env())

    _report("1/3: Generating comprehensive search query...")
    _report("2/3: Searching Google and extracting structured job data...")
    try:
        result = pipeline.search_jobs(criteria)
    except Exception as exc:
        log.error("Unexpected search failure: %s", exc)
        result = PipelineResult(ok=False, kind=ErrorKind.TRANSPORT, message=redact(str(exc)))

    if not result.ok:
        log.warning("Falling back to hardcoded listings (%s)", result.kind.value)
        return ScanOutcome(
            token=token,
            criteria=criteria,
            jobs=fallback_jobs(),
            source=FALLBACK,
            diagnostic=diagnostic_for(result.kind, result.message),
            error_kind=result.kind,
            error_message=result.message,
            progress=steps,
        )

    outcome = ScanOutcome(
        token=token,
        criteria=criteria,
        jobs=list(result.value),
        source=LIVE,
        progress=steps,
    )

    _report("3/3: Generating AI insights...")
    try:
        insights = pipeline.generate_insights(criteria, len(outcome.jobs))
    except Exception as exc:
        log.error("Unexpected insight failure: %s", exc)
        insights = PipelineResult(ok=False, kind=ErrorKind.TRANSPORT, message=redact(str(exc)))

    if insights.ok:
        outcome.insights = insights.value
    else:
        outcome.insights_text = f"Insights unavailable: {insights.message}"

    log.info(
        "Scan complete — source=%s, jobs=%d, actionable=%d",
        outcome.source, len(outcome.jobs), sum(1 for j in outcome.jobs if j.actionable),
    )
    return outcome
