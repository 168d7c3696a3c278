"""Per-user scan state: invocation tokens, current outcome and listing feedback."""
from __future__ import annotations

import itertools

from jobscan.log import get_logger
from jobscan.models import SearchCriteria
from jobscan.pipeline import RequestPipeline
from jobscan.scan import ProgressFn, ScanOutcome, run_scan

log = get_logger(__name__)

FEEDBACK_KINDS = ("positive", "negative")


class ScanSession:
    """Holds the latest accepted outcome. Only the newest invocation may write it."""

    def __init__(self, pipeline: RequestPipeline | None = None) -> None:
        self.pipeline = pipeline
        self.outcome: ScanOutcome | None = None
        self.feedback: dict[str, str] = {}
        self._tokens = itertools.count(1)
        self._current = 0

    @property
    def current_token(self) -> int:
        return self._current

    def begin(self) -> int:
        self._current = next(self._tokens)
        return self._current

    def complete(self, outcome: ScanOutcome) -> bool:
        if outcome.token != self._current:
            log.info("Discarding stale scan result (token %d, current %d)", outcome.token, self._current)
            return False
        self.outcome = outcome
        self.feedback = {}
        return True

    def search(
        self,
        criteria: SearchCriteria,
        *,
        force_fallback: bool = False,
        progress: ProgressFn | None = None,
    ) -> ScanOutcome:
        token = self.begin()
        outcome = run_scan(
            criteria,
            pipeline=self.pipeline,
            force_fallback=force_fallback,
            progress=progress,
            token=token,
        )
        self.complete(outcome)
        return outcome

    def toggle_feedback(self, job_id: str, kind: str) -> str | None:
        """Set ``kind`` on a listing, or clear it when it is already set."""
        if kind not in FEEDBACK_KINDS:
            raise ValueError(f"Unknown feedback kind: {kind!r}")
        if self.feedback.get(job_id) == kind:
            del self.feedback[job_id]
            return None
        self.feedback[job_id] = kind
        return kind
