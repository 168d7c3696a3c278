"""
Request pipeline shared by job search and insight generation.

Runs: build prompt → send → extract payload → parse/validate.
Every pipeline failure comes back as a failed PipelineResult.
"""
from __future__ import annotations

from enum import Enum
from typing import Any, Callable

from jobscan.config import PipelineConfig
from jobscan.errors import AuthError, NoResultsError, PipelineError
from jobscan.extract import (
    Shape,
    coerce_listings,
    coerce_report,
    extract_payload,
    parse_payload,
)
from jobscan.log import get_logger
from jobscan.models import InsightReport, JobListing, SearchCriteria
from jobscan.prompts import (
    INSIGHTS_SYSTEM_INSTRUCTION,
    SEARCH_SYSTEM_INSTRUCTION,
    build_insights_prompt,
    build_search_prompt,
)
from jobscan.result import PipelineResult
from jobscan.transport import Transport, build_request_body, get_transport

log = get_logger(__name__)


class Stage(str, Enum):
    IDLE = "idle"
    BUILDING = "building"
    SENDING = "sending"
    EXTRACTING = "extracting"
    PARSING = "parsing"
    DONE = "done"


class RequestPipeline:
    def __init__(
        self,
        config: PipelineConfig,
        transport: Transport | None = None,
        on_stage: Callable[[Stage], None] | None = None,
    ) -> None:
        self.config = config
        self.transport = transport or get_transport(config)
        self.on_stage = on_stage
        self.stages: list[Stage] = [Stage.IDLE]

    def _enter(self, stage: Stage) -> None:
        self.stages.append(stage)
        log.debug("Pipeline stage → %s", stage.value)
        if self.on_stage:
            self.on_stage(stage)

    def _exchange(self, prompt: str, system_instruction: str, *, web_search: bool, shape: Shape) -> tuple[str, Any]:
        if not self.config.has_credentials:
            raise AuthError("GEMINI_API_KEY is not set. Add it to your .env file.")

        self._enter(Stage.SENDING)
        body = build_request_body(prompt, system_instruction, web_search=web_search)
        raw = self.transport.send(self.config.endpoint, body, self.config.api_key)

        self._enter(Stage.EXTRACTING)
        candidate = extract_payload(raw)

        self._enter(Stage.PARSING)
        return candidate, parse_payload(candidate, shape)

    def search_jobs(self, criteria: SearchCriteria) -> PipelineResult:
        """Live job search. Success always carries at least one listing."""
        self.stages = [Stage.IDLE]
        try:
            self._enter(Stage.BUILDING)
            prompt = build_search_prompt(criteria, self.config.country)
            candidate, items = self._exchange(
                prompt, SEARCH_SYSTEM_INSTRUCTION, web_search=True, shape=Shape.LISTINGS
            )
            listings: list[JobListing] = coerce_listings(items, candidate)
            if not listings:
                raise NoResultsError(
                    "The AI could not find any job listings matching your criteria."
                )
        except PipelineError as exc:
            log.warning("Job search failed [%s]: %s", exc.kind.value, exc.message)
            self._enter(Stage.DONE)
            return PipelineResult.failure(exc)

        log.info("Job search returned %d listing(s)", len(listings))
        self._enter(Stage.DONE)
        return PipelineResult.success(listings)

    def generate_insights(self, criteria: SearchCriteria, result_count: int) -> PipelineResult:
        self.stages = [Stage.IDLE]
        try:
            self._enter(Stage.BUILDING)
            prompt = build_insights_prompt(criteria, result_count)
            _, data = self._exchange(
                prompt, INSIGHTS_SYSTEM_INSTRUCTION, web_search=False, shape=Shape.REPORT
            )
            report: InsightReport = coerce_report(data)
        except PipelineError as exc:
            log.warning("Insight generation failed [%s]: %s", exc.kind.value, exc.message)
            self._enter(Stage.DONE)
            return PipelineResult.failure(exc)

        self._enter(Stage.DONE)
        return PipelineResult.success(report)
