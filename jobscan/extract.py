"""
Payload extraction and validation for model output.

Handles the formats the model actually produces:
- JSON in ```json blocks
- JSON in ``` blocks (no language tag)
- a bare JSON array wrapped in conversational text
- anything else is handed to the parser as-is
"""
from __future__ import annotations

import json
import re
from enum import Enum
from typing import Any

from jobscan.errors import FormatError
from jobscan.log import get_logger
from jobscan.models import (
    POSTED_UNKNOWN,
    SALARY_NOT_SPECIFIED,
    InsightReport,
    JobListing,
)

log = get_logger(__name__)

_FENCE = re.compile(r"```(?:json)?[ \t]*\r?\n?(.*?)```", re.DOTALL | re.IGNORECASE)
_EXCERPT = 200


class Shape(str, Enum):
    LISTINGS = "listings"
    REPORT = "report"


def extract_payload(raw_text: str | None) -> str:
    """Return the most likely structured-data substring. Never fails.

    Priority: first fenced block, then the span from the first ``[`` to the
    last ``]``, then the whole text.
    """
    text = raw_text or ""

    match = _FENCE.search(text)
    if match:
        return match.group(1).strip()

    start = text.find("[")
    end = text.rfind("]")
    if start != -1 and end > start:
        return text[start:end + 1].strip()

    return text.strip()


def parse_payload(candidate: str, shape: Shape) -> Any:
    """Strict JSON parse of ``candidate`` into the requested shape.

    For ``Shape.LISTINGS`` a value that is not an array is treated as an
    empty result and ``[]`` is returned. For ``Shape.REPORT`` anything other
    than an object is a :class:`FormatError`.
    """
    try:
        value = json.loads(candidate)
    except (json.JSONDecodeError, TypeError) as exc:
        log.debug("Unparseable payload: %s", candidate[:_EXCERPT])
        raise FormatError(
            f"The AI model's response was not valid JSON ({exc})", payload=candidate
        ) from exc

    if shape is Shape.LISTINGS:
        if not isinstance(value, list):
            log.info("Parsed %s instead of an array, treating as empty", type(value).__name__)
            return []
        return value

    if not isinstance(value, dict):
        raise FormatError(
            f"Expected a JSON object for insights, got {type(value).__name__}",
            payload=candidate,
        )
    return value


def _text(value: Any, default: str = "") -> str:
    if value is None:
        return default
    if isinstance(value, str):
        return value.strip() or default
    return str(value)


def _optional_text(value: Any) -> str | None:
    text = _text(value)
    return text or None


def _keyword_list(value: Any) -> list[str]:
    if isinstance(value, str):
        value = value.split(",")
    if not isinstance(value, (list, tuple)):
        return []
    out: list[str] = []
    for item in value:
        kw = _text(item)
        if kw and kw not in out:
            out.append(kw)
    return out


def coerce_listings(items: list[Any], payload: str = "") -> list[JobListing]:
    """Turn parsed array elements into listings with unique string ids.

    Elements that are not objects make the whole payload a FormatError.
    Missing or duplicate ids become ``job-<position>``.
    """
    bad = [i for i, item in enumerate(items) if not isinstance(item, dict)]
    if bad:
        raise FormatError(
            f"Job listing array contains non-object elements at positions {bad[:5]}",
            payload=payload,
        )

    seen: set[str] = set()
    listings: list[JobListing] = []
    for index, item in enumerate(items):
        job_id = _text(item.get("id"))
        if not job_id or job_id in seen:
            job_id = f"job-{index}"
            while job_id in seen:
                job_id += "-dup"
        seen.add(job_id)

        listings.append(
            JobListing(
                id=job_id,
                title=_text(item.get("title")),
                company=_text(item.get("company")),
                location=_text(item.get("location")),
                type=_text(item.get("type")),
                description=_text(item.get("description")),
                url=_optional_text(item.get("url")),
                company_url=_optional_text(item.get("companyUrl")),
                salary=_text(item.get("salary"), SALARY_NOT_SPECIFIED),
                posted=_text(item.get("posted"), POSTED_UNKNOWN),
                raw=item,
            )
        )

    inert = sum(1 for job in listings if not job.actionable)
    if inert:
        log.info("%d of %d listings have no usable URL", inert, len(listings))
    return listings


def coerce_report(data: dict[str, Any]) -> InsightReport:
    return InsightReport(
        analysis=_text(data.get("analysis")),
        suggestions=_text(data.get("suggestions")),
        keywords_to_add=_keyword_list(data.get("keywordsToAdd")),
        keywords_to_remove=_keyword_list(data.get("keywordsToRemove")),
    )
