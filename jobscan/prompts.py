"""Prompt builders for the search and insights requests. Pure functions."""
from __future__ import annotations

from jobscan.models import SearchCriteria

SEARCH_SYSTEM_INSTRUCTION = (
    "You are a job search assistant. Use Google Search to find real, current "
    "job listings and report them only in the requested JSON format."
)

INSIGHTS_SYSTEM_INSTRUCTION = (
    "You are a helpful career assistant. Analyze job searches and their "
    "results, and answer only in the requested JSON format."
)

LISTING_KEYS = (
    "id", "title", "company", "location", "type", "description",
    "url", "companyUrl", "salary", "posted",
)
INSIGHT_KEYS = ("analysis", "suggestions", "keywordsToAdd", "keywordsToRemove")

_SEARCH_FORMAT = """---

IMPORTANT: Perform a Google search to find real, current job listings based on the criteria.
Return exactly one fenced block that starts with ```json and ends with ```. It must contain
a JSON array of objects, and every object must have exactly these keys:
"id", "title", "company", "location", "type", "description", "url", "companyUrl", "salary", "posted".
- "id": a unique integer, numbering the listings 1, 2, 3, ...
- "url" (mandatory): a direct, absolute https:// URL to the job posting itself.
- "companyUrl" (mandatory): an absolute https:// URL to the company's website.
- "salary" and "posted": use "Not specified" and "N/A" when unknown.
If you cannot find a real value for a mandatory field, omit that listing entirely rather than
inventing a value. Do not write any text outside the fenced block."""

_INSIGHTS_FORMAT = """Based on this, return exactly one fenced block that starts with ```json and ends with ```,
containing a single JSON object with exactly these keys:
{
  "analysis": "A brief, one-sentence summary of the search results. Mention if the results seem relevant to the keywords.",
  "suggestions": "A short paragraph with 1-2 actionable tips for improving the next search.",
  "keywordsToAdd": ["keyword1", "keyword2", "keyword3"],
  "keywordsToRemove": ["keywordA", "keywordB"]
}
All four keys are mandatory; use an empty string or an empty array when there is nothing to say.
Do not write any text outside the fenced block."""


def _joined(values) -> str:
    return ", ".join(values) if values else "none"


def build_search_prompt(criteria: SearchCriteria, country: str = "Austria") -> str:
    job_types = _joined([t.value for t in criteria.ordered_job_types])
    return (
        f"Search for job listings in {country} for an English-speaking entry-level graduate "
        f"near {criteria.location}.\n"
        f"Keywords: {_joined(criteria.include_keywords)}. "
        f"Exclude: {_joined(criteria.exclude_keywords)}. "
        f"Job Types: {job_types}.\n\n"
        f"{_SEARCH_FORMAT}"
    )


def build_insights_prompt(criteria: SearchCriteria, result_count: int) -> str:
    job_types = _joined([t.value for t in criteria.ordered_job_types])
    return (
        "Analyze the following job search and its results to provide helpful insights for the user.\n\n"
        "Search Parameters:\n"
        f"- Location: {criteria.location}\n"
        f"- Keywords: {_joined(criteria.include_keywords)}\n"
        f"- Excluded Keywords: {_joined(criteria.exclude_keywords)}\n"
        f"- Job Types: {job_types}\n"
        f"Number of Jobs Found: {result_count}\n\n"
        f"{_INSIGHTS_FORMAT}"
    )
