"""Data models for search criteria, job listings and insight reports."""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from urllib.parse import urlparse

SALARY_NOT_SPECIFIED = "Not specified"
POSTED_UNKNOWN = "N/A"


class JobType(str, Enum):
    FULL_TIME = "Full-time"
    PART_TIME = "Part-time"
    INTERNSHIP = "Internship"
    CONTRACT = "Contract"

    @classmethod
    def parse(cls, value: str | JobType) -> JobType:
        if isinstance(value, JobType):
            return value
        wanted = str(value).strip().lower()
        for member in cls:
            if member.value.lower() == wanted:
                return member
        raise ValueError(f"Unknown job type: {value!r}")


def is_actionable_url(url: str | None) -> bool:
    """True only for absolute http(s) URLs with a host."""
    if not url or not isinstance(url, str):
        return False
    try:
        parsed = urlparse(url.strip())
    except ValueError:
        return False
    return parsed.scheme in ("http", "https") and bool(parsed.netloc)


def split_keywords(value: str | list[str] | tuple[str, ...] | None) -> tuple[str, ...]:
    """Accept a comma-separated string or a sequence; drop blanks, keep order."""
    if value is None:
        return ()
    items = value.split(",") if isinstance(value, str) else value
    return tuple(str(s).strip() for s in items if s is not None and str(s).strip())


@dataclass(frozen=True)
class SearchCriteria:
    location: str
    include_keywords: tuple[str, ...] = ()
    exclude_keywords: tuple[str, ...] = ()
    job_types: frozenset[JobType] = frozenset()

    @classmethod
    def build(
        cls,
        location: str,
        include_keywords: str | list[str] | tuple[str, ...] | None = None,
        exclude_keywords: str | list[str] | tuple[str, ...] | None = None,
        job_types: list[str | JobType] | tuple[str | JobType, ...] | None = None,
    ) -> SearchCriteria:
        """Construct fresh criteria from loosely-typed form or YAML values."""
        return cls(
            location=(location or "").strip(),
            include_keywords=split_keywords(include_keywords),
            exclude_keywords=split_keywords(exclude_keywords),
            job_types=frozenset(JobType.parse(t) for t in (job_types or [])),
        )

    @property
    def ordered_job_types(self) -> list[JobType]:
        """Job types in declaration order, for stable prompts and display."""
        return [t for t in JobType if t in self.job_types]

    def to_dict(self) -> dict:
        return {
            "location": self.location,
            "include_keywords": list(self.include_keywords),
            "exclude_keywords": list(self.exclude_keywords),
            "job_types": [t.value for t in self.ordered_job_types],
        }


@dataclass
class JobListing:
    id: str
    title: str
    company: str
    location: str
    type: str
    description: str
    url: str | None = None
    company_url: str | None = None
    salary: str = SALARY_NOT_SPECIFIED
    posted: str = POSTED_UNKNOWN
    raw: dict = field(default_factory=dict, repr=False)

    @property
    def actionable(self) -> bool:
        return is_actionable_url(self.url)

    @property
    def company_actionable(self) -> bool:
        return is_actionable_url(self.company_url)


@dataclass
class InsightReport:
    analysis: str
    suggestions: str = ""
    keywords_to_add: list[str] = field(default_factory=list)
    keywords_to_remove: list[str] = field(default_factory=list)
