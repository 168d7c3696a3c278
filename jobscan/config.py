"""Load pipeline configuration from the environment and criteria from YAML."""
from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml
from dotenv import load_dotenv

from jobscan.log import get_logger
from jobscan.models import SearchCriteria

log = get_logger(__name__)

load_dotenv()

ROOT_DIR: Path = Path(__file__).resolve().parent.parent
CONFIG_DIR: Path = ROOT_DIR / "config"
CRITERIA_PATH: Path = CONFIG_DIR / "criteria.yaml"
REPORTS_DIR: Path = ROOT_DIR / "reports"

DEFAULT_BASE_URL = "https://generativelanguage.googleapis.com/v1beta"
DEFAULT_MODEL = "gemini-2.5-flash"
CREDENTIAL_MODES = ("header", "query")

DEFAULT_CRITERIA: dict[str, Any] = {
    "location": "Vienna, Mödling",
    "include_keywords": [
        "entry level", "English", "junior", "office", "assistant",
        "customer service", "marketing", "tech", "administrative",
        "data entry", "hospitality",
    ],
    "exclude_keywords": ["senior", "manager", "German required", "Deutsch erforderlich"],
    "job_types": ["Full-time", "Part-time", "Internship"],
}


def get_env(key: str, default: str = "") -> str:
    return os.environ.get(key, default).strip()


def _int_env(key: str, default: int) -> int:
    raw = get_env(key)
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        log.warning("Ignoring non-integer %s=%r, using %d", key, raw, default)
        return default


def _float_env(key: str, default: float) -> float:
    raw = get_env(key)
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        log.warning("Ignoring non-numeric %s=%r, using %s", key, raw, default)
        return default


@dataclass(frozen=True)
class PipelineConfig:
    api_key: str = field(default="", repr=False)
    model: str = DEFAULT_MODEL
    base_url: str = DEFAULT_BASE_URL
    credential_mode: str = "header"
    max_attempts: int = 5
    timeout: float = 60.0
    country: str = "Austria"

    def __post_init__(self) -> None:
        if self.credential_mode not in CREDENTIAL_MODES:
            raise ValueError(
                f"credential_mode must be one of {CREDENTIAL_MODES}, got {self.credential_mode!r}"
            )
        if self.max_attempts < 1:
            raise ValueError("max_attempts must be >= 1")

    @property
    def endpoint(self) -> str:
        return f"{self.base_url.rstrip('/')}/models/{self.model}:generateContent"

    @property
    def has_credentials(self) -> bool:
        return bool(self.api_key)

    @classmethod
    def from_env(cls) -> PipelineConfig:
        return cls(
            api_key=get_env("GEMINI_API_KEY"),
            model=get_env("GEMINI_MODEL", DEFAULT_MODEL) or DEFAULT_MODEL,
            base_url=get_env("GEMINI_BASE_URL", DEFAULT_BASE_URL) or DEFAULT_BASE_URL,
            credential_mode=(get_env("GEMINI_CREDENTIAL_MODE", "header") or "header").lower(),
            max_attempts=_int_env("JOBSCAN_MAX_ATTEMPTS", 5),
            timeout=_float_env("JOBSCAN_TIMEOUT", 60.0),
            country=get_env("JOBSCAN_COUNTRY", "Austria") or "Austria",
        )


def load_criteria(path: Path | None = None) -> SearchCriteria:
    """Read saved search criteria; falls back to the built-in defaults."""
    path = path or CRITERIA_PATH
    data: dict[str, Any] = dict(DEFAULT_CRITERIA)
    if path.exists():
        with open(path, "r", encoding="utf-8") as f:
            loaded = yaml.safe_load(f) or {}
        if not isinstance(loaded, dict):
            raise ValueError(f"{path.name} must contain a mapping")
        data.update({k: v for k, v in loaded.items() if v is not None})
    else:
        log.debug("No %s found, using default criteria", path.name)

    return SearchCriteria.build(
        location=data.get("location", ""),
        include_keywords=data.get("include_keywords"),
        exclude_keywords=data.get("exclude_keywords"),
        job_types=data.get("job_types"),
    )


def save_criteria(criteria: SearchCriteria, path: Path | None = None) -> Path:
    path = path or CRITERIA_PATH
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        yaml.safe_dump(criteria.to_dict(), f, sort_keys=False, allow_unicode=True)
    log.info("Saved search criteria → %s", path.name)
    return path
