"""HTTP transport for a generateContent-style LLM endpoint."""
from __future__ import annotations

import time
from typing import Any, Callable
from urllib.parse import urlparse

import requests

from jobscan.errors import (
    AuthError,
    EmptyResponseError,
    PipelineError,
    TransportError,
)
from jobscan.log import get_logger, redact, register_secret
from jobscan.retry import call_with_retry, exponential_backoff
from jobscan.transport.base import Transport

log = get_logger(__name__)

AUTH_STATUSES = (401, 403)
API_KEY_HEADER = "x-goog-api-key"
API_KEY_PARAM = "key"
_BODY_EXCERPT = 200


def build_request_body(
    prompt: str,
    system_instruction: str,
    *,
    web_search: bool = False,
) -> dict[str, Any]:
    return {
        "contents": [{"role": "user", "parts": [{"text": prompt}]}],
        "systemInstruction": {"parts": [{"text": system_instruction}]},
        "tools": [{"google_search": {}}] if web_search else [],
    }


def extract_envelope_text(data: Any) -> str:
    """Concatenated text parts of the first candidate that has any."""
    candidates = data.get("candidates") if isinstance(data, dict) else None
    if not isinstance(candidates, list):
        candidates = []
    for cand in candidates:
        content = cand.get("content") if isinstance(cand, dict) else None
        parts = content.get("parts") if isinstance(content, dict) else None
        if not isinstance(parts, list):
            continue
        text = "".join(
            p["text"] for p in parts if isinstance(p, dict) and isinstance(p.get("text"), str)
        )
        if text.strip():
            return text

    reason = ""
    feedback = data.get("promptFeedback") if isinstance(data, dict) else None
    if isinstance(feedback, dict) and feedback.get("blockReason"):
        reason = f" (blocked: {feedback['blockReason']})"
    raise EmptyResponseError(f"The AI model returned no text content{reason}")


class HttpTransport(Transport):
    """POSTs JSON with bounded retry. Credentials go in a header or query param."""

    def __init__(
        self,
        credential_mode: str = "header",
        *,
        max_attempts: int = 5,
        timeout: float = 60.0,
        backoff: Callable[[int], float] = exponential_backoff,
        sleep: Callable[[float], Any] = time.sleep,
    ) -> None:
        if credential_mode not in ("header", "query"):
            raise ValueError(f"Unsupported credential mode: {credential_mode!r}")
        self.credential_mode = credential_mode
        self.max_attempts = max_attempts
        self.timeout = timeout
        self.backoff = backoff
        self.sleep = sleep
        self.attempts = 0

    def _post_once(self, endpoint: str, payload: dict[str, Any], credentials: str) -> Any:
        self.attempts += 1
        host = urlparse(endpoint).netloc or endpoint
        headers = {"Content-Type": "application/json"}
        params: dict[str, str] = {}
        if self.credential_mode == "header":
            headers[API_KEY_HEADER] = credentials
        else:
            params[API_KEY_PARAM] = credentials

        try:
            r = requests.post(
                endpoint,
                json=payload,
                headers=headers,
                params=params or None,
                timeout=self.timeout,
            )
        except requests.RequestException as exc:
            raise TransportError(
                f"Network error calling {host}: {redact(str(exc))[:_BODY_EXCERPT]}"
            ) from None

        if r.status_code in AUTH_STATUSES:
            raise AuthError(
                f"{host} rejected the API key (HTTP {r.status_code})",
                status_code=r.status_code,
            )
        if not r.ok:
            raise TransportError(
                f"HTTP {r.status_code} from {host}: {redact(r.text[:_BODY_EXCERPT])}",
                status_code=r.status_code,
            )

        try:
            return r.json()
        except ValueError:
            raise EmptyResponseError(
                f"HTTP {r.status_code} from {host} did not carry a JSON envelope"
            ) from None

    def send(self, endpoint: str, payload: dict[str, Any], credentials: str) -> str:
        register_secret(credentials)
        self.attempts = 0
        data = call_with_retry(
            lambda: self._post_once(endpoint, payload, credentials),
            max_attempts=self.max_attempts,
            backoff=self.backoff,
            retryable=(PipelineError,),
            is_terminal=lambda exc: not isinstance(exc, TransportError),
            sleep=self.sleep,
            label="generateContent",
        )
        text = extract_envelope_text(data)
        log.debug("Received %d chars after %d attempt(s)", len(text), self.attempts)
        return text
