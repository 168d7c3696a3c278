"""Error taxonomy for the request pipeline."""
from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    AUTH = "AuthError"
    TRANSPORT = "TransportError"
    EMPTY_RESPONSE = "EmptyResponseError"
    FORMAT = "FormatError"
    NO_RESULTS = "NoResultsError"


class PipelineError(Exception):
    kind: ErrorKind = ErrorKind.TRANSPORT

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class AuthError(PipelineError):
    """Credential missing or rejected. Never retried."""

    kind = ErrorKind.AUTH

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class TransportError(PipelineError):
    """Network failure or non-success HTTP status."""

    kind = ErrorKind.TRANSPORT

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class EmptyResponseError(PipelineError):
    kind = ErrorKind.EMPTY_RESPONSE


class FormatError(PipelineError):
    """Model text present but not parseable as the expected shape."""

    kind = ErrorKind.FORMAT

    def __init__(self, message: str, payload: str = "") -> None:
        super().__init__(message)
        self.payload = payload


class NoResultsError(PipelineError):
    kind = ErrorKind.NO_RESULTS
