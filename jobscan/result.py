"""Tagged result crossing the pipeline boundary."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from jobscan.errors import ErrorKind, PipelineError

T = TypeVar("T")


@dataclass(frozen=True)
class PipelineResult(Generic[T]):
    ok: bool
    value: T | None = None
    kind: ErrorKind | None = None
    message: str = ""

    @classmethod
    def success(cls, value: Any) -> PipelineResult:
        return cls(ok=True, value=value)

    @classmethod
    def failure(cls, error: PipelineError) -> PipelineResult:
        return cls(ok=False, kind=error.kind, message=error.message)

    def to_dict(self) -> dict[str, Any]:
        if self.ok:
            return {"ok": True, "value": self.value}
        return {"ok": False, "kind": self.kind.value if self.kind else None, "message": self.message}
