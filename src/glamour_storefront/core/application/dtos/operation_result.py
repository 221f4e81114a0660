from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any


class FailureKind(StrEnum):
    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    STORAGE = "storage"


@dataclass(frozen=True)
class OperationResult:
    """Caller-facing outcome envelope: ``{success, data|error}``."""

    success: bool
    data: dict[str, Any] | None = None
    error: str | None = None
    failure: FailureKind | None = None
    retryable: bool = False
    details: list[dict[str, Any]] = field(default_factory=list)

    @classmethod
    def ok(cls, data: dict[str, Any]) -> OperationResult:
        return cls(success=True, data=data)

    @classmethod
    def fail(
        cls,
        error: str,
        failure: FailureKind,
        retryable: bool = False,
        details: list[dict[str, Any]] | None = None,
    ) -> OperationResult:
        return cls(success=False, error=error, failure=failure, retryable=retryable, details=details or [])

    def to_payload(self) -> dict[str, Any]:
        if self.success:
            return {"success": True, "data": self.data}
        payload: dict[str, Any] = {"success": False, "error": self.error, "retryable": self.retryable}
        if self.details:
            payload["details"] = self.details
        return payload
