from __future__ import annotations

from typing import Any

from pydantic import ValidationError

from glamour_storefront.core.exceptions.domain_error import DomainError


class DraftValidationError(DomainError):
    """Client supplied data that does not satisfy the entity contract."""

    def __init__(self, message: str, details: list[dict[str, Any]] | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or []

    @classmethod
    def from_pydantic(cls, exc: ValidationError) -> DraftValidationError:
        details = [
            {"field": ".".join(str(p) for p in err.get("loc", ())), "message": err.get("msg", "")}
            for err in exc.errors()
        ]
        fields = ", ".join(d["field"] for d in details) or "payload"
        return cls(f"Invalid fields: {fields}", details)
