from __future__ import annotations

import uuid
from collections.abc import Iterable, Mapping
from datetime import UTC, datetime
from typing import Any

RESERVED_FIELDS = ("id", "created_at", "updated_at")


def new_record_id() -> str:
    return uuid.uuid4().hex


def utc_now() -> datetime:
    return datetime.now(UTC)


def strip_reserved(patch: Mapping[str, Any]) -> dict[str, Any]:
    return {k: v for k, v in patch.items() if k not in RESERVED_FIELDS}


def find_unique_conflict(
    records: Iterable[Mapping[str, Any]],
    unique_fields: Iterable[str],
    candidate: Mapping[str, Any],
    exclude_id: str | None = None,
) -> tuple[str, Any] | None:
    """Return ``(field, value)`` of the first unique field *candidate* would duplicate."""
    fields = [f for f in unique_fields if candidate.get(f) is not None]
    if not fields:
        return None
    for record in records:
        if exclude_id is not None and record.get("id") == exclude_id:
            continue
        for field in fields:
            if record.get(field) == candidate[field]:
                return field, candidate[field]
    return None
