"""Storefront log schema processor for structlog.

Groups flat structlog event_dict keys into nested ``request``,
``processing`` and ``error`` blocks while leaving ``event``, ``level`` and
``timestamp`` at the root so every renderer can consume the result.
All field extraction uses dict.pop(key, default) to avoid KeyError.
"""

from __future__ import annotations

import os
from typing import Any


def _build_request(event_dict: dict[str, Any]) -> dict[str, Any] | None:
    """Extract request context bound by CorrelationMiddleware."""
    correlation_id = event_dict.pop("correlation_id", None)
    if correlation_id is None:
        return None
    return {
        "correlation_id": correlation_id,
        "trace_id": event_dict.pop("trace_id", None),
        "endpoint": event_dict.pop("context_endpoint", None),
        "method": event_dict.pop("context_method", None),
    }


def _build_processing(event_dict: dict[str, Any]) -> dict[str, Any] | None:
    """Extract processing metrics block."""
    status = event_dict.pop("processing_status", None)
    if status is None:
        return None
    return {
        "status": status,
        "http_status": event_dict.pop("processing_http_status", None),
        "duration_ms": event_dict.pop("processing_duration_ms", None),
    }


def _build_error(event_dict: dict[str, Any]) -> dict[str, Any] | None:
    """Extract error block. Returns None if no error_type present."""
    error_type = event_dict.pop("error_type", None)
    if error_type is None:
        return None
    return {
        "type": error_type,
        "details": event_dict.pop("error_details", None),
        "retryable": event_dict.pop("error_retryable", False),
    }


def log_schema_processor(
    logger: Any,  # noqa: ARG001
    method_name: str,  # noqa: ARG001
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    """Structlog processor that nests request, processing and error fields."""
    event_dict.setdefault("service", os.environ.get("SERVICE_NAME", "glamour-storefront"))
    event_dict.setdefault("environment", os.environ.get("APP_ENV", "local"))

    for key, builder in (
        ("request", _build_request),
        ("processing", _build_processing),
        ("error", _build_error),
    ):
        block = builder(event_dict)
        if block is not None:
            event_dict[key] = block

    return event_dict
