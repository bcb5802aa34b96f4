"""
Validation telemetry.

One span event per validation. No content, no advisor identifiers.
"""
import logging
from typing import Optional

from azure.monitor.opentelemetry import configure_azure_monitor
from opentelemetry.trace import get_current_span

logger = logging.getLogger("advisorcomply.telemetry")

ALLOWED_STATUSES = (
    "pending",
    "approved",
    "rejected",
    "requires_modification",
    "under_review",
)


def init_telemetry(connection_string: Optional[str]) -> bool:
    """
    Configure the Azure Monitor exporter. Returns False when telemetry
    is disabled (local / tests).
    """
    if not connection_string:
        return False

    configure_azure_monitor(connection_string=connection_string)
    logger.info("Azure Monitor telemetry configured")
    return True


def emit_validation_telemetry(
    latency_ms: int,
    risk_score: int,
    status: str,
    escalated: bool,
):
    assert isinstance(latency_ms, int), "latency_ms must be int"
    assert isinstance(risk_score, int), "risk_score must be int"
    assert status in ALLOWED_STATUSES, f"status must be one of {ALLOWED_STATUSES}, got {status}"
    assert isinstance(escalated, bool), "escalated must be bool"

    span = get_current_span()
    if not span:
        return

    span.add_event(
        name="advisorcomply.validation",
        attributes={
            "latency_ms": latency_ms,
            "risk_score": risk_score,
            "status": status,
            "escalated": escalated,
        }
    )


def emit_exception_telemetry(exception: Exception):
    """Record only the exception class name; messages may quote content."""
    span = get_current_span()
    if not span:
        return

    span.add_event(
        name="advisorcomply.exception",
        attributes={
            "exception_type": type(exception).__name__,
        }
    )
