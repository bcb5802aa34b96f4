import uuid
from datetime import datetime, timezone
from typing import Iterable, Optional, Tuple

from advisorcomply.models.audit_entry import AuditAction, ComplianceAuditEntry


def _now() -> datetime:
    return datetime.now(timezone.utc)


def new_audit_entry(
    action: AuditAction,
    performed_by: str,
    details: Optional[str] = None,
    previous_state: Optional[str] = None,
    new_state: Optional[str] = None,
    reason: Optional[str] = None,
) -> ComplianceAuditEntry:
    action = AuditAction(action)
    return ComplianceAuditEntry(
        id=f"audit-{uuid.uuid4().hex}",
        action=action,
        performed_by=performed_by,
        performed_at=_now(),
        details=details or f"Compliance validation {action.value}",
        previous_state=previous_state,
        new_state=new_state,
        reason=reason,
    )


def create_audit_trail(
    validation_id: str,
    action: AuditAction,
    performed_by: str,
) -> Tuple[ComplianceAuditEntry, ...]:
    """
    Start a trail with a single entry. validation_id is accepted for
    call-site symmetry; entry ids are independent UUIDs.
    """
    return (new_audit_entry(action, performed_by),)


def append_audit_entry(
    trail: Iterable[ComplianceAuditEntry],
    entry: ComplianceAuditEntry,
) -> Tuple[ComplianceAuditEntry, ...]:
    """
    Return a new trail with entry appended. performed_at is clamped to the
    last entry's timestamp so the trail never goes backwards in time.
    """
    existing = tuple(trail)
    if existing and entry.performed_at < existing[-1].performed_at:
        entry = ComplianceAuditEntry(
            **{**entry.__dict__, "performed_at": existing[-1].performed_at}
        )
    return existing + (entry,)
