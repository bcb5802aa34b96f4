import logging
from dataclasses import replace
from enum import Enum
from typing import Optional

from advisorcomply.audit.trail import append_audit_entry, new_audit_entry
from advisorcomply.models.audit_entry import AuditAction
from advisorcomply.models.validation import (
    ApprovalWorkflow,
    ComplianceValidation,
    RiskAssessment,
    ValidationStatus,
)

logger = logging.getLogger("advisorcomply.workflow")

ESCALATION_SCORE_THRESHOLD = 70
DEFAULT_ESCALATION_TEAM = "compliance-team"
ESCALATION_REASON = "High risk content requires review"

# Statuses that always route the validation to a human reviewer
ESCALATING_STATUSES = (ValidationStatus.REQUIRES_MODIFICATION, ValidationStatus.REJECTED)


class ReviewAction(str, Enum):
    APPROVE = "approve"
    REJECT = "reject"
    REQUEST_CHANGES = "request_changes"
    START_REVIEW = "start_review"


# action -> (resulting status, audit action)
_TRANSITIONS = {
    ReviewAction.APPROVE: (ValidationStatus.APPROVED, AuditAction.APPROVED),
    ReviewAction.REJECT: (ValidationStatus.REJECTED, AuditAction.REJECTED),
    ReviewAction.REQUEST_CHANGES: (ValidationStatus.REQUIRES_MODIFICATION, AuditAction.MODIFIED),
    ReviewAction.START_REVIEW: (ValidationStatus.UNDER_REVIEW, AuditAction.REVIEWED),
}


def requires_approval(
    risk: RiskAssessment,
    status: ValidationStatus,
    threshold: int = ESCALATION_SCORE_THRESHOLD,
) -> bool:
    return risk.overall_risk_score > threshold or status in ESCALATING_STATUSES


def build_approval_workflow(
    risk: RiskAssessment,
    status: ValidationStatus,
    threshold: int = ESCALATION_SCORE_THRESHOLD,
    escalation_team: str = DEFAULT_ESCALATION_TEAM,
) -> ApprovalWorkflow:
    """
    Initial workflow for a fresh validation. Approval and review fields
    always start unset; nothing is auto-approved.
    """
    if requires_approval(risk, status, threshold):
        return ApprovalWorkflow(
            escalated_to=escalation_team,
            escalation_reason=ESCALATION_REASON,
        )
    return ApprovalWorkflow()


def is_finalized(validation: ComplianceValidation) -> bool:
    """True once a human has approved or rejected the validation."""
    if validation.approval_workflow.approved_by:
        return True
    return any(
        entry.action == AuditAction.REJECTED and entry.performed_by != "system"
        for entry in validation.audit_trail
    )


def record_review(
    validation: ComplianceValidation,
    action: ReviewAction,
    reviewer_id: str,
    reason: Optional[str] = None,
) -> ComplianceValidation:
    """
    Apply a human review action and return the updated validation.
    The input validation is left untouched.
    """
    if not reviewer_id or not reviewer_id.strip():
        raise ValueError("Reviewer identity is required")

    try:
        action = ReviewAction(action)
    except ValueError:
        raise ValueError(f"Unknown review action: {action}")

    if is_finalized(validation):
        raise ValueError(
            f"Validation {validation.id} is already {validation.status.value}"
        )

    has_reason = bool(reason and reason.strip())

    if action == ReviewAction.REJECT and not has_reason:
        raise ValueError("A reason is required to reject content")

    if action == ReviewAction.REQUEST_CHANGES and not has_reason:
        raise ValueError("A description of the requested changes is required")

    if (
        action == ReviewAction.APPROVE
        and validation.status == ValidationStatus.REJECTED
        and not has_reason
    ):
        raise ValueError("Overriding a rejected validation requires a reason")

    new_status, audit_action = _TRANSITIONS[action]
    reviewer_id = reviewer_id.strip()

    entry = new_audit_entry(
        audit_action,
        reviewer_id,
        previous_state=validation.status.value,
        new_state=new_status.value,
        reason=reason,
    )
    trail = append_audit_entry(validation.audit_trail, entry)
    timestamp = trail[-1].performed_at

    workflow = replace(
        validation.approval_workflow,
        reviewed_by=reviewer_id,
        reviewed_at=timestamp,
    )
    if action == ReviewAction.APPROVE:
        workflow = replace(workflow, approved_by=reviewer_id, approved_at=timestamp)

    logger.info(
        f"Validation {validation.id} {audit_action.value} by {reviewer_id}: "
        f"{validation.status.value} -> {new_status.value}"
    )

    risk_assessment = validation.risk_assessment
    if has_reason:
        risk_assessment = replace(risk_assessment, reviewer_comments=reason.strip())

    return replace(
        validation,
        status=new_status,
        approval_workflow=workflow,
        risk_assessment=risk_assessment,
        audit_trail=trail,
        updated_at=max(timestamp, validation.updated_at),
    )


def escalate(
    validation: ComplianceValidation,
    escalated_to: str,
    reason: str,
    performed_by: str = "system",
) -> ComplianceValidation:
    if not escalated_to or not escalated_to.strip():
        raise ValueError("Escalation target is required")

    entry = new_audit_entry(
        AuditAction.ESCALATED,
        performed_by,
        details=f"Compliance validation escalated to {escalated_to}",
        reason=reason,
    )
    trail = append_audit_entry(validation.audit_trail, entry)

    workflow = replace(
        validation.approval_workflow,
        escalated_to=escalated_to,
        escalation_reason=reason,
    )
    return replace(
        validation,
        approval_workflow=workflow,
        audit_trail=trail,
        updated_at=max(trail[-1].performed_at, validation.updated_at),
    )
