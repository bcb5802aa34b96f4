from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import List, Optional, Tuple

from advisorcomply.models.audit_entry import ComplianceAuditEntry
from advisorcomply.models.compliance_result import ComplianceResult


class ValidationType(str, Enum):
    PRE_PUBLICATION = "pre_publication"
    POST_PUBLICATION = "post_publication"
    AUDIT = "audit"
    MANUAL_REVIEW = "manual_review"


class ValidationStatus(str, Enum):
    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"
    REQUIRES_MODIFICATION = "requires_modification"
    UNDER_REVIEW = "under_review"


class RiskLevel(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


def _iso(value: Optional[datetime]) -> Optional[str]:
    return value.isoformat() if value is not None else None


def _parse(value: Optional[str]) -> Optional[datetime]:
    return datetime.fromisoformat(value) if value else None


@dataclass(frozen=True)
class RiskAssessment:
    overall_risk_score: int
    risk_level: RiskLevel
    risk_factors: Tuple[str, ...] = ()
    mitigation_required: bool = False
    reviewer_comments: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            "overall_risk_score": self.overall_risk_score,
            "risk_level": self.risk_level.value,
            "risk_factors": list(self.risk_factors),
            "mitigation_required": self.mitigation_required,
            "reviewer_comments": self.reviewer_comments,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "RiskAssessment":
        return cls(
            overall_risk_score=int(data["overall_risk_score"]),
            risk_level=RiskLevel(data["risk_level"]),
            risk_factors=tuple(data.get("risk_factors", ())),
            mitigation_required=bool(data.get("mitigation_required", False)),
            reviewer_comments=data.get("reviewer_comments"),
        )


@dataclass(frozen=True)
class ContentModifications:
    """
    Proposed edits only. modified_content mirrors original_content;
    nothing here rewrites text.
    """
    original_content: str
    modified_content: str
    injected_disclaimers: Tuple[str, ...] = ()
    removed_content: Tuple[str, ...] = ()
    added_warnings: Tuple[str, ...] = ()

    def to_dict(self) -> dict:
        return {
            "original_content": self.original_content,
            "modified_content": self.modified_content,
            "injected_disclaimers": list(self.injected_disclaimers),
            "removed_content": list(self.removed_content),
            "added_warnings": list(self.added_warnings),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "ContentModifications":
        return cls(
            original_content=data["original_content"],
            modified_content=data["modified_content"],
            injected_disclaimers=tuple(data.get("injected_disclaimers", ())),
            removed_content=tuple(data.get("removed_content", ())),
            added_warnings=tuple(data.get("added_warnings", ())),
        )


@dataclass(frozen=True)
class ApprovalWorkflow:
    approved_by: Optional[str] = None
    approved_at: Optional[datetime] = None
    reviewed_by: Optional[str] = None
    reviewed_at: Optional[datetime] = None
    escalated_to: Optional[str] = None
    escalation_reason: Optional[str] = None

    @property
    def is_escalated(self) -> bool:
        return self.escalated_to is not None

    def to_dict(self) -> dict:
        return {
            "approved_by": self.approved_by,
            "approved_at": _iso(self.approved_at),
            "reviewed_by": self.reviewed_by,
            "reviewed_at": _iso(self.reviewed_at),
            "escalated_to": self.escalated_to,
            "escalation_reason": self.escalation_reason,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "ApprovalWorkflow":
        return cls(
            approved_by=data.get("approved_by"),
            approved_at=_parse(data.get("approved_at")),
            reviewed_by=data.get("reviewed_by"),
            reviewed_at=_parse(data.get("reviewed_at")),
            escalated_to=data.get("escalated_to"),
            escalation_reason=data.get("escalation_reason"),
        )


@dataclass(frozen=True)
class ComplianceChecks:
    finra_compliance: ComplianceResult
    sec_compliance: ComplianceResult
    firm_policy_compliance: ComplianceResult
    client_privacy_compliance: ComplianceResult
    state_regulation_compliance: ComplianceResult

    def as_list(self) -> List[ComplianceResult]:
        """Results in the fixed domain order used for aggregation."""
        return [
            self.finra_compliance,
            self.sec_compliance,
            self.firm_policy_compliance,
            self.client_privacy_compliance,
            self.state_regulation_compliance,
        ]

    def to_dict(self) -> dict:
        return {
            "finra_compliance": self.finra_compliance.to_dict(),
            "sec_compliance": self.sec_compliance.to_dict(),
            "firm_policy_compliance": self.firm_policy_compliance.to_dict(),
            "client_privacy_compliance": self.client_privacy_compliance.to_dict(),
            "state_regulation_compliance": self.state_regulation_compliance.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "ComplianceChecks":
        return cls(**{key: ComplianceResult.from_dict(value) for key, value in data.items()})


@dataclass(frozen=True)
class ComplianceValidation:
    """
    Aggregate root produced once per validate_content call.
    Updates (reviews, escalations) produce a new instance.
    """
    id: str
    content_id: str
    advisor_id: str
    meeting_id: Optional[str]
    validation_type: ValidationType
    status: ValidationStatus
    compliance_checks: ComplianceChecks
    risk_assessment: RiskAssessment
    content_modifications: ContentModifications
    approval_workflow: ApprovalWorkflow
    audit_trail: Tuple[ComplianceAuditEntry, ...]
    created_at: datetime
    updated_at: datetime

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "content_id": self.content_id,
            "advisor_id": self.advisor_id,
            "meeting_id": self.meeting_id,
            "validation_type": self.validation_type.value,
            "status": self.status.value,
            "compliance_checks": self.compliance_checks.to_dict(),
            "risk_assessment": self.risk_assessment.to_dict(),
            "content_modifications": self.content_modifications.to_dict(),
            "approval_workflow": self.approval_workflow.to_dict(),
            "audit_trail": [entry.to_dict() for entry in self.audit_trail],
            "created_at": self.created_at.isoformat(),
            "updated_at": self.updated_at.isoformat(),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "ComplianceValidation":
        return cls(
            id=data["id"],
            content_id=data["content_id"],
            advisor_id=data["advisor_id"],
            meeting_id=data.get("meeting_id"),
            validation_type=ValidationType(data["validation_type"]),
            status=ValidationStatus(data["status"]),
            compliance_checks=ComplianceChecks.from_dict(data["compliance_checks"]),
            risk_assessment=RiskAssessment.from_dict(data["risk_assessment"]),
            content_modifications=ContentModifications.from_dict(data["content_modifications"]),
            approval_workflow=ApprovalWorkflow.from_dict(data["approval_workflow"]),
            audit_trail=tuple(
                ComplianceAuditEntry.from_dict(entry) for entry in data.get("audit_trail", [])
            ),
            created_at=datetime.fromisoformat(data["created_at"]),
            updated_at=datetime.fromisoformat(data["updated_at"]),
        )
