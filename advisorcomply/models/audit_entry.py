from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Optional


class AuditAction(str, Enum):
    CREATED = "created"
    REVIEWED = "reviewed"
    APPROVED = "approved"
    REJECTED = "rejected"
    MODIFIED = "modified"
    ESCALATED = "escalated"


@dataclass(frozen=True)
class ComplianceAuditEntry:
    id: str
    action: AuditAction
    performed_by: str
    performed_at: datetime
    details: str

    # Set by review actions only
    previous_state: Optional[str] = None
    new_state: Optional[str] = None
    reason: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "action": self.action.value,
            "performed_by": self.performed_by,
            "performed_at": self.performed_at.isoformat(),
            "details": self.details,
            "previous_state": self.previous_state,
            "new_state": self.new_state,
            "reason": self.reason,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "ComplianceAuditEntry":
        return cls(
            id=data["id"],
            action=AuditAction(data["action"]),
            performed_by=data["performed_by"],
            performed_at=datetime.fromisoformat(data["performed_at"]),
            details=data["details"],
            previous_state=data.get("previous_state"),
            new_state=data.get("new_state"),
            reason=data.get("reason"),
        )
