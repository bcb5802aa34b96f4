from dataclasses import dataclass
from enum import Enum
from typing import Tuple


class Severity(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


@dataclass(frozen=True)
class ComplianceResult:
    """
    Outcome of evaluating one regulatory domain against a piece of content.
    """
    passed: bool
    issues: Tuple[str, ...] = ()
    severity: Severity = Severity.LOW
    recommendations: Tuple[str, ...] = ()
    rule_violations: Tuple[str, ...] = ()
    required_actions: Tuple[str, ...] = ()

    def to_dict(self) -> dict:
        return {
            "passed": self.passed,
            "issues": list(self.issues),
            "severity": self.severity.value,
            "recommendations": list(self.recommendations),
            "rule_violations": list(self.rule_violations),
            "required_actions": list(self.required_actions),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "ComplianceResult":
        return cls(
            passed=data["passed"],
            issues=tuple(data.get("issues", ())),
            severity=Severity(data.get("severity", Severity.LOW.value)),
            recommendations=tuple(data.get("recommendations", ())),
            rule_violations=tuple(data.get("rule_violations", ())),
            required_actions=tuple(data.get("required_actions", ())),
        )
